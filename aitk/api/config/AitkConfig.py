"""Top-level AITK configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ...constants import CLAUDE_HOME_EXT, DEFAULT_LANGUAGE, DEFAULT_LANGUAGES
from .CategoryConfig import CategoryConfig
from .ConfigurationError import ConfigurationError
from .get_config_path import get_config_path
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig


def _expand_home(value: str, home: Path) -> str:
    """Expand a leading ``~`` against an explicit home and make the path absolute."""
    if value == "~" or value.startswith("~/"):
        value = str(home / value[2:]) if len(value) > 1 else str(home)
    return str(Path(value).absolute())


class AitkConfig(BaseModel):
    """Configuration for linking a toolkit checkout into the assistant's directory."""

    model_config = ConfigDict(extra="forbid")

    source_dir: str = Field(..., description="Toolkit checkout containing agents/ and skills/")
    target_dir: str = Field(..., description="Directory the assistant scans (agents/ and skills/ go here)")
    languages: list[str] = Field(default_factory=lambda: list(DEFAULT_LANGUAGES), min_length=1)
    default_language: str = Field(default=DEFAULT_LANGUAGE)
    canonicalize_paths: bool = Field(
        default=True,
        description="Treat links that resolve to the same file as already linked",
    )
    agents: CategoryConfig = Field(
        default_factory=lambda: CategoryConfig(subdir="agents", kind="file", suffix=".md"),
    )
    skills: CategoryConfig = Field(
        default_factory=lambda: CategoryConfig(subdir="skills", kind="directory"),
    )
    log: LogConfig = Field(default_factory=LogConfig)

    @model_validator(mode="after")
    def _default_language_supported(self) -> "AitkConfig":
        if self.default_language not in self.languages:
            raise ValueError(
                f"default_language '{self.default_language}' is not one of {', '.join(self.languages)}"
            )
        return self

    def categories(self) -> dict[str, CategoryConfig]:
        """Categories in linking order."""
        return {"agents": self.agents, "skills": self.skills}

    @classmethod
    def defaults(cls, home: Path) -> dict[str, Any]:
        """Default raw values for settings that depend on the environment."""
        return {
            "source_dir": str(Path.cwd()),
            "target_dir": str(home / CLAUDE_HOME_EXT),
        }

    @classmethod
    def load(cls, home: Path | None = None, path: Path | None = None) -> "AitkConfig":
        """Load config from file, falling back to defaults when it does not exist.

        Args:
            home: User home directory used for defaults and ``~`` expansion
            path: Config file; defaults to ``<AITK_HOME>/config.json``

        Raises:
            ConfigurationError: If the file holds invalid JSON or fails validation
        """
        home = home if home is not None else get_home_dir()
        path = path if path is not None else get_config_path(home=home)

        raw: dict[str, Any] = {}
        if path.exists():
            try:
                with path.open() as fh:
                    raw = json.load(fh)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid JSON in config file {path}: {e}") from e
            if not isinstance(raw, dict):
                raise ConfigurationError(f"Config file {path} must contain a JSON object")

        merged = {**cls.defaults(home), **raw}
        for key in ("source_dir", "target_dir"):
            if isinstance(merged.get(key), str):
                merged[key] = _expand_home(merged[key], home)

        try:
            return cls(**merged)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ConfigurationError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return self.model_dump(mode="json")
