"""Show what is currently linked into the target directory."""

import logging
import os
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from .._output_schemas.link import LinkStatusOutput
from ..config.AitkConfig import AitkConfig
from ..config.ConfigurationError import ConfigurationError
from ..StageResult import StageResult
from .available_languages import available_languages
from .link_language import link_language

logger = logging.getLogger(__name__)


def _describe(entry: Path, category: str, config: AitkConfig, source_dir: Path, selected: str) -> dict[str, Any]:
    if not entry.is_symlink():
        return {
            "category": category,
            "name": entry.name,
            "is_symlink": False,
            "link_target": "",
            "managed": False,
            "language": "",
            "matches_language": False,
            "dangling": False,
        }
    language = link_language(
        entry, source_dir, config.categories()[category], canonicalize=config.canonicalize_paths
    )
    return {
        "category": category,
        "name": entry.name,
        "is_symlink": True,
        "link_target": os.readlink(entry),
        "managed": language is not None,
        "language": language or "",
        "matches_language": language == selected,
        "dangling": not entry.exists(),
    }


def cmd_status(lang: str | None = None) -> StageResult:
    """Report the symlinks found in the target agents/ and skills/ directories.

    Args:
        lang: Language to report against; defaults to the configured default.
            Toolkit links into any other language are flagged.

    Returns:
        StageResult listing links, whether they belong to the toolkit and
        whether they dangle, plus the languages the toolkit provides.
        Unreadable target directories and entries are reported as errors.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = AitkConfig.load()
            language = lang or config.default_language
            if language not in config.languages:
                raise ConfigurationError(
                    f"Unsupported language '{language}'. Supported languages: {', '.join(config.languages)}"
                )
        except ConfigurationError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Configuration error: {e}"
            result_obj.output = LinkStatusOutput(
                errors=[str(e)],
                warnings=[],
                language=lang or "",
                source_dir="",
                target_dir="",
                available_languages={},
                links=[],
                count=0,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        source_dir = Path(config.source_dir)
        target_dir = Path(config.target_dir)
        errors: list[str] = []
        warnings: list[str] = []
        links: list[dict[str, Any]] = []
        languages: dict[str, list[str]] = {}

        for name, category in config.categories().items():
            yield (0.3 if name == "agents" else 0.7, f"Inspecting {target_dir / name}...")
            root = target_dir / name
            try:
                languages[name] = available_languages(source_dir, category)
                if not root.is_dir():
                    warnings.append(f"No {name} directory: {root}")
                    continue
                entries = sorted(root.iterdir(), key=lambda p: p.name)
            except OSError as e:
                logger.error(f"Cannot list {root}: {e}")
                errors.append(f"{name}: {e}")
                continue
            for entry in entries:
                try:
                    links.append(_describe(entry, name, config, source_dir, language))
                except OSError as e:
                    logger.error(f"Cannot inspect {entry}: {e}")
                    errors.append(f"{name}/{entry.name}: {e}")

        count = sum(1 for item in links if item["is_symlink"])
        for item in links:
            display_name = f"{item['category']}/{item['name']}"
            if item["dangling"]:
                warnings.append(f"Dangling link: {display_name}")
            if item["managed"] and not item["matches_language"]:
                warnings.append(f"Linked to another language: {display_name} ({item['language']})")

        yield (1.0, "Complete")
        result_obj.result = f"Found {count} link(s) in {target_dir}"
        if errors:
            result_obj.result += f", {len(errors)} error(s)"
        result_obj.output = LinkStatusOutput(
            errors=errors,
            warnings=warnings,
            language=language,
            source_dir=str(source_dir),
            target_dir=str(target_dir),
            available_languages=languages,
            links=links,
            count=count,
        ).model_dump(mode="python")
        result_obj.success = not errors

    return StageResult(announce="Checking linked agents and skills...", progress_callback=do_work)
