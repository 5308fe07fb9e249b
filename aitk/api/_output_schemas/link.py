"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkRunOutput(BaseOutputSchema):
    """Output schema for link run command.

    Output structure:
    - errors: list[str] - fatal configuration errors plus per-entry conflicts and IO errors
    - warnings: list[str] - informational notes such as empty categories
    - language: str - language code that was linked
    - source_dir: str - toolkit checkout the links point into
    - target_dir: str - directory holding the agents/ and skills/ link roots
    - entries: list[dict] - one dict per entry (category, name, source, target, status, reason)
    - counts: dict[str, int] - number of entries per status
    - linked: int - entries that ended up correctly linked
    """

    language: str = Field(..., description="Language code that was linked")
    source_dir: str = Field(..., description="Toolkit source directory")
    target_dir: str = Field(..., description="Target directory containing the link roots")
    entries: list[dict[str, Any]] = Field(..., description="Per-entry reconciliation results")
    counts: dict[str, int] = Field(..., description="Number of entries per status")
    linked: int = Field(..., description="Entries created, relinked or already linked")


class LinkStatusOutput(BaseOutputSchema):
    """Output schema for link status command."""

    language: str = Field(..., description="Selected language code")
    source_dir: str = Field(..., description="Toolkit source directory")
    target_dir: str = Field(..., description="Target directory containing the link roots")
    available_languages: dict[str, list[str]] = Field(..., description="Languages present per category")
    links: list[dict[str, Any]] = Field(..., description="Entries found in the target category directories")
    count: int = Field(..., description="Number of symlinks found")


class LinkRemoveOutput(BaseOutputSchema):
    """Output schema for link remove command."""

    source_dir: str = Field(..., description="Toolkit source directory")
    target_dir: str = Field(..., description="Target directory containing the link roots")
    removed: list[str] = Field(..., description="Symlinks that were removed")
    skipped: list[str] = Field(..., description="Entries left in place")
    count: int = Field(..., description="Number of symlinks removed")


register_output_schema("link", "run", LinkRunOutput)
register_output_schema("link", "status", LinkStatusOutput)
register_output_schema("link", "remove", LinkRemoveOutput)
