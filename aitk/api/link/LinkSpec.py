"""Desired link: target should be a symlink to source."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class LinkSpec:
    """Desired state for one target path.

    ``source`` is never modified; ``target``'s parent may not exist yet.
    """

    category: str
    name: str
    source: Path
    target: Path
    label: str = ""

    @property
    def display_name(self) -> str:
        return f"{self.category}/{self.label or self.name}"
