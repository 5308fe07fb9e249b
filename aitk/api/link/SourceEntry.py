"""A source entry discovered under a category root."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SourceEntry:
    """One agent file or skill directory.

    Attributes:
        name: File or directory name, reused as the link name
        label: Identifier shown to the user (file name without suffix)
        path: Absolute source path
    """

    name: str
    label: str
    path: Path
