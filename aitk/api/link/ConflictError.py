"""Target occupied by something that is not a symlink."""

from pathlib import Path


class ConflictError(Exception):
    """Raised when a link target exists and is not a symlink.

    The occupant is user data and is never removed.
    """

    def __init__(self, target: Path):
        self.target = target
        kind = "directory" if target.is_dir() else "file"
        super().__init__(f"{target} exists and is not a symlink ({kind})")
