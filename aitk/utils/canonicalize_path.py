"""Canonicalize a path for comparison.

Expands user home directory (~) and resolves symlinks. If resolution
fails, returns the expanded absolute path without resolution.
"""

from pathlib import Path


def canonicalize_path(path: str | Path) -> Path:
    """Expand user and resolve symlinks (non-strict).

    Examples:
        >>> canonicalize_path("~/toolkit/agents/en")
        Path("/Users/user/toolkit/agents/en")
    """
    path_obj = Path(path).expanduser()
    try:
        return path_obj.resolve(strict=False)
    except (OSError, RuntimeError):
        return path_obj.absolute()
