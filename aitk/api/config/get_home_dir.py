"""Get the invoking user's home directory."""

import os
from pathlib import Path


def get_home_dir(*parts: str) -> Path:
    """Get the user's home directory or a path under it.

    Checks the HOME environment variable first (for test isolation),
    then falls back to ``Path.home()``.

    Examples:
        >>> get_home_dir()
        Path("/Users/user")
        >>> get_home_dir(".claude", "agents")
        Path("/Users/user/.claude/agents")
    """
    home_env = os.environ.get("HOME")
    home = Path(home_env) if home_env else Path.home()
    return home / Path(*parts) if parts else home
