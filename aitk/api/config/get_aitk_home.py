"""Get AITK home directory path or path under it."""

import os
from pathlib import Path

from ...constants import AITK_HOME_EXT
from .get_home_dir import get_home_dir


def get_aitk_home(*parts: str, home: Path | None = None) -> Path:
    """Get AITK home directory path or path under it.

    Checks AITK_HOME environment variable first, defaults to ``<home>/.aitk``.

    Args:
        *parts: Optional path components to join (e.g., "config.json")
        home: Explicit user home directory; defaults to ``get_home_dir()``
    """
    aitk_home_env = os.environ.get("AITK_HOME")
    if aitk_home_env:
        aitk_home = Path(aitk_home_env).expanduser().resolve()
    else:
        aitk_home = (home if home is not None else get_home_dir()) / AITK_HOME_EXT

    return aitk_home / Path(*parts) if parts else aitk_home
