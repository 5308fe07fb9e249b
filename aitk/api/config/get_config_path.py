"""Get path to AITK config file."""

from pathlib import Path

from ...constants import CONFIG_FILE_NAME
from .get_aitk_home import get_aitk_home


def get_config_path(home: Path | None = None) -> Path:
    """Get path to AITK config file."""
    return get_aitk_home(CONFIG_FILE_NAME, home=home)
