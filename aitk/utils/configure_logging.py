import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import LOG_FILE_NAME

# Prevent multiple configurations
_CONFIGURED_PATH: Path | None = None


def configure_logging(aitk_home: Path | None = None, level: str = "INFO") -> Path:
    """Configure unified AITK logging.

    Attaches a rotating file handler to the ``aitk`` logger. Calling again with
    the same home only updates the level; a different home replaces the handler.

    Args:
        aitk_home: Path to AITK home directory. If None, derived from environment.
        level: Logging level name.

    Returns:
        Path to the log file.
    """
    global _CONFIGURED_PATH

    if aitk_home is None:
        from ..api.config.get_aitk_home import get_aitk_home

        aitk_home = get_aitk_home()

    log_file = aitk_home / LOG_FILE_NAME
    root_logger = logging.getLogger("aitk")
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if _CONFIGURED_PATH == log_file:
        return log_file

    for handler in list(root_logger.handlers):
        if isinstance(handler, RotatingFileHandler):
            root_logger.removeHandler(handler)
            handler.close()

    # Ensure directory exists
    aitk_home.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED_PATH = log_file
    return log_file
