"""Shared constants for AITK home and target locations."""

AITK_HOME_EXT = ".aitk"  # user-level state/config directory suffix

AITK_HOME_DISPLAY = f"~/{AITK_HOME_EXT}"  # user-readable path hint

CLAUDE_HOME_EXT = ".claude"  # directory the assistant scans for agents and skills

LOG_FILE_NAME = "aitk.log"

CONFIG_FILE_NAME = "config.json"

# Language codes shipped with the toolkit
DEFAULT_LANGUAGES = ["en", "zh-cn"]

DEFAULT_LANGUAGE = "en"
