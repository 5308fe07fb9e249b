"""Configuration API."""

from .AitkConfig import AitkConfig
from .CategoryConfig import CategoryConfig
from .ConfigurationError import ConfigurationError
from .get_aitk_home import get_aitk_home
from .get_config_path import get_config_path
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig

__all__ = [
    "AitkConfig",
    "CategoryConfig",
    "ConfigurationError",
    "LogConfig",
    "get_aitk_home",
    "get_config_path",
    "get_home_dir",
]
