"""Configuration loading for dirlist."""

from dirlist.config.config import DEFAULT_PROGRAM_NAME, Config, ConfigError
from dirlist.config.paths import default_config_path

__all__ = ["Config", "ConfigError", "DEFAULT_PROGRAM_NAME", "default_config_path"]
