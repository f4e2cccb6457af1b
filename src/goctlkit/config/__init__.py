"""Configuration reading exports."""

from goctlkit.config.loader import Config, load_config, read_config
from goctlkit.config.paths import config_dir_from_env

__all__ = ["Config", "config_dir_from_env", "load_config", "read_config"]
