"""Configuration management for replaycache.

This module provides a small configuration system built on OmegaConf.
Defaults live in code; a `.env` file or the process environment can
override them, and callers may merge their own settings on top with
`config_manager.set_config`.
"""

import os
from loguru import logger
from typing import Any, Optional
from omegaconf import DictConfig, OmegaConf
import dotenv

dotenv.load_dotenv()


DEFAULTS = {
    "cache": {
        "touch_count": 1,
    },
    "logging": {
        "level": "INFO",
        "file": None,
        "rotation": "10 MB",
        "retention": "1 week",
    },
}

# Environment variable -> dotted config key
ENV_OVERRIDES = {
    "REPLAYCACHE_TOUCH_COUNT": "cache.touch_count",
    "REPLAYCACHE_LOG_LEVEL": "logging.level",
    "REPLAYCACHE_LOG_FILE": "logging.file",
}


def _load_defaults() -> DictConfig:
    """Build the default configuration, applying environment overrides.

    Returns:
        Configuration with defaults and environment overrides merged
    """
    cfg = OmegaConf.create(DEFAULTS)
    for env_name, key in ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            OmegaConf.update(cfg, key, value)
    return cfg


class ConfigManager:
    """Configuration manager for replaycache.

    This class provides a singleton instance for accessing the configuration.
    """

    _instance = None
    _cfg: Optional[DictConfig] = None

    def __new__(cls):
        """Create a singleton instance."""
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize the configuration manager."""
        # Only initialize once
        if ConfigManager._cfg is None:
            ConfigManager._cfg = _load_defaults()

    def set_config(self, cfg: Any):
        """Merge a configuration over the defaults.

        Args:
            cfg: Configuration object (DictConfig or dict)
        """
        if not isinstance(cfg, DictConfig):
            cfg = OmegaConf.create(cfg)
        ConfigManager._cfg = OmegaConf.merge(_load_defaults(), cfg)
        logger.debug("Configuration set successfully")

    def get_config(self) -> DictConfig:
        """Get the configuration.

        Returns:
            Configuration object
        """
        return ConfigManager._cfg

    def reset(self) -> None:
        """Restore the default configuration."""
        ConfigManager._cfg = _load_defaults()

    def to_dict(self):
        """Convert configuration to dictionary.

        Returns:
            Configuration dictionary
        """
        return OmegaConf.to_container(self.get_config(), resolve=True)


# Helper functions for accessing configuration values

def get_touch_count() -> int:
    """Get the default number of records `touch_next` pulls.

    Returns:
        The touch count
    """
    value = config_manager.get_config().get("cache", {}).get("touch_count", 1)
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid cache.touch_count: {value}, using 1")
        return 1


def get_log_level() -> str:
    """Get the log level from configuration.

    Returns:
        The log level name
    """
    return str(config_manager.get_config().get("logging", {}).get("level", "INFO")).upper()


# Create a singleton instance of the configuration manager
config_manager = ConfigManager()
