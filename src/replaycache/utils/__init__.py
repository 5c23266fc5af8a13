"""Utility functions for replaycache."""

from .errors import InvalidSourceError
from .error_handling import log_source_errors

# Configuration utilities
from .config import (
    config_manager,
    ConfigManager,
    get_touch_count,
    get_log_level,
)

__all__ = [
    # From errors
    "InvalidSourceError",
    # From error_handling
    "log_source_errors",
    # From config
    "config_manager",
    "ConfigManager",
    "get_touch_count",
    "get_log_level",
]
