"""Configuration management for UBIX.

This package contains:
- settings: Settings dataclass with configuration fields
- manager: ConfigManager class for loading configuration

Configuration Format
====================
Flat KEY=VALUE lines (environment variable style), ``#`` for comments:

    UBIX_DEFAULT_AUTHOR="Data Team"
    UBIX_DEFAULT_API=latest
    UBIX_ASSUME_DEFAULTS=false
"""

from ubix.config.manager import ConfigManager
from ubix.config.settings import CONFIG_FILE, Settings

__all__ = [
    "CONFIG_FILE",
    "ConfigManager",
    "Settings",
]
