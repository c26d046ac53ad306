"""Settings dataclass for UBIX configuration.

This module defines the Settings dataclass that holds all configuration
values, together with the mapping between config keys and attributes.
"""

from dataclasses import dataclass, field
from pathlib import Path

from ubix import DEFAULT_ARCHIVE_NAME


@dataclass
class Settings:
    """Configuration settings for UBIX.

    All settings have sensible defaults and can be loaded from
    the configuration files (~/.ubix-config, .ubix) or the environment.

    Attributes:
        default_author: Author offered when creating a solution
        default_version: Version offered when creating a solution
        default_api: UBIX API version offered when creating a solution
        archive_name: File name of the package written inside the solution
        assume_defaults: Create solutions without prompting
    """

    default_author: str = ""
    default_version: str = "0.0.0"
    default_api: str = "latest"
    archive_name: str = DEFAULT_ARCHIVE_NAME
    assume_defaults: bool = False

    # Config key to attribute mapping
    _key_mapping: dict[str, str] = field(
        default_factory=lambda: {
            "UBIX_DEFAULT_AUTHOR": "default_author",
            "UBIX_DEFAULT_VERSION": "default_version",
            "UBIX_DEFAULT_API": "default_api",
            "UBIX_ARCHIVE_NAME": "archive_name",
            "UBIX_ASSUME_DEFAULTS": "assume_defaults",
        },
        repr=False,
    )

    def get_attribute_for_key(self, key: str) -> str | None:
        """Get the attribute name for a config key.

        Args:
            key: Configuration key (e.g., "UBIX_DEFAULT_AUTHOR")

        Returns:
            Attribute name or None if key is unknown
        """
        return self._key_mapping.get(key)

    def get_key_for_attribute(self, attr: str) -> str | None:
        """Get the config key for an attribute name."""
        for key, value in self._key_mapping.items():
            if value == attr:
                return key
        return None

    @classmethod
    def get_config_keys(cls) -> list[str]:
        """Get list of all valid configuration keys."""
        temp = cls()
        return list(temp._key_mapping.keys())


# Default configuration file path
CONFIG_FILE = Path.home() / ".ubix-config"
