"""Configuration manager for UBIX.

This module provides the ConfigManager class for loading configuration
values with a cascading hierarchy:

    1. Environment Variables (highest priority)
    2. Local Config (.ubix in current/parent directories)
    3. Global Config (~/.ubix-config)
    4. Built-in Defaults (lowest priority)

Teams can commit a local .ubix next to their solutions to share defaults
such as the author, while each user keeps personal defaults globally.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from rich.markup import escape

from ubix.config.settings import CONFIG_FILE, Settings
from ubix.solution.validation import API_PATTERN, VERSION_PATTERN, matches
from ubix.utils.console import console, print_header, print_info
from ubix.utils.errors import ConfigError
from ubix.utils.logging import log_message

logger = logging.getLogger(__name__)

# Settings whose values must satisfy a manifest pattern
_PATTERN_CHECKED_KEYS = {
    "UBIX_DEFAULT_VERSION": VERSION_PATTERN,
    "UBIX_DEFAULT_API": API_PATTERN,
}


class ConfigManager:
    """Loads configuration with a cascading hierarchy.

    Configuration Precedence (highest to lowest):
    1. Environment Variables - CI/CD, temporary overrides
    2. Local Config (.ubix) - Project-specific settings
    3. Global Config (~/.ubix-config) - User defaults
    4. Built-in Defaults - Fallback values

    Files are parsed line by line as KEY=VALUE pairs; nothing is evaluated.

    Attributes:
        settings: Current settings instance
        global_config_path: Path to global ~/.ubix-config file
        local_config_path: Path to discovered local .ubix file (after load)
    """

    LOCAL_CONFIG_NAME = ".ubix"
    GLOBAL_CONFIG_NAME = ".ubix-config"

    def __init__(self, global_config_path: Path | None = None) -> None:
        """Initialize the configuration manager.

        Args:
            global_config_path: Optional custom path to global config file.
                                Defaults to ~/.ubix-config.
        """
        self.global_config_path = global_config_path or CONFIG_FILE
        self.local_config_path: Path | None = None
        self.settings = Settings()
        self._raw_values: dict[str, str] = {}
        self._config_sources: dict[str, str] = {}

    def load(self) -> Settings:
        """Load configuration from all sources with cascading precedence.

        Each call starts from clean defaults, so repeated loads never keep
        stale values.

        Returns:
            Settings instance with loaded values

        Raises:
            ConfigError: If a configuration file cannot be read
        """
        self.settings = Settings()
        self.local_config_path = None
        self._raw_values = {}
        self._config_sources = {}

        if self.global_config_path.exists():
            log_message(f"Loading global configuration from {self.global_config_path}")
            self._load_file(self.global_config_path, source="global")

        local_path = self._find_local_config()
        if local_path:
            self.local_config_path = local_path
            log_message(f"Loading local configuration from {local_path}")
            self._load_file(local_path, source=f"local ({local_path})")

        self._load_environment()

        for key, value in self._raw_values.items():
            self._apply_value_to_settings(key, value)

        log_message(f"Configuration loaded successfully ({len(self._raw_values)} keys)")
        return self.settings

    def _find_local_config(self) -> Path | None:
        """Find local .ubix config by traversing up from CWD.

        Traversal stops at the first .ubix file, at a repository root
        (a directory containing .git), or at the filesystem root.

        Returns:
            Path to local config file, or None if not found
        """
        current = Path.cwd()
        while True:
            config_path = current / self.LOCAL_CONFIG_NAME
            if config_path.is_file():
                return config_path

            if (current / ".git").exists():
                break

            parent = current.parent
            if parent == current:
                break
            current = parent

        return None

    def _load_file(self, path: Path, source: str = "file") -> None:
        """Load key=value pairs from a config file.

        Args:
            path: Path to the config file
            source: Source identifier for debugging

        Raises:
            ConfigError: If the file cannot be read or is not UTF-8
        """
        pattern = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)=(.*)$")

        try:
            lines = path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read configuration file {path}: {e}") from e

        for line in lines:
            line = line.strip()

            if not line or line.startswith("#"):
                continue

            match = pattern.match(line)
            if match:
                key, value = match.groups()

                # Double quotes allow \" and \\ escapes, single quotes are literal
                if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
                    value = self._unescape_value(value[1:-1])
                elif len(value) >= 2 and value.startswith("'") and value.endswith("'"):
                    value = value[1:-1]

                self._raw_values[key] = value
                self._config_sources[key] = source

    def _load_environment(self) -> None:
        """Override config with environment variables.

        Only known config keys are read, so unrelated environment
        variables never leak into the configuration.
        """
        for key in Settings.get_config_keys():
            env_value = os.environ.get(key)
            if env_value is not None:
                self._raw_values[key] = env_value
                self._config_sources[key] = "environment"

    def _apply_value_to_settings(self, key: str, value: str) -> None:
        """Apply a raw config value to the settings object.

        Args:
            key: Configuration key
            value: Raw string value from file or environment
        """
        attr = self.settings.get_attribute_for_key(key)
        if attr is None:
            return  # Unknown key, ignore

        current_value = getattr(self.settings, attr)

        if isinstance(current_value, bool):
            setattr(self.settings, attr, value.lower() in ("true", "1", "yes"))
            return

        pattern = _PATTERN_CHECKED_KEYS.get(key)
        if pattern is not None and not matches(pattern, value):
            logger.warning(
                f"Invalid {key} value '{value}' from {self._config_sources.get(key)}, "
                f"keeping default '{current_value}'"
            )
            return

        setattr(self.settings, attr, value)

    @staticmethod
    def _unescape_value(value: str) -> str:
        """Undo backslash escaping of a double-quoted config value."""
        return re.sub(r"\\(.)", r"\1", value)

    def get(self, key: str, default: str = "") -> str:
        """Get a raw configuration value.

        Args:
            key: Configuration key to retrieve
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self._raw_values.get(key, default)

    def get_config_source(self, key: str) -> str:
        """Describe where the effective value of ``key`` came from."""
        return self._config_sources.get(key, "default")

    def show(self) -> None:
        """Display current configuration using Rich formatting."""
        print_header("Current Configuration")

        print_info(f"Global config: {self.global_config_path}")
        if self.local_config_path:
            print_info(f"Local config:  {self.local_config_path}")
        else:
            print_info("Local config:  (not found)")
        console.print()

        s = self.settings
        console.print("  [bold]Solution Defaults:[/bold]")
        for label, key, value in (
            ("Author", "UBIX_DEFAULT_AUTHOR", s.default_author or "(not set)"),
            ("Version", "UBIX_DEFAULT_VERSION", s.default_version),
            ("API Version", "UBIX_DEFAULT_API", s.default_api),
        ):
            console.print(f"    {label}: {escape(value)} [dim]({self.get_config_source(key)})[/dim]")
        console.print()

        console.print("  [bold]Behavior:[/bold]")
        console.print(
            f"    Archive Name: {escape(s.archive_name)} "
            f"[dim]({self.get_config_source('UBIX_ARCHIVE_NAME')})[/dim]"
        )
        console.print(
            f"    Assume Defaults: {s.assume_defaults} "
            f"[dim]({self.get_config_source('UBIX_ASSUME_DEFAULTS')})[/dim]"
        )
        console.print()


__all__ = ["ConfigManager"]
