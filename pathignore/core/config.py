"""Configuration management for pathignore.

This module provides a small interface for reading and writing the
local and global settings that decide which ignore files are loaded
when none are named explicitly.
"""

import os
import configparser
from pathlib import Path
from typing import Optional, Dict


class Config:
    """
    Manages pathignore configuration files.

    Configuration is stored in INI format:
    - Global config: ~/.pathignorerc
    - Local config: .pathignore in the working directory

    Local config takes precedence over global config.
    Environment variables take highest precedence.
    """

    GLOBAL_CONFIG_PATH = Path.home() / '.pathignorerc'
    LOCAL_CONFIG_NAME = '.pathignore'

    DEFAULTS = {
        ('core', 'ignorefile'): '.gitignore',
    }

    def __init__(self, local_config_path: Optional[Path] = None):
        """
        Initialize Config manager.

        Args:
            local_config_path: Path to the local config file, if any
        """
        self.local_config_path = local_config_path
        self._global_config = None
        self._local_config = None

    @property
    def global_config(self) -> configparser.ConfigParser:
        """Load and return global configuration."""
        if self._global_config is None:
            self._global_config = configparser.ConfigParser()
            if self.GLOBAL_CONFIG_PATH.exists():
                self._global_config.read(self.GLOBAL_CONFIG_PATH)
        return self._global_config

    @property
    def local_config(self) -> Optional[configparser.ConfigParser]:
        """Load and return local configuration."""
        if self._local_config is None and self.local_config_path:
            self._local_config = configparser.ConfigParser()
            if self.local_config_path.exists():
                self._local_config.read(self.local_config_path)
        return self._local_config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Priority order (highest to lowest):
        1. Environment variables (PATHIGNORE_<SECTION>_<KEY>)
        2. Local config
        3. Global config
        4. Fallback value, then built-in default

        Args:
            section: Config section (e.g., 'core')
            key: Config key (e.g., 'ignorefile')
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        env_key = f"PATHIGNORE_{section.upper()}_{key.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value

        if self.local_config and self.local_config.has_option(section, key):
            return self.local_config.get(section, key)

        if self.global_config.has_option(section, key):
            return self.global_config.get(section, key)

        if fallback is not None:
            return fallback
        return self.DEFAULTS.get((section, key))

    def set(self, section: str, key: str, value: str, global_config: bool = False) -> None:
        """
        Set a configuration value.

        Args:
            section: Config section
            key: Config key
            value: Value to set
            global_config: If True, write to global config; otherwise local config
        """
        if global_config:
            config = self.global_config
            config_path = self.GLOBAL_CONFIG_PATH
        else:
            if not self.local_config_path:
                raise ValueError("No local config path available")
            config = self.local_config
            config_path = self.local_config_path

        if not config.has_section(section):
            config.add_section(section)

        config.set(section, key, value)

        with open(config_path, 'w') as f:
            config.write(f)

    def unset(self, section: str, key: str, global_config: bool = False) -> bool:
        """
        Remove a configuration value.

        Returns:
            True if value was removed, False if it didn't exist
        """
        if global_config:
            config = self.global_config
            config_path = self.GLOBAL_CONFIG_PATH
        else:
            if not self.local_config:
                return False
            config = self.local_config
            config_path = self.local_config_path

        if not config.has_option(section, key):
            return False

        config.remove_option(section, key)

        # Remove empty sections
        if not config.options(section):
            config.remove_section(section)

        with open(config_path, 'w') as f:
            config.write(f)

        return True

    def list_all(self, global_only: bool = False) -> Dict[str, Dict[str, str]]:
        """
        List configured values; global keys carry a ``(global)`` suffix.

        Args:
            global_only: Leave out the local config file

        Returns:
            Dict of sections to key-value dicts
        """
        result = {}

        for section in self.global_config.sections():
            result.setdefault(section, {})
            for key, value in self.global_config.items(section):
                result[section][f"{key} (global)"] = value

        if not global_only and self.local_config:
            for section in self.local_config.sections():
                result.setdefault(section, {})
                for key, value in self.local_config.items(section):
                    result[section][key] = value

        return result


def get_config(cwd: Optional[Path] = None) -> Config:
    """
    Get a Config instance for a working directory.

    Args:
        cwd: Directory holding the local config; defaults to the current one

    Returns:
        Config instance
    """
    cwd = Path(cwd) if cwd is not None else Path.cwd()
    return Config(cwd / Config.LOCAL_CONFIG_NAME)
