"""Configuration management for gitvis.

This module provides a clean interface for reading and writing the
INI configuration that tunes the simulation.
"""

import os
import configparser
from pathlib import Path
from typing import Optional, Dict, Tuple

from .errors import ConfigError
from .modifications import DEFAULT_MAX_DELETIONS, DEFAULT_MAX_INSERTIONS, ModificationGenerator


class Config:
    """
    Manages gitvis configuration files.

    Configuration is stored in INI format:
    - Global config: ~/.gitvisconfig
    - Session config: an explicit file passed on the command line

    Session config takes precedence over global config.
    Environment variables take highest precedence.
    """

    GLOBAL_CONFIG_NAME = '.gitvisconfig'

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize Config manager.

        Args:
            config_path: Optional explicit config file
        """
        self.config_path = Path(config_path) if config_path else None
        self._global_config = None
        self._local_config = None

    @classmethod
    def global_config_path(cls) -> Path:
        """Path of the per-user config file."""
        return Path.home() / cls.GLOBAL_CONFIG_NAME

    @property
    def global_config(self) -> configparser.ConfigParser:
        """Load and return global configuration."""
        if self._global_config is None:
            self._global_config = configparser.ConfigParser()
            path = self.global_config_path()
            if path.exists():
                self._global_config.read(path)
        return self._global_config

    @property
    def local_config(self) -> Optional[configparser.ConfigParser]:
        """Load and return the explicit configuration file, if any."""
        if self._local_config is None and self.config_path:
            self._local_config = configparser.ConfigParser()
            if self.config_path.exists():
                self._local_config.read(self.config_path)
        return self._local_config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Priority order (highest to lowest):
        1. Environment variables (GITVIS_<SECTION>_<KEY>)
        2. Explicit config file
        3. Global config
        4. Fallback value

        Args:
            section: Config section (e.g., 'modify', 'session')
            key: Config key (e.g., 'max_insertions')
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        env_key = f"GITVIS_{section.upper()}_{key.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value

        if self.local_config and self.local_config.has_option(section, key):
            return self.local_config.get(section, key)

        if self.global_config.has_option(section, key):
            return self.global_config.get(section, key)

        return fallback

    def get_int(self, section: str, key: str, fallback: Optional[int] = None) -> Optional[int]:
        """
        Get a non-negative integer configuration value.

        Raises:
            ConfigError: If the stored value is not a non-negative integer
        """
        value = self.get(section, key)
        if value is None:
            return fallback

        try:
            number = int(value)
        except ValueError:
            raise ConfigError(f"{section}.{key} must be an integer, got {value!r}")

        if number < 0:
            raise ConfigError(f"{section}.{key} must not be negative, got {number}")

        return number

    def set(self, section: str, key: str, value: str, global_config: bool = False) -> None:
        """
        Set a configuration value.

        Args:
            section: Config section
            key: Config key
            value: Value to set
            global_config: If True, write to global config; otherwise the explicit file
        """
        if global_config:
            config = self.global_config
            config_path = self.global_config_path()
        else:
            if not self.config_path:
                raise ConfigError("No config file given (use --global for global config)")
            config = self.local_config
            config_path = self.config_path

        if not config.has_section(section):
            config.add_section(section)

        config.set(section, key, value)

        with open(config_path, 'w') as f:
            config.write(f)

    def list_all(self) -> Dict[str, Dict[str, str]]:
        """
        List all configuration values.

        Returns:
            Dict of sections to key-value dicts, explicit file overriding global
        """
        result = {}

        for section in self.global_config.sections():
            result.setdefault(section, {})
            for key, value in self.global_config.items(section):
                result[section][key] = value

        if self.local_config:
            for section in self.local_config.sections():
                result.setdefault(section, {})
                for key, value in self.local_config.items(section):
                    result[section][key] = value

        return result

    def modification_limits(self) -> Tuple[int, int]:
        """Maximum (insertions, deletions) of a random edit."""
        return (
            self.get_int('modify', 'max_insertions', DEFAULT_MAX_INSERTIONS),
            self.get_int('modify', 'max_deletions', DEFAULT_MAX_DELETIONS),
        )

    def seed(self) -> Optional[int]:
        """Random seed for reproducible sessions, if configured."""
        return self.get_int('session', 'seed')

    def modification_generator(self, seed: Optional[int] = None) -> ModificationGenerator:
        """
        Build a modification generator from configuration.

        Args:
            seed: Overrides the configured seed when given
        """
        max_insertions, max_deletions = self.modification_limits()
        return ModificationGenerator(
            max_insertions,
            max_deletions,
            seed=seed if seed is not None else self.seed(),
        )


def get_config(config_path: Optional[Path] = None) -> Config:
    """
    Get a Config instance.

    Args:
        config_path: Explicit config file, or None for global-only config

    Returns:
        Config instance
    """
    return Config(config_path)
