"""
Configuration management for the IP Ranges system.

This module provides functionality for loading and managing configuration
from JSON/YAML files and environment variables.
"""

import json
import os
import yaml
from typing import Dict, Any
from dotenv import load_dotenv

from ipranges.core.constants import (
    CONFIG_DEFAULTS_DIR, ENV_PREFIX, SOURCES_DIR
)
from ipranges.core.exceptions import ConfigurationError

class Settings:
    """
    Settings manager for the IP Ranges system.

    This class loads and manages configuration from YAML files and environment variables.
    """

    _instance = None

    @classmethod
    def get_instance(cls):
        """Get or create the singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def __init__(self, config_dir: str = CONFIG_DEFAULTS_DIR):
        """Initialize the settings manager."""
        self.config = {}
        self._load_defaults(config_dir)
        self._load_environment()

    def _load_defaults(self, config_dir: str):
        """Load default configuration from YAML files, one section per file."""
        if not os.path.isdir(config_dir):
            return

        for filename in sorted(os.listdir(config_dir)):
            if filename.endswith('.yaml') or filename.endswith('.yml'):
                filepath = os.path.join(config_dir, filename)
                try:
                    with open(filepath, 'r') as f:
                        section = os.path.splitext(filename)[0]
                        self.config[section] = yaml.safe_load(f) or {}
                except (OSError, yaml.YAMLError) as e:
                    raise ConfigurationError(f"Error loading config file {filepath}: {e}")

    def _load_environment(self):
        """Load configuration from environment variables."""
        load_dotenv()  # Load .env file if present

        # IPRANGES_SOURCES_DIRECTORY -> config['sources']['directory']
        for key, value in os.environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            name = key[len(ENV_PREFIX):].lower()
            if '_' not in name:
                continue
            section, option = name.split('_', 1)
            self.set(section, option, value)

    def get(self, section: str, option: str, default: Any = None) -> Any:
        """Get a configuration value."""
        section_config = self.config.get(section)
        if not isinstance(section_config, dict):
            return default
        return section_config.get(option, default)

    def set(self, section: str, option: str, value: Any) -> None:
        """Set a configuration value."""
        if not isinstance(self.config.get(section), dict):
            self.config[section] = {}
        self.config[section][option] = value

    @classmethod
    def from_file(cls, filepath: str) -> 'Settings':
        """
        Create a Settings instance from a configuration file.

        Values from the file override defaults and environment variables.

        Args:
            filepath: Path to the configuration file (YAML or JSON)

        Returns:
            Settings instance
        """
        if not os.path.isfile(filepath):
            raise ConfigurationError(f"Config file not found: {filepath}")

        instance = cls()
        _, ext = os.path.splitext(filepath)

        try:
            with open(filepath, 'r') as f:
                if ext.lower() in ('.yaml', '.yml'):
                    config_data = yaml.safe_load(f)
                elif ext.lower() == '.json':
                    config_data = json.load(f)
                else:
                    raise ConfigurationError(f"Unsupported config file format: {filepath}")
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Error loading config file {filepath}: {e}")

        if not isinstance(config_data, dict):
            raise ConfigurationError(f"Invalid config format in {filepath}")

        for section, values in config_data.items():
            if isinstance(values, dict):
                for option, value in values.items():
                    instance.set(section, option, value)
            else:
                instance.config[section] = values

        return instance

    def get_source_params(self) -> Dict[str, Any]:
        """
        Get source discovery parameters.

        Returns:
            Dictionary with directory and name prefix
        """
        params = dict(self.config.get('sources') or {})
        params.setdefault('directory', SOURCES_DIR)
        params.setdefault('prefix', None)
        return params

    def get_logging_params(self) -> Dict[str, Any]:
        """
        Get logging parameters.

        Returns:
            Dictionary with level and log file directory (None for console only)
        """
        params = dict(self.config.get('logging') or {})
        params.setdefault('level', 'INFO')
        params.setdefault('directory', None)
        return params
