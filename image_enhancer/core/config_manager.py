#!/usr/bin/env python3
"""
Configuration Manager for the Image Enhancer
Loads and validates YAML configuration with fail-loud error handling
"""

import os
import re
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from .exceptions import ConfigurationError

CONFIG_DIR_ENV = 'IMAGE_ENHANCER_CONFIG_DIR'

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigManager:
    """Manages all configuration for the Image Enhancer"""

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize configuration manager

        Args:
            config_dir: Custom config directory, defaults to package config/
        """
        if config_dir is None:
            env_dir = os.environ.get(CONFIG_DIR_ENV)
            if env_dir:
                config_dir = Path(env_dir)
            else:
                package_dir = Path(__file__).parent.parent
                config_dir = package_dir / "config"

        self.config_dir = Path(config_dir)

        if not self.config_dir.exists():
            raise ConfigurationError(
                f"Configuration directory not found: {self.config_dir}\n"
                f"Expected to find settings.yaml at this location.\n"
                f"Current working directory: {os.getcwd()}"
            )

        self.settings = {}

    def load_all(self) -> None:
        """Load all configuration files - fail loud on any error"""
        self.settings = self._load_yaml("settings.yaml", required=True)
        self.settings = self._expand_env_vars(self.settings)
        self._validate_all()

    def _load_yaml(self, filename: str, required: bool = True) -> Dict[str, Any]:
        """Load a YAML configuration file

        Args:
            filename: Name of the YAML file to load
            required: If True, fail if file doesn't exist

        Returns:
            Loaded configuration dictionary
        """
        filepath = self.config_dir / filename

        if not filepath.exists():
            if required:
                raise ConfigurationError(
                    f"Required configuration file not found: {filepath}\n"
                    f"Please ensure all configuration files are present."
                )
            else:
                return {}

        try:
            with open(filepath, 'r') as f:
                config = yaml.safe_load(f)

            if config is None:
                config = {}

            if not isinstance(config, dict):
                raise ConfigurationError(
                    f"Configuration file must contain a mapping: {filepath}"
                )

            return config

        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Failed to parse YAML file: {filepath}\n"
                f"Error: {e}\n"
                f"Please check the YAML syntax."
            )
        except OSError as e:
            raise ConfigurationError(
                f"Failed to load configuration file: {filepath}\n"
                f"Error: {type(e).__name__}: {e}"
            )

    def _validate_all(self) -> None:
        """Validate all loaded configuration - fail loud on errors"""
        self._validate_enhancement()
        self._validate_ai()
        self._validate_output()
        self._validate_logging()

    def _validate_positive_int(self, setting_path: str) -> None:
        value = self.get_setting(setting_path)
        if value is None:
            return
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ConfigurationError(
                f"Setting '{setting_path}' must be a positive integer, got: {value!r}"
            )

    def _validate_enhancement(self) -> None:
        """Validate classical enhancement settings"""
        self._validate_positive_int('enhancement.scale_factor')

        intensity = self.get_setting('enhancement.default_intensity')
        if intensity is not None and (isinstance(intensity, bool) or not isinstance(intensity, (int, float))):
            raise ConfigurationError(
                f"Setting 'enhancement.default_intensity' must be a number, got: {intensity!r}"
            )

    def _validate_ai(self) -> None:
        """Validate AI enhancement settings"""
        self._validate_positive_int('ai.tile_size')
        self._validate_positive_int('ai.scale_factor')

        providers = self.get_setting('ai.providers')
        if providers is not None:
            if not isinstance(providers, list) or not providers:
                raise ConfigurationError(
                    "Setting 'ai.providers' must be a non-empty list of onnxruntime providers"
                )

    def _validate_output(self) -> None:
        """Validate output settings"""
        self._validate_positive_int('output.jpeg_quality')

    def _validate_logging(self) -> None:
        """Validate logging settings"""
        level = self.get_setting('logging.level', 'INFO')
        if str(level).upper() not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level: {level}\n"
                f"Valid levels: {', '.join(VALID_LOG_LEVELS)}"
            )

    def get_setting(self, setting_path: str, default: Any = None) -> Any:
        """Get a setting value using dot notation

        Args:
            setting_path: Path to setting (e.g., 'ai.tile_size')
            default: Default value if not found

        Returns:
            Setting value
        """
        keys = setting_path.split('.')
        value = self.settings

        for key in keys:
            if isinstance(value, dict):
                value = value.get(key)
            else:
                return default

        return value if value is not None else default

    def _expand_env_vars(self, config: Any) -> Any:
        """Expand ${VAR} patterns in config values

        Args:
            config: Configuration to expand

        Returns:
            Config with expanded environment variables
        """
        if isinstance(config, str):
            pattern = r'\$\{([^}]+)\}'

            def replacer(match):
                return os.environ.get(match.group(1), '')

            return re.sub(pattern, replacer, config)
        elif isinstance(config, dict):
            return {k: self._expand_env_vars(v) for k, v in config.items()}
        elif isinstance(config, list):
            return [self._expand_env_vars(v) for v in config]
        return config


# Singleton instance
_config_manager: Optional[ConfigManager] = None


def get_config(config_dir: Optional[Path] = None) -> ConfigManager:
    """Get the global configuration manager instance

    Args:
        config_dir: Load from this directory, replacing any cached instance
    """
    global _config_manager
    if _config_manager is None or config_dir is not None:
        _config_manager = ConfigManager(config_dir)
        _config_manager.load_all()
    return _config_manager


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads it"""
    global _config_manager
    _config_manager = None
