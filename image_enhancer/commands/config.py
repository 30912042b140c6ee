#!/usr/bin/env python3
"""
Config Command Implementation
Configuration inspection
"""

from pathlib import Path
from typing import Optional
import yaml

from ..core import get_logger, get_config


class ConfigCommand:
    """Handles configuration inspection"""

    def __init__(self, config_dir: Optional[str] = None, verbose: bool = False):
        """Initialize config command

        Args:
            config_dir: Custom config directory
            verbose: Enable verbose output
        """
        self.config_dir = config_dir
        self.verbose = verbose
        self.config = get_config(Path(config_dir) if config_dir else None)
        self.logger = get_logger()

    def show_config(self) -> str:
        """Display current configuration"""
        self.logger.info("=== CURRENT CONFIGURATION ===")
        self.logger.info(f"Config directory: {self.config.config_dir}")

        self.logger.info("Classical enhancement:")
        self.logger.info(f"  Scale factor: {self.config.get_setting('enhancement.scale_factor')}")
        self.logger.info(f"  Default intensity: {self.config.get_setting('enhancement.default_intensity')}")

        self.logger.info("AI enhancement:")
        self.logger.info(f"  Tile size: {self.config.get_setting('ai.tile_size')}")
        self.logger.info(f"  Scale factor: {self.config.get_setting('ai.scale_factor')}")
        self.logger.info(f"  Providers: {', '.join(self.config.get_setting('ai.providers', []))}")

        dump = yaml.dump(self.config.settings, default_flow_style=False)
        if self.verbose:
            self.logger.info("Full configuration:")
            print(dump)
        return dump

    def validate_config(self) -> None:
        """Validate configuration files"""
        self.logger.info("Validating configuration...")

        try:
            self.config._validate_all()
            self.logger.info("✓ Configuration is valid")

        except Exception as e:
            self.logger.error(f"✗ Configuration validation failed: {e}")
            raise
