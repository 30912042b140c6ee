#!/usr/bin/env python3
"""
Enhance Command Implementation
Load an image, run one enhancement strategy, save the result
"""

import time
from pathlib import Path
from typing import Optional, Dict, Any

from ..core import get_logger, get_config
from ..processing import enhance_classical, enhance_ai
from ..utils import load_image, save_image, format_for_path


class EnhanceCommand:
    """Handles the classical and AI enhancement workflows"""

    def __init__(self, config_dir: Optional[str] = None, verbose: bool = False):
        """Initialize enhance command

        Args:
            config_dir: Custom config directory
            verbose: Enable verbose output
        """
        self.config_dir = config_dir
        self.verbose = verbose
        self.config = get_config(Path(config_dir) if config_dir else None)
        self.logger = get_logger()
        if verbose:
            self.logger.set_level('DEBUG')

    def execute_classical(
        self,
        input_path: str,
        output_path: str,
        intensity: Optional[float] = None
    ) -> Dict[str, Any]:
        """Upscale and sharpen with the classical pipeline

        Args:
            input_path: Image to enhance
            output_path: Where to write the result
            intensity: Sharpen strength, defaults to enhancement.default_intensity

        Returns:
            Result dictionary
        """
        start_time = time.time()

        if intensity is None:
            intensity = float(self.config.get_setting('enhancement.default_intensity', 1.0))
        scale_factor = self.config.get_setting('enhancement.scale_factor', 2)

        # Unknown extensions fail before any processing happens
        format_for_path(output_path)

        self.logger.log_separator()
        self.logger.log_stage("Step 1/3", "Loading image")
        image = load_image(input_path)

        self.logger.log_stage("Step 2/3", f"Classical enhancement (intensity {intensity})")
        result = enhance_classical(image, scale_factor=scale_factor, intensity=intensity)

        self.logger.log_stage("Step 3/3", "Saving image")
        saved_path = self._save(result, output_path)
        self.logger.log_separator()

        return {
            'mode': 'classical',
            'image_path': saved_path,
            'input_size': image.size,
            'output_size': result.size,
            'duration': time.time() - start_time
        }

    def execute_ai(
        self,
        model_path: str,
        input_path: str,
        output_path: str,
        tile_size: Optional[int] = None
    ) -> Dict[str, Any]:
        """Enhance with the ONNX super-resolution pipeline

        Args:
            model_path: ONNX graph to run
            input_path: Image to enhance
            output_path: Where to write the result
            tile_size: Model input size, defaults to ai.tile_size

        Returns:
            Result dictionary
        """
        start_time = time.time()

        if tile_size is None:
            tile_size = self.config.get_setting('ai.tile_size', 128)
        scale_factor = self.config.get_setting('ai.scale_factor', 2)

        format_for_path(output_path)

        self.logger.log_separator()
        self.logger.log_stage("Step 1/3", "Loading image")
        image = load_image(input_path)

        self.logger.log_stage("Step 2/3", "AI enhancement (onnxruntime, CPU)")
        result = enhance_ai(image, model_path, tile_size=tile_size, scale_factor=scale_factor)

        self.logger.log_stage("Step 3/3", "Saving image")
        saved_path = self._save(result, output_path)
        self.logger.log_separator()

        return {
            'mode': 'ai',
            'image_path': saved_path,
            'input_size': image.size,
            'output_size': result.size,
            'duration': time.time() - start_time
        }

    def _save(self, image, output_path: str) -> Path:
        quality = self.config.get_setting('output.jpeg_quality', 95)
        return save_image(image, output_path, quality=quality)
