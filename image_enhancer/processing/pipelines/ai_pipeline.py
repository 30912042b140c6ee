#!/usr/bin/env python3
"""
AI Enhancement Pipeline
Runs a fixed-size tile through an ONNX super-resolution graph and resizes
the result to exactly twice the original dimensions
"""

from pathlib import Path
from typing import Callable, Optional, Union

import numpy as np
from PIL import Image

from ...core import get_logger
from ...models.onnx_model import run_inference
from ..resampler import resize
from ..tensor_bridge import encode, decode

AI_SCALE_FACTOR = 2
DEFAULT_TILE_SIZE = 128

InferenceRunner = Callable[[Union[str, Path], np.ndarray], np.ndarray]


def enhance_ai(image: Image.Image,
               model_path: Union[str, Path],
               tile_size: int = DEFAULT_TILE_SIZE,
               scale_factor: int = AI_SCALE_FACTOR,
               runner: Optional[InferenceRunner] = None) -> Image.Image:
    """Enhance an image with an ONNX super-resolution model

    Args:
        image: Source RGB image
        model_path: Path to the .onnx graph
        tile_size: Square input size the model expects
        scale_factor: Final size relative to the original image
        runner: Inference callable (model_path, tensor) -> tensor, defaults to onnxruntime

    Returns:
        New image of size (width * scale_factor, height * scale_factor)

    Raises:
        ShapeError: If the model output is not a (1, 3, H, W) tensor
        ModelLoadError: If the model cannot be loaded
        InferenceError: If the model fails while running
    """
    if tile_size <= 0:
        raise ValueError(f"tile_size must be positive, got {tile_size}")
    if scale_factor <= 0:
        raise ValueError(f"scale_factor must be positive, got {scale_factor}")

    if runner is None:
        runner = run_inference

    logger = get_logger(component="AI")
    logger.info(f"Model path: {model_path}")

    # Target size comes from the original image, before any resizing
    final_width = image.width * scale_factor
    final_height = image.height * scale_factor

    logger.log_stage("Preprocess", f"{image.width}x{image.height} -> {tile_size}x{tile_size} tile")
    tile = resize(image, tile_size, tile_size)
    input_tensor = encode(tile, tile_size)

    logger.log_stage("Inference")
    output_tensor = runner(model_path, input_tensor)

    logger.log_stage("Postprocess")
    ai_image = decode(output_tensor)
    logger.info(f"AI model output size: {ai_image.width}x{ai_image.height}")

    final_image = resize(ai_image, final_width, final_height)
    logger.info(f"Final output size ({scale_factor}x): {final_width}x{final_height}")

    return final_image
