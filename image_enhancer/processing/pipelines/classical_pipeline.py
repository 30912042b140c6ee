#!/usr/bin/env python3
"""
Classical Enhancement Pipeline
Lanczos upscale followed by a 3x3 sharpen convolution
"""

from PIL import Image

from ...core import get_logger
from ..resampler import resize
from ..kernel import synthesize
from ..convolution import convolve


def enhance_classical(image: Image.Image, scale_factor: int = 2, intensity: float = 1.0) -> Image.Image:
    """Upscale an image and sharpen it

    Args:
        image: Source RGB image
        scale_factor: Integer upscale factor applied to both axes
        intensity: Sharpen strength, <= 0 disables sharpening

    Returns:
        New image of size (width * scale_factor, height * scale_factor)
    """
    if isinstance(scale_factor, bool) or not isinstance(scale_factor, int) or scale_factor <= 0:
        raise ValueError(f"scale_factor must be a positive integer, got {scale_factor!r}")

    logger = get_logger(component="Classical")
    logger.info(f"Original size: {image.width}x{image.height}")

    logger.log_stage("Resize", f"Lanczos x{scale_factor}")
    resized = resize(image, image.width * scale_factor, image.height * scale_factor)
    logger.info(f"Upscaled size: {resized.width}x{resized.height}")

    logger.log_stage("Sharpen", f"intensity {intensity}")
    kernel = synthesize(intensity)
    logger.debug(f"Sharpen kernel: {kernel.tolist()}")

    return convolve(resized, kernel)
