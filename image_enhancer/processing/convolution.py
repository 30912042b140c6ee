#!/usr/bin/env python3
"""
3x3 Convolution Engine
Applies a sharpen kernel to an RGB raster, leaving the one-pixel border untouched
"""

import numpy as np
from PIL import Image

KERNEL_SHAPE = (3, 3)


def convolve(image: Image.Image, kernel: np.ndarray) -> Image.Image:
    """Convolve an RGB image with a 3x3 kernel

    Border rows and columns are copied unchanged. Interior pixels receive the
    weighted sum of their 3x3 neighbourhood, clamped to [0, 255] and truncated
    to 8 bits. The input image is not modified.

    Args:
        image: Source image (converted to RGB if needed)
        kernel: 3x3 weights, kernel[i][j] applied to the neighbour at (y+i-1, x+j-1)

    Returns:
        New RGB image with the same dimensions
    """
    weights = np.asarray(kernel, dtype=np.float64)
    if weights.shape != KERNEL_SHAPE:
        raise ValueError(f"Convolution kernel must be 3x3, got shape {weights.shape}")

    pixels = np.asarray(image.convert('RGB'), dtype=np.uint8)
    height, width = pixels.shape[:2]
    output = pixels.copy()

    # Nothing but border
    if height < 3 or width < 3:
        return Image.fromarray(output)

    source = pixels.astype(np.float64)
    accumulator = np.zeros((height - 2, width - 2, 3), dtype=np.float64)

    # Same summation order as a per-pixel loop over (i, j), so results are bit-identical
    for i in range(3):
        for j in range(3):
            accumulator += source[i:height - 2 + i, j:width - 2 + j] * weights[i, j]

    output[1:-1, 1:-1] = np.clip(accumulator, 0.0, 255.0).astype(np.uint8)
    return Image.fromarray(output)
