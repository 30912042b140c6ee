#!/usr/bin/env python3
"""
Tensor Bridge
Converts between RGB rasters and NCHW float tensors for ONNX inference
"""

import numpy as np
from PIL import Image

from ..core.exceptions import ShapeError

CHANNELS = 3


def encode(image: Image.Image, tile_size: int) -> np.ndarray:
    """Encode a square RGB tile as a normalized (1, 3, tile, tile) tensor

    Args:
        image: Tile that is already exactly tile_size x tile_size
        tile_size: Edge length expected by the model

    Returns:
        float32 array, channel-first (R, G, B planes), values in [0, 1]

    Raises:
        ShapeError: If the image is not tile_size x tile_size
    """
    if image.size != (tile_size, tile_size):
        raise ShapeError(
            (image.height, image.width),
            f"a {tile_size}x{tile_size} tile"
        )

    pixels = np.asarray(image.convert('RGB'), dtype=np.float32) / 255.0
    # HWC -> CHW, plus the batch axis
    tensor = np.transpose(pixels, (2, 0, 1))[np.newaxis, ...]
    return np.ascontiguousarray(tensor, dtype=np.float32)


def decode(tensor: np.ndarray) -> Image.Image:
    """Decode a (1, 3, H, W) tensor into a W x H RGB image

    Values are scaled by 255, clamped to [0, 255] and truncated to 8 bits.

    Raises:
        ShapeError: If the tensor is not rank 4 with batch 1 and 3 channels
    """
    array = np.asarray(tensor)
    shape = array.shape

    if len(shape) != 4 or shape[0] != 1 or shape[1] != CHANNELS:
        raise ShapeError(shape, "rank 4 tensor (1, 3, height, width)")
    if shape[2] <= 0 or shape[3] <= 0:
        raise ShapeError(shape, "positive spatial dimensions")

    planes = np.nan_to_num(array[0].astype(np.float32), nan=0.0) * 255.0
    pixels = np.clip(planes, 0.0, 255.0).astype(np.uint8)
    # CHW -> HWC
    return Image.fromarray(np.ascontiguousarray(np.transpose(pixels, (1, 2, 0))))
