#!/usr/bin/env python3
"""
Lanczos Resampler
Exact-size resizing used by both enhancement strategies
"""

from numbers import Integral

from PIL import Image

# Three-lobe windowed sinc, for upscaling and downscaling alike
RESAMPLE_FILTER = Image.Resampling.LANCZOS


def resize(image: Image.Image, target_width: int, target_height: int) -> Image.Image:
    """Resize an image to exactly target_width x target_height

    Aspect ratio is not preserved; non-proportional targets skew the image.

    Args:
        image: Source image
        target_width: Output width in pixels (> 0)
        target_height: Output height in pixels (> 0)

    Returns:
        New RGB image of the requested size
    """
    for size in (target_width, target_height):
        if isinstance(size, bool) or not isinstance(size, Integral):
            raise ValueError(
                f"Resize target must be whole pixels, got {target_width}x{target_height}"
            )
    if target_width <= 0 or target_height <= 0:
        raise ValueError(
            f"Resize target must be positive, got {target_width}x{target_height}"
        )

    source = image.convert('RGB')
    return source.resize((int(target_width), int(target_height)), resample=RESAMPLE_FILTER)
