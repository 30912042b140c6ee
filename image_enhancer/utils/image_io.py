#!/usr/bin/env python3
"""
Image load/save helpers
Decode any Pillow-readable file to RGB; save in the format implied by the extension
"""

from pathlib import Path
from typing import Union

from PIL import Image, UnidentifiedImageError

from ..core import get_logger
from ..core.exceptions import DecodeError, EncodeError

LOSSY_FORMATS = ('JPEG', 'WEBP')


def load_image(filepath: Union[str, Path]) -> Image.Image:
    """Load an image file as an RGB raster

    Args:
        filepath: Path to the input image

    Returns:
        Fully decoded RGB image

    Raises:
        DecodeError: If the file is missing or is not a readable image
    """
    filepath = Path(filepath)
    logger = get_logger()
    logger.info(f"Reading image: {filepath}")

    try:
        with Image.open(filepath) as source:
            image = source.convert('RGB')
    except (OSError, UnidentifiedImageError, ValueError) as e:
        raise DecodeError(str(filepath), e)

    logger.info(f"Original image size: {image.width}x{image.height}")
    return image


def format_for_path(filepath: Union[str, Path]) -> str:
    """Get the Pillow format name registered for a file extension

    Raises:
        EncodeError: If the extension is unknown to Pillow
    """
    filepath = Path(filepath)
    Image.init()
    image_format = Image.EXTENSION.get(filepath.suffix.lower())

    if image_format is None:
        raise EncodeError(
            str(filepath),
            ValueError(f"Unknown image extension: '{filepath.suffix}'")
        )
    return image_format


def save_image(image: Image.Image, filepath: Union[str, Path], quality: int = 95) -> Path:
    """Save image in the format inferred from its extension

    PNG is written without compression loss; JPEG and WEBP use the given quality.

    Args:
        image: Image to save
        filepath: Output path, its extension selects the format
        quality: Quality for lossy formats

    Returns:
        Path: Where the file was saved

    Raises:
        EncodeError: If the format is unknown or writing fails
    """
    filepath = Path(filepath)
    image_format = format_for_path(filepath)

    save_params = {'format': image_format}
    if image_format == 'PNG':
        save_params['compress_level'] = 6
    elif image_format in LOSSY_FORMATS:
        save_params['quality'] = quality

    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        image.save(str(filepath), **save_params)
    except (OSError, ValueError, KeyError) as e:
        raise EncodeError(str(filepath), e)

    file_size_kb = filepath.stat().st_size / 1024
    get_logger().info(
        f"Saved {image_format}: {filepath.name} | "
        f"Size: {file_size_kb:.1f}KB | "
        f"Resolution: {image.width}x{image.height}"
    )
    return filepath
