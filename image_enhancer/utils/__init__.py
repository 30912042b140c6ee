"""
Utility modules for the Image Enhancer
"""

from .image_io import load_image, save_image, format_for_path

__all__ = [
    'load_image',
    'save_image',
    'format_for_path'
]
