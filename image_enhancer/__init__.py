"""
Image Enhancer Package
2x upscaling with classical sharpening or ONNX super-resolution
"""

__version__ = '0.2.0'
__author__ = 'Image Enhancer Team'

# Import main components for easier access
from .core import get_config, get_logger
from .processing import enhance_classical, enhance_ai, synthesize

__all__ = [
    'get_config',
    'get_logger',
    'enhance_classical',
    'enhance_ai',
    'synthesize',
    '__version__'
]
