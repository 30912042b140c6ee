"""
Enhancement pipelines for the Image Enhancer
"""

from .classical_pipeline import enhance_classical
from .ai_pipeline import enhance_ai, AI_SCALE_FACTOR, DEFAULT_TILE_SIZE

__all__ = [
    'enhance_classical',
    'enhance_ai',
    'AI_SCALE_FACTOR',
    'DEFAULT_TILE_SIZE'
]
