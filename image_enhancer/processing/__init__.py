"""
Processing module for the Image Enhancer
"""

from .kernel import synthesize, IDENTITY_KERNEL
from .convolution import convolve
from .resampler import resize, RESAMPLE_FILTER
from .tensor_bridge import encode, decode
from .pipelines import enhance_classical, enhance_ai

__all__ = [
    'synthesize',
    'IDENTITY_KERNEL',
    'convolve',
    'resize',
    'RESAMPLE_FILTER',
    'encode',
    'decode',
    'enhance_classical',
    'enhance_ai'
]
