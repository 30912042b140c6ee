"""
CLI command implementations for the Image Enhancer
"""

from .enhance import EnhanceCommand
from .config import ConfigCommand

__all__ = [
    'EnhanceCommand',
    'ConfigCommand'
]
