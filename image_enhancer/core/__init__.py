"""
Core components for the Image Enhancer
"""

from .config_manager import ConfigManager, get_config, reset_config
from .logger import EnhancerLogger, get_logger
from .exceptions import (
    ImageEnhancerError,
    ConfigurationError,
    DecodeError,
    EncodeError,
    ShapeError,
    ModelError,
    ModelLoadError,
    InferenceError,
    LoggingError,
    handle_error
)

__all__ = [
    # Config
    'ConfigManager',
    'get_config',
    'reset_config',

    # Logging
    'EnhancerLogger',
    'get_logger',

    # Exceptions
    'ImageEnhancerError',
    'ConfigurationError',
    'DecodeError',
    'EncodeError',
    'ShapeError',
    'ModelError',
    'ModelLoadError',
    'InferenceError',
    'LoggingError',
    'handle_error'
]
