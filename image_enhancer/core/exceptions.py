#!/usr/bin/env python3
"""
Custom exceptions for the Image Enhancer
All exceptions follow the FAIL LOUD philosophy - verbose, informative errors
"""

import sys
import traceback
from typing import Optional, Dict, Any, Sequence


class ImageEnhancerError(Exception):
    """Base exception for all Image Enhancer errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize exception with message and optional details

        Args:
            message: Error message
            details: Additional error details
        """
        self.message = message
        self.details = details or {}

        full_message = f"\n{'=' * 70}\n"
        full_message += "❌ IMAGE ENHANCER ERROR ❌\n"
        full_message += f"{'=' * 70}\n\n"
        full_message += f"ERROR: {message}\n"

        if self.details:
            full_message += "\nDETAILS:\n"
            if isinstance(self.details, dict):
                for key, value in self.details.items():
                    full_message += f"  {key}: {value}\n"
            else:
                full_message += f"  {self.details}\n"

        full_message += f"\n{'=' * 70}\n"

        super().__init__(full_message)


class ConfigurationError(ImageEnhancerError):
    """Raised when configuration is invalid or missing"""
    pass


class DecodeError(ImageEnhancerError):
    """Raised when an input file cannot be parsed as an image"""

    def __init__(self, path: str, error: Exception):
        self.path = path
        details = {
            "Input file": path,
            "Error type": type(error).__name__,
            "Error message": str(error),
            "Suggestion": "Check that the file exists and is a supported image format"
        }
        super().__init__(f"Failed to decode image '{path}'", details)


class EncodeError(ImageEnhancerError):
    """Raised when the output image cannot be persisted"""

    def __init__(self, path: str, error: Exception):
        self.path = path
        details = {
            "Output file": path,
            "Error type": type(error).__name__,
            "Error message": str(error),
            "Suggestion": "Use a known image extension (.png, .jpg, .webp, .bmp, .tiff) and a writable directory"
        }
        super().__init__(f"Failed to encode image to '{path}'", details)


class ShapeError(ImageEnhancerError):
    """Raised when a tensor or tile does not have the expected shape"""

    def __init__(self, shape: Sequence[int], expected: str):
        self.shape = tuple(shape)
        details = {
            "Received shape": self.shape,
            "Expected": expected
        }
        super().__init__(f"Unexpected tensor shape {self.shape}", details)


class ModelError(ImageEnhancerError):
    """Base exception for model-related errors"""
    pass


class ModelLoadError(ModelError):
    """Raised when an inference graph fails to load"""

    def __init__(self, model_path: str, error: Exception):
        self.model_path = model_path
        details = {
            "Model": model_path,
            "Error type": type(error).__name__,
            "Error message": str(error)
        }
        if sys.exc_info()[0] is not None:
            details["Traceback"] = traceback.format_exc()
        super().__init__(f"Failed to load model '{model_path}'", details)


class InferenceError(ModelError):
    """Raised when the inference runtime fails while executing a graph"""

    def __init__(self, model_path: str, error: Exception):
        self.model_path = model_path
        details = {
            "Model": model_path,
            "Error type": type(error).__name__,
            "Error message": str(error)
        }
        if sys.exc_info()[0] is not None:
            details["Traceback"] = traceback.format_exc()
        super().__init__(f"Inference failed for model '{model_path}'", details)


class LoggingError(ImageEnhancerError):
    """Raised when logging setup fails"""

    def __init__(self, operation: str, error: str, resolution: str = ""):
        message = (
            f"❌ LOGGING FAILURE: {operation}\n"
            f"Error: {error}"
        )
        if resolution:
            message += f"\nResolution: {resolution}"

        super().__init__(message)


def handle_error(error: Exception, context: str = "") -> None:
    """Handle an error according to fail-loud philosophy

    Args:
        error: The exception that occurred
        context: Additional context about what was happening
    """
    print("\n" + "❌" * 35, file=sys.stderr)
    print("FATAL ERROR - CANNOT CONTINUE", file=sys.stderr)
    print("❌" * 35, file=sys.stderr)

    if context:
        print(f"\nCONTEXT: {context}", file=sys.stderr)

    if isinstance(error, ImageEnhancerError):
        # Our custom errors already have detailed formatting
        print(str(error), file=sys.stderr)
    else:
        print(f"\nERROR TYPE: {type(error).__name__}", file=sys.stderr)
        print(f"ERROR MESSAGE: {str(error)}", file=sys.stderr)
        print("\nFULL TRACEBACK:", file=sys.stderr)
        print(traceback.format_exc(), file=sys.stderr)

    print("\n" + "❌" * 35, file=sys.stderr)
    print("PROCESSING HALTED - FIX ERROR AND RETRY", file=sys.stderr)
    print("❌" * 35 + "\n", file=sys.stderr)

    sys.exit(1)
