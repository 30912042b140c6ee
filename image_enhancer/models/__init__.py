"""
Inference models for the Image Enhancer
"""

from .onnx_model import OnnxSuperResolutionModel, run_inference

__all__ = [
    'OnnxSuperResolutionModel',
    'run_inference'
]
