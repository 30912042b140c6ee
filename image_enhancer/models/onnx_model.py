#!/usr/bin/env python3
"""
ONNX Super-Resolution Model
Thin adapter over onnxruntime: model path in, output tensor out
"""

from pathlib import Path
from typing import List, Optional, Sequence, Union

import numpy as np
import onnxruntime as ort

from ..core import get_logger, get_config
from ..core.exceptions import ModelLoadError, InferenceError

DEFAULT_PROVIDERS = ["CPUExecutionProvider"]


class OnnxSuperResolutionModel:
    """Loads an ONNX graph once and runs it on a single NCHW tensor"""

    def __init__(self, model_path: Union[str, Path], providers: Optional[Sequence[str]] = None):
        """Initialize model handle

        Args:
            model_path: Path to the .onnx graph
            providers: onnxruntime execution providers, defaults to config ai.providers
        """
        self.model_path = Path(model_path)
        self.logger = get_logger(component="ONNX")

        if providers is None:
            providers = get_config().get_setting('ai.providers', DEFAULT_PROVIDERS)
        self.providers = self._filter_providers(providers)

        self.session: Optional[ort.InferenceSession] = None
        self.input_name: Optional[str] = None
        self.output_name: Optional[str] = None

    def _filter_providers(self, requested: Sequence[str]) -> List[str]:
        """Keep only providers this onnxruntime build offers, CPU as last resort"""
        available = ort.get_available_providers()
        providers = [p for p in requested if p in available]

        for provider in requested:
            if provider not in available:
                self.logger.warning(f"Execution provider not available, skipping: {provider}")

        if not providers:
            providers = list(DEFAULT_PROVIDERS)
        return providers

    def load(self) -> None:
        """Load, optimize and compile the graph

        Raises:
            ModelLoadError: If the path is not a readable ONNX graph
        """
        self.logger.info(f"Loading ONNX model: {self.model_path}")

        if not self.model_path.is_file():
            raise ModelLoadError(
                str(self.model_path),
                FileNotFoundError(f"Model file not found: {self.model_path}")
            )

        options = ort.SessionOptions()
        options.graph_optimization_level = ort.GraphOptimizationLevel.ORT_ENABLE_ALL

        try:
            session = ort.InferenceSession(
                str(self.model_path),
                sess_options=options,
                providers=self.providers
            )
        except Exception as e:
            raise ModelLoadError(str(self.model_path), e)

        inputs = session.get_inputs()
        outputs = session.get_outputs()
        if not inputs or not outputs:
            raise ModelLoadError(
                str(self.model_path),
                ValueError("Model graph must declare at least one input and one output")
            )

        self.session = session
        self.input_name = inputs[0].name
        self.output_name = outputs[0].name

        self.logger.debug(
            f"Model ready: input '{self.input_name}' {inputs[0].shape}, "
            f"output '{self.output_name}' {outputs[0].shape}, "
            f"providers={session.get_providers()}"
        )

    def run(self, input_tensor: np.ndarray) -> np.ndarray:
        """Execute the graph once

        Args:
            input_tensor: float32 array bound to the graph's first input

        Returns:
            The graph's first output as a float32 array

        Raises:
            InferenceError: If the runtime fails during execution
        """
        if self.session is None:
            self.load()

        self.logger.info("Running model inference...")

        try:
            results = self.session.run(
                [self.output_name],
                {self.input_name: np.asarray(input_tensor, dtype=np.float32)}
            )
        except Exception as e:
            raise InferenceError(str(self.model_path), e)

        return np.asarray(results[0], dtype=np.float32)


def run_inference(model_path: Union[str, Path], input_tensor: np.ndarray) -> np.ndarray:
    """Load the model at model_path, run it once on input_tensor and discard it

    Args:
        model_path: Path to the .onnx graph
        input_tensor: float32 NCHW tensor

    Returns:
        First output tensor of the graph
    """
    model = OnnxSuperResolutionModel(model_path)
    model.load()
    return model.run(input_tensor)
