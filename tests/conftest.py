"""
Shared fixtures for the Image Enhancer test suite
"""

import numpy as np
import pytest
from PIL import Image

from image_enhancer.core import get_logger, reset_config


@pytest.fixture(scope="session", autouse=True)
def session_logger():
    """Bind the console handler to the real stdout before CliRunner swaps it"""
    return get_logger()


@pytest.fixture(autouse=True)
def fresh_config():
    """Each test starts from the packaged settings.yaml"""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def gray_image():
    return Image.new('RGB', (4, 4), (128, 128, 128))


@pytest.fixture
def random_image():
    rng = np.random.default_rng(1234)
    pixels = rng.integers(0, 256, size=(17, 23, 3), dtype=np.uint8)
    return Image.fromarray(pixels)


def _save_model(onnx, helper, nodes, initializers, out_shape, path):
    from onnx import TensorProto

    graph = helper.make_graph(
        nodes,
        path.stem,
        [helper.make_tensor_value_info("input", TensorProto.FLOAT, [1, 3, 128, 128])],
        [helper.make_tensor_value_info("output", TensorProto.FLOAT, out_shape)],
        initializer=initializers
    )
    model = helper.make_model(graph, opset_imports=[helper.make_opsetid("", 13)])
    model.ir_version = 8
    onnx.save(model, str(path))
    return path


@pytest.fixture
def identity_model(tmp_path):
    """ONNX graph that returns its (1, 3, 128, 128) input unchanged"""
    onnx = pytest.importorskip("onnx")
    from onnx import helper

    node = helper.make_node("Identity", ["input"], ["output"])
    return _save_model(onnx, helper, [node], [], [1, 3, 128, 128], tmp_path / "identity.onnx")


@pytest.fixture
def upscale_model(tmp_path):
    """ONNX graph that doubles the tile with nearest-neighbour resize"""
    onnx = pytest.importorskip("onnx")
    from onnx import helper, TensorProto

    scales = helper.make_tensor("scales", TensorProto.FLOAT, [4], [1.0, 1.0, 2.0, 2.0])
    node = helper.make_node("Resize", ["input", "", "scales"], ["output"], mode="nearest")
    return _save_model(onnx, helper, [node], [scales], [1, 3, 256, 256], tmp_path / "upscale_x2.onnx")
