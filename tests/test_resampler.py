import numpy as np
import pytest
from PIL import Image

from image_enhancer.processing import resize


@pytest.mark.parametrize("target", [(8, 8), (1, 1), (128, 128), (3, 200), (100, 60), (7, 2)])
def test_exact_target_size(random_image, target):
    result = resize(random_image, *target)
    assert result.size == target
    assert result.mode == 'RGB'


def test_uniform_field_stays_uniform(gray_image):
    result = np.asarray(resize(gray_image, 8, 8))
    assert np.all(result == 128)


def test_converts_to_rgb():
    image = Image.new('L', (10, 10), 200)
    result = resize(image, 20, 20)
    assert result.mode == 'RGB'


def test_source_unchanged(random_image):
    before = np.asarray(random_image).copy()
    resize(random_image, 50, 50)
    assert random_image.size == (23, 17)
    np.testing.assert_array_equal(np.asarray(random_image), before)


@pytest.mark.parametrize("target", [(0, 10), (10, 0), (-4, 4)])
def test_rejects_non_positive_targets(random_image, target):
    with pytest.raises(ValueError):
        resize(random_image, *target)


@pytest.mark.parametrize("target", [(2.7, 4), (4, 3.0), (True, 4)])
def test_rejects_non_integer_targets(random_image, target):
    with pytest.raises(ValueError):
        resize(random_image, *target)


def test_accepts_numpy_integers(random_image):
    assert resize(random_image, np.int64(6), np.int32(9)).size == (6, 9)
