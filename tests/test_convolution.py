import numpy as np
import pytest
from PIL import Image

from image_enhancer.processing import convolve, synthesize


def reference_convolve(image, kernel):
    """Straightforward per-pixel loop used to check the vectorised engine"""
    src = np.asarray(image, dtype=np.uint8)
    height, width = src.shape[:2]
    out = src.copy()
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            for c in range(3):
                total = 0.0
                for i in range(3):
                    for j in range(3):
                        total += float(src[y + i - 1, x + j - 1, c]) * kernel[i][j]
                out[y, x, c] = int(min(max(total, 0.0), 255.0))
    return out


def test_identity_kernel_is_noop(random_image):
    result = convolve(random_image, synthesize(0))
    np.testing.assert_array_equal(np.asarray(result), np.asarray(random_image))


def test_dimensions_preserved(random_image):
    result = convolve(random_image, synthesize(1.5))
    assert result.size == random_image.size
    assert result.mode == 'RGB'


def test_border_untouched(random_image):
    original = np.asarray(random_image)
    result = np.asarray(convolve(random_image, synthesize(2.0)))

    np.testing.assert_array_equal(result[0, :], original[0, :])
    np.testing.assert_array_equal(result[-1, :], original[-1, :])
    np.testing.assert_array_equal(result[:, 0], original[:, 0])
    np.testing.assert_array_equal(result[:, -1], original[:, -1])


@pytest.mark.parametrize("intensity", [0.25, 1.5, 3.0, 100.0])
def test_matches_per_pixel_loop(random_image, intensity):
    kernel = synthesize(intensity)
    result = np.asarray(convolve(random_image, kernel))
    np.testing.assert_array_equal(result, reference_convolve(random_image, kernel))


def test_large_intensity_is_clamped(random_image):
    kernel = synthesize(1e6)
    result = np.asarray(convolve(random_image, kernel))
    np.testing.assert_array_equal(result, reference_convolve(random_image, kernel))

    # Saturates at both ends instead of wrapping around
    interior = result[1:-1, 1:-1]
    assert (interior == 0).any()
    assert (interior == 255).any()


def test_center_pixel_arithmetic():
    pixels = np.full((3, 3, 3), 10, dtype=np.uint8)
    pixels[1, 1] = (50, 50, 50)
    result = np.asarray(convolve(Image.fromarray(pixels), synthesize(0.5)))
    # 50 * 5 - 0.5 * 8 * 10
    assert tuple(result[1, 1]) == (210, 210, 210)


def test_dark_center_clamps_to_zero():
    pixels = np.full((3, 3, 3), 100, dtype=np.uint8)
    pixels[1, 1] = (0, 0, 0)
    result = np.asarray(convolve(Image.fromarray(pixels), synthesize(0.5)))
    assert tuple(result[1, 1]) == (0, 0, 0)


def test_input_not_modified(random_image):
    before = np.asarray(random_image).copy()
    convolve(random_image, synthesize(1.0))
    np.testing.assert_array_equal(np.asarray(random_image), before)


def test_tiny_image_returned_unchanged():
    image = Image.new('RGB', (2, 5), (1, 2, 3))
    result = convolve(image, synthesize(1.0))
    assert result is not image
    np.testing.assert_array_equal(np.asarray(result), np.asarray(image))


def test_rejects_non_3x3_kernel(random_image):
    with pytest.raises(ValueError):
        convolve(random_image, np.ones((5, 5)) / 25)
