import numpy as np
import pytest
from PIL import Image

from imgdenoise.matrix import InvalidMethodError, image_to_matrix, matrix_to_image
from imgdenoise.processor import ImageProcessor


def test_unknown_method_raises():
    processor = ImageProcessor(50, 10)
    with pytest.raises(InvalidMethodError):
        processor.process_image("svd", Image.new("L", (4, 4)), 2)


def test_missing_image_raises():
    with pytest.raises(ValueError):
        ImageProcessor(50, 10).process_image("pca", None, 2)


def test_pca_on_constant_square_image_keeps_value():
    result = ImageProcessor(50, 10).process_image("pca", Image.new("L", (4, 4), 77), 2)
    assert result.mode == "L"
    assert np.all(np.asarray(result) == 77)


def test_pca_on_non_square_image_only_smooths():
    pixels = (np.arange(15, dtype=np.uint8) * 15).reshape(3, 5)
    image = Image.fromarray(pixels)
    result = ImageProcessor(50, 10).process_image("pca", image, 2)
    expected = matrix_to_image(image_to_matrix(image))
    assert result.size == (5, 3)
    assert np.array_equal(np.asarray(result), np.asarray(expected))


def test_nmf_image_keeps_size():
    pixels = np.random.default_rng(2).integers(0, 256, (6, 7)).astype(np.uint8)
    result = ImageProcessor(50, 15).process_image("nmf", Image.fromarray(pixels), 3)
    assert result.size == (7, 6)
    assert result.mode == "L"


def test_apply_pca_matches_full_reconstruction():
    data = np.random.default_rng(3).integers(0, 256, (5, 5)).astype(float)
    assert np.allclose(ImageProcessor(50, 10).apply_pca(data, 5), data)


def test_apply_pca_non_square_returns_input():
    data = np.ones((2, 3))
    assert ImageProcessor(50, 10).apply_pca(data, 1) is data


def test_apply_nmf_range():
    data = np.random.default_rng(4).integers(0, 256, (4, 5)).astype(float)
    result = ImageProcessor(50, 20).apply_nmf(data, 1)
    assert result.shape == (4, 5)
    assert np.all((result >= 3) & (result <= 255))