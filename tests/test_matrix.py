import numpy as np
import pytest
from PIL import Image

from imgdenoise.matrix import (
    InvalidImageFormatError,
    InvalidMethodError,
    image_to_matrix,
    matrix_to_image,
)


def test_grayscale_image_gives_pixel_values():
    pixels = np.arange(12, dtype=np.uint8).reshape(3, 4) * 20
    matrix = image_to_matrix(Image.fromarray(pixels))
    assert matrix.shape == (3, 4)
    assert np.allclose(matrix, pixels)


def test_equal_channels_give_that_value():
    image = Image.new("RGB", (2, 2), (90, 90, 90))
    assert np.allclose(image_to_matrix(image), 90)


def test_fully_transparent_pixel_is_black():
    image = Image.new("RGBA", (1, 1), (255, 255, 255, 0))
    assert image_to_matrix(image)[0, 0] == 0


def test_opaque_alpha_keeps_colour():
    opaque = Image.new("RGBA", (2, 1), (10, 200, 30, 255))
    plain = Image.new("RGB", (2, 1), (10, 200, 30))
    assert np.allclose(image_to_matrix(opaque), image_to_matrix(plain))


def test_empty_image_gives_single_zero():
    matrix = image_to_matrix(Image.new("L", (0, 3)))
    assert matrix.shape == (1, 1)
    assert matrix[0, 0] == 0


def test_matrix_to_image_size_and_mode():
    image = matrix_to_image(np.zeros((3, 5)))
    assert image.size == (5, 3)
    assert image.mode == "L"


def test_constant_matrix_round_trips():
    image = matrix_to_image(np.full((4, 6), 123.0))
    assert np.array_equal(np.asarray(image), np.full((4, 6), 123, dtype=np.uint8))
    assert np.allclose(image_to_matrix(image), 123)


def test_smoothing_uses_in_bounds_neighbours():
    matrix = np.zeros((3, 3))
    matrix[1, 1] = 255
    result = np.asarray(matrix_to_image(matrix))
    assert result[1, 1] == 28
    assert result[0, 0] == result[0, 2] == result[2, 0] == result[2, 2] == 64
    assert result[0, 1] == result[1, 0] == result[1, 2] == result[2, 1] == 43


def test_values_are_clamped_to_byte_range():
    result = np.asarray(matrix_to_image(np.full((2, 2), 400.0)))
    assert np.all(result == 255)
    result = np.asarray(matrix_to_image(np.full((2, 2), -30.0)))
    assert np.all(result == 0)


def test_matrix_to_image_rejects_one_dimensional_input():
    with pytest.raises(ValueError):
        matrix_to_image(np.zeros(4))


def test_error_messages():
    assert str(InvalidMethodError()) == "invalid processing method"
    assert str(InvalidImageFormatError()) == "invalid image format"
    assert issubclass(InvalidMethodError, ValueError)