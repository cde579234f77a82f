"""Conversion between images and grayscale intensity matrices."""

from __future__ import annotations

import numpy as np
from PIL import Image

_LUMA_WEIGHTS = (0.299, 0.587, 0.114)


class InvalidImageFormatError(ValueError):
    """Raised when image data is not in a supported format."""

    def __init__(self, message: str = "invalid image format") -> None:
        super().__init__(message)


class InvalidMethodError(ValueError):
    """Raised when an unknown processing method is requested."""

    def __init__(self, message: str = "invalid processing method") -> None:
        super().__init__(message)


def _round_half_away(values: np.ndarray) -> np.ndarray:
    return np.copysign(np.floor(np.abs(values) + 0.5), values)


def image_to_matrix(image: Image.Image) -> np.ndarray:
    """Return the luma of every pixel as a float matrix of shape (height, width).

    Colour channels are taken alpha-premultiplied, reduced to 8 bits.
    An image with no pixels gives a 1x1 zero matrix.
    """
    width, height = image.size
    if width <= 0 or height <= 0:
        return np.zeros((1, 1), dtype=float)

    rgba = np.asarray(image.convert("RGBA"), dtype=np.uint32)
    alpha = rgba[..., 3]
    red, green, blue = (
        ((rgba[..., channel] * 257 * alpha) // 255) >> 8 for channel in range(3)
    )
    r_weight, g_weight, b_weight = _LUMA_WEIGHTS
    return (
        r_weight * red.astype(float)
        + g_weight * green.astype(float)
        + b_weight * blue.astype(float)
    )


def matrix_to_image(matrix) -> Image.Image:
    """Render a matrix as an 8-bit grayscale image, smoothed by a 3x3 mean filter.

    Each pixel is the mean of its in-bounds neighbours (itself included),
    rounded half away from zero.
    """
    data = np.asarray(matrix, dtype=float)
    if data.ndim != 2:
        raise ValueError("matrix must be two-dimensional")
    rows, cols = data.shape
    if rows == 0 or cols == 0:
        return Image.new("L", (cols, rows))

    padded = np.pad(data, 1)
    present = np.pad(np.ones_like(data), 1)
    offsets = [(dy, dx) for dy in range(3) for dx in range(3)]
    sums = sum(padded[dy:dy + rows, dx:dx + cols] for dy, dx in offsets)
    counts = sum(present[dy:dy + rows, dx:dx + cols] for dy, dx in offsets)

    values = np.clip(_round_half_away(sums / counts), 0, 255)
    return Image.fromarray(values.astype(np.uint8))