"""Low-rank denoising of intensity matrices by PCA and NMF."""

from __future__ import annotations

import logging

import numpy as np

logger = logging.getLogger(__name__)

_EPSILON = 1e-10
_FACTOR_MIN = 0.1
_FACTOR_MAX = 1.0


def _round_half_away(values: np.ndarray) -> np.ndarray:
    return np.copysign(np.floor(np.abs(values) + 0.5), values)


def _as_matrix(matrix) -> np.ndarray:
    data = np.asarray(matrix, dtype=float)
    if data.ndim != 2:
        raise ValueError("matrix must be two-dimensional")
    return data


def _to_pixel_range(values: np.ndarray) -> np.ndarray:
    return _round_half_away(np.clip(values, 0, 255))


class PCADenoising:
    """Reconstructs a matrix from a subset of eigenvectors of its row covariance."""

    def __init__(self, max_components: int) -> None:
        self.max_components = max_components

    def process(self, matrix, n_components: int):
        """Return the reconstruction, or the input unchanged when it cannot be formed."""
        data = _as_matrix(matrix)
        rows, cols = data.shape
        if rows == 0 or cols == 0:
            logger.warning("PCA: empty input matrix")
            return matrix

        if n_components <= 0 or n_components > cols:
            n_components = cols
        n_components = min(n_components, self.max_components)

        means = data.mean(axis=0)
        centered = data - means

        if rows < 2:
            logger.warning("PCA: failed to factorize covariance matrix")
            return matrix
        covariance = (centered @ centered.T) / (rows - 1)
        try:
            _, vectors = np.linalg.eigh(covariance)
        except np.linalg.LinAlgError:
            logger.warning("PCA: failed to factorize covariance matrix")
            return matrix

        if vectors.shape != (cols, cols):
            logger.warning(
                "PCA: unexpected eigenvectors dimensions: got %dx%d, expected %dx%d",
                vectors.shape[0], vectors.shape[1], cols, cols,
            )
            return matrix

        components = vectors[:, :n_components]
        reconstructed = (centered @ components) @ components.T + means
        return _to_pixel_range(reconstructed)


class NMFDenoising:
    """Rank-reduced reconstruction by multiplicative non-negative factorization."""

    def __init__(self, max_iterations: int, rng: np.random.Generator | None = None) -> None:
        self.max_iterations = max_iterations
        self.rng = rng if rng is not None else np.random.default_rng()

    def process(self, matrix, n_components: int):
        """Return W @ H scaled to 0..255, or the input unchanged when it is empty."""
        data = _as_matrix(matrix)
        rows, cols = data.shape
        if rows == 0 or cols == 0:
            logger.warning("NMF: empty input matrix")
            return matrix

        n_components = min(max(n_components, 1), cols)

        w = 0.5 + self.rng.random((rows, n_components))
        h = 0.5 + self.rng.random((n_components, cols))

        for _ in range(self.max_iterations):
            wh = w @ h
            h = np.clip(
                h * (w.T @ data) / (w.T @ wh + _EPSILON), _FACTOR_MIN, _FACTOR_MAX
            )
            w = np.clip(
                w * (data @ h.T) / (wh @ h.T + _EPSILON), _FACTOR_MIN, _FACTOR_MAX
            )

        return _to_pixel_range((w @ h) * 255)