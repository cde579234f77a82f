"""Dispatch of denoising methods over images."""

from __future__ import annotations

import numpy as np
from PIL import Image

from imgdenoise.denoising import NMFDenoising, PCADenoising
from imgdenoise.matrix import InvalidMethodError, image_to_matrix, matrix_to_image


class ImageProcessor:
    """Applies PCA or NMF denoising to images."""

    def __init__(self, pca_max_components: int, nmf_max_iterations: int) -> None:
        self.pca = PCADenoising(pca_max_components)
        self.nmf = NMFDenoising(nmf_max_iterations)

    def process_image(self, method: str, image: Image.Image | None, n_factors: int) -> Image.Image:
        """Denoise the image's luma with the named method ("pca" or "nmf")."""
        if image is None:
            raise ValueError("input image is None")
        algorithms = {"pca": self.pca, "nmf": self.nmf}
        try:
            algorithm = algorithms[method]
        except KeyError:
            raise InvalidMethodError() from None
        matrix = image_to_matrix(image)
        return matrix_to_image(algorithm.process(matrix, n_factors))

    def apply_pca(self, matrix: np.ndarray, n_components: int):
        """Run PCA denoising on a matrix."""
        return self.pca.process(matrix, n_components)

    def apply_nmf(self, matrix: np.ndarray, n_components: int):
        """Run NMF denoising on a matrix."""
        return self.nmf.process(matrix, n_components)