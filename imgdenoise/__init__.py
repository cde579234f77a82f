"""Image denoising with PCA and NMF, served as a small Flask web application."""

__version__ = "0.1.0"