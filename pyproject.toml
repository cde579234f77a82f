[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "imgdenoise"
version = "0.1.0"
description = "A small web application that denoises grayscale images with PCA or NMF."
requires-python = ">=3.10"
keywords = ["image", "denoising", "pca", "nmf", "flask", "web"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "flask",
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
imgdenoise-server = "imgdenoise.server:main"

[tool.hatch.build.targets.wheel]
packages = ["imgdenoise"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
