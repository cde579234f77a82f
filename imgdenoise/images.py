"""Reading and writing image files."""

from __future__ import annotations

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from imgdenoise.matrix import InvalidImageFormatError

_SUPPORTED_FORMATS = frozenset({"PNG", "JPEG"})


def load_image(path) -> Image.Image:
    """Decode a PNG or JPEG file into a fully loaded image."""
    try:
        with Image.open(path) as image:
            if image.format not in _SUPPORTED_FORMATS:
                raise InvalidImageFormatError(
                    f"unsupported image format: {image.format}"
                )
            image.load()
            return image
    except UnidentifiedImageError as exc:
        raise InvalidImageFormatError() from exc


def save_image(path, image: Image.Image) -> None:
    """Write the image as PNG, creating missing parent directories."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    image.save(target, format="PNG")