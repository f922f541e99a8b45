"""
Locate the photograph which accompanies a recipe file.

An image is associated with a recipe by sharing its base filename, e.g.
``tomato_soup.jpg`` belongs to ``tomato_soup.cook``. Extensions are matched
case-sensitively in the order given by :py:data:`IMAGE_EXTENSIONS`.
"""

from typing import Sequence

from pathlib import Path


IMAGE_EXTENSIONS: Sequence[str] = (
    "png",
    "jpg",
    "jpeg",
    "PNG",
    "JPG",
    "JPEG",
    "heic",
    "HEIC",
)
"""Image filename extensions to try, in priority order."""

NO_IMAGE = "no-image.png"
"""Placeholder image filename used when a recipe has no image."""


def find_image(recipe_source: Path) -> str:
    """
    Return the filename (without directory) of the image associated with a
    recipe file, or :py:data:`NO_IMAGE` if there is none.
    """
    for extension in IMAGE_EXTENSIONS:
        candidate = recipe_source.parent / f"{recipe_source.stem}.{extension}"
        if candidate.is_file():
            return candidate.name
    return NO_IMAGE
