import pytest

from typing import List

from pathlib import Path

from cooklang_md.images import find_image, NO_IMAGE


@pytest.mark.parametrize(
    "image_files, exp",
    [
        # No image
        ([], NO_IMAGE),
        # Unrelated images
        (["other.png", "tomato_soup.gif"], NO_IMAGE),
        # Single image of each kind
        (["tomato_soup.png"], "tomato_soup.png"),
        (["tomato_soup.jpeg"], "tomato_soup.jpeg"),
        (["tomato_soup.JPG"], "tomato_soup.JPG"),
        (["tomato_soup.HEIC"], "tomato_soup.HEIC"),
        # Priority order
        (["tomato_soup.jpg", "tomato_soup.png"], "tomato_soup.png"),
        (["tomato_soup.PNG", "tomato_soup.jpeg"], "tomato_soup.jpeg"),
        (["tomato_soup.heic", "tomato_soup.JPEG"], "tomato_soup.JPEG"),
    ],
)
def test_find_image(tmp_path: Path, image_files: List[str], exp: str) -> None:
    recipe = tmp_path / "tomato_soup.cook"
    recipe.write_text("Boil.")
    for image_file in image_files:
        (tmp_path / image_file).write_bytes(b"")

    assert find_image(recipe) == exp


def test_directories_are_ignored(tmp_path: Path) -> None:
    recipe = tmp_path / "tomato_soup.cook"
    recipe.write_text("Boil.")
    (tmp_path / "tomato_soup.png").mkdir()
    (tmp_path / "tomato_soup.jpg").write_bytes(b"")

    assert find_image(recipe) == "tomato_soup.jpg"


def test_spaces_and_accents(tmp_path: Path) -> None:
    recipe = tmp_path / "crème brûlée.cook"
    recipe.write_text("Torch.")
    (tmp_path / "crème brûlée.jpg").write_bytes(b"")

    assert find_image(recipe) == "crème brûlée.jpg"
