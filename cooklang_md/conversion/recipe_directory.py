"""
Utilities for enumerating recipes within a directory hierarchy.

Recipes may be arranged in a hierarchy of directories (for example) according
to categories and subcategories. All files with a ``.cook`` extension are
assumed to be recipe files. The output tree mirrors the input hierarchy
exactly.
"""

from typing import List

from pathlib import Path

from cooklang_md.compiler import RECIPE_SUFFIX


def enumerate_recipes(source_root: Path) -> List[Path]:
    """
    Find all recipe files at any depth below ``source_root``, in a stable
    (sorted) order.
    """
    return sorted(
        path for path in source_root.rglob(f"*{RECIPE_SUFFIX}") if path.is_file()
    )


def destination_for(
    recipe_source: Path, source_root: Path, destination_root: Path
) -> Path:
    """
    Get the directory, within ``destination_root``, into which the outputs for
    ``recipe_source`` should be written.

    Example::

        >>> destination_for(Path("in/soups/leek.cook"), Path("in"), Path("out"))
        PosixPath('out/soups')
    """
    relative_dir = recipe_source.parent.relative_to(source_root)
    return destination_root / relative_dir
