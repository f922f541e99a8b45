"""
Conversion of directory hierarchies of recipe files into Markdown (and,
optionally, other document formats).

.. autofunction:: cooklang_md.conversion.convert_directory

.. autofunction:: cooklang_md.conversion.convert_recipe
"""

from cooklang_md.conversion.converter import (
    convert_directory,
    convert_recipe,
    ConversionSummary,
    RecipeOutcome,
)

__all__ = [
    "convert_directory",
    "convert_recipe",
    "ConversionSummary",
    "RecipeOutcome",
]
