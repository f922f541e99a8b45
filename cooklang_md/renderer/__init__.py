"""
Recipes are rendered into Markdown documents using:

.. autofunction:: cooklang_md.renderer.render_recipe

Image filenames are percent-encoded for embedding in the document using:

.. autofunction:: cooklang_md.renderer.encode_image_filename
"""

from cooklang_md.renderer.markdown import render_recipe, encode_image_filename

__all__ = [
    "render_recipe",
    "encode_image_filename",
]
