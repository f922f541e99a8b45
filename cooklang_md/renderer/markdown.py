"""
Render a :py:class:`~cooklang_md.recipe.RecipeDocument` as a Markdown
document.

The document layout is fixed (see ``templates/recipe.md``). Downstream tools
may depend on the literal section headings, so these must not change.
"""

from typing import Mapping, Optional

import os

from urllib.parse import quote

from cooklang_md.recipe import RecipeDocument

from cooklang_md.renderer.templates import recipe_template


NO_INGREDIENTS = "- Aucun ingrédient spécifié"
NO_EQUIPMENT = "- Aucun matériel spécifié"
NO_STEPS = "Aucune étape spécifiée"


FALLBACK_ENCODINGS: Mapping[str, str] = {
    " ": "%20",
    "à": "%C3%A0",
    "é": "%C3%A9",
    "è": "%C3%A8",
    "ê": "%C3%AA",
    "ë": "%C3%AB",
    "ç": "%C3%A7",
    "ù": "%C3%B9",
    "û": "%C3%BB",
    "ü": "%C3%BC",
    "ô": "%C3%B4",
    "ö": "%C3%B6",
    "î": "%C3%AE",
    "ï": "%C3%AF",
    "â": "%C3%A2",
    "ä": "%C3%A4",
    "ñ": "%C3%B1",
    "ß": "%C3%9F",
}
"""
Character substitutions used by :py:func:`fallback_encode_image_filename`.
"""


def fallback_encode_image_filename(filename: str) -> str:
    """
    Percent-encode a filename which :py:func:`urllib.parse.quote` could not
    handle (e.g. one containing undecodable bytes, represented as surrogate
    escapes).

    Characters in :py:data:`FALLBACK_ENCODINGS` are substituted directly. Any
    other non-ASCII character is percent-encoded from its file system byte
    encoding. ASCII characters other than spaces are left as-is.
    """
    out = []
    for char in filename:
        if char in FALLBACK_ENCODINGS:
            out.append(FALLBACK_ENCODINGS[char])
        elif ord(char) < 128:
            out.append(char)
        else:
            out.append("".join(f"%{byte:02X}" for byte in _char_to_bytes(char)))
    return "".join(out)


def _char_to_bytes(char: str) -> bytes:
    try:
        return os.fsencode(char)
    except UnicodeEncodeError:
        # Lone surrogates which don't stand for an undecodable byte
        return char.encode("utf-8", "surrogatepass")


def encode_image_filename(filename: str) -> str:
    """
    Percent-encode an image filename for use as a Markdown link destination.
    """
    try:
        return quote(filename, safe="")
    except UnicodeEncodeError:
        return fallback_encode_image_filename(filename)


def source_domain(url: str) -> str:
    """
    Extract the domain from a URL for display, e.g. 'example.com' from
    'https://example.com/recipe'. Returns an empty string if the URL has no
    '://' separator.
    """
    _scheme, _sep, rest = url.partition("://")
    return rest.split("/")[0]


def ingredients_header(servings: Optional[str]) -> str:
    if servings:
        return f"## Ingrédients (Pour {servings})"
    else:
        return "## Ingrédients"


def render_recipe(recipe: RecipeDocument, image_filename: str) -> str:
    """
    Render a recipe as a Markdown document.

    Parameters
    ==========
    recipe : :py:class:`~cooklang_md.recipe.RecipeDocument`
        The recipe to render.
    image_filename : str
        The (unencoded) filename of the recipe's image, relative to the
        rendered document. Will be percent-encoded.
    """
    return recipe_template.render(
        title=recipe.title,
        image_href=encode_image_filename(image_filename),
        source=recipe.source,
        source_domain=source_domain(recipe.source) if recipe.source else "",
        ingredients_header=ingredients_header(recipe.servings),
        ingredients="\n".join(recipe.ingredient_lines) or NO_INGREDIENTS,
        equipment="\n".join(recipe.equipment_lines) or NO_EQUIPMENT,
        steps="\n".join(recipe.steps) or NO_STEPS,
    )
