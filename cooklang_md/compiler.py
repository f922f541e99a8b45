"""
Recipe files are compiled into the recipe data model (see
:py:mod:`cooklang_md.recipe`) by the following function:

.. autofunction:: cooklang_md.compiler.compile_recipe

The individual fields are extracted by the functions below. Each accepts
either the raw text of a recipe file or an already parsed
:py:class:`cooklang_md.parser.ast.Recipe`.

.. autofunction:: extract_metadata_field

.. autofunction:: extract_ingredients

.. autofunction:: extract_equipment

.. autofunction:: extract_steps

Missing fields are never an error: absent metadata yields an empty string and
absent ingredients, equipment or steps yield empty lists.
"""

from typing import Iterator, List, Union

from cooklang_md.parser import parse, ast

from cooklang_md.recipe import RecipeDocument, Ingredient


RECIPE_SUFFIX = ".cook"
"""The filename extension used by recipe files."""

UNIT_SEPARATOR = "%"
"""Separates a value from its unit in ingredient quantities (e.g. '2%tbsp')."""


RecipeSource = Union[str, ast.Recipe]


def _as_ast(content: RecipeSource) -> ast.Recipe:
    if isinstance(content, ast.Recipe):
        return content
    else:
        return parse(content)


def _iter_text_lines(recipe: ast.Recipe) -> Iterator[ast.TextLine]:
    for line in recipe.lines:
        if isinstance(line, ast.TextLine):
            yield line


def filename_to_title(filename: str) -> str:
    """
    Derive a recipe title from its filename, e.g. "tomato_soup.cook" becomes
    "tomato soup".
    """
    if filename.endswith(RECIPE_SUFFIX):
        filename = filename[: -len(RECIPE_SUFFIX)]
    return filename.replace("_", " ")


def extract_metadata_field(content: RecipeSource, key: str) -> str:
    """
    Return the value of the first metadata line (e.g. '>> servings: 4') with
    the given key, or an empty string if there is none.
    """
    for line in _as_ast(content).lines:
        if isinstance(line, ast.MetadataLine) and line.key == key:
            return line.value
    return ""


def _ingredients(recipe: ast.Recipe) -> List[Ingredient]:
    # Keyed on the rendered line: names may themselves contain " : "
    unique = {
        ingredient.line: ingredient
        for ingredient in (
            Ingredient(part.name, part.quantity.replace(UNIT_SEPARATOR, " "))
            for line in _iter_text_lines(recipe)
            for part in line.parts
            if isinstance(part, ast.IngredientToken)
        )
    }
    return [unique[line] for line in sorted(unique)]


def _equipment(recipe: ast.Recipe) -> List[str]:
    return sorted(
        {
            part.name
            for line in _iter_text_lines(recipe)
            for part in line.parts
            if isinstance(part, ast.EquipmentToken)
        }
    )


def _steps(recipe: ast.Recipe) -> List[str]:
    steps = []
    for line in _iter_text_lines(recipe):
        text = "".join(
            part.text if isinstance(part, ast.Text) else part.name
            for part in line.parts
        ).strip()
        if text:
            steps.append(f"{len(steps) + 1}. {text}")
    return steps


def extract_ingredients(content: RecipeSource) -> List[str]:
    """
    Return the unique ingredients (e.g. from '@olive oil{2%tbsp}') as sorted
    Markdown list items (e.g. '- olive oil : 2 tbsp').
    """
    return [ingredient.line for ingredient in _ingredients(_as_ast(content))]


def extract_equipment(content: RecipeSource) -> List[str]:
    """
    Return the unique equipment (e.g. from '#frying pan{}') as sorted Markdown
    list items (e.g. '- frying pan').
    """
    return [f"- {name}" for name in _equipment(_as_ast(content))]


def extract_steps(content: RecipeSource) -> List[str]:
    """
    Return the numbered steps of a recipe: every non-blank, non-metadata line
    with ingredient and equipment annotations reduced to their bare names.
    Lines which are empty after trimming are skipped without consuming a step
    number.
    """
    return _steps(_as_ast(content))


def compile_recipe(content: RecipeSource, title: str) -> RecipeDocument:
    """
    Compile a recipe file's contents into a :py:class:`RecipeDocument`.

    Parameters
    ==========
    content : str or :py:class:`cooklang_md.parser.ast.Recipe`
        The recipe source.
    title : str
        The recipe title (see :py:func:`filename_to_title`).
    """
    recipe = _as_ast(content)

    return RecipeDocument(
        title=title,
        servings=extract_metadata_field(recipe, "servings") or None,
        source=extract_metadata_field(recipe, "source") or None,
        ingredients=_ingredients(recipe),
        equipment=_equipment(recipe),
        steps=_steps(recipe),
    )
