"""
The data model for a recipe extracted from a recipe file.

.. autoclass:: RecipeDocument
    :members:

.. autoclass:: Ingredient
    :members:
"""

from typing import List, NamedTuple, Optional

from dataclasses import dataclass, field


class Ingredient(NamedTuple):
    """An ingredient and the quantity required."""

    name: str

    quantity: str
    """
    The quantity as written, with '%' unit separators replaced by spaces (e.g.
    '2 tbsp'). May be empty.
    """

    @property
    def line(self) -> str:
        """This ingredient as a Markdown list item."""
        return f"- {self.name} : {self.quantity}"


@dataclass
class RecipeDocument:
    """
    The fields extracted from a single recipe file, ready for rendering.
    """

    title: str

    servings: Optional[str] = None
    """The serving count as written in the metadata, if given."""

    source: Optional[str] = None
    """The URL the recipe came from, if given."""

    ingredients: List[Ingredient] = field(default_factory=list)
    """Unique ingredients, sorted by their rendered :py:attr:`Ingredient.line`."""

    equipment: List[str] = field(default_factory=list)
    """Unique equipment names, sorted."""

    steps: List[str] = field(default_factory=list)
    """The numbered steps (e.g. '1. Boil the water.'), in order."""

    @property
    def ingredient_lines(self) -> List[str]:
        return [ingredient.line for ingredient in self.ingredients]

    @property
    def equipment_lines(self) -> List[str]:
        return [f"- {name}" for name in self.equipment]
