"""
Abstract Syntax Tree (AST) for the recipe syntax.

A recipe file is represented line-by-line: each physical line is classified
as either a :py:class:`MetadataLine` (starting with ``>>``) or a
:py:class:`TextLine` made up of literal :py:class:`Text` interspersed with
:py:class:`IngredientToken` and :py:class:`EquipmentToken` annotations.
"""

from dataclasses import dataclass

from typing import Any, List, Optional, Union

import peggie


@dataclass
class AST:
    """
    Base class for all AST nodes.
    """


@dataclass
class Recipe(AST):
    """
    Root for all recipe ASTs.
    """

    lines: List["Line"]
    """One entry per line in the original recipe source, in order."""


@dataclass
class Line(AST):
    """Base class for line AST nodes."""

    pass


@dataclass
class MetadataLine(Line):
    """A metadata line, e.g. '>> servings: 4'."""

    key: Optional[str]
    """
    The (whitespace stripped) key ('servings' in this example) or None if the
    line contains no colon.
    """

    value: str
    """The (whitespace stripped) value ('4' in this example)."""


@dataclass
class TextLine(Line):
    """A line of recipe text, possibly containing annotations."""

    parts: List["Part"]

    @property
    def is_blank(self) -> bool:
        """True if this line contains nothing but whitespace."""
        return all(
            isinstance(part, Text) and not part.text.strip() for part in self.parts
        )


@dataclass
class Text(AST):
    """Literal text within a line."""

    text: str


@dataclass
class IngredientToken(AST):
    """An ingredient annotation, e.g. '@olive oil{2%tbsp}'."""

    name: str
    """The ingredient name ('olive oil' in this example)."""

    quantity: str
    """
    The raw quantity ('2%tbsp' in this example), including any '%' unit
    separators.
    """


@dataclass
class EquipmentToken(AST):
    """An equipment annotation, e.g. '#frying pan{}'."""

    name: str
    """The equipment name ('frying pan' in this example)."""

    argument: str = ""
    """The contents of the curly brackets, usually empty."""


Part = Union[Text, IngredientToken, EquipmentToken]


class RecipeTransformer(peggie.ParseTreeTransformer):
    """
    Transformer which transforms a raw :py:mod:`peggie` parse tree into a more
    friendly :py:class:`AST`.
    """

    def metadata(self, _pt: peggie.ParseTree, children: Any) -> MetadataLine:
        _marker, _sp, maybe_key, value = children

        key: Optional[str] = None
        if maybe_key is not None:
            key, _colon = maybe_key
            key = key.strip()

        return MetadataLine(key, value.strip())

    def ingredient(self, _pt: peggie.ParseTree, children: Any) -> IngredientToken:
        _at, name, _open, quantity, _close = children
        return IngredientToken(name, quantity)

    def equipment(self, _pt: peggie.ParseTree, children: Any) -> EquipmentToken:
        _hash, name, _open, argument, _close = children
        return EquipmentToken(name, argument)

    def text(self, _pt: peggie.ParseTree, children: Any) -> TextLine:
        parts: List[Part] = []
        for part in children:
            if isinstance(part, str):
                # Merge runs of literal characters
                if parts and isinstance(parts[-1], Text):
                    parts[-1] = Text(parts[-1].text + part)
                else:
                    parts.append(Text(part))
            else:
                parts.append(part)
        return TextLine(parts)

    def recipe(self, _pt: peggie.ParseTree, children: Any) -> Recipe:
        lines_and_eols, last_line, _eof = children

        lines = [line for line, _eol in lines_and_eols]
        lines.append(last_line)

        return Recipe(lines)
