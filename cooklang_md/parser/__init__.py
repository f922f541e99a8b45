"""
Recipe files are parsed into an Abstract Syntax Tree (AST) using
:py:func:`cooklang_md.parser.parse`:

.. autofunction:: cooklang_md.parser.parse
"""

from typing import cast

from peggie import Parser, ParseError

from cooklang_md.parser.grammar import grammar, prettify_parse_error

from cooklang_md.parser import ast


def parse(source: str) -> ast.Recipe:
    """
    Parse a recipe into an AST (see :py:mod:`cooklang_md.parser.ast`).

    Raises
    ======
    peggie.ParseError
    """
    parser = Parser(grammar)
    try:
        parse_tree = parser.parse(source)
    except ParseError as e:
        raise prettify_parse_error(e)
    return cast(ast.Recipe, ast.RecipeTransformer().transform(parse_tree))
