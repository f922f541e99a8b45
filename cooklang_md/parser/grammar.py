"""
The :py:mod:`peggie` grammar for the recipe syntax (read from
``grammar.peg``).

.. autodata:: grammar

.. autodata:: grammar_source

"""

import os

from peggie import compile_grammar, ParseError, RuleExpr, RegexExpr

__all__ = [
    "grammar",
    "grammar_source",
    "prettify_parse_error",
]

grammar_source_path = os.path.join(os.path.dirname(__file__), "grammar.peg")

with open(grammar_source_path) as f:
    grammar_source = f.read()
    """
    The recipe syntax :py:mod:`peggie` grammar source in a string.
    """

grammar = compile_grammar(grammar_source)
"""
The compiled :py:class:`peggie.Grammar` for the recipe syntax.
"""


def prettify_parse_error(parse_error: ParseError) -> ParseError:
    parse_error.expr_explanations = {
        RuleExpr("recipe"): "<metadata> or <text>",
        RuleExpr("line"): "<metadata> or <text>",
        RuleExpr("metadata"): "<metadata>",
        RuleExpr("text"): "<text>",
        RuleExpr("ingredient"): "<ingredient>",
        RuleExpr("equipment"): "<equipment>",
        RuleExpr("name"): "<name>",
        RuleExpr("literal"): "<text>",
        RuleExpr("eol"): "<newline>",
        RuleExpr("eof"): "<end of file>",
        # Display literals without escapes
        RegexExpr.literal(">>"): "'>>'",
        RegexExpr.literal("@"): "'@'",
        RegexExpr.literal("#"): "'#'",
        RegexExpr.literal("{"): "'{'",
        RegexExpr.literal("}"): "'}'",
        RegexExpr.literal(":"): "':'",
    }
    parse_error.last_resort_exprs = {
        RuleExpr("eof"),
        RuleExpr("eol"),
    }
    return parse_error
