"""Typed AST for TyD documents."""

from tydpy.ast.model import (
    ROOT_IDENTIFIER,
    AstAttribute,
    AstComment,
    AstList,
    AstNamedNode,
    AstNode,
    AstRecord,
    AstTable,
    ScalarValue,
)
from tydpy.ast.scalar import coerce_scalar, join_bare_words, parse_number
from tydpy.ast.views import AstTableMultimap, AstTableObject, AstTableValue, AstTableView
from tydpy.ast.walk import count_tables, format_tree, walk

__all__ = [
    "ROOT_IDENTIFIER",
    "AstAttribute",
    "AstComment",
    "AstList",
    "AstNamedNode",
    "AstNode",
    "AstRecord",
    "AstTable",
    "AstTableMultimap",
    "AstTableObject",
    "AstTableValue",
    "AstTableView",
    "ScalarValue",
    "coerce_scalar",
    "count_tables",
    "format_tree",
    "join_bare_words",
    "parse_number",
    "walk",
]
