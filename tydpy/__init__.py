"""TyD structured-data reader: lexer, statement parser and AST."""

from tydpy.ast import (
    AstAttribute,
    AstComment,
    AstList,
    AstNode,
    AstRecord,
    AstTable,
    AstTableView,
    walk,
)
from tydpy.diagnostics import (
    Diagnostic,
    LexError,
    LexErrorKind,
    ParseError,
    ParseErrorKind,
    TydError,
)
from tydpy.lexer import Lexer, Token, TokenKind, lex
from tydpy.parser import ParseMode, Parser, ParserOptions, parse, parse_result
from tydpy.pipeline import TydParseResult

__all__ = [
    "AstAttribute",
    "AstComment",
    "AstList",
    "AstNode",
    "AstRecord",
    "AstTable",
    "AstTableView",
    "Diagnostic",
    "LexError",
    "LexErrorKind",
    "Lexer",
    "ParseError",
    "ParseErrorKind",
    "ParseMode",
    "Parser",
    "ParserOptions",
    "Token",
    "TokenKind",
    "TydError",
    "TydParseResult",
    "lex",
    "parse",
    "parse_result",
    "walk",
]
