"""Diagnostics."""

from tydpy.diagnostics.codes import (
    LEXER_INVALID_ESCAPE,
    LEXER_UNEXPECTED_CHAR,
    LEXER_UNTERMINATED_ESCAPE,
    LEXER_UNTERMINATED_STRING,
    PARSER_EXPECTED_ATTRIBUTE,
    PARSER_EXPECTED_IDENTIFIER,
    PARSER_EXPECTED_VALUE,
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNEXPECTED_ATTRIBUTE_VALUE,
    PARSER_UNEXPECTED_EOF,
    PARSER_UNEXPECTED_TOKEN,
    PARSER_UNSUPPORTED_LIST_ITEM,
    DiagnosticSpec,
    Severity,
)
from tydpy.diagnostics.diagnostic import Diagnostic
from tydpy.diagnostics.errors import (
    LexError,
    LexErrorKind,
    ParseError,
    ParseErrorKind,
    TydError,
)
from tydpy.diagnostics.report import has_errors, render_diagnostic

__all__ = [
    "LEXER_INVALID_ESCAPE",
    "LEXER_UNEXPECTED_CHAR",
    "LEXER_UNTERMINATED_ESCAPE",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_EXPECTED_ATTRIBUTE",
    "PARSER_EXPECTED_IDENTIFIER",
    "PARSER_EXPECTED_VALUE",
    "PARSER_NESTING_TOO_DEEP",
    "PARSER_UNEXPECTED_ATTRIBUTE_VALUE",
    "PARSER_UNEXPECTED_EOF",
    "PARSER_UNEXPECTED_TOKEN",
    "PARSER_UNSUPPORTED_LIST_ITEM",
    "Diagnostic",
    "DiagnosticSpec",
    "LexError",
    "LexErrorKind",
    "ParseError",
    "ParseErrorKind",
    "Severity",
    "TydError",
    "has_errors",
    "render_diagnostic",
]
