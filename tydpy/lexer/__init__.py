"""Lexer."""

from tydpy.lexer.escapes import ESCAPES, unescape_char
from tydpy.lexer.lexer import (
    NUMBER_PATTERN,
    Lexer,
    classify_record_text,
    dump_tokens,
    lex,
)
from tydpy.lexer.statements import BOUNDARY_KINDS, Statement, is_statement_boundary
from tydpy.lexer.tokens import Token, TokenFlags, TokenKind

__all__ = [
    "BOUNDARY_KINDS",
    "ESCAPES",
    "NUMBER_PATTERN",
    "Lexer",
    "Statement",
    "Token",
    "TokenFlags",
    "TokenKind",
    "classify_record_text",
    "dump_tokens",
    "is_statement_boundary",
    "lex",
    "unescape_char",
]
