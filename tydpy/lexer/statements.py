"""Statement grouping rules.

A statement is the run of tokens the parser dispatches on. `;` ends a statement
explicitly. The lexer treats newlines as whitespace, so a line break between two
tokens is an implicit boundary, reported through `PRECEDING_LINE_BREAK`.
"""

from collections.abc import Sequence
from typing import Final

from tydpy.lexer.tokens import Token, TokenKind

type Statement = list[Token]

BOUNDARY_KINDS: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.LBRACE,
        TokenKind.RBRACE,
        TokenKind.LBRACKET,
        TokenKind.RBRACKET,
        TokenKind.EOF,
    }
)
"""Tokens that are never part of a non-empty statement."""


def is_statement_boundary(statement: Sequence[Token], token: Token) -> bool:
    """Return True if `token` must not be appended to `statement`.

    The token is left unconsumed so the caller can observe it with `peek()`.
    An empty statement has no boundary: its first token always starts it.
    """
    if not statement:
        return False
    if token.kind in BOUNDARY_KINDS:
        return True
    # trailing comments are their own statement
    if token.kind == TokenKind.COMMENT:
        return True
    return token.has_preceding_line_break()
