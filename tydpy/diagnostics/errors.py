"""Fatal lexer/parser errors.

Both stages stop at the first problem. The exception carries the same
`Diagnostic` a non-raising caller receives from `parse_result`.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from tydpy.diagnostics.diagnostic import Diagnostic

if TYPE_CHECKING:
    from tydpy.lexer.tokens import Token, TokenKind


class LexErrorKind(StrEnum):
    UNEXPECTED_CHAR = "unexpected_char"
    INVALID_ESCAPE = "invalid_escape"
    UNTERMINATED_STRING = "unterminated_string"
    UNTERMINATED_ESCAPE = "unterminated_escape"


class ParseErrorKind(StrEnum):
    EXPECTED_IDENTIFIER = "expected_identifier"
    EXPECTED_ATTRIBUTE = "expected_attribute"
    UNEXPECTED_ATTRIBUTE_VALUE = "unexpected_attribute_value"
    UNEXPECTED_EOF = "unexpected_eof"
    EXPECTED_VALUE = "expected_value"
    UNEXPECTED_TOKEN = "unexpected_token"
    UNSUPPORTED_LIST_ITEM = "unsupported_list_item"
    NESTING_TOO_DEEP = "nesting_too_deep"


class TydError(Exception):
    """Base class for errors raised while reading TyD text."""

    kind: LexErrorKind | ParseErrorKind

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def line(self) -> int:
        return self.diagnostic.position.line

    @property
    def column(self) -> int:
        return self.diagnostic.position.column


class LexError(TydError):
    """Character-level failure. The lexer must not be reused afterwards."""

    def __init__(self, kind: LexErrorKind, char: str, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic)
        self.kind = kind
        self.char = char


class ParseError(TydError):
    """Statement-level failure. No partial tree is produced."""

    def __init__(self, kind: ParseErrorKind, token: Token, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic)
        self.kind = kind
        self.token = token

    @property
    def token_kind(self) -> TokenKind:
        return self.token.kind
