"""Lexer tokens."""

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Final

from tydpy.text import TextPosition, TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Structure
    # -------------------------
    LBRACE = 10  # {
    RBRACE = 11  # }
    LBRACKET = 12  # [
    RBRACKET = 13  # ]
    SEMICOLON = 14  # ; (statement terminator)

    # -------------------------
    # Comments
    # -------------------------
    COMMENT = 20

    # -------------------------
    # Identifiers / literals
    # -------------------------
    STRING = 30  # quoted string
    IDENTIFIER = 31
    ATTRIBUTE_IDENTIFIER = 32  # *name
    NUMBER = 33
    NULL = 34


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    PRECEDING_LINE_BREAK = 1 << 0  # NEWLINE skipped before
    WAS_QUOTED = 1 << 1
    HAS_ESCAPE = 1 << 2


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `text` is decoded: escapes are resolved and string quotes removed. `line` and
    `column` point at the first character of the token.
    """

    kind: TokenKind
    text: str
    line: int
    column: int
    range: TextRange = field(default=TextRange(0, 0), compare=False)
    flags: TokenFlags = field(default=TokenFlags.NONE, compare=False)

    @property
    def position(self) -> TextPosition:
        return TextPosition(self.line, self.column)

    def has_preceding_line_break(self) -> bool:
        return bool(self.flags & TokenFlags.PRECEDING_LINE_BREAK)

    def was_quoted(self) -> bool:
        return bool(self.flags & TokenFlags.WAS_QUOTED)


STRUCTURAL_TEXT: Final[dict[str, TokenKind]] = {
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    ";": TokenKind.SEMICOLON,
}
