"""Scalar coercion shared by records and list values."""

from __future__ import annotations

from collections.abc import Sequence

from tydpy.ast.model import ScalarValue
from tydpy.lexer import NUMBER_PATTERN, Token, TokenFlags, TokenKind


def parse_number(text: str) -> int | float | None:
    normalized = text.strip()
    if not NUMBER_PATTERN.fullmatch(normalized):
        return None

    if "." in normalized:
        return float(normalized)
    return int(normalized)


def coerce_scalar(token: Token) -> ScalarValue:
    """Turn a value token into its Python value.

    `NUMBER` becomes `int` or `float`, `NULL` becomes None, every other kind keeps
    its decoded text.
    """
    match token.kind:
        case TokenKind.NUMBER:
            number = parse_number(token.text)
            if number is None:
                raise ValueError(f"Not a number token: {token.text!r}")
            return number
        case TokenKind.NULL:
            return None
        case _:
            return token.text


def join_bare_words(tokens: Sequence[Token]) -> Token:
    """Merge an unquoted multi-word value (`10.5cm wide`) into one identifier token.

    A single token is returned unchanged.
    """
    if len(tokens) == 1:
        return tokens[0]

    first = tokens[0]
    return Token(
        kind=TokenKind.IDENTIFIER,
        text=" ".join(token.text for token in tokens),
        line=first.line,
        column=first.column,
        range=first.range.cover(tokens[-1].range),
        flags=first.flags & TokenFlags.PRECEDING_LINE_BREAK,
    )


__all__ = [
    "coerce_scalar",
    "join_bare_words",
    "parse_number",
]
