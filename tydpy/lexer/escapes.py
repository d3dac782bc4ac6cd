"""Escape sequences allowed after a backslash."""

from typing import Final

ESCAPES: Final[dict[str, str]] = {
    "#": "#",
    ";": ";",
    "{": "{",
    "}": "}",
    "[": "[",
    "]": "]",
    '"': '"',
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
}


def unescape_char(char: str) -> str | None:
    """Decode the character following a backslash.

    Returns None for anything outside the escape table; the lexer turns that into
    an `INVALID_ESCAPE` error.
    """
    return ESCAPES.get(char)
