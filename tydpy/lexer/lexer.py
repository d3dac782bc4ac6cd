"""Lexer."""

from collections.abc import Callable
import re
from typing import Final

from tydpy.diagnostics import Diagnostic, DiagnosticSpec
from tydpy.diagnostics.codes import (
    LEXER_INVALID_ESCAPE,
    LEXER_UNEXPECTED_CHAR,
    LEXER_UNTERMINATED_ESCAPE,
    LEXER_UNTERMINATED_STRING,
)
from tydpy.diagnostics.errors import LexError, LexErrorKind
from tydpy.lexer.escapes import unescape_char
from tydpy.lexer.statements import BOUNDARY_KINDS, Statement, is_statement_boundary
from tydpy.lexer.tokens import STRUCTURAL_TEXT, Token, TokenFlags, TokenKind
from tydpy.text import TextPosition, TextRange

NUMBER_PATTERN: Final[re.Pattern[str]] = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")
NULL_TEXT: Final[str] = "null"
ATTRIBUTE_PREFIX: Final[str] = "*"

_RECORD_START_CHARS: Final[frozenset[str]] = frozenset({"-", "*", "\\"})
_WHITESPACE_CHARS: Final[frozenset[str]] = frozenset({" ", "\t", "\r", "\n"})


def _is_record_char(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == "_" or ch == ".")


def _is_record_start(ch: str) -> bool:
    return (ch.isascii() and (ch.isalnum() or ch == "_")) or ch in _RECORD_START_CHARS


def classify_record_text(text: str) -> TokenKind:
    """Classify an unquoted run of record characters."""
    if NUMBER_PATTERN.fullmatch(text):
        return TokenKind.NUMBER
    if text == NULL_TEXT:
        return TokenKind.NULL
    if text.startswith(ATTRIBUTE_PREFIX):
        return TokenKind.ATTRIBUTE_IDENTIFIER
    return TokenKind.IDENTIFIER


class Lexer:
    """TyD lexer with one token of lookahead and statement grouping.

    Whitespace and newlines never produce tokens. A skipped newline is recorded on
    the following token as `PRECEDING_LINE_BREAK`, which `next_statement` uses as
    an implicit statement boundary.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._line = 0
        self._column = 0
        self._after_newline = False
        self._current_flags = TokenFlags.NONE
        self._lookahead: Token | None = None
        self._ended_by_terminator = False

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def text_position(self) -> TextPosition:
        return TextPosition(self._line, self._column)

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def ended_by_terminator(self) -> bool:
        """Whether the last statement read was closed by `;`."""
        return self._ended_by_terminator

    def next_token(self) -> Token:
        """Consume and return the next token; `EOF` repeats forever at the end."""
        if self._lookahead is not None:
            token = self._lookahead
            self._lookahead = None
            return token
        return self._lex_token()

    def peek(self) -> Token:
        """Return the next token without consuming it."""
        if self._lookahead is None:
            self._lookahead = self._lex_token()
        return self._lookahead

    def has_more_tokens(self) -> bool:
        return self.peek().kind != TokenKind.EOF

    def next_statement(self) -> Statement:
        """Read the next statement.

        A `;` is consumed and dropped. A boundary token that follows at least one
        token is left for `peek()`. A structural token or `EOF` at the start of a
        statement is consumed and returned alone. The result may be empty.
        """
        statement: Statement = []
        self._ended_by_terminator = False

        while True:
            token = self.peek()
            if is_statement_boundary(statement, token):
                return statement

            self.next_token()
            if token.kind == TokenKind.SEMICOLON:
                self._ended_by_terminator = True
                return statement

            statement.append(token)
            if token.kind in BOUNDARY_KINDS:
                return statement

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_token(self) -> Token:
        self._skip_whitespace()

        self._current_flags = TokenFlags.PRECEDING_LINE_BREAK if self._after_newline else TokenFlags.NONE
        self._after_newline = False
        start = self._position
        line = self._line
        column = self._column

        kind, text = self._lex_kind_and_text()
        return Token(
            kind=kind,
            text=text,
            line=line,
            column=column,
            range=TextRange.new(start, self._position),
            flags=self._current_flags,
        )

    def _lex_kind_and_text(self) -> tuple[TokenKind, str]:
        if self.is_eof:
            return TokenKind.EOF, ""

        ch = self._current_char()

        if ch in STRUCTURAL_TEXT:
            self._advance()
            return STRUCTURAL_TEXT[ch], ch

        if ch == "#":
            return TokenKind.COMMENT, self._lex_comment()

        if ch == '"':
            return TokenKind.STRING, self._lex_string()

        if _is_record_start(ch):
            text = self._lex_record()
            return classify_record_text(text), text

        raise self._error(
            LexErrorKind.UNEXPECTED_CHAR,
            LEXER_UNEXPECTED_CHAR,
            ch,
            message=f"Unexpected character {ch!r} at line {self._line}, column {self._column}",
        )

    def _lex_comment(self) -> str:
        # Stop before the newline or terminator; the `;` still ends the statement.
        self._advance()
        return "#" + self._consume_while(lambda ch: ch != "\n" and ch != "\r" and ch != ";")

    def _lex_string(self) -> str:
        opening = self.text_position
        start = self._position
        self._advance()
        self._current_flags |= TokenFlags.WAS_QUOTED

        value = self._consume_while(lambda ch: ch != '"')
        if self.is_eof:
            raise self._error(
                LexErrorKind.UNTERMINATED_STRING,
                LEXER_UNTERMINATED_STRING,
                '"',
                position=opening,
                range=TextRange.new(start, self._position),
            )

        # closing quote
        self._advance()
        return value

    def _lex_record(self) -> str:
        ch = self._current_char()
        prefix = ""
        if ch == "-" or ch == "*":
            self._advance()
            prefix = ch
        return prefix + self._consume_while(_is_record_char)

    def _consume_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume characters while `predicate` holds, decoding escape sequences.

        The predicate only sees the peeked character, so nothing is ever pushed
        back. An escape sequence is always consumed whole.
        """
        chars: list[str] = []
        while not self.is_eof:
            ch = self._current_char()
            if ch == "\\":
                chars.append(self._consume_escape())
                continue
            if not predicate(ch):
                break
            chars.append(ch)
            self._advance()
        return "".join(chars)

    def _consume_escape(self) -> str:
        backslash = self.text_position
        start = self._position
        self._advance()

        if self.is_eof:
            raise self._error(
                LexErrorKind.UNTERMINATED_ESCAPE,
                LEXER_UNTERMINATED_ESCAPE,
                "\\",
                position=backslash,
                range=TextRange.new(start, self._position),
            )

        ch = self._current_char()
        decoded = unescape_char(ch)
        if decoded is None:
            raise self._error(
                LexErrorKind.INVALID_ESCAPE,
                LEXER_INVALID_ESCAPE,
                ch,
                message=f"Unexpected escape character {ch!r} at line {backslash.line}, column {backslash.column}",
                position=backslash,
                range=TextRange.new(start, self._position + 1),
            )

        self._advance()
        self._current_flags |= TokenFlags.HAS_ESCAPE
        return decoded

    def _skip_whitespace(self) -> None:
        while not self.is_eof:
            ch = self._current_char()
            if ch not in _WHITESPACE_CHARS:
                break
            if ch == "\n":
                self._after_newline = True
            self._advance()

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _advance(self) -> None:
        if self._source[self._position] == "\n":
            self._line += 1
            self._column = 0
        else:
            self._column += 1
        self._position += 1

    def _error(
        self,
        kind: LexErrorKind,
        spec: DiagnosticSpec,
        char: str,
        *,
        message: str | None = None,
        position: TextPosition | None = None,
        range: TextRange | None = None,
    ) -> LexError:
        if position is None:
            position = self.text_position
        if message is None:
            message = f"{spec.message} @ {position}"
        if range is None:
            range = TextRange.new(self._position, min(self._position + 1, len(self._source)))
        return LexError(
            kind,
            char,
            Diagnostic.from_spec(spec, range, position, message=message),
        )


def lex(source: str) -> list[Token]:
    """Lex a whole buffer into tokens, ending with `EOF`."""
    return Lexer(source).lex()


def dump_tokens(tokens: list[Token]) -> None:
    """Print token list with kind, position, range, flags, and text for debugging."""
    for i, tok in enumerate(tokens):
        print(
            f"{i:03d} {tok.kind.name:<22} pos={tok.position} range={tok.range.as_tuple()} "
            f"flags={tok.flags!r} text={tok.text!r}"
        )
