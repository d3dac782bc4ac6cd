"""Parser core."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Final

from tydpy.ast import ROOT_IDENTIFIER, AstTable
from tydpy.diagnostics import Diagnostic, DiagnosticSpec
from tydpy.diagnostics.codes import (
    PARSER_EXPECTED_ATTRIBUTE,
    PARSER_EXPECTED_IDENTIFIER,
    PARSER_EXPECTED_VALUE,
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNEXPECTED_ATTRIBUTE_VALUE,
    PARSER_UNEXPECTED_EOF,
    PARSER_UNEXPECTED_TOKEN,
    PARSER_UNSUPPORTED_LIST_ITEM,
)
from tydpy.diagnostics.errors import ParseError, ParseErrorKind
from tydpy.lexer import Lexer, Token
from tydpy.parser.options import ParserOptions

_SPECS: Final[dict[ParseErrorKind, DiagnosticSpec]] = {
    ParseErrorKind.EXPECTED_IDENTIFIER: PARSER_EXPECTED_IDENTIFIER,
    ParseErrorKind.EXPECTED_ATTRIBUTE: PARSER_EXPECTED_ATTRIBUTE,
    ParseErrorKind.UNEXPECTED_ATTRIBUTE_VALUE: PARSER_UNEXPECTED_ATTRIBUTE_VALUE,
    ParseErrorKind.UNEXPECTED_EOF: PARSER_UNEXPECTED_EOF,
    ParseErrorKind.EXPECTED_VALUE: PARSER_EXPECTED_VALUE,
    ParseErrorKind.UNEXPECTED_TOKEN: PARSER_UNEXPECTED_TOKEN,
    ParseErrorKind.UNSUPPORTED_LIST_ITEM: PARSER_UNSUPPORTED_LIST_ITEM,
    ParseErrorKind.NESTING_TOO_DEEP: PARSER_NESTING_TOO_DEEP,
}


class Parser:
    """Recursive-descent TyD parser.

    A parser instance is reusable; each `parse` call starts from a fresh nesting
    depth and consumes its lexer to the end or to the first error.
    """

    def __init__(self, options: ParserOptions | None = None) -> None:
        self._options = options or ParserOptions()
        self._depth = 0

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def depth(self) -> int:
        """Number of tables currently open."""
        return self._depth

    def parse(self, lexer: Lexer) -> AstTable:
        """Parse every statement of `lexer` into the implicit root table."""
        from tydpy.parser.grammar import parse_table_body

        self._depth = 0
        children = parse_table_body(self, lexer, root=True)
        return AstTable(identifier=ROOT_IDENTIFIER, children=tuple(children))

    @contextmanager
    def nested_table(self, header: Token) -> Iterator[None]:
        if self._depth >= self._options.max_depth:
            raise parse_error(
                ParseErrorKind.NESTING_TOO_DEEP,
                header,
                message=f"Table nesting exceeds {self._options.max_depth} levels @ {header.position}",
            )
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1


def parse_error(kind: ParseErrorKind, token: Token, *, message: str | None = None) -> ParseError:
    spec = _SPECS[kind]
    if message is None:
        message = f"{spec.message} @ {token.position}"
    return ParseError(
        kind,
        token,
        Diagnostic.from_spec(spec, token.range, token.position, message=message),
    )
