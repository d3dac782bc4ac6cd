"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNEXPECTED_CHAR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_CHAR",
    message="Unexpected character",
    hint="Quote the value if it contains characters other than letters, digits, `_`, `.`, `-` or `*`.",
    severity="error",
    category="lexer",
)

LEXER_INVALID_ESCAPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_ESCAPE",
    message="Invalid escape sequence",
    hint='Allowed escapes are \\# \\; \\{ \\} \\[ \\] \\" \\n \\r \\t and \\\\.',
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal",
    hint="Close the string with a double quote.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_ESCAPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_ESCAPE",
    message="Escape sequence at end of input",
    hint="Follow the backslash with the character to escape.",
    severity="error",
    category="lexer",
)

PARSER_EXPECTED_IDENTIFIER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_IDENTIFIER",
    message="Expected identifier",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_ATTRIBUTE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_ATTRIBUTE",
    message="Expected attribute identifier or identifier",
    hint="Table headers take `*attribute` names, each optionally followed by one value.",
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_ATTRIBUTE_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_ATTRIBUTE_VALUE",
    message="Attribute value without a preceding attribute identifier",
    hint="Prefix the attribute name with `*`.",
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_EOF: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_EOF",
    message="Unexpected end of input",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_VALUE",
    message="Expected a value",
    hint="Write `null` for an empty record value.",
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TOKEN",
    message="Unexpected token",
    severity="error",
    category="parser",
)

PARSER_UNSUPPORTED_LIST_ITEM: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNSUPPORTED_LIST_ITEM",
    message="Unsupported list item: list values must be scalars",
    hint="Nested tables and lists inside lists are not supported.",
    severity="error",
    category="parser",
)

PARSER_NESTING_TOO_DEEP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_NESTING_TOO_DEEP",
    message="Tables are nested too deeply",
    hint="Raise `ParserOptions.max_depth` if the nesting is intentional.",
    severity="error",
    category="parser",
)
