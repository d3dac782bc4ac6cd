"""TyD grammar routines.

Each routine consumes whole statements from the lexer. The statement kind is
decided by the token that follows it: `{` opens a table, `[` opens a list, and
anything else makes the statement a record.
"""

from collections.abc import Sequence

from tydpy.ast import (
    AstAttribute,
    AstComment,
    AstList,
    AstNode,
    AstRecord,
    AstTable,
    ScalarValue,
    coerce_scalar,
    join_bare_words,
)
from tydpy.diagnostics.errors import ParseError, ParseErrorKind
from tydpy.lexer import Lexer, Statement, Token, TokenKind
from tydpy.parser.parser import Parser, parse_error


def parse_table_body(parser: Parser, lexer: Lexer, *, root: bool = False) -> list[AstNode]:
    """Parse statements up to the closing `}` (root: up to end of input).

    The closing brace is consumed. Children are returned in source order.
    """
    children: list[AstNode] = []

    while not root or lexer.has_more_tokens():
        statement = lexer.next_statement()
        if not statement:
            continue

        first = statement[0]
        match first.kind:
            case TokenKind.RBRACE:
                if root:
                    raise parse_error(
                        ParseErrorKind.UNEXPECTED_TOKEN,
                        first,
                        message=f"Unexpected '}}' @ {first.position}, no table is open",
                    )
                return children
            case TokenKind.EOF:
                raise parse_error(
                    ParseErrorKind.UNEXPECTED_EOF,
                    first,
                    message=f"Unexpected EOF @ {first.position}, expected '}}'",
                )
            case TokenKind.LBRACE | TokenKind.LBRACKET:
                raise _expected_identifier(first)
            case TokenKind.RBRACKET:
                raise parse_error(
                    ParseErrorKind.UNEXPECTED_TOKEN,
                    first,
                    message=f"Unexpected ']' @ {first.position}, no list is open",
                )

        children.append(parse_statement(parser, lexer, statement))

    return children


def parse_statement(parser: Parser, lexer: Lexer, statement: Statement) -> AstNode:
    if len(statement) == 1 and statement[0].kind == TokenKind.COMMENT:
        comment = statement[0]
        return AstComment(text=comment.text, position=comment.position)

    # A `;` closes the statement for good, so a brace after it is not a header.
    if not lexer.ended_by_terminator:
        following = lexer.peek()
        if following.kind == TokenKind.LBRACE:
            lexer.next_token()
            return parse_table(parser, lexer, statement)
        if following.kind == TokenKind.LBRACKET:
            lexer.next_token()
            return parse_list(lexer, statement)

    return parse_record(parser, statement)


def parse_table(parser: Parser, lexer: Lexer, header: Statement) -> AstTable:
    """Parse a table whose opening `{` was just consumed."""
    identifier, attributes = parse_table_head(header)
    with parser.nested_table(header[0]):
        children = parse_table_body(parser, lexer)

    return AstTable(
        identifier=identifier,
        attributes=tuple(attributes),
        children=tuple(children),
        position=header[0].position,
    )


def parse_table_head(tokens: Sequence[Token]) -> tuple[str, list[AstAttribute]]:
    """Split a table header into its identifier and attributes.

    `Cat *source Potato *abstract` gives `("Cat", [*source=Potato, *abstract])`.
    """
    if tokens[0].kind != TokenKind.IDENTIFIER:
        raise _expected_identifier(tokens[0], what="table identifier")

    return tokens[0].text, parse_attributes(tokens[1:])


def parse_attributes(tokens: Sequence[Token]) -> list[AstAttribute]:
    attributes: list[AstAttribute] = []

    for token in tokens:
        if token.kind == TokenKind.ATTRIBUTE_IDENTIFIER:
            attributes.append(AstAttribute(identifier=token.text))
            continue

        if token.kind != TokenKind.IDENTIFIER:
            raise parse_error(
                ParseErrorKind.EXPECTED_ATTRIBUTE,
                token,
                message=(
                    f"Expected attribute identifier or identifier @ {token.position} "
                    f"not {token.kind.name}"
                ),
            )

        if not attributes:
            raise parse_error(
                ParseErrorKind.UNEXPECTED_ATTRIBUTE_VALUE,
                token,
                message=f"Expected attribute identifier @ {token.position} not {token.kind.name}",
            )

        # value of the most recent attribute
        previous = attributes[-1]
        attributes[-1] = AstAttribute(identifier=previous.identifier, value=token.text)

    return attributes


def parse_list(lexer: Lexer, header: Statement) -> AstList:
    """Parse a list whose opening `[` was just consumed.

    Values are whole statements, separated by `;` or line breaks. Only scalars
    are supported; comments between values are dropped.
    """
    identifier = header[0]
    if identifier.kind != TokenKind.IDENTIFIER:
        raise _expected_identifier(identifier, what="list identifier")
    if len(header) > 1:
        raise parse_error(
            ParseErrorKind.UNEXPECTED_TOKEN,
            header[1],
            message=f"Unexpected {header[1].kind.name} @ {header[1].position}, a list header is a single identifier",
        )

    values: list[ScalarValue] = []
    while True:
        statement = lexer.next_statement()
        if not statement:
            continue

        first = statement[0]
        match first.kind:
            case TokenKind.RBRACKET:
                return AstList(
                    identifier=identifier.text,
                    values=tuple(values),
                    position=identifier.position,
                )
            case TokenKind.EOF:
                raise parse_error(
                    ParseErrorKind.UNEXPECTED_EOF,
                    first,
                    message=f"Unexpected EOF @ {first.position}, expected ']'",
                )
            case TokenKind.LBRACE | TokenKind.LBRACKET:
                raise parse_error(ParseErrorKind.UNSUPPORTED_LIST_ITEM, first)
            case TokenKind.RBRACE:
                raise parse_error(
                    ParseErrorKind.UNEXPECTED_TOKEN,
                    first,
                    message=f"Unexpected '}}' @ {first.position}, expected ']'",
                )
            case TokenKind.COMMENT:
                continue

        values.append(coerce_scalar(join_bare_words(statement)))


def parse_record(parser: Parser, statement: Statement) -> AstRecord:
    identifier = statement[0]
    if identifier.kind != TokenKind.IDENTIFIER:
        raise _expected_identifier(identifier, what="record identifier")

    if len(statement) == 1:
        if parser.options.allow_valueless_records:
            return AstRecord(identifier=identifier.text, value=None, position=identifier.position)
        raise parse_error(
            ParseErrorKind.EXPECTED_VALUE,
            identifier,
            message=f"Expected a value for '{identifier.text}' @ {identifier.position}",
        )

    value = join_bare_words(statement[1:])
    return AstRecord(
        identifier=identifier.text,
        value=coerce_scalar(value),
        position=identifier.position,
    )


def _expected_identifier(token: Token, *, what: str = "identifier") -> ParseError:
    return parse_error(
        ParseErrorKind.EXPECTED_IDENTIFIER,
        token,
        message=f"Expected {what} @ {token.position} not {token.kind.name}",
    )
