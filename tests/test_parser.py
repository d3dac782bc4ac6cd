import textwrap

import pytest

from tests._debug import debug_dump_ast, debug_print_source
from tests._shared_cases import ALL_TYD_CASES, ERROR_CASES, TydCase, TydErrorCase, case_id
from tydpy.ast import AstComment, AstList, AstRecord, AstTable
from tydpy.diagnostics import LexError, ParseError, ParseErrorKind, TydError
from tydpy.lexer import Lexer, TokenKind
from tydpy.parser import DEFAULT_MAX_DEPTH, ParseMode, Parser, ParserOptions, parse


def _parse(name: str, source: str, **kwargs) -> AstTable:
    debug_print_source(name, source)
    root = parse(source, **kwargs)
    debug_dump_ast(name, root)
    return root


@pytest.mark.parametrize("case", ALL_TYD_CASES, ids=case_id)
def test_parse_cases(case: TydCase) -> None:
    root = _parse(case.name, case.source)

    assert root.identifier == ""
    assert root.is_root
    assert root.children == case.expected


@pytest.mark.parametrize("case", ERROR_CASES, ids=case_id)
def test_parse_error_cases(case: TydErrorCase) -> None:
    with pytest.raises(ParseError) as exc_info:
        _parse(case.name, case.source)

    assert exc_info.value.kind == case.kind


def test_children_keep_source_positions() -> None:
    source = textwrap.dedent(
        """
        Cat *abstract
        {
            Dog 1
            Legs [4]
        }
        """
    ).lstrip()

    root = _parse("positions", source)

    table = root.children[0]
    assert isinstance(table, AstTable)
    assert table.position.as_tuple() == (0, 0)

    record, legs = table.children
    assert isinstance(record, AstRecord)
    assert record.position.as_tuple() == (2, 4)
    assert isinstance(legs, AstList)
    assert legs.position.as_tuple() == (3, 4)
    assert legs.values == (4,)


def test_document_with_every_statement_kind() -> None:
    source = textwrap.dedent(
        """
        # Animals
        Cat *source Animal
        {
            name "Tom"
            weight 4.5
            owner null
            toys [ball; "red string"; 3]
            Habits *abstract
            {
                sleep all day
            }
        }
        version 2
        """
    ).lstrip()

    root = _parse("every_kind", source)

    assert [type(child).__name__ for child in root.children] == ["AstComment", "AstTable", "AstRecord"]
    cat = root.find("Cat")
    assert isinstance(cat, AstTable)
    assert cat.attribute("*source") is not None
    assert cat.attribute("*source").value == "Animal"
    assert [child.identifier for child in cat.records] == ["name", "weight", "owner"]
    assert cat.lists[0].values == ("ball", "red string", 3)
    habits = cat.tables[0]
    assert habits.has_attribute("*abstract")
    assert habits.children == (AstRecord("sleep", "all day"),)
    assert root.find("version") == AstRecord("version", 2)


def test_eof_error_position_inside_table() -> None:
    with pytest.raises(ParseError) as exc_info:
        _parse("eof_position", "Cat {\n  Dog 1\n")

    error = exc_info.value
    assert error.kind == ParseErrorKind.UNEXPECTED_EOF
    assert error.token_kind == TokenKind.EOF
    assert (error.line, error.column) == (2, 0)
    assert "expected '}'" in str(error)


def test_error_points_at_offending_token() -> None:
    with pytest.raises(ParseError) as exc_info:
        _parse("offending_token", "Cat\n{\n  1 2\n}")

    error = exc_info.value
    assert error.kind == ParseErrorKind.EXPECTED_IDENTIFIER
    assert error.token.text == "1"
    assert (error.line, error.column) == (2, 2)
    assert error.diagnostic.code == "PARSER_EXPECTED_IDENTIFIER"


def test_lex_errors_propagate_through_parse() -> None:
    with pytest.raises(LexError):
        _parse("lex_error", 'Cat "open')


def test_errors_share_base_class() -> None:
    for source in ("Cat {", "Cat @"):
        with pytest.raises(TydError):
            parse(source)


def test_strict_mode_requires_record_value() -> None:
    with pytest.raises(ParseError) as exc_info:
        _parse("strict_valueless", "Cat", mode=ParseMode.STRICT)

    assert exc_info.value.kind == ParseErrorKind.EXPECTED_VALUE
    assert str(exc_info.value) == "Expected a value for 'Cat' @ 0:0"


def test_comment_between_header_and_brace_detaches_header() -> None:
    with pytest.raises(ParseError) as exc_info:
        _parse("comment_before_brace", "Cat # note\n{\n}")

    assert exc_info.value.kind == ParseErrorKind.EXPECTED_VALUE
    assert exc_info.value.token.text == "Cat"

    root = _parse("comment_inside_brace", "Cat { # note\n}")
    assert root.children == (AstTable("Cat", children=(AstComment("# note"),)),)


def test_permissive_mode_allows_valueless_record() -> None:
    root = _parse("permissive_valueless", "Cat; Dog 1\nBird", mode=ParseMode.PERMISSIVE)

    assert root.children == (
        AstRecord("Cat", None),
        AstRecord("Dog", 1),
        AstRecord("Bird", None),
    )


def test_options_and_mode_are_mutually_exclusive() -> None:
    with pytest.raises(ValueError):
        parse("Cat 1", ParserOptions(), mode=ParseMode.STRICT)


def test_for_mode_profiles() -> None:
    assert ParserOptions.for_mode(ParseMode.STRICT).allow_valueless_records is False
    assert ParserOptions.for_mode(ParseMode.PERMISSIVE).allow_valueless_records is True
    assert ParserOptions().max_depth == DEFAULT_MAX_DEPTH


def test_max_depth_must_be_positive() -> None:
    with pytest.raises(ValueError):
        ParserOptions(max_depth=0)


def test_nesting_limit() -> None:
    source = "A { B { C { } } }"

    with pytest.raises(ParseError) as exc_info:
        _parse("too_deep", source, options=ParserOptions(max_depth=2))

    assert exc_info.value.kind == ParseErrorKind.NESTING_TOO_DEEP
    assert exc_info.value.token.text == "C"

    root = _parse("deep_enough", source, options=ParserOptions(max_depth=3))
    assert root.children == (
        AstTable("A", children=(AstTable("B", children=(AstTable("C"),)),)),
    )


def test_parser_is_reusable_after_error() -> None:
    parser = Parser(ParserOptions(max_depth=1))

    with pytest.raises(ParseError):
        parser.parse(Lexer("A { B { } }"))
    assert parser.depth == 0

    root = parser.parse(Lexer("A { b 1 }"))
    assert root.children == (AstTable("A", children=(AstRecord("b", 1),)),)
