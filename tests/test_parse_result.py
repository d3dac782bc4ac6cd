import logging

import pytest

from tests._debug import debug_dump_diagnostics
from tydpy.ast import AstRecord
from tydpy.diagnostics import (
    PARSER_UNEXPECTED_EOF,
    Diagnostic,
    LexError,
    ParseError,
    has_errors,
    render_diagnostic,
)
from tydpy.parser import ParseMode, ParserOptions, parse, parse_result
from tydpy.text import TextPosition, TextRange


def test_parse_result_success_has_root_and_no_diagnostics() -> None:
    result = parse_result("a 1\n")

    assert result.root is not None
    assert result.root.children == (AstRecord("a", 1),)
    assert result.diagnostics == []
    assert result.error is None
    assert result.has_errors is False
    assert result.unwrap() is result.root
    assert result.render_diagnostics() == ""


def test_parse_result_matches_parse() -> None:
    source = "Cat { legs 4 }\nnames [a; b]"

    assert parse_result(source).root == parse(source)


def test_parse_result_caches_root_view() -> None:
    result = parse_result("a 1\n")

    view = result.root_view()
    assert view is not None
    assert view.as_object() == {"a": 1}
    assert result.root_view() is view


def test_parse_result_reports_parse_error_as_diagnostic() -> None:
    source = "Cat {"
    result = parse_result(source)
    debug_dump_diagnostics("parse_error", source, result.diagnostics)

    assert result.root is None
    assert result.root_view() is None
    assert result.has_errors is True
    assert isinstance(result.error, ParseError)
    assert [d.code for d in result.diagnostics] == ["PARSER_UNEXPECTED_EOF"]
    assert result.diagnostics[0] is result.error.diagnostic

    with pytest.raises(ParseError):
        result.unwrap()


def test_parse_result_reports_lex_error_as_diagnostic() -> None:
    result = parse_result('Cat "open')

    assert isinstance(result.error, LexError)
    assert result.diagnostics[0].code == "LEXER_UNTERMINATED_STRING"
    assert result.diagnostics[0].position.as_tuple() == (0, 4)


def test_parse_result_mode_profiles() -> None:
    strict = parse_result("Cat")
    permissive = parse_result("Cat", mode=ParseMode.PERMISSIVE)

    assert strict.has_errors is True
    assert strict.options.mode == ParseMode.STRICT
    assert permissive.has_errors is False
    assert permissive.options.allow_valueless_records is True
    assert permissive.unwrap().children == (AstRecord("Cat", None),)


def test_parse_result_rejects_options_with_mode() -> None:
    with pytest.raises(ValueError):
        parse_result("a 1", ParserOptions(), mode=ParseMode.PERMISSIVE)


def test_render_diagnostic_with_source() -> None:
    source = "Cat {"
    result = parse_result(source)

    rendered = result.render_diagnostics()

    assert rendered.splitlines() == [
        "0:5: error[PARSER_UNEXPECTED_EOF]: Unexpected EOF @ 0:5, expected '}'",
        "    Cat {",
        "         ^",
    ]


def test_render_diagnostic_with_hint_and_without_source() -> None:
    result = parse_result("Cat")
    diagnostic = result.diagnostics[0]

    rendered = render_diagnostic(diagnostic)

    assert rendered.splitlines() == [
        "0:0: error[PARSER_EXPECTED_VALUE]: Expected a value for 'Cat' @ 0:0",
        "hint: Write `null` for an empty record value.",
    ]


def test_diagnostic_from_spec_defaults_message() -> None:
    diagnostic = Diagnostic.from_spec(PARSER_UNEXPECTED_EOF, TextRange(0, 0), TextPosition(0, 0))

    assert diagnostic.message == PARSER_UNEXPECTED_EOF.message
    assert diagnostic.category == "parser"
    assert has_errors([diagnostic])


def test_parse_logs_at_debug_level(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="tydpy"):
        parse_result("a 1")
        parse_result("a {")

    assert "parsing 3 characters in strict mode" in caplog.text
    assert "parse failed" in caplog.text
