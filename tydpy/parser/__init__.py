"""Parser (statement grammar + entrypoints)."""

from tydpy.parser.grammar import (
    parse_attributes,
    parse_list,
    parse_record,
    parse_statement,
    parse_table,
    parse_table_body,
    parse_table_head,
)
from tydpy.parser.options import DEFAULT_MAX_DEPTH, ParseMode, ParserOptions
from tydpy.parser.parser import Parser, parse_error
from tydpy.parser.tyd import parse, parse_result

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "ParseMode",
    "Parser",
    "ParserOptions",
    "parse",
    "parse_attributes",
    "parse_error",
    "parse_list",
    "parse_record",
    "parse_result",
    "parse_statement",
    "parse_table",
    "parse_table_body",
    "parse_table_head",
]
