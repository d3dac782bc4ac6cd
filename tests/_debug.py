"""Shared debug printers for lexer/parser/ast tests."""

from __future__ import annotations

import os

from tydpy.ast import AstTable, format_tree
from tydpy.diagnostics import Diagnostic, render_diagnostic
from tydpy.lexer import Token

PRINT_TOKENS = os.getenv("PRINT_TOKENS", "0").lower() in {"1", "true", "yes", "on"}
PRINT_AST = os.getenv("PRINT_AST", "0").lower() in {"1", "true", "yes", "on"}
PRINT_SOURCE = os.getenv("PRINT_SOURCE", "0").lower() in {"1", "true", "yes", "on"}
PRINT_DIAGNOSTICS = os.getenv("PRINT_DIAGNOSTICS", "0").lower() in {
    "1",
    "true",
    "yes",
    "on",
}


def debug_print_source(test_name: str, source: str) -> None:
    if not PRINT_SOURCE:
        return
    print(f"\n===== {test_name} SOURCE =====")
    print(source)


def debug_dump_tokens(test_name: str, source: str, tokens: list[Token]) -> None:
    if not PRINT_TOKENS:
        return
    debug_print_source(test_name, source)
    print(f"\n===== {test_name} TOKENS =====")
    for index, tok in enumerate(tokens):
        print(f"{index:03d} {tok.kind.name:<22} pos={tok.position} range={tok.range.as_tuple()} text={tok.text!r}")


def debug_dump_ast(test_name: str, root: AstTable) -> None:
    if not PRINT_AST:
        return
    print(f"\n===== {test_name} AST =====")
    print(format_tree(root))


def debug_dump_diagnostics(test_name: str, source: str, diagnostics: list[Diagnostic]) -> None:
    if not PRINT_DIAGNOSTICS:
        return
    print(f"===== {test_name} DIAGNOSTICS =====")
    if not diagnostics:
        print("(none)")
        return
    for diagnostic in diagnostics:
        print(render_diagnostic(diagnostic, source))

