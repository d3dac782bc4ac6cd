#!/usr/bin/env python
from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from tydpy.ast import format_tree
from tydpy.diagnostics import TydError, render_diagnostic
from tydpy.lexer import Lexer, dump_tokens
from tydpy.parser import ParseMode, parse_result


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Dump the tokens and tree of a TyD file.")
    parser.add_argument("path", type=Path, help="TyD file to read.")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ParseMode],
        default=ParseMode.STRICT.value,
        help="Parser mode (defaults to strict).",
    )
    parser.add_argument("--no-ast", action="store_true", help="Only dump tokens.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    text = args.path.read_text(encoding="utf-8")

    try:
        tokens = Lexer(text).lex()
    except TydError as exc:
        print(render_diagnostic(exc.diagnostic, text), file=sys.stderr)
        return 1
    dump_tokens(tokens)

    if args.no_ast:
        return 0

    result = parse_result(text, mode=ParseMode(args.mode))
    if result.root is None:
        print(result.render_diagnostics(), file=sys.stderr)
        return 1

    print()
    print(format_tree(result.root))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
