"""High-level parse entrypoint for TyD source text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tydpy.ast import AstTable
from tydpy.diagnostics import TydError
from tydpy.lexer import Lexer
from tydpy.parser.options import ParseMode, ParserOptions
from tydpy.parser.parser import Parser

if TYPE_CHECKING:
    from tydpy.pipeline import TydParseResult

logger = logging.getLogger(__name__)


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> AstTable:
    """Parse `text` into the root table, raising `LexError`/`ParseError` on failure."""
    resolved_options = _resolve_options(options=options, mode=mode)
    logger.debug("parsing %d characters in %s mode", len(text), resolved_options.mode)

    root = Parser(resolved_options).parse(Lexer(text))

    logger.debug("parsed %d top-level statements", len(root.children))
    return root


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> TydParseResult:
    """Parse `text` without raising; failures are reported as diagnostics."""
    from tydpy.pipeline import TydParseResult

    resolved_options = _resolve_options(options=options, mode=mode)
    try:
        root = parse(text, options=resolved_options)
    except TydError as error:
        logger.debug("parse failed: %s", error)
        return TydParseResult(
            source_text=text,
            options=resolved_options,
            root=None,
            diagnostics=[error.diagnostic],
            error=error,
        )

    return TydParseResult(
        source_text=text,
        options=resolved_options,
        root=root,
    )
