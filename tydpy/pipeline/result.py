"""Parse carrier for callers that want failures as data instead of exceptions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tydpy.diagnostics import has_errors, render_diagnostic
from tydpy.parser.options import ParserOptions

if TYPE_CHECKING:
    from tydpy.ast import AstTable, AstTableView
    from tydpy.diagnostics import Diagnostic, TydError


@dataclass(slots=True)
class TydParseResult:
    """Outcome of one parse: the root table, or the diagnostic that aborted it."""

    source_text: str
    options: ParserOptions
    root: AstTable | None
    diagnostics: list[Diagnostic] = field(default_factory=list)
    error: TydError | None = None
    _root_view: AstTableView | None = field(default=None, init=False, repr=False)

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def unwrap(self) -> AstTable:
        """Return the root table or re-raise the error that stopped the parse."""
        if self.error is not None:
            raise self.error
        assert self.root is not None
        return self.root

    def root_view(self) -> AstTableView | None:
        if self.root is None:
            return None
        if self._root_view is None:
            from tydpy.ast import AstTableView

            self._root_view = AstTableView(self.root)
        return self._root_view

    def render_diagnostics(self) -> str:
        return "\n".join(render_diagnostic(d, self.source_text) for d in self.diagnostics)
