"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from tydpy.diagnostics.diagnostic import Diagnostic


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def render_diagnostic(diagnostic: Diagnostic, source: str | None = None) -> str:
    """Format a diagnostic as `line:column: severity[CODE]: message`.

    With the source text, the offending line is appended with a caret under the
    reported column. Lines and columns are printed 0-indexed, as stored.
    """
    header = (
        f"{diagnostic.position}: {diagnostic.severity}[{diagnostic.code}]: {diagnostic.message}"
    )
    lines = [header]

    if source is not None:
        source_lines = source.split("\n")
        if diagnostic.position.line < len(source_lines):
            text = source_lines[diagnostic.position.line]
            lines.append(f"    {text}")
            lines.append("    " + " " * diagnostic.position.column + "^")

    if diagnostic.hint is not None:
        lines.append(f"hint: {diagnostic.hint}")

    return "\n".join(lines)
