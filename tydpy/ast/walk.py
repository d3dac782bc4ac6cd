"""Depth-first traversal helpers."""

from __future__ import annotations

from collections.abc import Iterator

from tydpy.ast.model import AstComment, AstList, AstNode, AstRecord, AstTable


def walk(node: AstNode) -> Iterator[AstNode]:
    """Yield `node` and its descendants in source order."""
    yield node
    if isinstance(node, AstTable):
        for child in node.children:
            yield from walk(child)


def count_tables(root: AstTable) -> int:
    """Number of tables below `root` (the root itself is not counted)."""
    return sum(1 for node in walk(root) if isinstance(node, AstTable)) - 1


def format_tree(node: AstNode, depth: int = 0) -> str:
    """Render `node` as an indented outline, one line per node."""
    lines: list[str] = []

    def visit(current: AstNode, level: int) -> None:
        indent = "  " * level
        match current:
            case AstTable():
                attributes = " ".join(
                    attribute.identifier if attribute.value is None else f"{attribute.identifier}={attribute.value}"
                    for attribute in current.attributes
                )
                lines.append(f"{indent}TABLE {current.identifier or '<root>'} {attributes}".rstrip())
                for child in current.children:
                    visit(child, level + 1)
            case AstRecord():
                lines.append(f"{indent}RECORD {current.identifier}={current.value!r}")
            case AstList():
                lines.append(f"{indent}LIST {current.identifier}={list(current.values)!r}")
            case AstComment():
                lines.append(f"{indent}COMMENT {current.text!r}")

    visit(node, depth)
    return "\n".join(lines)


__all__ = ["count_tables", "format_tree", "walk"]
