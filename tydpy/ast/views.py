"""AST consumer views built on top of canonical AST nodes."""

from __future__ import annotations

from dataclasses import dataclass

from tydpy.ast.model import AstComment, AstList, AstNamedNode, AstRecord, AstTable, ScalarValue

type AstTableValue = ScalarValue | tuple[ScalarValue, ...] | AstTable
type AstTableObject = dict[str, AstTableValue]
type AstTableMultimap = dict[str, list[AstTableValue]]


@dataclass(frozen=True, slots=True)
class AstTableView:
    """Explicit consumer view over an `AstTable`.

    Records map to their value, lists to a tuple of values and tables to the
    nested `AstTable`. Comments are skipped.
    """

    table: AstTable

    @property
    def identifier(self) -> str:
        return self.table.identifier

    @property
    def is_empty(self) -> bool:
        return not any(not isinstance(child, AstComment) for child in self.table.children)

    def as_object(self) -> AstTableObject:
        """Values by identifier; a repeated identifier keeps its last value."""
        object_result: AstTableObject = {}
        for child in self._named_children():
            object_result[child.identifier] = _node_value(child)
        return object_result

    def as_multimap(self) -> AstTableMultimap:
        """All values per identifier, in source order."""
        multimap_result: AstTableMultimap = {}
        for child in self._named_children():
            multimap_result.setdefault(child.identifier, []).append(_node_value(child))
        return multimap_result

    def get_value(self, identifier: str) -> AstTableValue:
        """Value of the last child named `identifier`.

        Raises KeyError when there is none, so a missing entry is not confused
        with a `null` value.
        """
        return self.as_object()[identifier]

    def get_table(self, identifier: str) -> AstTableView | None:
        child = self.table.find(identifier)
        if isinstance(child, AstTable):
            return AstTableView(child)
        return None

    def _named_children(self) -> list[AstNamedNode]:
        return [child for child in self.table.children if not isinstance(child, AstComment)]


def _node_value(node: AstNamedNode) -> AstTableValue:
    match node:
        case AstRecord(value=value):
            return value
        case AstList(values=values):
            return values
        case AstTable():
            return node


__all__ = [
    "AstTableMultimap",
    "AstTableObject",
    "AstTableValue",
    "AstTableView",
]
