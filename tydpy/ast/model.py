"""AST data model for TyD source."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from tydpy.text import ZERO_POSITION, TextPosition

type ScalarValue = str | int | float | None

ROOT_IDENTIFIER: Final[str] = ""
"""Identifier of the implicit root table."""


@dataclass(frozen=True, slots=True)
class AstAttribute:
    """Table header modifier, e.g. `*source Potato` or `*abstract`."""

    identifier: str
    value: str | None = None


@dataclass(frozen=True, slots=True)
class AstRecord:
    """Identifier bound to one scalar value."""

    identifier: str
    value: ScalarValue
    position: TextPosition = field(default=ZERO_POSITION, compare=False)


@dataclass(frozen=True, slots=True)
class AstList:
    """Identifier bound to an ordered sequence of scalar values."""

    identifier: str
    values: tuple[ScalarValue, ...]
    position: TextPosition = field(default=ZERO_POSITION, compare=False)


@dataclass(frozen=True, slots=True)
class AstComment:
    """Comment text including the leading `#`."""

    text: str
    position: TextPosition = field(default=ZERO_POSITION, compare=False)


@dataclass(frozen=True, slots=True)
class AstTable:
    """Named table preserving statement order of its children."""

    identifier: str
    attributes: tuple[AstAttribute, ...] = ()
    children: tuple[AstNode, ...] = ()
    position: TextPosition = field(default=ZERO_POSITION, compare=False)

    @property
    def is_root(self) -> bool:
        return self.identifier == ROOT_IDENTIFIER

    @property
    def tables(self) -> tuple[AstTable, ...]:
        return tuple(child for child in self.children if isinstance(child, AstTable))

    @property
    def records(self) -> tuple[AstRecord, ...]:
        return tuple(child for child in self.children if isinstance(child, AstRecord))

    @property
    def lists(self) -> tuple[AstList, ...]:
        return tuple(child for child in self.children if isinstance(child, AstList))

    @property
    def comments(self) -> tuple[AstComment, ...]:
        return tuple(child for child in self.children if isinstance(child, AstComment))

    def find(self, identifier: str) -> AstNamedNode | None:
        """First direct child with the given identifier."""
        for child in self.children:
            if not isinstance(child, AstComment) and child.identifier == identifier:
                return child
        return None

    def find_all(self, identifier: str) -> list[AstNamedNode]:
        return [
            child
            for child in self.children
            if not isinstance(child, AstComment) and child.identifier == identifier
        ]

    def attribute(self, identifier: str) -> AstAttribute | None:
        for attribute in self.attributes:
            if attribute.identifier == identifier:
                return attribute
        return None

    def has_attribute(self, identifier: str) -> bool:
        return self.attribute(identifier) is not None


type AstNode = AstTable | AstRecord | AstList | AstComment
type AstNamedNode = AstTable | AstRecord | AstList


__all__ = [
    "ROOT_IDENTIFIER",
    "AstAttribute",
    "AstComment",
    "AstList",
    "AstNamedNode",
    "AstNode",
    "AstRecord",
    "AstTable",
    "ScalarValue",
]
