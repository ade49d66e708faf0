"""
AST nodes for TFEN documents.

The tree is built once by the parser and handed out read-only: every node is
a frozen dataclass and child sequences are tuples. Parents own their children
exclusively; there are no back references.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from ..lexer.tokens import Position, START


@dataclass(frozen=True)
class Node:
    """Base class for all AST nodes."""
    position: Position


@dataclass(frozen=True)
class Identifier(Node):
    """Name of a resource or attribute."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Condition(Node):
    """
    The ``with "<condition>"`` clause of an attribute.

    Kept as opaque text; interpreting it is up to downstream tools.
    """
    text: str


@dataclass(frozen=True)
class Value(Node):
    """One entry of an attribute's allowed-value list. Never empty."""
    text: str


@dataclass(frozen=True)
class Attribute(Node):
    """
    attribute "<id>" with "<condition>" of [<values>]

    Position is that of the ``attribute`` keyword, not of the identifier
    string; the identifier carries its own position.
    """
    id: Identifier
    condition: Condition
    values: Tuple[Value, ...] = ()

    @property
    def value_texts(self) -> Tuple[str, ...]:
        return tuple(v.text for v in self.values)


@dataclass(frozen=True)
class Resource(Node):
    """
    resource "<id>" has { <attributes> }

    Position is that of the ``resource`` keyword.
    """
    id: Identifier
    attributes: Tuple[Attribute, ...] = ()


@dataclass(frozen=True)
class Program(Node):
    """Root of a parsed document."""
    resources: Tuple[Resource, ...] = ()
    position: Position = field(default=START)


__all__ = [
    "Node",
    "Identifier",
    "Condition",
    "Value",
    "Attribute",
    "Resource",
    "Program",
]
