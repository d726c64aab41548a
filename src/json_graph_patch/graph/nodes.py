"""Graph data types: rows, nodes, edges, and the graph that holds them.

Every node mirrors one addressable location of a JSON document and records
that location as its ``path``.  A node's rows summarise its immediate
children, or hold the scalar itself for a leaf node.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

from json_graph_patch.path import Path, to_display_string

__all__ = ["Edge", "Graph", "Node", "Row", "RowKind"]


class RowKind(StrEnum):
    """What a row summarises.

    - OBJECT -> "object" : a nested JSON object; the row value is its key count
    - ARRAY  -> "array"  : a nested JSON array; the row value is its item count
    - SCALAR -> "scalar" : a string, number, bool or null; the row value is raw
    """

    OBJECT = auto()
    ARRAY = auto()
    SCALAR = auto()


@dataclass(frozen=True, slots=True)
class Row:
    """One child entry of a node.

    Attributes:
        kind:  Which kind of child this row summarises.
        key:   Object key, or the index label ("0", "1", ...) for array
               entries.  None for the single row of a leaf node.
        value: The raw scalar for SCALAR rows; the immediate child count for
               OBJECT and ARRAY rows.
        index: Array position for array entries; None otherwise.
    """

    kind: RowKind
    key: str | None = None
    value: Any = None
    index: int | None = None


@dataclass(frozen=True, slots=True)
class Node:
    """A graph vertex mirroring the sub-tree at ``path``."""

    id: str
    path: Path
    rows: tuple[Row, ...] = ()
    width: float = 0.0
    height: float = 0.0

    @property
    def is_leaf(self) -> bool:
        """True if the node wraps a scalar rather than a container."""
        return len(self.rows) == 1 and self.rows[0].key is None

    @property
    def display_path(self) -> str:
        return to_display_string(self.path)


@dataclass(frozen=True, slots=True)
class Edge:
    """Parent-to-child link between two node ids."""

    source: str
    target: str


@dataclass(frozen=True, slots=True)
class Graph:
    """A node set and its edges, in pre-order document order."""

    nodes: tuple[Node, ...] = field(default_factory=tuple)
    edges: tuple[Edge, ...] = field(default_factory=tuple)

    @property
    def root(self) -> Node | None:
        return self.nodes[0] if self.nodes else None
