"""GraphBuilder: converts any valid JSON value into a node graph.

Uses recursive dispatch in pre-order.  Every addressable location of the
document gets exactly one node: the root, every object value and every
array item, recursively, scalars included.  Node ids are assigned in visit
order ("1", "2", ...), so building the same document twice yields the same
graph.

Paths are built during traversal:
- Root is () (empty tuple)
- Object children append their key, array children append their index
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import Any

from json_graph_patch.config import EditorConfig
from json_graph_patch.graph.nodes import Edge, Graph, Node, Row
from json_graph_patch.graph.rows import row_text, rows_for
from json_graph_patch.path import Path

__all__ = ["GraphBuilder"]


@dataclass
class GraphBuilder:
    """Builds a ``Graph`` from a JSON value.

    The dispatch order matters: bool is checked before int because bool is a
    subclass of int in Python, and neither may reach the unsupported-type
    branch.

    Node sizes come from the configuration: one ``row_height`` per row (a
    node with no rows still gets one), and a width wide enough for the
    longest ``"key: value"`` line, never below ``min_node_width``.

    Example::

        graph = GraphBuilder().build({"user": {"name": "Ada"}})
        [node.path for node in graph.nodes]
        # [(), ("user",), ("user", "name")]
    """

    config: EditorConfig = field(default_factory=EditorConfig)

    def build(self, value: Any) -> Graph:
        """Convert a JSON value to a graph.

        Raises:
            TypeError: If ``value`` holds a non-JSON type anywhere.
        """
        nodes: list[Node] = []
        edges: list[Edge] = []
        self._visit(value, (), None, count(1), nodes, edges)
        return Graph(nodes=tuple(nodes), edges=tuple(edges))

    def _visit(
        self,
        value: Any,
        path: Path,
        parent_id: str | None,
        ids: count[int],
        nodes: list[Node],
        edges: list[Edge],
    ) -> None:
        node_id = str(next(ids))
        if parent_id is not None:
            edges.append(Edge(source=parent_id, target=node_id))

        if isinstance(value, bool) or value is None:
            children: list[tuple[str | int, Any]] = []
        elif isinstance(value, dict):
            children = list(value.items())
        elif isinstance(value, list):
            children = list(enumerate(value))
        elif isinstance(value, str | int | float):
            children = []
        else:
            msg = f"Unsupported JSON value type: {type(value)!r}"
            raise TypeError(msg)

        rows = rows_for(value)
        width, height = self._measure(rows)
        nodes.append(
            Node(id=node_id, path=path, rows=rows, width=width, height=height)
        )

        for seg, child in children:
            self._visit(child, (*path, seg), node_id, ids, nodes, edges)

    def _measure(self, rows: tuple[Row, ...]) -> tuple[float, float]:
        cfg = self.config
        longest = 0
        for row in rows:
            text = row_text(row)
            line = text if row.key is None else f"{row.key}: {text}"
            longest = max(longest, len(line))
        width = max(cfg.min_node_width, longest * cfg.char_width + cfg.node_padding)
        height = max(1, len(rows)) * cfg.row_height
        return width, height
