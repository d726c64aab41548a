"""Locate graph nodes by structural path.

``find_by_path`` is the plain linear scan, usable on any node sequence.
``GraphIndex`` builds a dict over one node set for repeated lookups and
checks that no two nodes share a path.  Both must be given the node set of
the graph as it is now; an index built before a rebuild describes a graph
that no longer exists.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any

from json_graph_patch.graph.nodes import Node
from json_graph_patch.path import Path, as_path, equals, to_display_string

__all__ = ["GraphIndex", "find_by_path"]


def find_by_path(nodes: Iterable[Node], path: Sequence[Any]) -> Node | None:
    """Return the node whose path equals ``path``, or None if there is none."""
    for node in nodes:
        if equals(node.path, path):
            return node
    return None


class GraphIndex:
    """Path-keyed lookup over one node set.

    Args:
        nodes: Nodes of a freshly built graph.

    Raises:
        ValueError: If two nodes share a path.
    """

    def __init__(self, nodes: Iterable[Node]) -> None:
        self._by_path: dict[Path, Node] = {}
        for node in nodes:
            key = as_path(node.path)
            if key in self._by_path:
                msg = (
                    f"nodes {self._by_path[key].id!r} and {node.id!r} share "
                    f"path {to_display_string(key)}"
                )
                raise ValueError(msg)
            self._by_path[key] = node

    def find(self, path: Iterable[Any]) -> Node | None:
        """Return the node at ``path``, or None if the graph has no such node."""
        return self._by_path.get(as_path(path))

    @property
    def root(self) -> Node | None:
        return self._by_path.get(())

    def __contains__(self, path: object) -> bool:
        if isinstance(path, str) or not isinstance(path, Iterable):
            return False
        try:
            return self.find(path) is not None
        except (TypeError, ValueError):
            return False

    def __len__(self) -> int:
        return len(self._by_path)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._by_path.values())
