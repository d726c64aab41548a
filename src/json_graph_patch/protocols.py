"""Store protocols for the edit pipeline's external collaborators.

``NodeEditor`` talks to the document and the graph only through these
structural interfaces.  Any object with conformant methods passes
``isinstance`` checks; no inheritance is required.

Example::

    from json_graph_patch.protocols import DocumentStore

    class FileBackedStore:
        def __init__(self, path):
            self._path = path

        def get_current_text(self) -> str:
            return self._path.read_text(encoding="utf-8")

        def set_text(self, text: str) -> None:
            self._path.write_text(text, encoding="utf-8")

    assert isinstance(FileBackedStore(...), DocumentStore)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from json_graph_patch.graph.nodes import Node

__all__ = ["DocumentStore", "GraphStore"]


@runtime_checkable
class DocumentStore(Protocol):
    """Owner of the canonical document text.

    ``set_text`` must leave the graph store rebuilt from the new text by the
    time it returns (or before the next read of the graph's nodes).
    """

    def get_current_text(self) -> str: ...

    def set_text(self, text: str) -> None: ...


@runtime_checkable
class GraphStore(Protocol):
    """Owner of the current node set and the selected node."""

    @property
    def nodes(self) -> Sequence[Node]: ...

    def set_selected(self, node: Node | None) -> None: ...
