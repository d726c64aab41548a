"""In-memory document and graph stores.

These satisfy ``DocumentStore`` and ``GraphStore`` and wire the control flow
the edit pipeline relies on: publishing new text to the document store
synchronously rebuilds the graph store it is connected to.

Example::

    documents = InMemoryDocumentStore('{"user": {"name": "Ada"}}')
    graphs = InMemoryGraphStore()
    graphs.connect(documents)

    documents.set_text('{"user": {"name": "Grace"}}')
    graphs.find(["user", "name"]).rows[0].value   # "Grace"
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from json_graph_patch.errors import DocumentParseError
from json_graph_patch.graph.builder import GraphBuilder
from json_graph_patch.graph.index import GraphIndex
from json_graph_patch.graph.nodes import Edge, Graph, Node
from json_graph_patch.serializer import parse

__all__ = ["InMemoryDocumentStore", "InMemoryGraphStore"]

logger = logging.getLogger(__name__)

TextListener = Callable[[str], Any]


class InMemoryDocumentStore:
    """Holds the document text and notifies subscribers when it changes.

    Args:
        text: Initial document text.  Not validated.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._listeners: list[TextListener] = []
        self.has_changes = False

    def get_current_text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        """Replace the text, then call every subscriber with it, in order."""
        self._text = text
        self.has_changes = True
        for listener in list(self._listeners):
            listener(text)

    def subscribe(self, listener: TextListener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


class InMemoryGraphStore:
    """Holds the graph built from the current document, and the selection.

    The graph is replaced wholesale on every ``rebuild``.  Selection is only
    changed through ``set_selected``; after a rebuild it may still refer to a
    node of the previous graph until the caller re-selects.

    Args:
        builder: Graph constructor.  Defaults to ``GraphBuilder()``.
    """

    def __init__(self, builder: GraphBuilder | None = None) -> None:
        self._builder = builder if builder is not None else GraphBuilder()
        self._graph = Graph()
        self._index = GraphIndex(())
        self._selected: Node | None = None

    # ------------------------------------------------------------------
    # GraphStore Protocol surface
    # ------------------------------------------------------------------

    @property
    def nodes(self) -> tuple[Node, ...]:
        return self._graph.nodes

    def set_selected(self, node: Node | None) -> None:
        logger.debug("selected node %s", node.display_path if node else None)
        self._selected = node

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def edges(self) -> tuple[Edge, ...]:
        return self._graph.edges

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def selected(self) -> Node | None:
        return self._selected

    def find(self, path: Iterable[Any]) -> Node | None:
        """Return the node at ``path`` in the current graph, if any."""
        return self._index.find(path)

    # ------------------------------------------------------------------
    # Reconstruction
    # ------------------------------------------------------------------

    def rebuild(self, text: str) -> bool:
        """Rebuild the graph from document ``text``.

        Returns:
            True if the graph was replaced.  False if ``text`` is not valid
            JSON, in which case the previous graph is kept.
        """
        try:
            document = parse(text)
        except DocumentParseError as exc:
            logger.warning("keeping previous graph; text is not valid JSON: %s", exc)
            return False

        graph = self._builder.build(document)
        self._index = GraphIndex(graph.nodes)
        self._graph = graph
        logger.debug("rebuilt graph with %d nodes", len(graph.nodes))
        return True

    def connect(self, documents: InMemoryDocumentStore) -> Callable[[], None]:
        """Rebuild from ``documents`` now and on every later ``set_text``.

        Returns:
            A callable that disconnects this store again.
        """
        unsubscribe = documents.subscribe(self.rebuild)
        self.rebuild(documents.get_current_text())
        return unsubscribe
