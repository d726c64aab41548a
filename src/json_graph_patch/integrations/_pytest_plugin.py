"""Fixtures for testing code that edits documents through json-graph-patch.

``json_graph_editor`` hands out a ``NodeEditor`` already wired to a document
store and a graph store that rebuilds on every publish.
``assert_graph_mirrors`` checks that a graph has one node per location of a
document.

The fixtures are registered under the ``pytest11`` entry point, so they are
available in any test session once the package is installed.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import pytest

from json_graph_patch import (
    EditorConfig,
    Graph,
    GraphBuilder,
    InMemoryDocumentStore,
    InMemoryGraphStore,
    NodeEditor,
    parse,
    serialize,
    to_display_string,
)


@dataclass
class EditorHarness:
    """A NodeEditor wired to connected in-memory stores."""

    editor: NodeEditor
    documents: InMemoryDocumentStore
    graphs: InMemoryGraphStore

    @property
    def document(self) -> Any:
        """The published document, parsed."""
        return parse(self.documents.get_current_text())


@pytest.fixture
def json_graph_editor() -> Callable[..., EditorHarness]:
    """Fixture that returns a factory for wired editors.

    Usage in tests::

        def test_rename(json_graph_editor):
            harness = json_graph_editor({"user": {"name": "Ada"}})
            harness.editor.save(["user"], '{"name": "Grace"}')
            assert harness.document == {"user": {"name": "Grace"}}

    Returns:
        A callable ``_make(document, config=None) -> EditorHarness``.  Each
        call builds fresh stores; nothing is shared between harnesses.
    """

    def _make(document: Any, config: EditorConfig | None = None) -> EditorHarness:
        cfg = config if config is not None else EditorConfig()
        documents = InMemoryDocumentStore(serialize(document, indent=cfg.indent))
        graphs = InMemoryGraphStore(GraphBuilder(config=cfg))
        graphs.connect(documents)
        return EditorHarness(
            editor=NodeEditor(documents, graphs, config=cfg),
            documents=documents,
            graphs=graphs,
        )

    return _make


def _locations(value: Any, path: tuple[Any, ...] = ()) -> list[tuple[Any, ...]]:
    found = [path]
    if isinstance(value, dict):
        for key, child in value.items():
            found.extend(_locations(child, (*path, key)))
    elif isinstance(value, list):
        for idx, child in enumerate(value):
            found.extend(_locations(child, (*path, idx)))
    return found


@pytest.fixture(scope="session")
def assert_graph_mirrors() -> Callable[[Graph, Any], None]:
    """Fixture that returns a callable graph/document consistency asserter.

    Session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_graph(assert_graph_mirrors):
            assert_graph_mirrors(build_graph(doc), doc)

    Returns:
        A callable ``_assert(graph, document) -> None`` that raises
        ``AssertionError`` unless the graph has exactly one node per
        addressable location of ``document``, in document order.
    """

    def _assert(graph: Graph, document: Any) -> None:
        expected = _locations(document)
        actual = [tuple(node.path) for node in graph.nodes]
        if actual != expected:
            missing = [to_display_string(p) for p in expected if p not in actual]
            extra = [to_display_string(p) for p in actual if p not in expected]
            raise AssertionError(
                f"graph does not mirror document:\n"
                f"  missing: {missing}\n"
                f"  extra:   {extra}\n"
                f"  nodes:   {len(actual)}, locations: {len(expected)}"
            )

    return _assert
