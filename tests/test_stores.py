"""Tests for the in-memory document and graph stores."""

from __future__ import annotations

import logging

import pytest

from json_graph_patch.protocols import DocumentStore, GraphStore
from json_graph_patch.stores import InMemoryDocumentStore, InMemoryGraphStore


class TestProtocolConformance:
    def test_document_store(self) -> None:
        assert isinstance(InMemoryDocumentStore(), DocumentStore)

    def test_graph_store(self) -> None:
        assert isinstance(InMemoryGraphStore(), GraphStore)

    def test_custom_document_store(self) -> None:
        class Minimal:
            def get_current_text(self) -> str:
                return "{}"

            def set_text(self, text: str) -> None:
                pass

        assert isinstance(Minimal(), DocumentStore)

    def test_missing_method_fails_conformance(self) -> None:
        class ReadOnly:
            def get_current_text(self) -> str:
                return "{}"

        assert not isinstance(ReadOnly(), DocumentStore)


class TestInMemoryDocumentStore:
    def test_initial_text(self) -> None:
        store = InMemoryDocumentStore('{"a": 1}')
        assert store.get_current_text() == '{"a": 1}'
        assert store.has_changes is False

    def test_set_text_marks_changes(self) -> None:
        store = InMemoryDocumentStore()
        store.set_text("[]")
        assert store.get_current_text() == "[]"
        assert store.has_changes is True

    def test_subscribers_called_in_order(self) -> None:
        store = InMemoryDocumentStore()
        calls: list[str] = []
        store.subscribe(lambda text: calls.append(f"first:{text}"))
        store.subscribe(lambda text: calls.append(f"second:{text}"))
        store.set_text("1")
        assert calls == ["first:1", "second:1"]

    def test_unsubscribe(self) -> None:
        store = InMemoryDocumentStore()
        calls: list[str] = []
        unsubscribe = store.subscribe(calls.append)
        unsubscribe()
        unsubscribe()  # second call is harmless
        store.set_text("1")
        assert calls == []


class TestInMemoryGraphStore:
    def test_starts_empty(self) -> None:
        store = InMemoryGraphStore()
        assert store.nodes == ()
        assert store.edges == ()
        assert store.selected is None

    def test_rebuild_replaces_graph(self) -> None:
        store = InMemoryGraphStore()
        assert store.rebuild('{"a": [1]}') is True
        assert [node.path for node in store.nodes] == [(), ("a",), ("a", 0)]
        assert store.graph.root is store.nodes[0]

    def test_invalid_text_keeps_previous_graph(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        store = InMemoryGraphStore()
        store.rebuild('{"a": 1}')
        before = store.graph
        with caplog.at_level(logging.WARNING, logger="json_graph_patch.stores"):
            assert store.rebuild("{oops") is False
        assert store.graph is before
        assert "keeping previous graph" in caplog.text

    def test_find_uses_current_graph(self) -> None:
        store = InMemoryGraphStore()
        store.rebuild('{"a": {"b": 1}}')
        assert store.find(["a", "b"]) is not None
        store.rebuild('{"a": 2}')
        assert store.find(["a", "b"]) is None

    def test_set_selected(self) -> None:
        store = InMemoryGraphStore()
        store.rebuild("[1]")
        store.set_selected(store.nodes[1])
        assert store.selected is store.nodes[1]
        store.set_selected(None)
        assert store.selected is None

    def test_rebuild_does_not_touch_selection(self) -> None:
        store = InMemoryGraphStore()
        store.rebuild("[1]")
        previous = store.nodes[1]
        store.set_selected(previous)
        store.rebuild("[2]")
        assert store.selected is previous


class TestConnect:
    def test_connect_builds_immediately(
        self,
        document_store: InMemoryDocumentStore,
        graph_store: InMemoryGraphStore,
    ) -> None:
        assert graph_store.find(["customer", "name"]) is not None

    def test_set_text_rebuilds_synchronously(
        self,
        document_store: InMemoryDocumentStore,
        graph_store: InMemoryGraphStore,
    ) -> None:
        document_store.set_text('{"only": true}')
        assert [node.path for node in graph_store.nodes] == [(), ("only",)]

    def test_disconnect(self) -> None:
        documents = InMemoryDocumentStore("{}")
        graphs = InMemoryGraphStore()
        disconnect = graphs.connect(documents)
        disconnect()
        documents.set_text('{"a": 1}')
        assert len(graphs.nodes) == 1
