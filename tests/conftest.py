"""Shared fixtures: sample documents and connected in-memory stores."""

from __future__ import annotations

from typing import Any

import pytest

from json_graph_patch import InMemoryDocumentStore, InMemoryGraphStore, serialize


def make_customer_document() -> dict[str, Any]:
    """A small document mixing nested objects, arrays and every scalar type."""
    return {
        "customer": {
            "name": "Ada",
            "tags": ["vip", "early"],
            "address": {"city": "London", "zip": "N1"},
            "color": "#ff0000",
        },
        "orders": [
            {"id": 1, "total": 9.5, "paid": True},
            {"id": 2, "total": 12, "paid": False, "note": None},
        ],
        "version": 3,
    }


@pytest.fixture
def customer_document() -> dict[str, Any]:
    return make_customer_document()


@pytest.fixture
def document_store(customer_document: dict[str, Any]) -> InMemoryDocumentStore:
    return InMemoryDocumentStore(serialize(customer_document))


@pytest.fixture
def graph_store(document_store: InMemoryDocumentStore) -> InMemoryGraphStore:
    store = InMemoryGraphStore()
    store.connect(document_store)
    return store
