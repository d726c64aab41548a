"""Public API functions for json-graph-patch.

This module provides the user-facing entry points: build_graph, apply_edit,
and save_node_edit.  Each call creates a fresh GraphBuilder or NodeEditor
to guarantee zero global state mutation between calls.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from json_graph_patch.config import EditorConfig
from json_graph_patch.editor import NodeEditor
from json_graph_patch.graph.builder import GraphBuilder
from json_graph_patch.graph.nodes import Graph, Node
from json_graph_patch.protocols import DocumentStore, GraphStore
from json_graph_patch.result import EditResult

__all__ = ["apply_edit", "build_graph", "save_node_edit"]


def build_graph(document: Any, config: EditorConfig | None = None) -> Graph:
    """Build the node graph for a parsed JSON document.

    Args:
        document: Any JSON value (dict, list, str, int, float, bool, None).
        config:   Sizing parameters.  Defaults to ``EditorConfig()`` when None.

    Returns:
        A ``Graph`` with one node per addressable location of ``document``.
    """
    builder = GraphBuilder(config=config if config is not None else EditorConfig())
    return builder.build(document)


def apply_edit(
    document_store: DocumentStore,
    graph_store: GraphStore,
    path: Iterable[Any],
    new_value: Any,
    config: EditorConfig | None = None,
) -> EditResult:
    """Write ``new_value`` at ``path`` and re-select the node there.

    Args:
        document_store: Source of the current text; receives the new text.
        graph_store:    Rebuilt by the document store; receives the selection.
        path:           Object keys and array indices from the document root.
        new_value:      Parsed JSON value to write.
        config:         Pipeline settings.  Defaults to ``EditorConfig()``.

    Returns:
        ``EditApplied`` on success, or ``ParseError`` when the current
        document is unparsable and ``config.strict_document`` is set.
    """
    editor = NodeEditor(document_store, graph_store, config=config)
    return editor.apply_edit(path, new_value)


def save_node_edit(
    document_store: DocumentStore,
    graph_store: GraphStore,
    node: Node,
    edited_text: str,
    config: EditorConfig | None = None,
) -> EditResult:
    """Apply the user's edited JSON text to ``node``'s location.

    Returns:
        ``ParseError`` with source ``edit`` if ``edited_text`` is not valid
        JSON (no store is touched); otherwise as ``apply_edit``.
    """
    editor = NodeEditor(document_store, graph_store, config=config)
    return editor.save(node.path, edited_text)
