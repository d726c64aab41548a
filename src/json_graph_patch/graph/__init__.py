"""Graph subpackage: the node graph mirroring a JSON document.

Re-exports the public API for the graph module:
- Node, Row, RowKind, Edge, Graph: graph data types
- GraphBuilder: converts any valid JSON value into a Graph
- GraphIndex, find_by_path: locate nodes by structural path
- RowProjector, DisplayRow: turn node rows into display text
"""

from json_graph_patch.graph.builder import GraphBuilder
from json_graph_patch.graph.index import GraphIndex, find_by_path
from json_graph_patch.graph.nodes import Edge, Graph, Node, Row, RowKind
from json_graph_patch.graph.rows import (
    DisplayRow,
    RowProjector,
    node_content,
    project_value,
    rows_equal,
    rows_for,
)

__all__ = [
    "DisplayRow",
    "Edge",
    "Graph",
    "GraphBuilder",
    "GraphIndex",
    "Node",
    "Row",
    "RowKind",
    "RowProjector",
    "find_by_path",
    "node_content",
    "project_value",
    "rows_equal",
    "rows_for",
]
