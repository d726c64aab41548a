"""json-graph-patch - edit JSON documents through the node graph that renders them."""

from __future__ import annotations

from json_graph_patch.api import apply_edit, build_graph, save_node_edit
from json_graph_patch.config import EditorConfig
from json_graph_patch.editor import NodeEditor
from json_graph_patch.errors import (
    DocumentParseError,
    JsonGraphPatchError,
    PathSyntaxError,
)
from json_graph_patch.graph import (
    DisplayRow,
    Graph,
    GraphBuilder,
    GraphIndex,
    Node,
    Row,
    RowKind,
    RowProjector,
    find_by_path,
)
from json_graph_patch.patcher import PatchResult, TreePatcher
from json_graph_patch.path import (
    Path,
    PathCodec,
    equals,
    from_display_string,
    to_display_string,
)
from json_graph_patch.result import EditApplied, EditResult, ParseError, ParseSource
from json_graph_patch.serializer import parse, serialize
from json_graph_patch.stores import InMemoryDocumentStore, InMemoryGraphStore

__version__: str = "0.1.0"
__all__: list[str] = [
    "DisplayRow",
    "DocumentParseError",
    "EditApplied",
    "EditResult",
    "EditorConfig",
    "Graph",
    "GraphBuilder",
    "GraphIndex",
    "InMemoryDocumentStore",
    "InMemoryGraphStore",
    "JsonGraphPatchError",
    "Node",
    "NodeEditor",
    "ParseError",
    "ParseSource",
    "PatchResult",
    "Path",
    "PathCodec",
    "PathSyntaxError",
    "Row",
    "RowKind",
    "RowProjector",
    "TreePatcher",
    "apply_edit",
    "build_graph",
    "equals",
    "find_by_path",
    "from_display_string",
    "parse",
    "save_node_edit",
    "serialize",
    "to_display_string",
]
