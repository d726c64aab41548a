"""Tests for GraphBuilder: node coverage, ids, edges, rows and sizing."""

from __future__ import annotations

from typing import Any

import pytest

from json_graph_patch.config import EditorConfig
from json_graph_patch.graph.builder import GraphBuilder
from json_graph_patch.graph.nodes import Edge, Row, RowKind
from json_graph_patch.path import Path


@pytest.fixture
def builder() -> GraphBuilder:
    return GraphBuilder()


def addressable_paths(value: Any, path: Path = ()) -> list[Path]:
    """Every location of ``value``, root first, in pre-order."""
    paths = [path]
    if isinstance(value, dict):
        for key, child in value.items():
            paths.extend(addressable_paths(child, (*path, key)))
    elif isinstance(value, list):
        for idx, child in enumerate(value):
            paths.extend(addressable_paths(child, (*path, idx)))
    return paths


SAMPLE = {"k1": {}, "k2": [1, 2, 3], "k3": "x"}


class TestNodeCoverage:
    def test_preorder_paths(self, builder: GraphBuilder) -> None:
        graph = builder.build(SAMPLE)
        assert [node.path for node in graph.nodes] == [
            (),
            ("k1",),
            ("k2",),
            ("k2", 0),
            ("k2", 1),
            ("k2", 2),
            ("k3",),
        ]

    @pytest.mark.parametrize(
        "document",
        [
            SAMPLE,
            {"a": [{"b": [[], {"c": None}]}], "d": {"e": {"f": True}}},
            [1, [2, [3]]],
            "scalar",
            None,
            {},
        ],
    )
    def test_node_paths_are_exactly_the_addressable_locations(
        self, builder: GraphBuilder, document: Any
    ) -> None:
        paths = [node.path for node in builder.build(document).nodes]
        assert paths == addressable_paths(document)
        assert len(set(paths)) == len(paths)

    def test_ids_follow_visit_order(self, builder: GraphBuilder) -> None:
        graph = builder.build(SAMPLE)
        assert [node.id for node in graph.nodes] == ["1", "2", "3", "4", "5", "6", "7"]

    def test_edges_link_parent_to_child(self, builder: GraphBuilder) -> None:
        graph = builder.build(SAMPLE)
        assert graph.edges == (
            Edge("1", "2"),
            Edge("1", "3"),
            Edge("3", "4"),
            Edge("3", "5"),
            Edge("3", "6"),
            Edge("1", "7"),
        )

    def test_build_is_deterministic(self, builder: GraphBuilder) -> None:
        assert builder.build(SAMPLE) == builder.build(SAMPLE)


class TestRows:
    def test_container_rows(self, builder: GraphBuilder) -> None:
        root = builder.build(SAMPLE).nodes[0]
        assert root.rows == (
            Row(kind=RowKind.OBJECT, key="k1", value=0),
            Row(kind=RowKind.ARRAY, key="k2", value=3),
            Row(kind=RowKind.SCALAR, key="k3", value="x"),
        )

    def test_array_rows_carry_index(self, builder: GraphBuilder) -> None:
        array_node = builder.build(SAMPLE).nodes[2]
        assert array_node.rows[1] == Row(
            kind=RowKind.SCALAR, key="1", value=2, index=1
        )

    def test_leaf_node_has_single_keyless_row(self, builder: GraphBuilder) -> None:
        leaf = builder.build(SAMPLE).nodes[-1]
        assert leaf.rows == (Row(kind=RowKind.SCALAR, value="x"),)
        assert leaf.is_leaf

    def test_bool_kept_as_bool(self, builder: GraphBuilder) -> None:
        leaf = builder.build(True).nodes[0]
        assert leaf.rows[0].value is True


class TestSizing:
    def test_width_fits_longest_line(self, builder: GraphBuilder) -> None:
        root = builder.build(SAMPLE).nodes[0]
        # "k2: [3 items]" is 13 characters
        assert root.width == 13 * 8.0 + 20.0
        assert root.height == 3 * 24.0

    def test_width_never_below_minimum(self, builder: GraphBuilder) -> None:
        leaf = builder.build("x").nodes[0]
        assert leaf.width == 80.0
        assert leaf.height == 24.0

    def test_empty_container_gets_one_row_of_height(
        self, builder: GraphBuilder
    ) -> None:
        node = builder.build({}).nodes[0]
        assert node.rows == ()
        assert node.height == 24.0

    def test_config_drives_sizes(self) -> None:
        config = EditorConfig(
            row_height=10.0, char_width=1.0, node_padding=0.0, min_node_width=1.0
        )
        root = GraphBuilder(config=config).build({"ab": 1}).nodes[0]
        assert root.width == len("ab: 1")
        assert root.height == 10.0


class TestInvalidInput:
    @pytest.mark.parametrize("bad", [{1, 2}, object(), {"a": (1, 2)}, [b"x"]])
    def test_non_json_values_raise(self, builder: GraphBuilder, bad: Any) -> None:
        with pytest.raises(TypeError, match="Unsupported JSON value type"):
            builder.build(bad)
