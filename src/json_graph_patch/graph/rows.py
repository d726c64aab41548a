"""Row construction and projection for node display.

``rows_for`` summarises a JSON value into the rows a node stores.
``RowProjector`` turns those rows into display-ready text: nested objects
become ``"{N keys}"``, nested arrays ``"[N items]"`` and scalars their text.

Also provides the two node-level helpers a view needs:

- ``node_content``: the editable JSON text shown for a node.
- ``rows_equal``: whether a node must be re-rendered.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from json_graph_patch.graph.nodes import Node, Row, RowKind
from json_graph_patch.serializer import serialize

__all__ = [
    "DisplayRow",
    "RowProjector",
    "node_content",
    "project_value",
    "row_text",
    "rows_equal",
    "rows_for",
]

SWATCH_KEY = "color"


def _entry_row(value: Any, key: str, index: int | None = None) -> Row:
    if isinstance(value, dict):
        return Row(kind=RowKind.OBJECT, key=key, value=len(value), index=index)
    if isinstance(value, list):
        return Row(kind=RowKind.ARRAY, key=key, value=len(value), index=index)
    return Row(kind=RowKind.SCALAR, key=key, value=value, index=index)


def rows_for(value: Any) -> tuple[Row, ...]:
    """Return the rows of the node wrapping ``value``, in document order.

    Objects yield one row per key, arrays one row per item (keyed by the
    index label), and a scalar yields a single keyless row.
    """
    if isinstance(value, dict):
        return tuple(_entry_row(child, key=key) for key, child in value.items())
    if isinstance(value, list):
        return tuple(
            _entry_row(child, key=str(idx), index=idx)
            for idx, child in enumerate(value)
        )
    return (Row(kind=RowKind.SCALAR, value=value),)


def row_text(row: Row) -> str:
    """Render the value part of ``row`` as display text."""
    if row.kind == RowKind.OBJECT:
        return f"{{{row.value} keys}}"
    if row.kind == RowKind.ARRAY:
        return f"[{row.value} items]"
    if isinstance(row.value, str):
        return row.value
    return json.dumps(row.value)


@dataclass(frozen=True, slots=True)
class DisplayRow:
    """A row ready for a display surface.

    Attributes:
        key:    Row key, or None for a leaf node's row.
        text:   Rendered value text.
        kind:   Kind of the underlying row.
        swatch: CSS colour for a colour indicator, set only when the key is
                literally "color" and the value is a string.
    """

    key: str | None
    text: str
    kind: RowKind
    swatch: str | None = None


class RowProjector:
    """Projects node rows into ``DisplayRow`` sequences.

    Pure and deterministic: the output depends only on the rows passed in.
    """

    def project(self, rows: Sequence[Row]) -> list[DisplayRow]:
        return [self._project_row(row) for row in rows]

    def _project_row(self, row: Row) -> DisplayRow:
        swatch = None
        if row.key == SWATCH_KEY and row.kind == RowKind.SCALAR:
            if isinstance(row.value, str):
                swatch = row.value
        return DisplayRow(
            key=row.key, text=row_text(row), kind=row.kind, swatch=swatch
        )


def project_value(value: Any) -> list[DisplayRow]:
    """Project the rows of the node that would wrap ``value``."""
    return RowProjector().project(rows_for(value))


def node_content(rows: Sequence[Row], indent: int = 2) -> str:
    """Return the editable JSON text for a node with ``rows``.

    - No rows: ``"{}"``.
    - A single keyless row (leaf node): the scalar as JSON text.
    - An array of scalars: the array itself.
    - Otherwise: an object of the keyed scalar rows.  Nested containers are
      left out.  Saving the text through ``NodeEditor.save`` shallow-merges
      it into the existing object, or writes the items back into the
      existing array, so they survive the edit.
    """
    if not rows:
        return "{}"
    if len(rows) == 1 and rows[0].key is None:
        return serialize(rows[0].value, indent=indent)
    if all(row.index is not None and row.kind == RowKind.SCALAR for row in rows):
        return serialize([row.value for row in rows], indent=indent)

    content = {
        row.key: row.value
        for row in rows
        if row.kind == RowKind.SCALAR and row.key is not None
    }
    return serialize(content, indent=indent)


def _fingerprint(row: Row) -> tuple[Any, ...]:
    # True == 1 in Python; JSON text keeps them apart.
    return (row.kind, row.key, row.index, json.dumps(row.value))


def rows_equal(previous: Node, current: Node) -> bool:
    """Return True if ``current`` renders identically to ``previous``.

    Two nodes render the same when their rows match value-for-value and
    their widths are equal; anything else needs a re-render.
    """
    if previous.width != current.width or len(previous.rows) != len(current.rows):
        return False
    return all(
        _fingerprint(a) == _fingerprint(b)
        for a, b in zip(previous.rows, current.rows, strict=True)
    )
