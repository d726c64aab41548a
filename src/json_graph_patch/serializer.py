"""Canonical JSON text for working documents, and the strict parser it inverts.

``serialize`` emits stably indented text whose object key order is the
dict's insertion order: untouched keys keep their original position and new
keys follow them.  ``parse`` accepts strict JSON only, so that
``parse(serialize(doc)) == doc`` for every document the patcher produces.
"""

from __future__ import annotations

import json
from typing import Any

from json_graph_patch.errors import DocumentParseError

__all__ = ["JsonValue", "parse", "serialize"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class _NonFiniteConstant(ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name


def _reject_constant(name: str) -> Any:
    raise _NonFiniteConstant(name)


def parse(text: str) -> Any:
    """Parse ``text`` as a strict JSON document.

    ``NaN``, ``Infinity`` and ``-Infinity`` are rejected: they are not JSON
    and cannot be serialized back.

    Raises:
        DocumentParseError: If ``text`` is not valid JSON.  ``line`` and
            ``column`` are 1-based; both are 0 for a rejected non-finite
            constant, whose position the decoder does not report.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise DocumentParseError(str(exc), line=exc.lineno, column=exc.colno) from exc
    except _NonFiniteConstant as exc:
        msg = f"Non-finite number {exc.name!r} is not valid JSON"
        raise DocumentParseError(msg, line=0, column=0) from exc


def serialize(document: Any, indent: int = 2) -> str:
    """Return canonical JSON text for ``document``.

    Args:
        document: Any JSON value (dict, list, str, int, float, bool, None).
        indent:   Spaces per nesting level.  Defaults to 2.

    Raises:
        TypeError:  If the document holds a non-JSON value.
        ValueError: If the document holds a non-finite float.
    """
    return json.dumps(document, indent=indent, ensure_ascii=False, allow_nan=False)
