"""Structural paths into JSON documents and their display strings.

A path is a tuple of segments: ``str`` for object keys, non-negative ``int``
for array indices.  The empty tuple addresses the document root.

Display strings are bracketed accessor expressions rooted at ``$``::

    ()                         -> $
    ("customer", 2, "name")    -> $["customer"][2]["name"]

String segments are rendered as JSON string literals so that any key,
including ones containing quotes or brackets, can be parsed back.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterable, Sequence
from typing import Any

from cachetools import LRUCache

from json_graph_patch.errors import PathSyntaxError

__all__ = [
    "Path",
    "PathCodec",
    "PathSegment",
    "as_path",
    "equals",
    "from_display_string",
    "index_of",
    "to_display_string",
]

PathSegment = str | int
Path = tuple[PathSegment, ...]

ROOT = "$"

_INDEX = re.compile(r"0|[1-9][0-9]*")
_decoder = json.JSONDecoder()


def as_path(segments: Iterable[Any]) -> Path:
    """Validate ``segments`` and return them as a ``Path`` tuple.

    Raises:
        TypeError: If ``segments`` is a bare string, or a segment is not a
            ``str`` or ``int`` (``bool`` is rejected even though it
            subclasses ``int``).
        ValueError: If an index segment is negative.
    """
    if isinstance(segments, str | bytes):
        msg = f"path must be a sequence of segments, not {type(segments).__name__}"
        raise TypeError(msg)
    path = tuple(segments)
    for seg in path:
        if isinstance(seg, bool) or not isinstance(seg, str | int):
            msg = f"path segment must be str or int, got {type(seg).__name__}"
            raise TypeError(msg)
        if isinstance(seg, int) and seg < 0:
            msg = f"array index segment must be >= 0, got {seg}"
            raise ValueError(msg)
    return path


def index_of(seg: PathSegment) -> int | None:
    """Return the array index ``seg`` names, or None if it names none.

    Ints are indices as they are.  A string is an index only when it is the
    canonical decimal form (``"0"``, ``"12"``; not ``"01"`` or ``"-1"``).
    """
    if isinstance(seg, int):
        return seg
    if _INDEX.fullmatch(seg):
        return int(seg)
    return None


def _segments_equal(a: Any, b: Any) -> bool:
    # "2" and 2 address different locations.
    if isinstance(a, str) or isinstance(b, str):
        return isinstance(a, str) and isinstance(b, str) and a == b
    return bool(a == b)


class PathCodec:
    """Converts paths to and from display strings and compares them.

    Rendering is memoised per instance in an ``LRUCache``; two codecs never
    share cache state.

    Args:
        cache_size: Maximum number of rendered paths kept in memory.
    """

    def __init__(self, cache_size: int = 1024) -> None:
        self._cache: LRUCache[Path, str] = LRUCache(maxsize=cache_size)

    @property
    def cache_size(self) -> int:
        """The maximum number of display strings this codec remembers."""
        return int(self._cache.maxsize)

    def to_display_string(self, path: Iterable[Any]) -> str:
        """Render ``path`` as ``$[...]`` accessor text."""
        key = as_path(path)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        parts = [ROOT]
        for seg in key:
            if isinstance(seg, int):
                parts.append(f"[{seg}]")
            else:
                parts.append(f"[{json.dumps(seg, ensure_ascii=False)}]")
        text = "".join(parts)
        self._cache[key] = text
        return text

    def from_display_string(self, text: str) -> Path:
        """Parse ``$[...]`` accessor text back into a path.

        Raises:
            PathSyntaxError: If ``text`` is not a well-formed display string.
        """
        if not text.startswith(ROOT):
            msg = f"path must start with {ROOT!r}: {text!r}"
            raise PathSyntaxError(msg, {"position": 0})

        segments: list[PathSegment] = []
        pos = len(ROOT)
        while pos < len(text):
            if text[pos] != "[":
                msg = f"expected '[' at position {pos} in {text!r}"
                raise PathSyntaxError(msg, {"position": pos})
            pos += 1

            if text.startswith('"', pos):
                try:
                    value, pos = _decoder.raw_decode(text, pos)
                except json.JSONDecodeError as exc:
                    msg = f"invalid key literal at position {pos} in {text!r}"
                    raise PathSyntaxError(msg, {"position": pos}) from exc
                segments.append(value)
            else:
                match = _INDEX.match(text, pos)
                if match is None:
                    msg = f"expected key or index at position {pos} in {text!r}"
                    raise PathSyntaxError(msg, {"position": pos})
                segments.append(int(match.group()))
                pos = match.end()

            if not text.startswith("]", pos):
                msg = f"expected ']' at position {pos} in {text!r}"
                raise PathSyntaxError(msg, {"position": pos})
            pos += 1

        return tuple(segments)

    @staticmethod
    def equals(a: Sequence[Any], b: Sequence[Any]) -> bool:
        """Return True if both paths have the same segments in the same order.

        Index segments compare numerically and key segments compare by exact
        text; an index never equals a key, even ``2`` and ``"2"``.
        """
        if len(a) != len(b):
            return False
        return all(_segments_equal(x, y) for x, y in zip(a, b, strict=True))


_default_codec = PathCodec()


def to_display_string(path: Iterable[Any]) -> str:
    """Render ``path`` with the shared module-level codec."""
    return _default_codec.to_display_string(path)


def from_display_string(text: str) -> Path:
    """Parse a display string with the shared module-level codec."""
    return _default_codec.from_display_string(text)


def equals(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Structural path equality; see ``PathCodec.equals``."""
    return PathCodec.equals(a, b)
