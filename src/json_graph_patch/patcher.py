"""TreePatcher: write a value into a JSON document at a structural path.

The patcher works on a deep copy of the document, so the caller's value is
never observed half-patched.

Walking the path (every segment but the last):

- Inside an object a segment names the key ``str(segment)``.  A missing key
  is created as an empty object.
- Inside an array a segment must name an existing element: an int, or a
  canonical index string such as ``"2"``.  Arrays are not extended here.
- A scalar or null where a container is needed is replaced by an empty
  object and the walk continues through it.  The document root is treated
  the same way.

At the terminal segment, an object written over an existing object is
shallow-merged (new keys win); anything else replaces the old value.  An
index at or past the end of an array pads it with nulls up to that index.

Arrays are never replaced to make a path fit.  When a path cannot be placed
(a key that is not an index on an array, or an index past the end before
the last segment), the edit is dropped: the result carries the unchanged
document and ``path=None``.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from json_graph_patch.path import (
    Path,
    PathSegment,
    as_path,
    index_of,
    to_display_string,
)

__all__ = ["PatchResult", "TreePatcher", "apply", "resolve"]

logger = logging.getLogger(__name__)

DEFAULT_MAX_ARRAY_LENGTH = 10_000


def _is_container(value: Any) -> bool:
    return isinstance(value, dict | list)


@dataclass(frozen=True, slots=True)
class PatchResult:
    """Outcome of one ``TreePatcher.patch`` call.

    Attributes:
        document: The patched document, or an unchanged copy when the edit
            was dropped.
        path: The location written, with each segment in the form the
            document uses there (object keys as ``str``, array positions as
            ``int``).  None when the edit was dropped.
    """

    document: Any
    path: Path | None

    @property
    def applied(self) -> bool:
        return self.path is not None


class TreePatcher:
    """Applies document-shaped edits at structural paths.

    Stateless; one instance can be shared freely.

    Args:
        max_array_length: Largest array a terminal write may pad up to.
            Writes past it are dropped.

    Example::

        patcher = TreePatcher()
        patcher.apply({"a": {"x": 1, "y": 2}}, ["a"], {"y": 3, "z": 4})
        # {"a": {"x": 1, "y": 3, "z": 4}}
        patcher.patch({"a": {}}, ["a", 0], 5).path
        # ("a", "0")
    """

    def __init__(self, max_array_length: int = DEFAULT_MAX_ARRAY_LENGTH) -> None:
        if max_array_length < 1:
            msg = f"max_array_length must be >= 1, got {max_array_length}"
            raise ValueError(msg)
        self.max_array_length = max_array_length

    def apply(self, document: Any, path: Iterable[Any], new_value: Any) -> Any:
        """Return a copy of ``document`` with ``new_value`` written at ``path``.

        Shorthand for ``patch(...).document``.
        """
        return self.patch(document, path, new_value).document

    def patch(
        self, document: Any, path: Iterable[Any], new_value: Any
    ) -> PatchResult:
        """Write ``new_value`` at ``path`` in a copy of ``document``.

        Args:
            document:  Current JSON value.  Not modified.
            path:      Segments from the root; empty means replace the document.
            new_value: JSON value to write.

        Returns:
            A ``PatchResult``.  For an empty path its document is ``new_value``.

        Raises:
            TypeError, ValueError: Only for malformed segments (see ``as_path``);
                never for a path that does not fit the document's shape.
        """
        segments = as_path(path)
        value = copy.deepcopy(new_value)
        if not segments:
            return PatchResult(document=value, path=())

        root = copy.deepcopy(document)
        if not _is_container(root):
            logger.debug("coercing root (%s) to an object", type(root).__name__)
            root = {}

        parent = root
        written: list[PathSegment] = []
        for seg in segments[:-1]:
            slot = self._slot(parent, seg, terminal=False)
            if slot is None:
                return self._dropped(document, segments, written)
            written.append(slot)
            parent = self._descend(parent, slot, written)

        slot = self._slot(parent, segments[-1], terminal=True)
        if slot is None:
            return self._dropped(document, segments, written)
        written.append(slot)
        self._write(parent, slot, value)
        return PatchResult(document=root, path=tuple(written))

    def _slot(
        self, parent: Any, seg: PathSegment, terminal: bool
    ) -> PathSegment | None:
        """Return the key or index ``seg`` names in ``parent``, or None."""
        if isinstance(parent, dict):
            return str(seg)
        idx = index_of(seg)
        if idx is None:
            return None
        if idx < len(parent):
            return idx
        if terminal and idx < self.max_array_length:
            return idx
        return None

    @staticmethod
    def _descend(parent: Any, slot: PathSegment, written: list[PathSegment]) -> Any:
        if isinstance(parent, dict) and slot not in parent:
            parent[slot] = {}
            return parent[slot]

        child = parent[slot]
        if not _is_container(child):
            logger.debug(
                "coercing %s (%s) to an object",
                to_display_string(written),
                type(child).__name__,
            )
            child = {}
            parent[slot] = child
        return child

    @staticmethod
    def _write(parent: Any, slot: PathSegment, value: Any) -> None:
        if isinstance(parent, dict):
            existing = parent.get(slot)
        else:
            assert isinstance(slot, int)
            if slot >= len(parent):
                parent.extend([None] * (slot - len(parent) + 1))
            existing = parent[slot]

        if isinstance(value, dict) and isinstance(existing, dict):
            value = {**existing, **value}
        parent[slot] = value

    @staticmethod
    def _dropped(
        document: Any, segments: Path, written: list[PathSegment]
    ) -> PatchResult:
        logger.warning(
            "dropping edit at %s; the array at %s has no element %r",
            to_display_string(segments),
            to_display_string(written),
            segments[len(written)],
        )
        return PatchResult(document=copy.deepcopy(document), path=None)


_default_patcher = TreePatcher()


def apply(document: Any, path: Iterable[Any], new_value: Any) -> Any:
    """Patch ``document`` at ``path``; see ``TreePatcher.apply``."""
    return _default_patcher.apply(document, path, new_value)


def resolve(document: Any, path: Iterable[Any]) -> Any:
    """Return the value stored at ``path`` in ``document``.

    Segments are read the way ``TreePatcher`` writes them: object keys by
    ``str(segment)``, array elements by index.

    Raises:
        LookupError: If ``document`` has nothing at ``path``.
    """
    current = document
    for seg in as_path(path):
        if isinstance(current, dict):
            current = current[str(seg)]
            continue
        idx = index_of(seg) if isinstance(current, list) else None
        if idx is None or idx >= len(current):
            msg = f"nothing at {to_display_string(path)}"
            raise LookupError(msg)
        current = current[idx]
    return current
