"""Exception types raised by the parsing layers.

The edit pipeline itself does not raise for bad input text: ``NodeEditor``
catches ``DocumentParseError`` and returns a typed ``ParseError`` result.
"""

from __future__ import annotations

from typing import Any

__all__ = ["DocumentParseError", "JsonGraphPatchError", "PathSyntaxError"]


class JsonGraphPatchError(Exception):
    """Base exception for json-graph-patch."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DocumentParseError(JsonGraphPatchError, ValueError):
    """Text is not a valid JSON document.

    ``line`` and ``column`` are 1-based and point at the offending character.
    """

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(message, {"line": line, "column": column})
        self.line = line
        self.column = column


class PathSyntaxError(JsonGraphPatchError, ValueError):
    """A display string could not be parsed back into a path."""
