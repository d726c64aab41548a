"""Typed outcomes of the edit pipeline.

``NodeEditor`` never raises for bad JSON text.  It returns either
``EditApplied`` or ``ParseError``; callers branch on the type::

    match editor.save(node.path, text):
        case EditApplied(node=selected):
            ...
        case ParseError(message=message):
            show_error(message)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from json_graph_patch.errors import DocumentParseError
    from json_graph_patch.graph.nodes import Node
    from json_graph_patch.path import Path

__all__ = ["EditApplied", "EditResult", "ParseError", "ParseSource"]


class ParseSource(StrEnum):
    """Which text failed to parse.

    - EDIT     -> "edit"     : the text the user submitted for a node
    - DOCUMENT -> "document" : the store's current document text
    """

    EDIT = auto()
    DOCUMENT = auto()


@dataclass(frozen=True, slots=True)
class ParseError:
    """An edit rejected because some text was not valid JSON.

    Attributes:
        message: Human-readable decoder message, suitable for display.
        source:  Which text failed (see ParseSource).
        line:    1-based line of the failure; 0 when unknown.
        column:  1-based column of the failure; 0 when unknown.
    """

    message: str
    source: ParseSource
    line: int = 0
    column: int = 0

    @property
    def ok(self) -> bool:
        return False

    @classmethod
    def from_exception(
        cls, exc: DocumentParseError, source: ParseSource
    ) -> ParseError:
        return cls(message=exc.message, source=source, line=exc.line, column=exc.column)


@dataclass(frozen=True, slots=True)
class EditApplied:
    """A successful edit.

    Attributes:
        document: The patched document, as published.
        text: Its canonical serialization, as handed to the document store.
        node: The node now at the edited path, or None if the rebuilt graph
            has no node there.  The graph store's selection was set to it.
        recovered_from: The parse failure of the previous document text when
            the edit was applied to an empty-object fallback; None otherwise.
        path: The location written, in the document's own segment types
            (an index written into an object becomes its key text).  None
            when the path could not be placed; nothing was published then
            and ``text`` is the unchanged store text.
    """

    document: Any
    text: str
    node: Node | None = None
    recovered_from: ParseError | None = None
    path: Path | None = None

    @property
    def ok(self) -> bool:
        return True


EditResult = EditApplied | ParseError
