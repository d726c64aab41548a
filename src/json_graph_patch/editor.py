"""NodeEditor: orchestrator for editing one node and re-synchronising the graph.

This is the wiring layer between the pure pieces (parse, TreePatcher,
serialize, graph lookup) and the two stores the view owns.

Flow of ``apply_edit(path, value)``:

1. Read the current document text and parse it into a working copy.  If it
   does not parse, either reject the edit (``strict_document``) or continue
   from an empty object and report the failure on the result.
2. Patch the working copy at ``path``.
3. Serialize and publish the text; the document store rebuilds the graph.
4. Find the node at the path actually written in the rebuilt node set and
   select it.  When the rebuilt graph has no node there the selection is
   left alone.  A path the patcher cannot place publishes nothing.

Nothing is published until step 3, so a rejected edit leaves both stores
untouched.  Edits are synchronous; the next one starts only after this one
has returned.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from json_graph_patch.config import EditorConfig
from json_graph_patch.errors import DocumentParseError
from json_graph_patch.graph.index import find_by_path
from json_graph_patch.graph.nodes import Node
from json_graph_patch.graph.rows import node_content
from json_graph_patch.patcher import TreePatcher, resolve
from json_graph_patch.path import Path, PathCodec, as_path, index_of
from json_graph_patch.protocols import DocumentStore, GraphStore
from json_graph_patch.result import EditApplied, EditResult, ParseError, ParseSource
from json_graph_patch.serializer import parse, serialize

__all__ = ["NodeEditor"]

logger = logging.getLogger(__name__)


def _restore_array(document: Any, path: Path, value: Any) -> Any:
    """Read an index-keyed object saved over an array back as that array.

    ``node_content`` shows an array holding containers as an object of its
    scalar items keyed by index.  Saving that object writes those items
    into a copy of the array; the other items are kept.
    """
    if not isinstance(value, dict):
        return value
    try:
        current = resolve(document, path)
    except LookupError:
        return value
    if not isinstance(current, list):
        return value

    items = list(current)
    for key, item in value.items():
        idx = index_of(key)
        if idx is None or idx >= len(items):
            return value
        items[idx] = item
    return items


class NodeEditor:
    """Applies node edits to a document store and re-selects the edited node.

    Stores are injected; the editor holds no document state of its own, so
    one instance can serve any number of edits.

    Example::

        documents = InMemoryDocumentStore('{"a": {"x": 1}}')
        graphs = InMemoryGraphStore()
        graphs.connect(documents)

        editor = NodeEditor(documents, graphs)
        result = editor.save(("a",), '{"y": 2}')
        result.document       # {"a": {"x": 1, "y": 2}}
        graphs.selected.path  # ("a",)
    """

    def __init__(
        self,
        document_store: DocumentStore,
        graph_store: GraphStore,
        config: EditorConfig | None = None,
        patcher: TreePatcher | None = None,
    ) -> None:
        self._documents = document_store
        self._graphs = graph_store
        self._config = config if config is not None else EditorConfig()
        self._patcher = patcher if patcher is not None else TreePatcher()
        self._codec = PathCodec(cache_size=self._config.path_cache_size)

    @property
    def config(self) -> EditorConfig:
        return self._config

    def path_text(self, path: Iterable[Any]) -> str:
        """Return the $[...] accessor text shown for ``path``."""
        return self._codec.to_display_string(path)

    def content_for(self, node: Node) -> str:
        """Return the editable JSON text for ``node``."""
        return node_content(node.rows, indent=self._config.indent)

    def save(self, path: Iterable[Any], edited_text: str) -> EditResult:
        """Parse the user's ``edited_text`` and apply it at ``path``.

        The text is read the way ``content_for`` writes it, so saving a
        node's content unchanged leaves the document as it was.

        Returns:
            ``ParseError`` with source ``edit`` if the text is not valid JSON
            (no store is touched), otherwise as ``apply_edit``.
        """
        segments = as_path(path)
        try:
            new_value = parse(edited_text)
        except DocumentParseError as exc:
            logger.debug("rejected edit at %s: %s", self.path_text(segments), exc)
            return ParseError.from_exception(exc, ParseSource.EDIT)
        return self._apply(segments, new_value, from_content=True)

    def apply_edit(self, path: Iterable[Any], new_value: Any) -> EditResult:
        """Write ``new_value`` at ``path`` and publish the whole document.

        Raises:
            TypeError, ValueError: If ``path`` has malformed segments or
                ``new_value`` is not serializable as JSON.  Raised before any
                store is touched.
        """
        return self._apply(as_path(path), new_value, from_content=False)

    def _apply(self, segments: Path, new_value: Any, from_content: bool) -> EditResult:
        current_text = self._documents.get_current_text()
        recovered_from: ParseError | None = None

        try:
            document = parse(current_text)
        except DocumentParseError as exc:
            error = ParseError.from_exception(exc, ParseSource.DOCUMENT)
            if self._config.strict_document:
                logger.debug("rejected edit; current document is not valid JSON")
                return error
            logger.warning(
                "current document is not valid JSON (%s); editing an empty object",
                exc.message,
            )
            document = {}
            recovered_from = error

        if from_content:
            new_value = _restore_array(document, segments, new_value)

        outcome = self._patcher.patch(document, segments, new_value)
        if outcome.path is None:
            return EditApplied(
                document=outcome.document,
                text=current_text,
                recovered_from=recovered_from,
            )

        text = serialize(outcome.document, indent=self._config.indent)
        self._documents.set_text(text)

        node = find_by_path(self._graphs.nodes, outcome.path)
        if node is None:
            logger.debug(
                "no node at %s after rebuild; selection unchanged",
                self.path_text(outcome.path),
            )
        else:
            self._graphs.set_selected(node)

        return EditApplied(
            document=outcome.document,
            text=text,
            node=node,
            recovered_from=recovered_from,
            path=outcome.path,
        )
