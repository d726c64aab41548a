"""EditorConfig: immutable settings for the edit pipeline and graph sizing.

EditorConfig is a frozen dataclass validated on construction, so an invalid
configuration fails loudly before any document is touched.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["EditorConfig"]


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Immutable configuration for ``NodeEditor`` and ``GraphBuilder``.

    Attributes:
        indent: Indentation width used when serializing the document (>= 0).
        strict_document: When True, an unparsable current document rejects
            the edit with a ``ParseError``.  When False (default), the edit
            is applied to an empty-object fallback document and the parse
            failure is reported on ``EditApplied.recovered_from``.
        row_height: Height of one display row, in pixels (> 0).
        char_width: Approximate width of one rendered character (> 0).
        node_padding: Horizontal padding added to each node width (>= 0).
        min_node_width: Lower bound for computed node widths (> 0).
        path_cache_size: Capacity of the display-string LRU cache (>= 1).
    """

    indent: int = 2
    strict_document: bool = False
    row_height: float = 24.0
    char_width: float = 8.0
    node_padding: float = 20.0
    min_node_width: float = 80.0
    path_cache_size: int = 1024

    def __post_init__(self) -> None:
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)
        if self.row_height <= 0.0:
            msg = f"row_height must be > 0, got {self.row_height}"
            raise ValueError(msg)
        if self.char_width <= 0.0:
            msg = f"char_width must be > 0, got {self.char_width}"
            raise ValueError(msg)
        if self.node_padding < 0.0:
            msg = f"node_padding must be >= 0, got {self.node_padding}"
            raise ValueError(msg)
        if self.min_node_width <= 0.0:
            msg = f"min_node_width must be > 0, got {self.min_node_width}"
            raise ValueError(msg)
        if self.path_cache_size < 1:
            msg = f"path_cache_size must be >= 1, got {self.path_cache_size}"
            raise ValueError(msg)
