"""Tests for EditorConfig defaults, immutability and validation."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_graph_patch.config import EditorConfig


class TestDefaults:
    def test_default_values(self) -> None:
        config = EditorConfig()
        assert config.indent == 2
        assert config.strict_document is False
        assert config.row_height == 24.0
        assert config.char_width == 8.0
        assert config.node_padding == 20.0
        assert config.min_node_width == 80.0
        assert config.path_cache_size == 1024

    def test_frozen(self) -> None:
        config = EditorConfig()
        with pytest.raises(FrozenInstanceError):
            config.indent = 4  # type: ignore[misc]

    def test_equal_configs_compare_equal(self) -> None:
        assert EditorConfig(indent=4) == EditorConfig(indent=4)


class TestValidation:
    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("indent", -1),
            ("row_height", 0.0),
            ("char_width", -1.0),
            ("node_padding", -0.5),
            ("min_node_width", 0.0),
            ("path_cache_size", 0),
        ],
    )
    def test_invalid_values_raise(self, field: str, value: float) -> None:
        with pytest.raises(ValueError, match=field):
            EditorConfig(**{field: value})  # type: ignore[arg-type]

    def test_zero_indent_allowed(self) -> None:
        assert EditorConfig(indent=0).indent == 0

    def test_zero_padding_allowed(self) -> None:
        assert EditorConfig(node_padding=0.0).node_padding == 0.0
