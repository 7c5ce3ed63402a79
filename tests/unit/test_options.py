"""Unit tests for option dataclasses."""

import dataclasses

import pytest

from markdiff.constants import DEFAULT_MAX_ALIGNMENT_CELLS
from markdiff.options import DiffOptions, MarkdownTokenizerOptions


@pytest.mark.unit
class TestDiffOptions:
    """Tests for DiffOptions."""

    def test_defaults(self):
        """Test default values."""
        options = DiffOptions()
        assert options.max_alignment_cells == DEFAULT_MAX_ALIGNMENT_CELLS == 250_000
        assert options.block_similarity_threshold == 0.0
        assert options.item_similarity_threshold == 0.5

    def test_create_updated(self):
        """Test create_updated returns a modified copy."""
        options = DiffOptions()
        updated = options.create_updated(max_alignment_cells=10)
        assert updated.max_alignment_cells == 10
        assert options.max_alignment_cells == DEFAULT_MAX_ALIGNMENT_CELLS

    def test_frozen(self):
        """Test options cannot be mutated."""
        options = DiffOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.max_alignment_cells = 1  # type: ignore[misc]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_alignment_cells": 0},
            {"max_pairing_candidates": -1},
            {"max_similarity_cells": 0},
            {"item_similarity_threshold": 1.5},
            {"line_similarity_threshold": -0.1},
        ],
    )
    def test_invalid_values(self, kwargs):
        """Test out-of-range values are rejected."""
        with pytest.raises(ValueError):
            DiffOptions(**kwargs)


@pytest.mark.unit
class TestMarkdownTokenizerOptions:
    """Tests for MarkdownTokenizerOptions."""

    def test_defaults(self):
        """Test every GFM extension is enabled by default."""
        options = MarkdownTokenizerOptions()
        assert options.parse_tables
        assert options.parse_strikethrough
        assert options.parse_task_lists

    def test_create_updated(self):
        """Test create_updated toggles one flag."""
        options = MarkdownTokenizerOptions().create_updated(parse_tables=False)
        assert not options.parse_tables
        assert options.parse_task_lists
