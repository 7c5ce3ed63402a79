"""Unit tests for the blockquote differ."""

import pytest

from markdiff.diff.blockquote import diff_blockquote
from markdiff.diff.blocks import diff_blocks
from markdiff.diff.results import Added, BlockquoteDiff, Deletion, Modified, TypedDiff
from markdiff.exceptions import MalformedTokenError
from markdiff.tokens import blockquote, list_block, paragraph, table


@pytest.mark.unit
class TestDiffBlockquote:
    """Tests for diff_blockquote function."""

    def test_inner_paragraph_modified(self, options):
        """Test inner blocks are diffed like a document."""
        result = diff_blockquote(blockquote("Hello", "World"), blockquote("Hello", "Earth"), options)
        assert isinstance(result, BlockquoteDiff)
        assert result.changes == {1: Modified(paragraph("World"))}

    def test_inner_block_added(self, options):
        """Test a paragraph added inside a quote."""
        result = diff_blockquote(blockquote("Hello"), blockquote("Hello", "More"), options)
        assert result.changes == {1: Added()}

    def test_inner_block_removed(self, options):
        """Test a paragraph removed inside a quote."""
        result = diff_blockquote(blockquote("A", "B"), blockquote("A"), options)
        assert result.deletions == [Deletion(paragraph("B"), 1)]

    def test_inner_list(self, options):
        """Test a list inside a quote gets a typed diff."""
        result = diff_blockquote(blockquote(list_block(["a"])), blockquote(list_block(["a", "b"])), options)
        entry = result.changes[0]
        assert isinstance(entry, TypedDiff)
        assert entry.diff.changes == {1: Added()}

    def test_inner_table(self, options):
        """Test a table inside a quote gets a row-level diff."""
        old = blockquote(table(["A"], [["1"]]))
        new = blockquote(table(["A"], [["1"], ["2"]]))
        entry = diff_blockquote(old, new, options).changes[0]
        assert isinstance(entry, TypedDiff)
        assert entry.change_type == "table"
        assert entry.diff.changes == {1: Added()}

    def test_not_a_blockquote(self, options):
        """Test non-blockquote tokens are rejected."""
        with pytest.raises(MalformedTokenError):
            diff_blockquote(paragraph("x"), blockquote("x"), options)

    def test_block_level_dispatch(self, options):
        """Test the block differ hands quotes to the blockquote differ."""
        old = blockquote("Hello", "World")
        result = diff_blocks([old], [blockquote("Hello", "Earth")], options)
        entry = result.changes[0]
        assert isinstance(entry, TypedDiff)
        assert entry.change_type == "blockquote"
        assert entry.old_token == old
