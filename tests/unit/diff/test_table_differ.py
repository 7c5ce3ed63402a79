"""Unit tests for the table differ."""

import pytest

from markdiff.diff.blocks import diff_blocks
from markdiff.diff.results import Added, Modified, TableDiff, TypedDiff
from markdiff.diff.tables import diff_table, row_similarity
from markdiff.exceptions import MalformedTokenError
from markdiff.tokens import Token, TokenKind, heading, paragraph, table


@pytest.mark.unit
class TestDiffTable:
    """Tests for diff_table function."""

    def test_row_inserted_and_removed(self, options):
        """Test an unrelated row replacing another is add plus delete."""
        old = table(["H"], [["r1"], ["r2"], ["r3"]])
        result = diff_table(old, table(["H"], [["r1"], ["new"], ["r3"]]), options)
        assert isinstance(result, TableDiff)
        assert result.changes == {1: Added()}
        assert len(result.deletions) == 1
        assert result.deletions[0].token.cells == ("r2",)
        assert result.deletions[0].before_idx == 1
        assert result.header is None

    def test_row_modified(self, options):
        """Test an edited row is a modification."""
        old = table(["Name", "Qty"], [["apple", "1"], ["pear", "2"]])
        result = diff_table(old, table(["Name", "Qty"], [["apple", "1"], ["pear", "3"]]), options)
        assert result.changes == {1: Modified(old.rows[1])}
        assert result.deletions == []

    def test_header_modified(self, options):
        """Test a header change is reported separately from body rows."""
        old = table(["A", "B"], [["1", "2"]])
        result = diff_table(old, table(["A", "C"], [["1", "2"]]), options)
        assert result.changes == {}
        assert result.header == Modified(old.header)
        assert result.has_changes
        assert result.stats().modified == 1

    def test_header_added(self, options):
        """Test a header on a previously header-less table."""
        row = Token(TokenKind.TABLE_ROW, "| 1 |", children=(Token(TokenKind.TABLE_CELL, "1"),))
        old = Token(TokenKind.TABLE, "| 1 |", children=(row,))
        result = diff_table(old, table(["A"], [["1"]]), options)
        assert result.header == Added()
        assert result.changes == {}

    def test_not_a_table(self, options):
        """Test non-table tokens are rejected."""
        with pytest.raises(MalformedTokenError):
            diff_table(paragraph("x"), table(["A"], []), options)

    def test_one_cell_edited_keeps_old_row(self, options):
        """Test a row with one rewritten cell out of two keeps its old cells."""
        old = table(["A", "B"], [["a1", "b1"], ["a2", "b2"]])
        result = diff_table(old, table(["A", "B"], [["a1-modified", "b1"], ["a2", "b2"]]), options)
        assert result.changes == {0: Modified(old.rows[0])}
        assert result.changes[0].old_token.cells == ("a1", "b1")
        assert result.deletions == []


@pytest.mark.unit
class TestRowSimilarity:
    """Tests for row_similarity function."""

    def test_mean_of_cells(self, options):
        """Test the score is the mean of the per-column scores."""
        old = table(["A", "B"], [["x", "same"]]).rows[0]
        new = table(["A", "B"], [["y", "same"]]).rows[0]
        assert row_similarity(old, new, options) == pytest.approx(0.5)

    def test_identical(self, options):
        """Test identical rows score 1.0."""
        row = table(["A", "B"], [["1", "2"]]).rows[0]
        assert row_similarity(row, row, options) == 1.0

    def test_extra_column(self, options):
        """Test a column missing on one side compares against an empty cell."""
        old = table(["A"], [["1"]]).rows[0]
        new = table(["A", "B"], [["1", "2"]]).rows[0]
        assert row_similarity(old, new, options) == pytest.approx(0.5)


@pytest.mark.unit
class TestNoCrossTablePairing:
    """Rows are only compared within one pair of tables."""

    def test_sibling_tables(self, options):
        """Test each table reports old values from itself only."""
        old = [
            heading("Title"),
            table(["A", "B"], [["a1", "b1"], ["a2", "b2"]]),
            paragraph("Separator"),
            table(["C", "D"], [["c1", "d1"], ["c2", "d2"]]),
        ]
        new = [
            heading("Title"),
            table(["A", "B"], [["a1-modified", "b1"], ["a2", "b2"]]),
            paragraph("Separator"),
            table(["C", "D"], [["c1", "d1-modified"], ["c2", "d2"]]),
        ]
        result = diff_blocks(old, new, options)

        assert sorted(result.changes) == [1, 3]
        first, second = result.changes[1], result.changes[3]
        assert isinstance(first, TypedDiff) and isinstance(second, TypedDiff)
        assert first.diff.changes[0].old_token.cells == ("a1", "b1")
        assert second.diff.changes[0].old_token.cells == ("c1", "d1")
        assert first.diff.deletions == [] and second.diff.deletions == []
        assert result.deletions == []
