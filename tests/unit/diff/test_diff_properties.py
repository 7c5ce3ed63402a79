"""Property-based tests for the diff engine.

This test module uses Hypothesis to generate random token documents and
checks the properties every diff must satisfy regardless of content.

Test Coverage:
- Idempotence: diffing a document against itself is empty
- Determinism: repeated diffs are structurally identical
- Index bounds of changes and deletion anchors
- Alignment accounting: every element is matched, paired, added or deleted
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from markdiff.api import diff
from markdiff.diff.aligner import align
from markdiff.options import DiffOptions
from markdiff.similarity import text_similarity
from markdiff.tokens import blockquote, code_block, heading, list_block, paragraph, table

words = st.text(alphabet="abcde ", min_size=1, max_size=12)

blocks = st.one_of(
    words.map(paragraph),
    st.builds(heading, words, st.integers(min_value=1, max_value=3)),
    st.lists(words, min_size=1, max_size=4).map(list_block),
    st.lists(words, min_size=0, max_size=4).map(lambda lines: code_block("\n".join(lines))),
    st.builds(
        table,
        st.lists(words, min_size=1, max_size=2),
        st.lists(st.lists(words, min_size=1, max_size=2), max_size=3),
    ),
    st.lists(words.map(paragraph), min_size=1, max_size=2).map(lambda inner: blockquote(*inner)),
)

documents = st.lists(blocks, max_size=6)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestDiffProperties:
    """Property-based tests for diff invariants."""

    @given(documents)
    def test_idempotence(self, doc):
        """Test diffing a document against itself reports nothing."""
        result = diff(doc, doc)
        assert result.changes == {}
        assert result.deletions == []

    @given(documents, documents)
    def test_determinism(self, old, new):
        """Test repeated diffs are identical."""
        assert diff(old, new) == diff(old, new)

    @given(documents, documents)
    def test_index_bounds(self, old, new):
        """Test changes index the new document and deletions anchor inside it."""
        result = diff(old, new)
        assert not result.coarse
        assert all(0 <= index < len(new) for index in result.changes)
        assert list(result.changes) == sorted(result.changes)
        assert all(0 <= deletion.before_idx <= len(new) for deletion in result.deletions)

    @given(documents, documents)
    def test_differs_means_changes(self, old, new):
        """Test differing documents always report something."""
        result = diff(old, new)
        assert result.has_changes == ([block.raw for block in old] != [block.raw for block in new])


@pytest.mark.unit
@pytest.mark.fuzzing
class TestAlignmentProperties:
    """Property-based tests for the sequence aligner."""

    @given(st.lists(words, max_size=8), st.lists(words, max_size=8))
    def test_every_element_accounted_for(self, old, new):
        """Test each element is anchored, paired, added or deleted exactly once."""
        alignment = align(
            old, new, key=lambda value: value, similarity=text_similarity, threshold=0.5, options=DiffOptions()
        )
        old_seen = [o for o, _ in alignment.anchors + alignment.pairs + alignment.deleted]
        new_seen = [n for _, n in alignment.anchors] + [n for _, n in alignment.pairs] + alignment.added
        assert sorted(old_seen) == list(range(len(old)))
        assert sorted(new_seen) == list(range(len(new)))

    @given(st.lists(words, max_size=8), st.lists(words, max_size=8))
    def test_matches_preserve_order(self, old, new):
        """Test anchors and pairs together never cross."""
        alignment = align(
            old, new, key=lambda value: value, similarity=text_similarity, threshold=0.5, options=DiffOptions()
        )
        matched = sorted(alignment.anchors + alignment.pairs)
        assert [n for _, n in matched] == sorted(n for _, n in matched)
