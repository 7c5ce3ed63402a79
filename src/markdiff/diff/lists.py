#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdiff/diff/lists.py
"""List differ.

Items are anchored on their full raw text (nested lists included) and the
leftovers are paired on their head text with inline emphasis stripped. A
paired item whose head text is unchanged but whose nested list differs is
reported as :class:`NestedList` and its sub-list is diffed recursively, so
that editing a child item never shows up as a replaced parent. Any other
paired item was rewritten and is reported as an added item with the old
item deleted right before it.
"""

from __future__ import annotations

from functools import partial
from typing import Sequence

from markdiff.diff.aligner import diff_sequences
from markdiff.diff.results import ChangeEntry, ListDiff, Modified, NestedList
from markdiff.exceptions import AlignmentLimitExceeded
from markdiff.options import DiffOptions
from markdiff.similarity import strip_inline_emphasis, text_similarity
from markdiff.tokens import Token


def _raw(item: Token) -> str:
    return item.raw


def item_head(item: Token) -> str:
    """Head text of a list item used for pairing, with emphasis markers removed."""
    return strip_inline_emphasis(item.head_text)


def item_similarity(old: Token, new: Token, options: DiffOptions) -> float:
    return text_similarity(item_head(old), item_head(new), options.max_similarity_cells)


def diff_item_pair(old: Token, new: Token, options: DiffOptions) -> ChangeEntry | None:
    """Describe how a paired list item changed.

    Returns ``None`` when the item was rewritten, which reports it as an
    added item plus a deletion of the old one.
    """
    if item_head(old) == item_head(new):
        old_nested = old.nested_items
        new_nested = new.nested_items
        if [item.raw for item in old_nested] != [item.raw for item in new_nested]:
            try:
                return NestedList(old, diff_items(old_nested, new_nested, options))
            except AlignmentLimitExceeded:
                return Modified(old)
    return None


def diff_items(old: Sequence[Token], new: Sequence[Token], options: DiffOptions) -> ListDiff:
    """Diff two sequences of list items.

    Raises
    ------
    AlignmentLimitExceeded
        If the item sequences are too large to align.

    """
    return diff_sequences(
        old,
        new,
        key=_raw,
        similarity=partial(item_similarity, options=options),
        threshold=options.item_similarity_threshold,
        pair_entry=partial(diff_item_pair, options=options),
        options=options,
        result_type=ListDiff,
    )


def diff_list(old: Token, new: Token, options: DiffOptions) -> ListDiff:
    """Diff the items of two LIST tokens.

    Raises
    ------
    MalformedTokenError
        If either token is not a list of list items.
    AlignmentLimitExceeded
        If the item sequences are too large to align.

    """
    return diff_items(old.items, new.items, options)
