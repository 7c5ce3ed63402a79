#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdiff/diff/blockquote.py
"""Blockquote differ: a blockquote's inner blocks are diffed as a nested document."""

from __future__ import annotations

from markdiff.diff.results import BlockquoteDiff
from markdiff.options import DiffOptions
from markdiff.tokens import Token, TokenKind


def diff_blockquote(old: Token, new: Token, options: DiffOptions) -> BlockquoteDiff:
    """Diff the inner blocks of two blockquotes with the block differ.

    Raises
    ------
    MalformedTokenError
        If either token is not a blockquote carrying its inner blocks.
    AlignmentLimitExceeded
        If the inner block sequences are too large to align.

    """
    # Imported here: the block differ dispatches back into this module
    from markdiff.diff.blocks import diff_block_sequence

    for token in (old, new):
        token.expect_kind(TokenKind.BLOCKQUOTE)
    return diff_block_sequence(old.require_children(), new.require_children(), options, BlockquoteDiff)
