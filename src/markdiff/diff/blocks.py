#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdiff/diff/blocks.py
"""Block-level differ.

Aligns document blocks on exact raw text, pairs the leftovers by
normalized edit distance, and hands every paired container to the
matching type-specific differ:

    - LIST       -> :func:`markdiff.diff.lists.diff_list`
    - TABLE      -> :func:`markdiff.diff.tables.diff_table`
    - CODE       -> :func:`markdiff.diff.code.diff_code`
    - BLOCKQUOTE -> :func:`markdiff.diff.blockquote.diff_blockquote`

Any other kind becomes a plain :class:`Modified`. Blocks of different kinds
score zero similarity and therefore never pair; they show up as an addition
plus a deletion.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable, Sequence, TypeVar

from markdiff.diff.aligner import diff_sequences
from markdiff.diff.blockquote import diff_blockquote
from markdiff.diff.code import diff_code
from markdiff.diff.guard import coarse_result
from markdiff.diff.lists import diff_list
from markdiff.diff.results import ChangeEntry, DiffResult, Modified, SubDiff, TypedDiff
from markdiff.diff.tables import diff_table
from markdiff.exceptions import AlignmentLimitExceeded
from markdiff.options import DiffOptions
from markdiff.similarity import text_similarity
from markdiff.tokens import Token, TokenKind

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=DiffResult)

TypedDiffer = Callable[[Token, Token, DiffOptions], SubDiff]

TYPED_DIFFERS: dict[TokenKind, TypedDiffer] = {
    TokenKind.LIST: diff_list,
    TokenKind.TABLE: diff_table,
    TokenKind.CODE: diff_code,
    TokenKind.BLOCKQUOTE: diff_blockquote,
}


def _raw(token: Token) -> str:
    return token.raw


def block_similarity(old: Token, new: Token, options: DiffOptions) -> float:
    """Normalized edit-distance similarity of two blocks; 0.0 across kinds."""
    if old.kind is not new.kind:
        return 0.0
    return text_similarity(old.raw, new.raw, options.max_similarity_cells)


def diff_block_pair(old: Token, new: Token, options: DiffOptions) -> ChangeEntry:
    """Describe how a paired block changed.

    Container kinds are diffed at the level of their sub-units. The pair
    falls back to :class:`Modified` when the kinds differ, when the kind has
    no typed differ, when the sub-units are too many to align, or when the
    change lives entirely outside the sub-units (a fence info string, a list
    marker, a table separator row).
    """
    differ = TYPED_DIFFERS.get(old.kind) if old.kind is new.kind else None
    if differ is None:
        return Modified(old)

    try:
        sub_diff = differ(old, new, options)
    except AlignmentLimitExceeded as exc:
        logger.debug(f"Reporting {old.kind.value} block as modified: {exc}")
        return Modified(old)

    if not sub_diff.has_changes:
        return Modified(old)
    return TypedDiff(old, sub_diff)


def diff_block_sequence(
    old: Sequence[Token],
    new: Sequence[Token],
    options: DiffOptions,
    result_type: type[R] = DiffResult,  # type: ignore[assignment]
) -> R:
    """Diff two block sequences.

    Raises
    ------
    AlignmentLimitExceeded
        If the sequences are too large to align; callers decide how to
        degrade.

    """
    return diff_sequences(
        old,
        new,
        key=_raw,
        similarity=partial(block_similarity, options=options),
        threshold=options.block_similarity_threshold,
        pair_entry=partial(diff_block_pair, options=options),
        options=options,
        result_type=result_type,
    )


def diff_blocks(old: Sequence[Token], new: Sequence[Token], options: DiffOptions) -> DiffResult:
    """Diff two documents given as block sequences.

    Documents too large for fine-grained alignment are reported as one
    coarse modification (see :func:`markdiff.diff.guard.coarse_result`).
    """
    try:
        return diff_block_sequence(old, new, options)
    except AlignmentLimitExceeded:
        return coarse_result(old)
