#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdiff/diff/tables.py
"""Table differ.

Tables are paired as whole blocks by the block differ first; rows are then
aligned strictly within one (old table, new table) pair. A row is never
compared with a row of another table, even when their cells coincide.
"""

from __future__ import annotations

from dataclasses import replace
from functools import partial
from itertools import zip_longest

from markdiff.diff.aligner import diff_sequences
from markdiff.diff.results import Added, ChangeEntry, Modified, TableDiff
from markdiff.options import DiffOptions
from markdiff.similarity import text_similarity
from markdiff.tokens import Token, TokenKind


def _raw(row: Token) -> str:
    return row.raw


def row_similarity(old: Token, new: Token, options: DiffOptions) -> float:
    """Mean similarity of the cells at matching columns.

    A column present in only one row compares against an empty cell, so one
    edited cell out of N leaves the other N - 1 columns carrying the score.
    """
    scores = [
        text_similarity(old_cell, new_cell, options.max_similarity_cells)
        for old_cell, new_cell in zip_longest(old.cells, new.cells, fillvalue="")
    ]
    if not scores:
        return 1.0
    return sum(scores) / len(scores)


def _modified_row(old: Token, new: Token) -> ChangeEntry:
    return Modified(old)


def _header_change(old: Token, new: Token) -> Added | Modified | None:
    old_header = old.header
    new_header = new.header
    old_raw = old_header.raw if old_header is not None else None
    new_raw = new_header.raw if new_header is not None else None
    if old_raw == new_raw:
        return None
    if old_header is None:
        return Added()
    return Modified(old_header)


def diff_table(old: Token, new: Token, options: DiffOptions) -> TableDiff:
    """Diff the body rows of two TABLE tokens.

    Row indices in the result refer to body rows of ``new``; the header row
    is reported separately in :attr:`TableDiff.header`.

    Raises
    ------
    MalformedTokenError
        If either token is not a table made of header and body rows.
    AlignmentLimitExceeded
        If the row sequences are too large to align.

    """
    for token in (old, new):
        token.expect_kind(TokenKind.TABLE)

    body = diff_sequences(
        old.rows,
        new.rows,
        key=_raw,
        similarity=partial(row_similarity, options=options),
        threshold=options.row_similarity_threshold,
        pair_entry=_modified_row,
        options=options,
        result_type=TableDiff,
    )
    header = _header_change(old, new)
    if header is None:
        return body
    return replace(body, header=header)
