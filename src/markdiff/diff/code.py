#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdiff/diff/code.py
"""Code-line differ for fenced and indented code blocks."""

from __future__ import annotations

from functools import partial

from markdiff.diff.aligner import diff_sequences
from markdiff.diff.results import CodeDiff
from markdiff.options import DiffOptions
from markdiff.similarity import text_similarity
from markdiff.tokens import Token


def _raw(line: Token) -> str:
    return line.raw


def line_similarity(old: Token, new: Token, options: DiffOptions) -> float:
    return text_similarity(old.raw, new.raw, options.max_similarity_cells)


def _replaced_line(old: Token, new: Token) -> None:
    return None


def diff_code(old: Token, new: Token, options: DiffOptions) -> CodeDiff:
    """Diff the lines of two CODE tokens.

    Lines are anchored on exact equality; leftover lines pair up when their
    edit-distance similarity reaches ``options.line_similarity_threshold``.
    An edited line is reported as a replacement: the new line is
    :class:`~markdiff.diff.results.Added` and the old line is a deletion
    anchored at the new line's index, so the old text renders just ahead of
    its replacement. An unpaired deleted line is anchored before the new
    line that follows the last matched or paired line.

    Raises
    ------
    MalformedTokenError
        If either token is not a code block carrying its lines.
    AlignmentLimitExceeded
        If the line sequences are too large to align.

    """
    return diff_sequences(
        old.lines,
        new.lines,
        key=_raw,
        similarity=partial(line_similarity, options=options),
        threshold=options.line_similarity_threshold,
        pair_entry=_replaced_line,
        options=options,
        result_type=CodeDiff,
    )
