#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdiff/diff/__init__.py
"""Structural diff engine.

The block differ aligns document blocks and recurses into lists, tables,
code blocks and blockquotes; every level reuses the sequence aligner in
:mod:`markdiff.diff.aligner`.
"""

from markdiff.diff.blocks import diff_blocks
from markdiff.diff.results import (
    Added,
    BlockquoteDiff,
    ChangeEntry,
    CodeDiff,
    Deletion,
    DiffResult,
    DiffStats,
    ListDiff,
    Modified,
    NestedList,
    TableDiff,
    TypedDiff,
)

__all__ = [
    "Added",
    "BlockquoteDiff",
    "ChangeEntry",
    "CodeDiff",
    "Deletion",
    "DiffResult",
    "DiffStats",
    "ListDiff",
    "Modified",
    "NestedList",
    "TableDiff",
    "TypedDiff",
    "diff_blocks",
]
