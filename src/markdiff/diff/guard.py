#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdiff/diff/guard.py
"""Scale Guard for the quadratic alignment step.

Longest-common-subsequence alignment costs ``len(old) * len(new)`` time and
memory. Regions above the configured bound are not aligned at all; the
enclosing differ reports them as one coarse replacement instead.
"""

from __future__ import annotations

import logging
from typing import Sequence

from markdiff.diff.results import DiffResult, Modified
from markdiff.exceptions import AlignmentLimitExceeded
from markdiff.tokens import Token, TokenKind

logger = logging.getLogger(__name__)


def enforce_scale_bound(old_size: int, new_size: int, limit: int) -> None:
    """Raise when aligning ``old_size`` by ``new_size`` elements exceeds ``limit`` cells.

    Raises
    ------
    AlignmentLimitExceeded
        If ``old_size * new_size > limit``.

    """
    if old_size * new_size > limit:
        logger.info(f"Skipping fine-grained alignment of {old_size}x{new_size} elements (limit {limit})")
        raise AlignmentLimitExceeded(old_size, new_size, limit)


def coarse_result(old: Sequence[Token]) -> DiffResult:
    """Report a whole block sequence as replaced.

    The result holds a single :class:`Modified` entry at new index 0 whose
    old token is a DOCUMENT token wrapping every old block. No deletions are
    computed.
    """
    old_blocks = tuple(old)
    region = Token(
        TokenKind.DOCUMENT,
        "\n\n".join(block.raw for block in old_blocks),
        children=old_blocks,
    )
    return DiffResult(changes={0: Modified(region)}, deletions=[], coarse=True)
