#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdiff/similarity.py
"""String similarity scoring used for pairing unmatched elements.

Scores are normalized edit-distance similarities in ``[0.0, 1.0]``, where
identical strings score 1.0 and strings sharing nothing score 0.0.
"""

from __future__ import annotations

import difflib
import re

from markdiff.constants import DEFAULT_MAX_SIMILARITY_CELLS

# Paired emphasis markers, longest first so "**" wins over "*"
_EMPHASIS_RE = re.compile(r"(\*\*|__|~~|\*|_)(?=\S)(.+?)(?<=\S)\1")


def levenshtein(a: str, b: str) -> int:
    """Compute the Levenshtein edit distance between two strings.

    Parameters
    ----------
    a : str
        First string
    b : str
        Second string

    Returns
    -------
    int
        Minimum number of single-character insertions, deletions and
        substitutions turning ``a`` into ``b``

    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, 1):
        current = [i]
        for j, char_b in enumerate(b, 1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (char_a != char_b),
                )
            )
        previous = current
    return previous[-1]


def text_similarity(a: str, b: str, max_cells: int = DEFAULT_MAX_SIMILARITY_CELLS) -> float:
    """Score two strings as ``1 - levenshtein(a, b) / max(len(a), len(b))``.

    Parameters
    ----------
    a : str
        First string
    b : str
        Second string
    max_cells : int, default = DEFAULT_MAX_SIMILARITY_CELLS
        Largest ``len(a) * len(b)`` scored exactly. Beyond it the score is
        difflib's linear-time ``quick_ratio`` estimate.

    Returns
    -------
    float
        Similarity in ``[0.0, 1.0]``

    """
    if a == b:
        return 1.0
    longest = max(len(a), len(b))
    if len(a) * len(b) > max_cells:
        return difflib.SequenceMatcher(None, a, b, autojunk=False).quick_ratio()
    return 1.0 - levenshtein(a, b) / longest


def strip_inline_emphasis(text: str) -> str:
    """Remove paired emphasis markers (bold, italic, strikethrough) from text.

    Only simple emphasis is stripped; links, code spans and other inline
    markup are left untouched.

        >>> strip_inline_emphasis("**Bold parent**")
        'Bold parent'

    """
    previous = None
    while previous != text:
        previous = text
        text = _EMPHASIS_RE.sub(r"\2", text)
    return text.strip()
