#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdiff/diff/aligner.py
"""Generic sequence alignment shared by every differ.

Two sequences are aligned in two passes:

1. Exact anchors. The longest common subsequence of the element keys gives
   an order-preserving set of ``(old_index, new_index)`` pairs whose
   elements are identical.
2. Similarity pairing. Between consecutive anchors (and before the first /
   after the last) the unmatched old and new elements form a *gap*. Inside
   a gap, elements are paired greedily by descending similarity, never by
   position: an insertion next to an unrelated deletion of the same size
   must not turn into a modification.

Whatever remains unpaired in a gap is reported as added (new side) or
deleted (old side). Each deletion is anchored to the new index it should be
rendered before, so removed content shows up immediately ahead of its
replacement or of the next surviving element.

Every step is deterministic: candidates are ordered by
``(-score, old_index, new_index)`` and no unordered collection is iterated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Hashable, Iterator, Sequence, TypeVar

from markdiff.diff.guard import enforce_scale_bound
from markdiff.diff.results import Added, ChangeEntry, Deletion, DiffResult
from markdiff.options import DiffOptions

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R", bound=DiffResult)

_ADDED = Added()


@dataclass(frozen=True)
class Alignment:
    """Index-level outcome of aligning two sequences.

    Parameters
    ----------
    anchors : list of (int, int)
        Exactly matching ``(old_index, new_index)`` pairs, ascending
    pairs : list of (int, int)
        Similarity-paired ``(old_index, new_index)`` pairs, ascending and
        never crossing each other or an anchor
    added : list of int
        New indices with no counterpart, ascending
    deleted : list of (int, int)
        ``(old_index, before_idx)`` for old elements with no counterpart,
        ascending by old index

    """

    anchors: list[tuple[int, int]] = field(default_factory=list)
    pairs: list[tuple[int, int]] = field(default_factory=list)
    added: list[int] = field(default_factory=list)
    deleted: list[tuple[int, int]] = field(default_factory=list)


def lcs_pairs(old_keys: Sequence[Hashable], new_keys: Sequence[Hashable]) -> list[tuple[int, int]]:
    """Compute LCS-based matched pairs between two key sequences.

    Parameters
    ----------
    old_keys : sequence of hashable
        Keys of the old elements
    new_keys : sequence of hashable
        Keys of the new elements

    Returns
    -------
    list[tuple[int, int]]
        ``(old_idx, new_idx)`` pairs of equal keys, in order

    """
    m = len(old_keys)
    n = len(new_keys)

    if m == 0 or n == 0:
        return []

    # dp[i][j] is the LCS length of old_keys[:i] and new_keys[:j]
    dp: list[list[int]] = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        old_key = old_keys[i - 1]
        row = dp[i]
        above = dp[i - 1]
        for j in range(1, n + 1):
            if old_key == new_keys[j - 1]:
                row[j] = above[j - 1] + 1
            else:
                row[j] = max(above[j], row[j - 1])

    pairs: list[tuple[int, int]] = []
    i, j = m, n
    while i > 0 and j > 0:
        if old_keys[i - 1] == new_keys[j - 1]:
            pairs.append((i - 1, j - 1))
            i -= 1
            j -= 1
        elif dp[i - 1][j] >= dp[i][j - 1]:
            i -= 1
        else:
            j -= 1

    pairs.reverse()
    return pairs


def iter_gaps(anchors: Sequence[tuple[int, int]], old_size: int, new_size: int) -> Iterator[tuple[range, range]]:
    """Yield ``(old_range, new_range)`` of unmatched indices around each anchor.

    One gap is yielded before every anchor and one after the last, so the
    number of gaps is ``len(anchors) + 1``. Either range may be empty.
    """
    prev_old, prev_new = -1, -1
    for old_idx, new_idx in [*anchors, (old_size, new_size)]:
        yield range(prev_old + 1, old_idx), range(prev_new + 1, new_idx)
        prev_old, prev_new = old_idx, new_idx


def _crosses(pair: tuple[int, int], chosen: Sequence[tuple[int, int]]) -> bool:
    old_idx, new_idx = pair
    return any((other_old < old_idx) != (other_new < new_idx) for other_old, other_new in chosen)


def pair_by_similarity(
    old: Sequence[T],
    new: Sequence[T],
    old_range: range,
    new_range: range,
    similarity: Callable[[T, T], float],
    threshold: float,
    max_candidates: int,
) -> list[tuple[int, int]]:
    """Greedily pair the unmatched elements of one gap by similarity.

    Candidates need a strictly positive score of at least ``threshold``.
    The best-scoring candidate is taken first; ties go to the lower old
    index, then the lower new index. A candidate is skipped when either
    element is already paired or when it would cross a chosen pair.

    Returns
    -------
    list[tuple[int, int]]
        Chosen ``(old_idx, new_idx)`` pairs, ascending

    """
    if not old_range or not new_range:
        return []

    candidate_count = len(old_range) * len(new_range)
    if candidate_count > max_candidates:
        logger.debug(f"Gap of {len(old_range)}x{len(new_range)} elements exceeds pairing limit {max_candidates}")
        return []

    candidates: list[tuple[float, int, int]] = []
    for old_idx in old_range:
        for new_idx in new_range:
            score = similarity(old[old_idx], new[new_idx])
            if score > 0.0 and score >= threshold:
                candidates.append((-score, old_idx, new_idx))
    candidates.sort()

    chosen: list[tuple[int, int]] = []
    used_old: set[int] = set()
    used_new: set[int] = set()
    for _neg_score, old_idx, new_idx in candidates:
        if old_idx in used_old or new_idx in used_new:
            continue
        if _crosses((old_idx, new_idx), chosen):
            continue
        chosen.append((old_idx, new_idx))
        used_old.add(old_idx)
        used_new.add(new_idx)

    chosen.sort()
    return chosen


def align(
    old: Sequence[T],
    new: Sequence[T],
    *,
    key: Callable[[T], Hashable],
    similarity: Callable[[T, T], float],
    threshold: float,
    options: DiffOptions,
) -> Alignment:
    """Align two sequences into anchors, similarity pairs, additions and deletions.

    Parameters
    ----------
    old : sequence
        Previous elements
    new : sequence
        Current elements
    key : callable
        Maps an element to the hashable value exact equality is decided on
    similarity : callable
        Scores an (old, new) element pair in ``[0.0, 1.0]``
    threshold : float
        Minimum similarity for pairing two unmatched elements
    options : DiffOptions
        Scale Guard and pairing limits

    Returns
    -------
    Alignment
        Index-level alignment of the two sequences

    Raises
    ------
    AlignmentLimitExceeded
        If the sequences differ and ``len(old) * len(new)`` exceeds
        ``options.max_alignment_cells``.

    """
    old_keys = [key(element) for element in old]
    new_keys = [key(element) for element in new]

    if old_keys == new_keys:
        return Alignment(anchors=[(index, index) for index in range(len(old_keys))])

    enforce_scale_bound(len(old_keys), len(new_keys), options.max_alignment_cells)
    anchors = lcs_pairs(old_keys, new_keys)

    pairs: list[tuple[int, int]] = []
    added: list[int] = []
    deleted: list[tuple[int, int]] = []

    for old_range, new_range in iter_gaps(anchors, len(old_keys), len(new_keys)):
        gap_pairs = pair_by_similarity(
            old, new, old_range, new_range, similarity, threshold, options.max_pairing_candidates
        )
        pairs.extend(gap_pairs)

        paired_new = {new_idx for _old_idx, new_idx in gap_pairs}
        added.extend(new_idx for new_idx in new_range if new_idx not in paired_new)

        # Deleted elements sit right after the closest preceding pair in the gap,
        # or at the start of the gap (just after the previous anchor).
        before_idx = new_range.start
        remaining_pairs = iter(gap_pairs)
        next_pair = next(remaining_pairs, None)
        for old_idx in old_range:
            if next_pair is not None and next_pair[0] == old_idx:
                before_idx = next_pair[1] + 1
                next_pair = next(remaining_pairs, None)
                continue
            deleted.append((old_idx, before_idx))

    return Alignment(anchors=anchors, pairs=pairs, added=added, deleted=deleted)


def diff_sequences(
    old: Sequence[T],
    new: Sequence[T],
    *,
    key: Callable[[T], Hashable],
    similarity: Callable[[T, T], float],
    threshold: float,
    pair_entry: Callable[[T, T], ChangeEntry | None],
    options: DiffOptions,
    result_type: type[R] = DiffResult,  # type: ignore[assignment]
) -> R:
    """Align two sequences and build a diff result from the alignment.

    ``pair_entry`` decides the change entry of every similarity-paired
    element, which lets each differ refine a pair into a typed sub-diff.
    Returning ``None`` reports the pair as a replacement instead: the new
    element becomes :class:`Added` and the old element a :class:`Deletion`
    rendered right before it. Unpaired new elements become :class:`Added`;
    unpaired old elements become :class:`Deletion` records. Deletions are
    ordered by their index in ``old``.

    Raises
    ------
    AlignmentLimitExceeded
        Propagated from :func:`align`.

    """
    alignment = align(old, new, key=key, similarity=similarity, threshold=threshold, options=options)

    changes: dict[int, ChangeEntry] = {new_idx: _ADDED for new_idx in alignment.added}
    deleted = list(alignment.deleted)
    for old_idx, new_idx in alignment.pairs:
        entry = pair_entry(old[old_idx], new[new_idx])
        if entry is None:
            changes[new_idx] = _ADDED
            deleted.append((old_idx, new_idx))
        else:
            changes[new_idx] = entry

    deletions = [Deletion(old[old_idx], before_idx) for old_idx, before_idx in sorted(deleted)]
    return result_type(changes=dict(sorted(changes.items())), deletions=deletions)
