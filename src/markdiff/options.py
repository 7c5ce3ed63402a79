#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdiff/options.py
"""Configuration options for the diff engine and the markdown adapter.

Both option classes are frozen dataclasses: an options object can be shared
freely between concurrent diff invocations, and modified copies are made
with :meth:`CloneFrozenMixin.create_updated`.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from markdiff.constants import (
    DEFAULT_BLOCK_SIMILARITY_THRESHOLD,
    DEFAULT_ITEM_SIMILARITY_THRESHOLD,
    DEFAULT_LINE_SIMILARITY_THRESHOLD,
    DEFAULT_MAX_ALIGNMENT_CELLS,
    DEFAULT_MAX_PAIRING_CANDIDATES,
    DEFAULT_MAX_SIMILARITY_CELLS,
    DEFAULT_ROW_SIMILARITY_THRESHOLD,
)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class DiffOptions(CloneFrozenMixin):
    """Tuning parameters for the structural diff engine.

    Parameters
    ----------
    max_alignment_cells : int, default 250_000
        Scale Guard bound. When ``len(old) * len(new)`` for a region exceeds
        it, the region is reported as one coarse modification.
    block_similarity_threshold : float, default 0.0
        Minimum similarity for pairing two unmatched top-level blocks. A
        pair also needs a strictly positive score.
    item_similarity_threshold : float, default 0.5
        Minimum similarity for pairing two list items by their head text.
    row_similarity_threshold : float, default 0.5
        Minimum similarity for pairing two table rows.
    line_similarity_threshold : float, default 0.5
        Minimum similarity for pairing two code lines.
    max_pairing_candidates : int, default 10_000
        Maximum number of (old, new) candidates scored inside one gap. Larger
        gaps are reported as plain additions and deletions.
    max_similarity_cells : int, default 10_000
        Maximum ``len(a) * len(b)`` for an exact edit-distance score; longer
        string pairs use a linear-time estimate.

    """

    max_alignment_cells: int = field(
        default=DEFAULT_MAX_ALIGNMENT_CELLS,
        metadata={"help": "Upper bound on len(old) * len(new) for fine-grained alignment", "type": int},
    )
    block_similarity_threshold: float = field(
        default=DEFAULT_BLOCK_SIMILARITY_THRESHOLD,
        metadata={"help": "Minimum similarity for pairing unmatched blocks", "type": float},
    )
    item_similarity_threshold: float = field(
        default=DEFAULT_ITEM_SIMILARITY_THRESHOLD,
        metadata={"help": "Minimum similarity for pairing unmatched list items", "type": float},
    )
    row_similarity_threshold: float = field(
        default=DEFAULT_ROW_SIMILARITY_THRESHOLD,
        metadata={"help": "Minimum similarity for pairing unmatched table rows", "type": float},
    )
    line_similarity_threshold: float = field(
        default=DEFAULT_LINE_SIMILARITY_THRESHOLD,
        metadata={"help": "Minimum similarity for pairing unmatched code lines", "type": float},
    )
    max_pairing_candidates: int = field(
        default=DEFAULT_MAX_PAIRING_CANDIDATES,
        metadata={"help": "Maximum candidate pairs scored inside one gap", "type": int},
    )
    max_similarity_cells: int = field(
        default=DEFAULT_MAX_SIMILARITY_CELLS,
        metadata={"help": "Maximum string product for exact edit-distance scoring", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        for name in ("max_alignment_cells", "max_pairing_candidates", "max_similarity_cells"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

        for name in (
            "block_similarity_threshold",
            "item_similarity_threshold",
            "row_similarity_threshold",
            "line_similarity_threshold",
        ):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be between 0.0 and 1.0, got {value}")


@dataclass(frozen=True)
class MarkdownTokenizerOptions(CloneFrozenMixin):
    """Configuration for the mistune-based markdown tokenizer.

    Parameters
    ----------
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).
    parse_task_lists : bool, default True
        Whether to parse task list checkboxes (- [ ] and - [x]).

    """

    parse_tables: bool = field(default=True, metadata={"help": "Parse table syntax (GFM pipe tables)"})
    parse_strikethrough: bool = field(default=True, metadata={"help": "Parse strikethrough syntax (~~text~~)"})
    parse_task_lists: bool = field(default=True, metadata={"help": "Parse task list checkboxes"})
