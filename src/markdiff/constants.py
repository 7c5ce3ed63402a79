#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the markdiff library.

This module centralizes the tuning values used by the diff engine so that
the defaults of :class:`markdiff.options.DiffOptions` and the dependency
specifications used by optional adapters live in one place.

Constants are organized by category:
1. Type Definitions - Literal types shared across modules
2. Alignment Bounds - Scale Guard and pairing limits
3. Similarity Thresholds - Minimum scores for similarity pairing
4. Dependency Specifications - Optional package requirements
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

ChangeType = Literal["added", "modified", "nested_list", "list", "table", "code", "blockquote"]

# =============================================================================
# Alignment Bounds
# =============================================================================

# Upper bound on len(old) * len(new) before the LCS step is skipped
DEFAULT_MAX_ALIGNMENT_CELLS = 250_000

# Upper bound on unmatched old * unmatched new pairs scored inside one gap
DEFAULT_MAX_PAIRING_CANDIDATES = 10_000

# Upper bound on len(a) * len(b) for an exact Levenshtein computation
DEFAULT_MAX_SIMILARITY_CELLS = 10_000

# =============================================================================
# Similarity Thresholds
# =============================================================================

# Top-level blocks of the same kind pair on any positive similarity
DEFAULT_BLOCK_SIMILARITY_THRESHOLD = 0.0
DEFAULT_ITEM_SIMILARITY_THRESHOLD = 0.5
DEFAULT_ROW_SIMILARITY_THRESHOLD = 0.5
DEFAULT_LINE_SIMILARITY_THRESHOLD = 0.5

# =============================================================================
# Dependency Specifications for @requires_dependencies decorator
# =============================================================================
# Each spec is a list of tuples: (pip_package, import_name, version_constraint)

DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
