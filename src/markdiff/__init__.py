"""markdiff - Structural diffing of markdown documents.

markdiff compares two versions of a tokenized markdown document and reports
what changed at the level a reader cares about: whole blocks, list items,
table rows, code lines and the blocks inside a blockquote. Unchanged
content is anchored exactly; leftovers are paired by textual similarity so
that an edited paragraph shows up as a modification rather than as an
unrelated insertion next to an unrelated deletion.

The engine consumes :class:`~markdiff.tokens.Token` trees. Tokens can be
built by hand with the builder functions exported here, or produced from
markdown text by the mistune-based adapter in :mod:`markdiff.parsers.markdown`.

Key Features
------------
- LCS anchoring with greedy, order-preserving similarity pairing
- Type-specific differs for lists (with nested sub-lists), tables, code and blockquotes
- Scale Guard degrading oversized regions to coarse changes
- Deterministic, side-effect free results with ``stats()`` and ``to_dict()``

Requirements
------------
- Python 3.10+
- mistune 3 for :func:`diff_markdown` (``pip install markdiff[markdown]``)

Examples
--------
Diffing hand-built documents:

    >>> from markdiff import diff, heading, paragraph
    >>> result = diff([heading("Hello"), paragraph("World")], [heading("Hello"), paragraph("Earth")])
    >>> sorted(result.changes)
    [1]

Diffing markdown text:

    >>> from markdiff import diff_markdown
    >>> result = diff_markdown("- a\\n- b\\n", "- a\\n- b\\n- c\\n")
    >>> result.changes[0].diff.changes[2].change_type
    'added'

See Also
--------
markdiff.diff : Diff engine and result types
markdiff.tokens : Token model and builders

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "markdiff requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from markdiff.api import diff, diff_markdown
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
from markdiff.exceptions import AlignmentLimitExceeded, DependencyError, MalformedTokenError, MarkdiffError
from markdiff.options import DiffOptions, MarkdownTokenizerOptions
from markdiff.tokens import (
    Token,
    TokenKind,
    blockquote,
    code_block,
    document,
    heading,
    list_block,
    list_item,
    other,
    paragraph,
    table,
    thematic_break,
)

__all__ = [
    "__version__",
    "diff",
    "diff_markdown",
    # Options
    "DiffOptions",
    "MarkdownTokenizerOptions",
    # Tokens
    "Token",
    "TokenKind",
    "blockquote",
    "code_block",
    "document",
    "heading",
    "list_block",
    "list_item",
    "other",
    "paragraph",
    "table",
    "thematic_break",
    # Results
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
    # Exceptions
    "AlignmentLimitExceeded",
    "DependencyError",
    "MalformedTokenError",
    "MarkdiffError",
]
