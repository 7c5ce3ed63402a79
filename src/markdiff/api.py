#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdiff/api.py
"""Public entry points of the markdiff library."""

from __future__ import annotations

import logging
from typing import Sequence, Union

from markdiff.diff.blocks import diff_blocks
from markdiff.diff.results import DiffResult
from markdiff.options import DiffOptions, MarkdownTokenizerOptions
from markdiff.tokens import Token, TokenKind
from markdiff.utils.decorators import debug_timer

logger = logging.getLogger(__name__)

DocumentInput = Union[Token, Sequence[Token]]


def _as_blocks(document: DocumentInput) -> Sequence[Token]:
    if isinstance(document, Token):
        document.expect_kind(TokenKind.DOCUMENT)
        return document.require_children()
    return document


def diff(old: DocumentInput, new: DocumentInput, options: DiffOptions | None = None) -> DiffResult:
    """Compute the structural diff between two tokenized documents.

    Parameters
    ----------
    old : Token or sequence of Token
        Previous document, as a DOCUMENT token or its top-level blocks
    new : Token or sequence of Token
        Current document, as a DOCUMENT token or its top-level blocks
    options : DiffOptions or None, default = None
        Tuning parameters; defaults are used when omitted

    Returns
    -------
    DiffResult
        Changes keyed by new block index plus deletions anchored to the new
        index they precede. Identical documents give an empty result.

    Raises
    ------
    MalformedTokenError
        If a container token is missing its children or a document token is
        not of kind DOCUMENT.

    Examples
    --------
        >>> from markdiff import diff, heading, paragraph
        >>> result = diff([heading("Hello"), paragraph("World")], [heading("Hello"), paragraph("Earth")])
        >>> result.changes[1].change_type
        'modified'

    """
    options = options or DiffOptions()
    old_blocks = _as_blocks(old)
    new_blocks = _as_blocks(new)

    logger.debug(f"Diffing {len(old_blocks)} old blocks against {len(new_blocks)} new blocks")

    with debug_timer(logger, "Block diff"):
        result = diff_blocks(old_blocks, new_blocks, options)

    if result.coarse:
        logger.info("Document too large for fine-grained alignment; reported as one coarse change")
    return result


def diff_markdown(
    old_text: str,
    new_text: str,
    options: DiffOptions | None = None,
    parser_options: MarkdownTokenizerOptions | None = None,
) -> DiffResult:
    """Tokenize two markdown texts and diff them.

    Requires the ``markdown`` extra (mistune).

    Parameters
    ----------
    old_text : str
        Previous markdown source
    new_text : str
        Current markdown source
    options : DiffOptions or None, default = None
        Diff tuning parameters
    parser_options : MarkdownTokenizerOptions or None, default = None
        Markdown parsing options

    Returns
    -------
    DiffResult
        Structural diff of the two documents

    Raises
    ------
    DependencyError
        If mistune is not installed.

    """
    from markdiff.parsers.markdown import MarkdownTokenizer

    tokenizer = MarkdownTokenizer(parser_options)
    return diff(tokenizer.tokenize(old_text), tokenizer.tokenize(new_text), options)
