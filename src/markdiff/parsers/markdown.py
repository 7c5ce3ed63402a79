#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdiff/parsers/markdown.py
"""Markdown to token tree adapter.

This module turns markdown text into the :class:`~markdiff.tokens.Token`
sequences consumed by the diff engine, using the mistune parser. Markdown
syntax is parsed entirely by mistune; the adapter only maps mistune's block
tokens onto the engine's token kinds and flattens inline content back into
canonical markdown text, which becomes each token's ``raw`` value.

"""

from __future__ import annotations

import logging
from typing import Any

from markdiff.constants import DEPS_MARKDOWN
from markdiff.options import MarkdownTokenizerOptions
from markdiff.tokens import (
    Token,
    blockquote,
    code_block,
    heading,
    list_block,
    list_item,
    other,
    paragraph,
    table,
    thematic_break,
)
from markdiff.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


class MarkdownTokenizer:
    r"""Convert markdown text into a block token sequence.

    Parameters
    ----------
    options : MarkdownTokenizerOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> tokenizer = MarkdownTokenizer()
        >>> blocks = tokenizer.tokenize("# Hello\n\nWorld\n")
        >>> [block.kind.value for block in blocks]
        ['heading', 'paragraph']

    """

    def __init__(self, options: MarkdownTokenizerOptions | None = None):
        """Initialize the tokenizer with options."""
        self.options = options or MarkdownTokenizerOptions()

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def tokenize(self, text: str) -> tuple[Token, ...]:
        """Tokenize markdown text into block tokens.

        Parameters
        ----------
        text : str
            Markdown source

        Returns
        -------
        tuple of Token
            Top-level blocks in document order; blank lines are dropped

        """
        import mistune
        from mistune.plugins.table import table_in_list, table_in_quote

        plugins: list[Any] = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.extend(["table", table_in_quote, table_in_list])
        if self.options.parse_task_lists:
            plugins.append("task_lists")

        markdown = mistune.create_markdown(plugins=plugins, renderer=None)
        tokens, _state = markdown.parse(text)

        return tuple(self._process_tokens(tokens))

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Token]:
        blocks: list[Token] = []
        for token in tokens:
            block = self._process_token(token)
            if block is not None:
                blocks.append(block)
        return blocks

    def _process_token(self, token: dict[str, Any]) -> Token | None:
        """Process a single mistune block token.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Token or None
            Resulting block token, or None for blank lines

        """
        token_type = token.get("type", "")
        attrs = token.get("attrs") or {}
        children = token.get("children") or []

        if token_type == "blank_line":
            return None
        elif token_type == "heading":
            return heading(self._inline_text(children), level=attrs.get("level", 1))
        elif token_type in ("paragraph", "block_text"):
            return paragraph(self._inline_text(children))
        elif token_type == "block_code":
            return code_block(token.get("raw", ""), info=(attrs.get("info") or "").strip())
        elif token_type == "block_quote":
            return blockquote(*self._process_tokens(children))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return thematic_break()
        elif token_type == "block_html":
            return other(token.get("raw", "").rstrip("\n"))

        logger.debug(f"Keeping unsupported markdown token '{token_type}' as an opaque block")
        if children:
            return other(self._inline_text(children))
        return other(token.get("raw", token_type))

    def _process_list(self, token: dict[str, Any]) -> Token:
        attrs = token.get("attrs") or {}
        ordered = attrs.get("ordered", False)
        start = attrs.get("start", 1)
        bullet = token.get("bullet") or ("." if ordered else "-")

        items = []
        for offset, child in enumerate(token.get("children") or []):
            marker = f"{start + offset}{bullet}" if ordered else bullet
            if child.get("type") == "task_list_item":
                checked = (child.get("attrs") or {}).get("checked", False)
                marker = f"{marker} [x]" if checked else f"{marker} [ ]"
            items.append(self._process_list_item(child, marker))
        return list_block(items)

    def _process_list_item(self, token: dict[str, Any], marker: str) -> Token:
        """Split a list item into its head text and its nested blocks."""
        head_parts: list[str] = []
        nested: list[Token] = []
        for child in token.get("children") or []:
            child_type = child.get("type")
            if child_type in ("block_text", "paragraph") and not nested:
                head_parts.append(self._inline_text(child.get("children") or []))
                continue
            block = self._process_token(child)
            if block is not None:
                nested.append(block)
        return list_item("\n".join(head_parts), *nested, marker=marker)

    def _process_table(self, token: dict[str, Any]) -> Token:
        header: list[str] = []
        rows: list[list[str]] = []

        for part in token.get("children") or []:
            part_type = part.get("type", "")
            if part_type == "table_head":
                # Header cells are direct children of table_head
                header = [
                    self._inline_text(cell.get("children") or [])
                    for cell in part.get("children") or []
                    if cell.get("type") == "table_cell"
                ]
            elif part_type == "table_body":
                for row in part.get("children") or []:
                    rows.append([self._inline_text(cell.get("children") or []) for cell in row.get("children") or []])

        return table(header, rows)

    def _inline_text(self, children: list[dict[str, Any]]) -> str:
        """Flatten inline tokens back into markdown text."""
        parts: list[str] = []
        for child in children:
            child_type = child.get("type", "")
            inner = child.get("children") or []
            if child_type == "text":
                parts.append(child.get("raw", ""))
            elif child_type == "strong":
                parts.append(f"**{self._inline_text(inner)}**")
            elif child_type == "emphasis":
                parts.append(f"*{self._inline_text(inner)}*")
            elif child_type == "strikethrough":
                parts.append(f"~~{self._inline_text(inner)}~~")
            elif child_type == "codespan":
                parts.append(f"`{child.get('raw', '')}`")
            elif child_type == "link":
                url = (child.get("attrs") or {}).get("url", "")
                parts.append(f"[{self._inline_text(inner)}]({url})")
            elif child_type == "image":
                url = (child.get("attrs") or {}).get("url", "")
                parts.append(f"![{self._inline_text(inner)}]({url})")
            elif child_type in ("linebreak", "softbreak"):
                parts.append("\n")
            elif inner:
                parts.append(self._inline_text(inner))
            else:
                parts.append(child.get("raw", ""))
        return "".join(parts)


def tokenize_markdown(text: str, options: MarkdownTokenizerOptions | None = None) -> tuple[Token, ...]:
    """Tokenize markdown text into block tokens with a fresh :class:`MarkdownTokenizer`."""
    return MarkdownTokenizer(options).tokenize(text)
