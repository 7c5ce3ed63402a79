#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdiff/tokens.py
"""Token model consumed by the diff engine.

A markdown document reaches the engine as a sequence of block-level
:class:`Token` objects produced by an external tokenizer. Container tokens
carry their sub-units as ``children``:

    - LIST       -> LIST_ITEM tokens
    - LIST_ITEM  -> nested block tokens (typically one nested LIST)
    - TABLE      -> one TABLE_HEAD token followed by TABLE_ROW tokens
    - TABLE_HEAD / TABLE_ROW -> TABLE_CELL tokens
    - CODE       -> CODE_LINE tokens
    - BLOCKQUOTE -> inner block tokens

``raw`` holds the exact source text of a token and is what equality is
decided on. Tokens are immutable snapshots; the engine never mutates them.

The builder functions at the bottom of the module produce well-formed
tokens with canonical markdown ``raw`` text. They are used by the markdown
adapter and are convenient for constructing documents by hand.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence, Union

from markdiff.exceptions import MalformedTokenError


class TokenKind(str, Enum):
    """Discriminant of a :class:`Token`."""

    DOCUMENT = "document"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST = "list"
    LIST_ITEM = "list_item"
    TABLE = "table"
    TABLE_HEAD = "table_head"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    CODE = "code"
    CODE_LINE = "code_line"
    BLOCKQUOTE = "blockquote"
    OTHER = "other"


CONTAINER_KINDS = frozenset(
    {
        TokenKind.DOCUMENT,
        TokenKind.LIST,
        TokenKind.LIST_ITEM,
        TokenKind.TABLE,
        TokenKind.TABLE_HEAD,
        TokenKind.TABLE_ROW,
        TokenKind.CODE,
        TokenKind.BLOCKQUOTE,
    }
)


@dataclass(frozen=True)
class Token:
    """A parsed block, list item, table row, cell or code line.

    Parameters
    ----------
    kind : TokenKind
        Structural kind of the token
    raw : str
        Exact source text, used for equality
    children : tuple of Token or None, default = None
        Nested tokens; required for container kinds
    text : str or None, default = None
        Head text of a list item (its own content without nested lists).
        ``None`` means the head text is ``raw``.

    """

    kind: TokenKind
    raw: str
    children: tuple[Token, ...] | None = None
    text: str | None = None

    def __post_init__(self) -> None:
        """Freeze ``children`` into a tuple."""
        if self.children is not None and not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_container(self) -> bool:
        """Whether this kind of token must carry children."""
        return self.kind in CONTAINER_KINDS

    def require_children(self) -> tuple[Token, ...]:
        """Return ``children``, failing fast when a container lacks them.

        Raises
        ------
        MalformedTokenError
            If the token has no children tuple.

        """
        if self.children is None:
            raise MalformedTokenError(
                f"{self.kind.value} token is missing its children",
                kind=self.kind,
                raw=self.raw,
            )
        return self.children

    def expect_kind(self, *kinds: TokenKind) -> None:
        """Raise :class:`MalformedTokenError` unless the token is one of ``kinds``."""
        if self.kind not in kinds:
            expected = " or ".join(kind.value for kind in kinds)
            raise MalformedTokenError(
                f"Expected a {expected} token, got {self.kind.value}",
                kind=self.kind,
                raw=self.raw,
            )

    def _children_of_kind(self, kind: TokenKind) -> tuple[Token, ...]:
        children = self.require_children()
        for child in children:
            if child.kind is not kind:
                raise MalformedTokenError(
                    f"{self.kind.value} token contains a {child.kind.value} child where {kind.value} is required",
                    kind=child.kind,
                    raw=child.raw,
                )
        return children

    @property
    def head_text(self) -> str:
        """Own text of a list item, excluding nested lists."""
        return self.raw if self.text is None else self.text

    @property
    def items(self) -> tuple[Token, ...]:
        """List items of a LIST token."""
        self.expect_kind(TokenKind.LIST)
        return self._children_of_kind(TokenKind.LIST_ITEM)

    @property
    def nested_items(self) -> tuple[Token, ...]:
        """Items of every list nested directly inside a LIST_ITEM token."""
        self.expect_kind(TokenKind.LIST_ITEM)
        nested: list[Token] = []
        for child in self.require_children():
            if child.kind is TokenKind.LIST:
                nested.extend(child.items)
        return tuple(nested)

    @property
    def header(self) -> Token | None:
        """Header row of a TABLE token, if any."""
        self.expect_kind(TokenKind.TABLE)
        for child in self.require_children():
            if child.kind is TokenKind.TABLE_HEAD:
                return child
        return None

    @property
    def rows(self) -> tuple[Token, ...]:
        """Body rows of a TABLE token, in order."""
        self.expect_kind(TokenKind.TABLE)
        rows = []
        for child in self.require_children():
            if child.kind is TokenKind.TABLE_ROW:
                rows.append(child)
            elif child.kind is not TokenKind.TABLE_HEAD:
                raise MalformedTokenError(
                    f"table token contains a {child.kind.value} child",
                    kind=child.kind,
                    raw=child.raw,
                )
        return tuple(rows)

    @property
    def cells(self) -> tuple[str, ...]:
        """Cell texts of a TABLE_HEAD or TABLE_ROW token."""
        self.expect_kind(TokenKind.TABLE_HEAD, TokenKind.TABLE_ROW)
        return tuple(cell.raw for cell in self._children_of_kind(TokenKind.TABLE_CELL))

    @property
    def lines(self) -> tuple[Token, ...]:
        """Line tokens of a CODE token."""
        self.expect_kind(TokenKind.CODE)
        return self._children_of_kind(TokenKind.CODE_LINE)


BlockLike = Union[Token, str]


def _as_block(block: BlockLike) -> Token:
    return block if isinstance(block, Token) else paragraph(block)


def _indent(raw: str, prefix: str) -> str:
    return "\n".join(f"{prefix}{line}" if line else line for line in raw.split("\n"))


def heading(text: str, level: int = 1) -> Token:
    """Build an ATX heading token."""
    if not 1 <= level <= 6:
        raise ValueError(f"Heading level must be between 1 and 6, got {level}")
    return Token(TokenKind.HEADING, f"{'#' * level} {text}")


def paragraph(text: str) -> Token:
    """Build a paragraph token."""
    return Token(TokenKind.PARAGRAPH, text)


def list_item(text: str, *nested: Token, marker: str = "-") -> Token:
    """Build a list item token.

    Parameters
    ----------
    text : str
        Head text of the item
    *nested : Token
        Blocks nested under the item, typically a LIST token
    marker : str, default "-"
        Bullet or ordinal marker, including a task box if any (e.g. "- [x]")

    Returns
    -------
    Token
        LIST_ITEM token whose ``raw`` includes the nested blocks indented
        under the marker

    """
    lines = [f"{marker} {text}" if text else marker]
    padding = " " * (len(marker) + 1)
    lines.extend(_indent(block.raw, padding) for block in nested)
    return Token(TokenKind.LIST_ITEM, "\n".join(lines), children=tuple(nested), text=text)


def list_block(items: Iterable[Union[Token, str]], ordered: bool = False, start: int = 1) -> Token:
    """Build a list token.

    String items are turned into list items with a bullet, or with
    consecutive ordinals when ``ordered`` is set. Token items are kept as
    they are.
    """
    built: list[Token] = []
    for offset, item in enumerate(items):
        if isinstance(item, Token):
            built.append(item)
        else:
            marker = f"{start + offset}." if ordered else "-"
            built.append(list_item(item, marker=marker))
    return Token(TokenKind.LIST, "\n".join(item.raw for item in built), children=tuple(built))


def _table_row(cells: Sequence[str], kind: TokenKind) -> Token:
    cell_tokens = tuple(Token(TokenKind.TABLE_CELL, cell) for cell in cells)
    return Token(kind, "| " + " | ".join(cells) + " |", children=cell_tokens)


def table(header: Sequence[str], rows: Iterable[Sequence[str]]) -> Token:
    """Build a pipe table token from header cells and body row cells."""
    head = _table_row(header, TokenKind.TABLE_HEAD)
    body = [_table_row(row, TokenKind.TABLE_ROW) for row in rows]
    separator = "| " + " | ".join("---" for _ in header) + " |"
    raw = "\n".join([head.raw, separator, *(row.raw for row in body)])
    return Token(TokenKind.TABLE, raw, children=(head, *body))


def code_block(code: str, info: str = "") -> Token:
    """Build a fenced code block token; each line of ``code`` becomes a child."""
    lines = code.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    body = "".join(f"{line}\n" for line in lines)
    children = tuple(Token(TokenKind.CODE_LINE, line) for line in lines)
    return Token(TokenKind.CODE, f"```{info}\n{body}```", children=children)


def blockquote(*blocks: BlockLike) -> Token:
    """Build a blockquote token around inner blocks."""
    inner = tuple(_as_block(block) for block in blocks)
    quoted = [
        "\n".join(f"> {line}" if line else ">" for line in block.raw.split("\n")) for block in inner
    ]
    return Token(TokenKind.BLOCKQUOTE, "\n>\n".join(quoted), children=inner)


def thematic_break() -> Token:
    """Build a thematic break token."""
    return Token(TokenKind.OTHER, "---")


def other(raw: str) -> Token:
    """Build a token of a kind the engine does not diff structurally."""
    return Token(TokenKind.OTHER, raw)


def document(blocks: Iterable[BlockLike]) -> Token:
    """Wrap a block sequence into a DOCUMENT token."""
    children = tuple(_as_block(block) for block in blocks)
    return Token(TokenKind.DOCUMENT, "\n\n".join(block.raw for block in children), children=children)
