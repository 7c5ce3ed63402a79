#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdiff/diff/results.py
"""Result model produced by the diff engine.

A :class:`DiffResult` maps new-sequence indices to change entries and lists
the old tokens that were removed, each anchored to the new index it should
be rendered before. The same shape is reused one level down for list items
(:class:`ListDiff`), table rows (:class:`TableDiff`), code lines
(:class:`CodeDiff`) and blockquote inner blocks (:class:`BlockquoteDiff`).

Results are created fresh by every diff invocation and are not mutated
afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from markdiff.constants import ChangeType
from markdiff.tokens import Token


@dataclass(frozen=True)
class Added:
    """Entry for a new element with no prior counterpart."""

    @property
    def change_type(self) -> ChangeType:
        return "added"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.change_type}


@dataclass(frozen=True)
class Modified:
    """Entry for a whole-element replacement of ``old_token``."""

    old_token: Token

    @property
    def change_type(self) -> ChangeType:
        return "modified"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.change_type, "old": self.old_token.raw}


@dataclass(frozen=True)
class NestedList:
    """Entry for a list item whose head text is unchanged but whose sub-list differs."""

    old_token: Token
    diff: ListDiff

    @property
    def change_type(self) -> ChangeType:
        return "nested_list"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.change_type, "old": self.old_token.raw, "diff": self.diff.to_dict()}


@dataclass(frozen=True)
class TypedDiff:
    """Entry for a container element diffed at the level of its sub-units."""

    old_token: Token
    diff: SubDiff

    @property
    def change_type(self) -> ChangeType:
        return self.diff.change_type

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.change_type, "old": self.old_token.raw, "diff": self.diff.to_dict()}


ChangeEntry = Union[Added, Modified, NestedList, TypedDiff]


@dataclass(frozen=True)
class Deletion:
    """An old element with no counterpart, rendered before new index ``before_idx``."""

    token: Token
    before_idx: int

    def to_dict(self) -> dict[str, Any]:
        return {"old": self.token.raw, "before_idx": self.before_idx}


@dataclass
class DiffStats:
    """Counts of changed units, summed over every nesting level."""

    added: int = 0
    modified: int = 0
    deleted: int = 0

    @property
    def total_changes(self) -> int:
        return self.added + self.modified + self.deleted


@dataclass(frozen=True)
class DiffResult:
    """Changes between two token sequences.

    Parameters
    ----------
    changes : dict of int to ChangeEntry
        Change entries keyed by index in the new sequence, in ascending key order
    deletions : list of Deletion
        Removed old elements in old-sequence order
    coarse : bool, default = False
        Set when the Scale Guard replaced fine-grained alignment with one
        whole-region modification

    """

    changes: dict[int, ChangeEntry] = field(default_factory=dict)
    deletions: list[Deletion] = field(default_factory=list)
    coarse: bool = False

    @property
    def has_changes(self) -> bool:
        """Whether anything was added, modified or deleted."""
        return bool(self.changes or self.deletions)

    def stats(self) -> DiffStats:
        """Count added, modified and deleted units at every nesting level.

        Typed and nested-list entries contribute the counts of their
        sub-diffs rather than counting themselves.
        """
        stats = DiffStats(deleted=len(self.deletions))
        for entry in self.changes.values():
            if isinstance(entry, Added):
                stats.added += 1
            elif isinstance(entry, Modified):
                stats.modified += 1
            else:
                sub = entry.diff.stats()
                stats.added += sub.added
                stats.modified += sub.modified
                stats.deleted += sub.deleted
        return stats

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain, JSON-serializable data with string keys."""
        data: dict[str, Any] = {
            "changes": {str(index): entry.to_dict() for index, entry in self.changes.items()},
            "deletions": [deletion.to_dict() for deletion in self.deletions],
        }
        if self.coarse:
            data["coarse"] = True
        return data


@dataclass(frozen=True)
class ListDiff(DiffResult):
    """Changes between the items of two lists."""

    @property
    def change_type(self) -> ChangeType:
        return "list"


@dataclass(frozen=True)
class TableDiff(DiffResult):
    """Changes between the body rows of two tables.

    ``header`` is set when the header row changed: a :class:`Modified` entry
    holding the old header row, or :class:`Added` when the old table had none.
    """

    header: Added | Modified | None = None

    @property
    def change_type(self) -> ChangeType:
        return "table"

    @property
    def has_changes(self) -> bool:
        return self.header is not None or super().has_changes

    def stats(self) -> DiffStats:
        stats = super().stats()
        if isinstance(self.header, Added):
            stats.added += 1
        elif self.header is not None:
            stats.modified += 1
        return stats

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.header is not None:
            data["header"] = self.header.to_dict()
        return data


@dataclass(frozen=True)
class CodeDiff(DiffResult):
    """Changes between the lines of two code blocks."""

    @property
    def change_type(self) -> ChangeType:
        return "code"


@dataclass(frozen=True)
class BlockquoteDiff(DiffResult):
    """Changes between the inner blocks of two blockquotes."""

    @property
    def change_type(self) -> ChangeType:
        return "blockquote"


SubDiff = Union[ListDiff, TableDiff, CodeDiff, BlockquoteDiff]
