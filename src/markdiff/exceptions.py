#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the markdiff library.

This module defines the exception classes raised by the diff engine and its
optional adapters.

Exception Hierarchy
-------------------
- MarkdiffError (base exception)

  - MalformedTokenError (token tree violates its nesting contract)

  - AlignmentLimitExceeded (Scale Guard tripped for a region)

  - DependencyError (missing/incompatible packages)

"""

from __future__ import annotations

from typing import Any


class MarkdiffError(Exception):
    """Base exception class for all markdiff-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class MalformedTokenError(MarkdiffError):
    """Exception raised when a token tree breaks its nesting contract.

    A container token (list, list item, table, table row, code block or
    blockquote) must carry its children. A missing ``children`` tuple is an
    upstream parser bug, not a diff scenario, so the engine stops instead of
    guessing.

    Parameters
    ----------
    message : str
        Description of the violation
    kind : Any, optional
        Kind of the offending token
    raw : str, optional
        Raw text of the offending token

    """

    def __init__(self, message: str, kind: Any = None, raw: str | None = None):
        """Initialize the error with the offending token details."""
        super().__init__(message)
        self.kind = kind
        self.raw = raw


class AlignmentLimitExceeded(MarkdiffError):
    """Signal that a region is too large for fine-grained alignment.

    Raised by the sequence aligner when ``len(old) * len(new)`` exceeds the
    configured bound. The block differ converts it into a coarse change for
    the enclosing region, so it never escapes :func:`markdiff.diff`.

    Parameters
    ----------
    old_size : int
        Length of the old sequence
    new_size : int
        Length of the new sequence
    limit : int
        Configured upper bound on ``old_size * new_size``

    """

    def __init__(self, old_size: int, new_size: int, limit: int):
        """Initialize the signal with the region dimensions."""
        super().__init__(f"Alignment of {old_size}x{new_size} elements exceeds the limit of {limit} cells")
        self.old_size = old_size
        self.new_size = new_size
        self.limit = limit


class DependencyError(MarkdiffError):
    """Raised when an optional extra is not installed or too old.

    Parameters
    ----------
    extra : str
        Name of the markdiff extra providing the packages (e.g. ``"markdown"``)
    missing_packages : list[tuple[str, str]]
        ``(distribution, version_spec)`` for packages that failed to import
    version_mismatches : list[tuple[str, str, str]], optional
        ``(distribution, version_spec, installed_version)`` for packages that
        import but do not satisfy ``version_spec``

    """

    def __init__(
        self,
        extra: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        problems = [f"'{name}{spec}' is not installed" for name, spec in missing_packages]
        problems.extend(
            f"'{name}' requires {spec}, but {installed} is installed" for name, spec, installed in version_mismatches
        )
        message = (
            f"The '{extra}' extra is unavailable: {'; '.join(problems)}\n"
            f'Install with: pip install --upgrade "markdiff[{extra}]"'
        )
        super().__init__(message, original_error=original_import_error)
        self.extra = extra
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.original_import_error = original_import_error
