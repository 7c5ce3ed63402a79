#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdiff/utils/decorators.py
"""Utility decorators for markdiff adapters and the diff entry point.

This module provides the dependency guard used by optional adapters and a
DEBUG-level timer used around diff invocations.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Tuple

from markdiff.exceptions import DependencyError
from markdiff.utils.packages import installed_version, satisfies


def requires_dependencies(extra: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check required dependencies and versions before method execution.

    Parameters
    ----------
    extra : str
        Name of the markdiff extra that provides the packages (e.g.
        ``"markdown"``), used in the install hint of the error.
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples

    Returns
    -------
    Callable
        Decorated method that checks dependencies before execution

    Raises
    ------
    DependencyError
        If any required package is missing or has an incompatible version.

    Examples
    --------
        >>> @requires_dependencies("markdown", [("mistune", "mistune", ">=3.0.0")])
        ... def tokenize(self, text):
        ...     import mistune
        ...     # tokenizing logic here

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing = []
            version_mismatches = []
            original_error = None

            for install_name, import_name, version_spec in packages:
                try:
                    importlib.import_module(import_name)

                    if version_spec and not satisfies(install_name, version_spec):
                        installed = installed_version(install_name) or "unknown"
                        version_mismatches.append((install_name, version_spec, installed))

                except ImportError as e:
                    missing.append((install_name, version_spec))
                    if original_error is None:
                        original_error = e

            if missing or version_mismatches:
                raise DependencyError(
                    extra=extra,
                    missing_packages=missing,
                    version_mismatches=version_mismatches,
                    original_import_error=original_error,
                ) from original_error

            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Context manager for timing operations with DEBUG-level logging.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Block diff")

    Yields
    ------
    None
        Control flow to the code block being timed

    Notes
    -----
    - Only measures time when logger has DEBUG level enabled
    - Uses perf_counter for high-resolution timing

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.4f}s")
    else:
        yield
