#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdiff/utils/packages.py
"""Installed-version checks for markdiff's optional extras."""

from __future__ import annotations

from importlib import metadata

from packaging.specifiers import SpecifierSet


def installed_version(distribution: str) -> str | None:
    """Return the installed version of ``distribution``, or None if absent."""
    try:
        return metadata.version(distribution)
    except metadata.PackageNotFoundError:
        return None


def satisfies(distribution: str, version_spec: str) -> bool:
    """Whether the installed ``distribution`` matches ``version_spec``."""
    version = installed_version(distribution)
    return version is not None and SpecifierSet(version_spec).contains(version, prereleases=True)
