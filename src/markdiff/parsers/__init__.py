#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdiff/parsers/__init__.py
"""Adapters that turn source text into token sequences for the diff engine.

Adapters depend on optional third-party parsers and are imported lazily by
:func:`markdiff.diff_markdown`.
"""
