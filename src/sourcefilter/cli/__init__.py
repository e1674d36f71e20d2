"""
Command-line interface package for sourcefilter.

This module exists mainly so `sourcefilter.cli` is a proper package and
can be imported cleanly by entrypoints/tests.
"""

from __future__ import annotations

__all__: list[str] = []
