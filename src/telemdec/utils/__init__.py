"""Utility functions for telemdec.

This module provides layout introspection helpers.
"""

from __future__ import annotations

from .sizing import coverage, field_sizes, required_length

__all__ = [
    "required_length",
    "field_sizes",
    "coverage",
]
