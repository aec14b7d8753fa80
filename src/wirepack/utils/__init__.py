"""Utility functions for wirepack."""

from __future__ import annotations

from .sizing import encoded_size, field_sizes, fixed_size

__all__ = [
    "encoded_size",
    "fixed_size",
    "field_sizes",
]
