"""Pydantic message modeling for wirepack.

This module provides the BaseMessage class and the ownership containers
used for wrapped fields.
"""

from __future__ import annotations

from .base import BaseMessage
from .wrappers import AtomicShared, Box, Shared

__all__ = [
    "BaseMessage",
    "Box",
    "Shared",
    "AtomicShared",
]
