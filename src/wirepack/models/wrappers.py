"""Ownership containers for wrapped wire values.

Python references are already shared, so these containers only make the
ownership intent of a field explicit. They add nothing on the wire.
"""

from __future__ import annotations

import threading
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class _Container(Generic[T]):
    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self.value == other.value)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class Box(_Container[T]):
    """Exclusively owned value."""

    __slots__ = ()


class Shared(_Container[T]):
    """Value shared between several owners on one thread."""

    __slots__ = ()


class AtomicShared(_Container[T]):
    """Value shared across threads.

    ``lock`` guards mutation of a mutable ``value``; it is not part of
    equality or the wire form.

    Example:
        >>> counters = AtomicShared([0, 0])
        >>> with counters.lock:
        ...     counters.value[0] += 1
    """

    __slots__ = ("lock",)

    def __init__(self, value: T) -> None:
        super().__init__(value)
        self.lock = threading.Lock()
