"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import io
from typing import Callable

import pytest


class TrickleSource:
    """Source that hands out at most one byte per read."""

    def __init__(self, data: bytes) -> None:
        self._buffer = io.BytesIO(data)
        self.reads = 0

    def read(self, size: int) -> bytes:
        self.reads += 1
        return self._buffer.read(min(size, 1))

    def remaining(self) -> bytes:
        return self._buffer.read()


class FailingSource:
    """Source whose reads raise an I/O error."""

    def __init__(self, error: OSError) -> None:
        self.error = error

    def read(self, size: int) -> bytes:
        raise self.error


class FailingSink:
    """Sink that accepts a number of writes and then raises."""

    def __init__(self, ok_writes: int, error: OSError) -> None:
        self.ok_writes = ok_writes
        self.error = error
        self.data = bytearray()

    def write(self, data: bytes) -> int:
        if self.ok_writes <= 0:
            raise self.error
        self.ok_writes -= 1
        self.data.extend(data)
        return len(data)


class ShortWriteSink:
    """Sink that accepts at most one byte per write."""

    def __init__(self) -> None:
        self.data = bytearray()
        self.writes = 0

    def write(self, data: bytes) -> int:
        self.writes += 1
        self.data.extend(bytes(data[:1]))
        return min(len(data), 1)


@pytest.fixture
def trickle_source() -> Callable[[bytes], TrickleSource]:
    """Factory for one-byte-per-read sources."""
    return TrickleSource


@pytest.fixture
def failing_source() -> Callable[[OSError], FailingSource]:
    """Factory for sources that raise on read."""
    return FailingSource


@pytest.fixture
def failing_sink() -> Callable[[int, OSError], FailingSink]:
    """Factory for sinks that raise after a number of writes."""
    return FailingSink


@pytest.fixture
def short_write_sink() -> ShortWriteSink:
    """Sink that accepts one byte per write call."""
    return ShortWriteSink()
