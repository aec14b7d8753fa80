"""Byte sink and source helpers.

The codec never owns a stream. Callers hand in any object with a
``write(bytes)`` method (sink) or a ``read(n)`` method (source): files,
sockets wrapped with ``makefile("rwb")``, ``io.BytesIO`` and so on.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from ..exceptions import SourceError

logger = logging.getLogger(__name__)


class Sink(Protocol):
    """Anything that accepts bytes in order."""

    def write(self, data: bytes, /) -> Optional[int]: ...


class Source(Protocol):
    """Anything that produces bytes in order, on demand."""

    def read(self, size: int, /) -> Optional[bytes]: ...


def write_all(sink: Sink, data: bytes) -> int:
    """Write every byte of data to the sink.

    Short writes are retried with the remainder. Sinks that return ``None``
    from ``write`` (buffered writers, some wrappers) are taken to have
    accepted the whole buffer.

    Args:
        sink: Destination
        data: Bytes to write

    Returns:
        Number of bytes written (always ``len(data)``)

    Raises:
        OSError: Whatever the sink raises, unchanged, or when the sink
            accepts zero bytes
    """
    view = memoryview(data)
    offset = 0
    while offset < len(view):
        written = sink.write(view[offset:] if offset else data)
        if written is None:
            break
        if written == 0:
            raise OSError(f"sink accepted no bytes ({len(view) - offset} pending)")
        offset += written
    return len(view)


def read_exact(source: Source, size: int) -> bytes:
    """Read exactly size bytes from the source.

    Args:
        source: Byte source
        size: Number of bytes required

    Returns:
        The bytes read

    Raises:
        SourceError: If the source is exhausted first (cause is EOFError),
            raises an I/O error (cause is that error), or is non-blocking
            and has no data ready (cause is BlockingIOError)
    """
    buffer = bytearray()
    while len(buffer) < size:
        try:
            chunk = source.read(size - len(buffer))
        except OSError as e:
            raise SourceError(f"Source read failed: {e}", cause=e) from e
        if chunk is None:
            # non-blocking source with nothing buffered; not the end of data
            blocked = BlockingIOError(f"source had no data ready after {len(buffer)} of {size} bytes")
            raise SourceError(f"Source would block: {blocked}", cause=blocked) from blocked
        if not chunk:
            logger.debug("Source exhausted after %d of %d bytes", len(buffer), size)
            eof = EOFError(f"need {size} bytes, source ended after {len(buffer)}")
            raise SourceError(f"Truncated data: {eof}", cause=eof) from eof
        buffer.extend(chunk)
    return bytes(buffer)


class CountingSink:
    """Sink that discards data and counts bytes, for sizing."""

    def __init__(self) -> None:
        self.count = 0

    def write(self, data: bytes) -> int:
        self.count += len(data)
        return len(data)
