"""Decoding entry points.

This module provides decode() and decode_from(), which reconstruct one value
of a declared type from a buffer or from a caller-supplied source.
"""

from __future__ import annotations

import io
import logging
from typing import Any, Type, TypeVar, overload

from pydantic import BaseModel

from .primitives import Codec
from .schema import resolve_codec
from .stream import Source

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


@overload
def decode_from(target: Type[M], source: Source) -> M: ...


@overload
def decode_from(target: Codec[T], source: Source) -> T: ...


def decode_from(target: Any, source: Source) -> Any:
    """Decode one value from a byte source.

    Exactly the bytes of one value are consumed; the source is left
    positioned after them.

    Args:
        target: Model class or codec describing the value
        source: Object with a ``read(n)`` method

    Returns:
        Decoded value

    Raises:
        SchemaError: If the model schema is invalid
        SourceError: If the source is exhausted or fails
        InvalidEncodingError: If text is not valid UTF-8
        InvariantError: If a non-zero field decodes as zero
        DecodeError: If the decoded fields fail model validation

    Examples:
        ```python
        with open("reading.bin", "rb") as f:
            first = decode_from(Reading, f)
            second = decode_from(Reading, f)
        ```
    """
    codec = resolve_codec(target)
    logger.debug("Decoding %s", codec.name)
    return codec.unpack_from(source)


@overload
def decode(target: Type[M], data: bytes | bytearray | memoryview) -> M: ...


@overload
def decode(target: Codec[T], data: bytes | bytearray | memoryview) -> T: ...


def decode(target: Any, data: bytes | bytearray | memoryview) -> Any:
    """Decode one value from the start of a buffer.

    Trailing bytes after the value are ignored. Same errors as decode_from().

    Examples:
        ```python
        decoded = decode(Reading, data)
        decode(I32, b"\\xff\\xff\\xff\\xff")  # -1
        ```
    """
    return decode_from(target, io.BytesIO(data))
