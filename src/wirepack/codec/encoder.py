"""Encoding entry points.

This module provides encode() and encode_into(), which write a value's wire
form to a fresh buffer or to a caller-supplied sink.
"""

from __future__ import annotations

import io
import logging
from typing import Any, Optional

from pydantic import BaseModel

from ..exceptions import EncodeError
from .primitives import Codec
from .schema import MessageCodec, resolve_codec
from .stream import Sink

logger = logging.getLogger(__name__)


def _target_codec(value: Any, target: Any) -> Codec[Any]:
    if target is not None:
        return resolve_codec(target)
    if isinstance(value, BaseModel):
        return MessageCodec(type(value))
    raise EncodeError(
        f"No codec given for {type(value).__name__}; pass target= for non-model values"
    )


def encode_into(value: Any, sink: Sink, target: Optional[Any] = None) -> int:
    """Encode a value into a byte sink.

    Args:
        value: Pydantic message instance, or any value when target is given
        sink: Object with a ``write(bytes)`` method
        target: Codec or model class to encode as (defaults to the message's own class)

    Returns:
        Number of bytes written

    Raises:
        SchemaError: If the message schema is invalid
        EncodeError: If a value is not representable by its codec
        OSError: If the sink fails (bytes already written are not rolled back)

    Examples:
        ```python
        with open("reading.bin", "wb") as f:
            encode_into(reading, f)

        encode_into(-1, f, target=I32)
        ```
    """
    codec = _target_codec(value, target)
    logger.debug("Encoding %s as %s", type(value).__name__, codec.name)
    return codec.pack_into(value, sink)


def encode(value: Any, target: Optional[Any] = None) -> bytes:
    """Encode a value into a new bytes object.

    Same arguments and errors as encode_into().

    Examples:
        ```python
        data = encode(Reading(sensor_id=7, offset=-3, label="tank", valid=True))
        encode("abc", target=STR)  # b"\\x00\\x00\\x00\\x03abc"
        ```
    """
    buffer = io.BytesIO()
    encode_into(value, buffer, target)
    return buffer.getvalue()
