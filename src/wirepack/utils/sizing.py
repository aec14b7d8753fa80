"""Encoded size calculation utilities.

This module provides functions to calculate how many bytes a value or a
message type occupies on the wire.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Type

from pydantic import BaseModel

from ..codec.encoder import encode_into
from ..codec.schema import MessageSchema, resolve_codec
from ..codec.stream import CountingSink


def encoded_size(value: Any, target: Optional[Any] = None) -> int:
    """Calculate the exact encoded size of a value in bytes.

    The value is encoded into a sink that only counts bytes, so the result
    always matches ``len(encode(value, target))``.

    Args:
        value: Message instance, or any value when target is given
        target: Codec or model class (defaults to the message's own class)

    Returns:
        Size in bytes

    Raises:
        SchemaError: If schema is invalid
        EncodeError: If the value is not representable

    Example:
        >>> encoded_size("abc", target=STR)
        7
    """
    sink = CountingSink()
    encode_into(value, sink, target)
    return sink.count


def fixed_size(target: Any) -> Optional[int]:
    """Return the encoded width shared by every value of a type.

    Args:
        target: Codec or model class

    Returns:
        Size in bytes, or None if the type contains text or sequences

    Example:
        >>> fixed_size(U64)
        8
        >>> fixed_size(Sequence(U8)) is None
        True
    """
    return resolve_codec(target).fixed_size


def field_sizes(message_class: Type[BaseModel]) -> Dict[str, Optional[int]]:
    """Get the fixed size of each field in a message.

    Args:
        message_class: Message class to analyze

    Returns:
        Dictionary mapping field names to their size in bytes (None when variable)

    Example:
        >>> field_sizes(Reading)
        {'sensor_id': 2, 'offset': 4, 'label': None, 'valid': 1}
    """
    schema = MessageSchema.from_model(message_class)
    return {field.name: field.fixed_size for field in schema.fields}
