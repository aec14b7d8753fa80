"""wirepack: explicit binary layouts for Python values

A small, symmetric pack/unpack layer. Every supported type has a codec that
writes a fixed, big-endian byte layout to any byte sink and reads it back
from any byte source. Application structures are Pydantic models whose field
declaration order is the wire order, so nothing about the layout depends on
hidden defaults.

Wire format:
- bool: 1 byte, 0x00 true, 0xFF false (any byte other than 0xFF decodes as true)
- u8..u128 / i8..i128: fixed width, big-endian, two's complement
- f32 / f64: IEEE 754 big-endian bit pattern
- str: u32 UTF-8 byte count + bytes
- sequence: u32 element count + elements
- non-zero integers and ownership wrappers: same bytes as the inner type

Quick Start:
    >>> from typing import Annotated
    >>> from wirepack import BaseMessage, U16, I32, encode, decode
    >>>
    >>> class Reading(BaseMessage):
    ...     sensor_id: Annotated[int, U16]
    ...     offset: Annotated[int, I32]
    ...     label: str
    ...     valid: bool
    >>>
    >>> msg = Reading(sensor_id=7, offset=-3, label="tank", valid=True)
    >>> data = encode(msg)
    >>> decoded = decode(Reading, data)
"""

from __future__ import annotations

from .codec import (
    BOOL,
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    I128,
    STR,
    U8,
    U16,
    U32,
    U64,
    U128,
    AtomicSharedRef,
    Boxed,
    Codec,
    MessageCodec,
    MessageSchema,
    NonZero,
    NonZeroI8,
    NonZeroI16,
    NonZeroI32,
    NonZeroI64,
    NonZeroI128,
    NonZeroU8,
    NonZeroU16,
    NonZeroU32,
    NonZeroU64,
    NonZeroU128,
    Sequence,
    SharedRef,
    Sink,
    Source,
    decode,
    decode_from,
    encode,
    encode_into,
    resolve_codec,
)
from .exceptions import (
    DecodeError,
    EncodeError,
    ErrorKind,
    InvalidEncodingError,
    InvariantError,
    SchemaError,
    SourceError,
    WirepackError,
)
from .models import AtomicShared, BaseMessage, Box, Shared
from .utils import encoded_size, field_sizes, fixed_size

__version__ = "0.1.0"

__all__ = [
    # Core API
    "BaseMessage",
    "encode",
    "encode_into",
    "decode",
    "decode_from",
    "resolve_codec",
    "Codec",
    "MessageCodec",
    "MessageSchema",
    "Sink",
    "Source",
    # Codecs
    "BOOL",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "F32",
    "F64",
    "STR",
    "NonZero",
    "NonZeroU8",
    "NonZeroU16",
    "NonZeroU32",
    "NonZeroU64",
    "NonZeroU128",
    "NonZeroI8",
    "NonZeroI16",
    "NonZeroI32",
    "NonZeroI64",
    "NonZeroI128",
    "Sequence",
    "Boxed",
    "SharedRef",
    "AtomicSharedRef",
    # Containers
    "Box",
    "Shared",
    "AtomicShared",
    # Exceptions
    "WirepackError",
    "SchemaError",
    "EncodeError",
    "DecodeError",
    "SourceError",
    "InvalidEncodingError",
    "InvariantError",
    "ErrorKind",
    # Sizing
    "encoded_size",
    "fixed_size",
    "field_sizes",
    # Version
    "__version__",
]
