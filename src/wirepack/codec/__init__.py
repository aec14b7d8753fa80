"""Binary codec for wirepack.

This module provides the per-type codecs and the encode/decode entry points.
"""

from __future__ import annotations

from .composite import (
    STR,
    AtomicSharedRef,
    Boxed,
    Sequence,
    SequenceCodec,
    SharedRef,
    StrCodec,
    WrapperCodec,
)
from .decoder import decode, decode_from
from .encoder import encode, encode_into
from .primitives import (
    BOOL,
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    I128,
    U8,
    U16,
    U32,
    U64,
    U128,
    BoolCodec,
    Codec,
    FloatCodec,
    IntCodec,
    NonZero,
    NonZeroCodec,
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
)
from .schema import FieldSchema, MessageCodec, MessageSchema, resolve_codec
from .stream import Sink, Source

__all__ = [
    "encode",
    "encode_into",
    "decode",
    "decode_from",
    "resolve_codec",
    "MessageSchema",
    "FieldSchema",
    "MessageCodec",
    "Sink",
    "Source",
    # Codec classes
    "Codec",
    "BoolCodec",
    "IntCodec",
    "FloatCodec",
    "NonZeroCodec",
    "StrCodec",
    "SequenceCodec",
    "WrapperCodec",
    # Codec instances and constructors
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
]
