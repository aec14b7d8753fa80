"""Fixed-width codecs: booleans, integers, floats and non-zero integers.

Every codec is a stateless object implementing the pack/unpack pair for one
wire type. The set of codecs is closed; callers pick one by declaring it,
either directly or through a model field annotation.
"""

from __future__ import annotations

import io
import math
import struct
from typing import Any, Generic, Optional, TypeVar

from ..constants import BOOL_FALSE, BOOL_TRUE, BYTE_ORDER
from ..exceptions import EncodeError, InvariantError
from .stream import Sink, Source, read_exact, write_all

T = TypeVar("T")


class Codec(Generic[T]):
    """Encode/decode capability for one wire type.

    Subclasses implement ``pack_into`` and ``unpack_from``; the buffer
    conveniences are defined purely in terms of those two.

    Attributes:
        name: Short type name used in reports and error messages
        fixed_size: Encoded width in bytes, or None for variable-length types
    """

    name: str = "codec"
    fixed_size: Optional[int] = None

    def pack_into(self, value: T, sink: Sink) -> int:
        """Write the encoding of value to sink and return the byte count."""
        raise NotImplementedError

    def unpack_from(self, source: Source) -> T:
        """Read exactly one value from source."""
        raise NotImplementedError

    def pack(self, value: T) -> bytes:
        """Encode value into a fresh buffer."""
        buffer = io.BytesIO()
        self.pack_into(value, buffer)
        return buffer.getvalue()

    def unpack(self, data: bytes | bytearray | memoryview) -> T:
        """Decode one value from the start of data. Trailing bytes are ignored."""
        return self.unpack_from(io.BytesIO(data))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class BoolCodec(Codec[bool]):
    """One byte: 0x00 is true, 0xFF is false.

    Decoding only tests against the false pattern, so every byte other
    than 0xFF decodes as true.
    """

    name = "bool"
    fixed_size = 1

    def pack_into(self, value: bool, sink: Sink) -> int:
        if not isinstance(value, bool):
            raise EncodeError(f"bool: expected bool, got {type(value).__name__}")
        return write_all(sink, bytes([BOOL_TRUE if value else BOOL_FALSE]))

    def unpack_from(self, source: Source) -> bool:
        return read_exact(source, 1)[0] != BOOL_FALSE


class IntCodec(Codec[int]):
    """Fixed-width big-endian integer, two's complement when signed."""

    def __init__(self, bits: int, signed: bool) -> None:
        if bits % 8 or not 8 <= bits <= 128:
            raise ValueError(f"bits must be a multiple of 8 in 8-128, got {bits}")
        self.bits = bits
        self.signed = signed
        self.fixed_size = bits // 8
        self.name = f"{'i' if signed else 'u'}{bits}"

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def pack_into(self, value: int, sink: Sink) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise EncodeError(f"{self.name}: expected int, got {type(value).__name__}")
        try:
            data = value.to_bytes(self.fixed_size, BYTE_ORDER, signed=self.signed)
        except OverflowError as err:
            raise EncodeError(
                f"{self.name}: value {value} out of range "
                f"[{self.min_value}, {self.max_value}]"
            ) from err
        return write_all(sink, data)

    def unpack_from(self, source: Source) -> int:
        data = read_exact(source, self.fixed_size)
        return int.from_bytes(data, BYTE_ORDER, signed=self.signed)


_F32_EXPONENT = 0x7F800000
_F32_MANTISSA = 0x007FFFFF
_F32_QUIET = 0x00400000
_F64_EXPONENT = 0x7FF << 52
# f32 mantissa sits in the top 23 of the f64 mantissa's 52 bits
_MANTISSA_SHIFT = 29


def _f32_nan_to_float(bits: int) -> float:
    """Widen an f32 NaN bit pattern to a double, keeping sign, quiet bit and payload."""
    wide = ((bits >> 31) << 63) | _F64_EXPONENT | ((bits & _F32_MANTISSA) << _MANTISSA_SHIFT)
    (value,) = struct.unpack(">d", wide.to_bytes(8, BYTE_ORDER))
    return value


def _float_nan_to_f32(value: float) -> bytes:
    """Narrow a NaN double back to the f32 pattern it was widened from."""
    wide = int.from_bytes(struct.pack(">d", value), BYTE_ORDER)
    mantissa = (wide >> _MANTISSA_SHIFT) & _F32_MANTISSA
    if not mantissa:
        # payload only in the dropped low bits; keep it a NaN
        mantissa = _F32_QUIET
    bits = ((wide >> 63) << 31) | _F32_EXPONENT | mantissa
    return bits.to_bytes(4, BYTE_ORDER)


class FloatCodec(Codec[float]):
    """IEEE 754 binary32/binary64, big-endian bit pattern.

    NaN payloads, including signaling NaNs, round-trip bit for bit. Python
    floats are doubles, so f32 NaNs are widened and narrowed by hand rather
    than through the platform conversion, which sets the quiet bit.
    """

    def __init__(self, bits: int) -> None:
        formats = {32: ">f", 64: ">d"}
        if bits not in formats:
            raise ValueError(f"bits must be 32 or 64, got {bits}")
        self.bits = bits
        self.fmt = formats[bits]
        self.fixed_size = bits // 8
        self.name = f"f{bits}"

    def pack_into(self, value: float, sink: Sink) -> int:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise EncodeError(f"{self.name}: expected float, got {type(value).__name__}")
        if self.bits == 32 and isinstance(value, float) and math.isnan(value):
            return write_all(sink, _float_nan_to_f32(value))
        try:
            data = struct.pack(self.fmt, value)
        except (OverflowError, struct.error) as err:
            raise EncodeError(f"{self.name}: cannot represent {value}: {err}") from err
        return write_all(sink, data)

    def unpack_from(self, source: Source) -> float:
        data = read_exact(source, self.fixed_size)
        if self.bits == 32:
            bits = int.from_bytes(data, BYTE_ORDER)
            if bits & _F32_EXPONENT == _F32_EXPONENT and bits & _F32_MANTISSA:
                return _f32_nan_to_float(bits)
        (value,) = struct.unpack(self.fmt, data)
        return value


class NonZeroCodec(Codec[int]):
    """Integer that is never zero.

    Same wire layout as the underlying integer. The invariant belongs to the
    input on encode and is only enforced when decoding.
    """

    def __init__(self, inner: IntCodec) -> None:
        self.inner = inner
        self.fixed_size = inner.fixed_size
        self.name = f"nonzero<{inner.name}>"

    def pack_into(self, value: int, sink: Sink) -> int:
        return self.inner.pack_into(value, sink)

    def unpack_from(self, source: Source) -> int:
        value = self.inner.unpack_from(source)
        if value == 0:
            raise InvariantError(f"{self.name}: decoded zero")
        return value


def NonZero(inner: Any) -> NonZeroCodec:
    """Wrap an integer codec in the non-zero invariant."""
    if not isinstance(inner, IntCodec):
        raise TypeError(f"NonZero requires an integer codec, got {inner!r}")
    return NonZeroCodec(inner)


BOOL = BoolCodec()

U8 = IntCodec(8, signed=False)
U16 = IntCodec(16, signed=False)
U32 = IntCodec(32, signed=False)
U64 = IntCodec(64, signed=False)
U128 = IntCodec(128, signed=False)

I8 = IntCodec(8, signed=True)
I16 = IntCodec(16, signed=True)
I32 = IntCodec(32, signed=True)
I64 = IntCodec(64, signed=True)
I128 = IntCodec(128, signed=True)

F32 = FloatCodec(32)
F64 = FloatCodec(64)

NonZeroU8 = NonZero(U8)
NonZeroU16 = NonZero(U16)
NonZeroU32 = NonZero(U32)
NonZeroU64 = NonZero(U64)
NonZeroU128 = NonZero(U128)

NonZeroI8 = NonZero(I8)
NonZeroI16 = NonZero(I16)
NonZeroI32 = NonZero(I32)
NonZeroI64 = NonZero(I64)
NonZeroI128 = NonZero(I128)
