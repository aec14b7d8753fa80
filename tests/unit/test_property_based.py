"""Property-based tests using hypothesis."""

from __future__ import annotations

import math
from typing import Annotated

from hypothesis import given
from hypothesis import strategies as st

from wirepack import (
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
    BaseMessage,
    Sequence,
    decode,
    encode,
)

INT_CODECS = [U8, U16, U32, U64, U128, I8, I16, I32, I64, I128]


@st.composite
def codec_and_int(draw) -> tuple:
    codec = draw(st.sampled_from(INT_CODECS))
    value = draw(st.integers(min_value=codec.min_value, max_value=codec.max_value))
    return codec, value


class Record(BaseMessage):
    """Message for property testing."""

    ident: Annotated[int, U32]
    delta: Annotated[int, I16]
    name: str
    tags: list[str]
    active: bool


class TestPrimitiveProperties:
    """Round-trip properties of fixed-width codecs."""

    @given(codec_and_int())
    def test_int_roundtrip(self, pair: tuple) -> None:
        codec, value = pair
        data = codec.pack(value)
        assert len(data) == codec.fixed_size
        assert codec.unpack(data) == value

    @given(codec_and_int())
    def test_int_matches_big_endian(self, pair: tuple) -> None:
        codec, value = pair
        assert codec.pack(value) == value.to_bytes(codec.fixed_size, "big", signed=codec.signed)

    @given(st.booleans())
    def test_bool_roundtrip(self, value: bool) -> None:
        assert BOOL.unpack(BOOL.pack(value)) is value

    @given(st.integers(min_value=0, max_value=255))
    def test_bool_decode_rule(self, byte: int) -> None:
        assert BOOL.unpack(bytes([byte])) is (byte != 0xFF)

    @given(st.floats(allow_nan=False))
    def test_f64_roundtrip(self, value: float) -> None:
        assert F64.unpack(F64.pack(value)) == value

    @given(st.floats(width=32, allow_nan=False))
    def test_f32_roundtrip(self, value: float) -> None:
        assert F32.unpack(F32.pack(value)) == value

    @given(st.binary(min_size=8, max_size=8))
    def test_f64_bit_pattern_roundtrip(self, data: bytes) -> None:
        """Every 64-bit pattern survives bit for bit, NaN payloads included."""
        assert F64.pack(F64.unpack(data)) == data

    @given(st.binary(min_size=4, max_size=4))
    def test_f32_bit_pattern_roundtrip(self, data: bytes) -> None:
        """Every 32-bit pattern survives bit for bit, NaN payloads included."""
        assert F32.pack(F32.unpack(data)) == data

    @given(
        sign=st.integers(min_value=0, max_value=1),
        mantissa=st.integers(min_value=1, max_value=0x7FFFFF),
    )
    def test_f32_nan_patterns(self, sign: int, mantissa: int) -> None:
        data = ((sign << 31) | 0x7F800000 | mantissa).to_bytes(4, "big")
        value = F32.unpack(data)
        assert math.isnan(value)
        assert F32.pack(value) == data


class TestCompositeProperties:
    """Round-trip properties of length-prefixed codecs."""

    @given(st.text())
    def test_text_roundtrip(self, value: str) -> None:
        data = STR.pack(value)
        assert int.from_bytes(data[:4], "big") == len(value.encode("utf-8"))
        assert STR.unpack(data) == value

    @given(st.lists(st.integers(min_value=I64.min_value, max_value=I64.max_value)))
    def test_sequence_layout(self, values: list) -> None:
        data = Sequence(I64).pack(values)
        assert data == len(values).to_bytes(4, "big") + b"".join(I64.pack(v) for v in values)
        assert Sequence(I64).unpack(data) == values

    @given(
        ident=st.integers(min_value=0, max_value=U32.max_value),
        delta=st.integers(min_value=I16.min_value, max_value=I16.max_value),
        name=st.text(max_size=50),
        tags=st.lists(st.text(max_size=10), max_size=5),
        active=st.booleans(),
    )
    def test_message_roundtrip(self, ident: int, delta: int, name: str, tags: list, active: bool) -> None:
        msg = Record(ident=ident, delta=delta, name=name, tags=tags, active=active)
        data = encode(msg)
        assert decode(Record, data) == msg
        assert encode(decode(Record, data)) == data
