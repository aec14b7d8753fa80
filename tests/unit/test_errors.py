"""Unit tests for the error taxonomy."""

from __future__ import annotations

import errno

import pytest

from wirepack import (
    STR,
    U8,
    U32,
    DecodeError,
    EncodeError,
    ErrorKind,
    InvalidEncodingError,
    InvariantError,
    NonZeroU16,
    SchemaError,
    Sequence,
    SourceError,
    WirepackError,
)


class TestHierarchy:
    """Test exception classes and kinds."""

    @pytest.mark.parametrize(
        "exc_class", [SchemaError, EncodeError, DecodeError, SourceError, InvalidEncodingError, InvariantError]
    )
    def test_all_derive_from_base(self, exc_class) -> None:
        assert issubclass(exc_class, WirepackError)

    def test_decode_kinds(self) -> None:
        assert SourceError.kind is ErrorKind.SOURCE
        assert InvalidEncodingError.kind is ErrorKind.ENCODING
        assert InvariantError.kind is ErrorKind.INVARIANT
        assert DecodeError.kind is ErrorKind.OTHER

    def test_kinds_are_distinct(self) -> None:
        kinds = {SourceError.kind, InvalidEncodingError.kind, InvariantError.kind, DecodeError.kind}
        assert len(kinds) == 4


class TestCauses:
    """Test that original causes are retrievable."""

    def test_eof_cause(self) -> None:
        with pytest.raises(SourceError) as exc_info:
            U32.unpack(b"\x01")
        err = exc_info.value
        assert isinstance(err.cause, EOFError)
        assert err.__cause__ is err.cause
        assert err.is_eof

    def test_io_error_cause(self, failing_source) -> None:
        broken = ConnectionResetError(errno.ECONNRESET, "reset by peer")
        with pytest.raises(SourceError) as exc_info:
            U32.unpack_from(failing_source(broken))
        assert exc_info.value.cause is broken
        assert not exc_info.value.is_eof

    def test_utf8_cause(self) -> None:
        with pytest.raises(InvalidEncodingError) as exc_info:
            STR.unpack(b"\x00\x00\x00\x01\x80")
        cause = exc_info.value.cause
        assert isinstance(cause, UnicodeDecodeError)
        assert cause.object == b"\x80"

    def test_invariant_has_no_underlying_cause(self) -> None:
        with pytest.raises(InvariantError) as exc_info:
            NonZeroU16.unpack(b"\x00\x00")
        assert exc_info.value.cause is None

    def test_custom_wrapped_cause(self) -> None:
        """Higher layers surface their own failures through DecodeError."""

        class ChecksumMismatch(Exception):
            pass

        inner = ChecksumMismatch("crc 0x1234 != 0xBEEF")
        err = DecodeError("frame rejected", cause=inner)
        assert err.kind is ErrorKind.OTHER
        assert err.cause is inner
        assert err.__cause__ is inner
        assert str(err) == "frame rejected"


class TestPropagation:
    """Test that failures reach the caller unchanged."""

    def test_sink_error_propagates_as_is(self, failing_sink) -> None:
        broken = BrokenPipeError(errno.EPIPE, "broken pipe")
        sink = failing_sink(0, broken)
        with pytest.raises(BrokenPipeError) as exc_info:
            U32.pack_into(7, sink)
        assert exc_info.value is broken

    def test_partial_write_not_rolled_back(self, failing_sink) -> None:
        sink = failing_sink(2, BrokenPipeError(errno.EPIPE, "broken pipe"))
        with pytest.raises(BrokenPipeError):
            Sequence(U8).pack_into([1, 2, 3], sink)
        assert bytes(sink.data) == b"\x00\x00\x00\x03\x01"

    def test_composite_decode_returns_no_partial_value(self) -> None:
        data = Sequence(STR).pack(["ok", "fine"])[:-1]
        with pytest.raises(SourceError):
            Sequence(STR).unpack(data)
