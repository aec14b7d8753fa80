"""Unit tests for size calculation."""

from __future__ import annotations

from typing import Annotated

from wirepack import (
    BOOL,
    F32,
    STR,
    U8,
    U64,
    U128,
    BaseMessage,
    NonZeroU16,
    Sequence,
    encode,
    encoded_size,
    field_sizes,
    fixed_size,
)


class Header(BaseMessage):
    """Fixed-width message."""

    version: Annotated[int, U8]
    sequence: Annotated[int, U64]
    key: Annotated[int, NonZeroU16]
    urgent: bool


class Note(BaseMessage):
    """Variable-width message."""

    header: Header
    text: str
    scores: list[Annotated[float, F32]]


class TestFixedSize:
    """Test static widths."""

    def test_codecs(self) -> None:
        assert fixed_size(U128) == 16
        assert fixed_size(BOOL) == 1
        assert fixed_size(STR) is None
        assert fixed_size(Sequence(U8)) is None

    def test_fixed_message(self) -> None:
        assert fixed_size(Header) == 1 + 8 + 2 + 1

    def test_variable_message(self) -> None:
        assert fixed_size(Note) is None

    def test_field_sizes(self) -> None:
        assert field_sizes(Header) == {"version": 1, "sequence": 8, "key": 2, "urgent": 1}
        assert field_sizes(Note) == {"header": 12, "text": None, "scores": None}


class TestEncodedSize:
    """Test exact sizes."""

    def test_matches_encoding(self) -> None:
        note = Note(
            header=Header(version=1, sequence=2, key=3, urgent=False),
            text="hello",
            scores=[1.0, 2.5],
        )
        assert encoded_size(note) == len(encode(note)) == 12 + 4 + 5 + 4 + 8

    def test_with_target(self) -> None:
        assert encoded_size("abc", target=STR) == 7
        assert encoded_size([], target=Sequence(U64)) == 4
