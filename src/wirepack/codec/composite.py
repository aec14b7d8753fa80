"""Length-prefixed and delegating codecs: text, sequences, ownership wrappers."""

from __future__ import annotations

from collections.abc import Sequence as SequenceABC
from typing import Any, Callable, Generic, List, Optional, Type, TypeVar

from ..constants import MAX_LENGTH, READ_CHUNK_SIZE
from ..exceptions import EncodeError, InvalidEncodingError, SchemaError
from ..models.wrappers import AtomicShared, Box, Shared
from .primitives import U32, Codec
from .stream import Sink, Source, read_exact, write_all

T = TypeVar("T")
W = TypeVar("W")


class StrCodec(Codec[str]):
    """UTF-8 text behind a u32 byte-count prefix."""

    name = "str"

    def pack_into(self, value: str, sink: Sink) -> int:
        if not isinstance(value, str):
            raise EncodeError(f"str: expected str, got {type(value).__name__}")
        try:
            data = value.encode("utf-8")
        except UnicodeEncodeError as err:
            raise EncodeError(f"str: not encodable as UTF-8: {err}") from err
        if len(data) > MAX_LENGTH:
            raise EncodeError(f"str: {len(data)} bytes exceeds u32 length prefix")
        written = U32.pack_into(len(data), sink)
        return written + write_all(sink, data)

    def unpack_from(self, source: Source) -> str:
        remaining = U32.unpack_from(source)
        data = bytearray()
        # Buffer grows with received bytes, never with the declared length.
        while remaining > 0:
            chunk = read_exact(source, min(remaining, READ_CHUNK_SIZE))
            data.extend(chunk)
            remaining -= len(chunk)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidEncodingError(f"str: invalid UTF-8: {e}", cause=e) from e


class SequenceCodec(Codec[List[T]]):
    """Ordered list behind a u32 element-count prefix.

    Elements must occupy at least one byte: a sequence of zero-width
    elements (a model with no fields, say) raises SchemaError both when
    packing and when unpacking.
    """

    def __init__(self, element: Codec[T]) -> None:
        self.element = element
        self.name = f"seq<{element.name}>"

    def _check_element_width(self) -> None:
        if self.element.fixed_size == 0:
            raise SchemaError(f"{self.name}: elements have no wire bytes")

    def pack_into(self, value: SequenceABC[T], sink: Sink) -> int:
        self._check_element_width()
        if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, SequenceABC):
            raise EncodeError(f"{self.name}: expected a sequence, got {type(value).__name__}")
        if len(value) > MAX_LENGTH:
            raise EncodeError(f"{self.name}: {len(value)} elements exceeds u32 count prefix")
        written = U32.pack_into(len(value), sink)
        for item in value:
            written += self.element.pack_into(item, sink)
        return written

    def unpack_from(self, source: Source) -> List[T]:
        self._check_element_width()
        count = U32.unpack_from(source)
        return [self.element.unpack_from(source) for _ in range(count)]


class WrapperCodec(Codec[W], Generic[W, T]):
    """Ownership wrapper with the same wire form as its inner value.

    Encoding accepts either a container instance or the bare inner value.
    """

    def __init__(self, inner: Codec[T], container: Type[Any], label: str) -> None:
        self.inner = inner
        self.container = container
        self.name = f"{label}<{inner.name}>"

    @property  # type: ignore[override]
    def fixed_size(self) -> Optional[int]:
        return self.inner.fixed_size

    def pack_into(self, value: Any, sink: Sink) -> int:
        if isinstance(value, self.container):
            value = value.value
        return self.inner.pack_into(value, sink)

    def unpack_from(self, source: Source) -> W:
        return self.container(self.inner.unpack_from(source))


def Sequence(element: Codec[T]) -> SequenceCodec[T]:
    """Sequence of element, count-prefixed."""
    return SequenceCodec(element)


def Boxed(inner: Codec[T]) -> WrapperCodec[Box[T], T]:
    """Exclusively owned value; decodes into a Box."""
    return WrapperCodec(inner, Box, "box")


def SharedRef(inner: Codec[T]) -> WrapperCodec[Shared[T], T]:
    """Shared value; decodes into a Shared."""
    return WrapperCodec(inner, Shared, "shared")


def AtomicSharedRef(inner: Codec[T]) -> WrapperCodec[AtomicShared[T], T]:
    """Thread-shared value; decodes into an AtomicShared."""
    return WrapperCodec(inner, AtomicShared, "atomic_shared")


STR = StrCodec()

WRAPPERS: dict[Type[Any], Callable[[Codec[Any]], WrapperCodec[Any, Any]]] = {
    Box: Boxed,
    Shared: SharedRef,
    AtomicShared: AtomicSharedRef,
}
