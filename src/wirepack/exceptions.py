"""Exception hierarchy for wirepack.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from WirepackError for easy catching of any wirepack-specific error.

Decode failures additionally carry an ErrorKind so callers can tell
"not enough data yet" from "the data is corrupt" from "the data violates a
structural invariant" without matching on exception classes.
"""

from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    """Closed set of decode failure kinds."""

    SOURCE = "source"
    ENCODING = "encoding"
    INVARIANT = "invariant"
    OTHER = "other"


class WirepackError(Exception):
    """Base exception for all wirepack errors."""

    pass


class SchemaError(WirepackError):
    """Raised when a model field cannot be mapped to a codec.

    Examples:
        - Bare ``int`` field without an explicit width
        - Optional or Union fields
        - Annotation that is neither a codec, a primitive, a list nor a model
    """

    pass


class EncodeError(WirepackError):
    """Raised when a value is not representable by its declared codec.

    Examples:
        - Integer out of range for the declared width
        - Wrong Python type for the codec
        - Text or sequence longer than a u32 length prefix allows

    Sink failures are not wrapped: the sink's own ``OSError`` propagates.
    """

    pass


class DecodeError(WirepackError):
    """Raised when decoding from a byte source fails.

    Raised directly, it represents an opaque failure surfaced by a higher
    layer (kind ``OTHER``). The subclasses below cover the built-in kinds.

    Attributes:
        kind: Failure kind
        cause: The underlying exception, if any (also chained as ``__cause__``)
    """

    kind: ErrorKind = ErrorKind.OTHER

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class SourceError(DecodeError):
    """The byte source ran out of data or raised an I/O error."""

    kind = ErrorKind.SOURCE

    @property
    def is_eof(self) -> bool:
        """True when the source was exhausted rather than broken."""
        return isinstance(self.cause, EOFError)


class InvalidEncodingError(DecodeError):
    """Text payload is not valid UTF-8."""

    kind = ErrorKind.ENCODING


class InvariantError(DecodeError):
    """Decoded bytes violate a structural invariant of the target type."""

    kind = ErrorKind.INVARIANT
