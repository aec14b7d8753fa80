"""Schema introspection for Pydantic models.

This module maps field annotations to codecs and provides MessageCodec, the
codec for a whole model: the concatenation of its fields in declaration order.
"""

from __future__ import annotations

import logging
import types
from dataclasses import dataclass
from typing import Annotated, Any, Dict, Generic, List, Optional, Type, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel, ValidationError
from pydantic.fields import FieldInfo

from ..exceptions import DecodeError, EncodeError, SchemaError
from .composite import STR, WRAPPERS, SequenceCodec
from .primitives import BOOL, F64, Codec
from .stream import Sink, Source

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

_UNION_ORIGINS: tuple[Any, ...] = (Union, types.UnionType)


def is_pydantic_model(tp: Any) -> bool:
    try:
        return isinstance(tp, type) and issubclass(tp, BaseModel)
    except TypeError:
        return False


def resolve_codec(annotation: Any) -> Codec[Any]:
    """Resolve a type annotation (or codec, or model class) to a codec.

    Resolution rules:
        - a Codec instance is used as-is
        - ``Annotated[T, codec]`` uses the codec found in the metadata
        - ``bool`` -> BOOL, ``str`` -> STR, ``float`` -> F64
        - ``list[X]`` -> Sequence of X's codec
        - ``Box[X]``, ``Shared[X]``, ``AtomicShared[X]`` -> matching wrapper of X's codec
        - a Pydantic model class -> MessageCodec

    Args:
        annotation: Type annotation, codec, or model class

    Returns:
        Codec for the annotation

    Raises:
        SchemaError: If no codec can be determined
    """
    if isinstance(annotation, Codec):
        return annotation

    if is_pydantic_model(annotation):
        return MessageCodec(annotation)

    origin = get_origin(annotation)
    args = get_args(annotation)

    if origin is Annotated:
        for meta in args[1:]:
            if isinstance(meta, Codec):
                return meta
        return resolve_codec(args[0])

    if origin in _UNION_ORIGINS:
        raise SchemaError(f"Union/Optional types have no wire form: {annotation}")

    if origin is list:
        if not args:
            raise SchemaError("list fields need an element type, e.g. list[Annotated[int, U8]]")
        return SequenceCodec(resolve_codec(args[0]))

    if origin in WRAPPERS:
        if not args:
            raise SchemaError(f"{origin.__name__} fields need an inner type")
        return WRAPPERS[origin](resolve_codec(args[0]))

    if annotation is bool:
        return BOOL
    if annotation is str:
        return STR
    if annotation is float:
        return F64
    if annotation is int:
        raise SchemaError(
            "int fields need an explicit width, e.g. Annotated[int, U32] or Annotated[int, I64]"
        )

    raise SchemaError(f"Unsupported type {annotation!r}")


@dataclass(frozen=True)
class FieldSchema:
    """Schema information for a single field.

    Attributes:
        name: Field name
        annotation: Annotation as declared on the model
        codec: Codec that lays the field out on the wire
    """

    name: str
    annotation: Any
    codec: Codec[Any]

    @property
    def fixed_size(self) -> Optional[int]:
        return self.codec.fixed_size


class MessageSchema:
    """Schema information for an entire message.

    This class introspects a Pydantic model and resolves a codec for every
    field, in declaration order.

    Example:
        >>> schema = MessageSchema.from_model(Reading)
        >>> for field in schema.fields:
        ...     print(f"{field.name}: {field.codec.name}")
    """

    def __init__(self, model_class: Type[BaseModel]) -> None:
        """Initialize schema from a Pydantic model.

        Args:
            model_class: Pydantic model class to introspect
        """
        self.model_class = model_class
        self.fields: List[FieldSchema] = []
        self._introspect()

    @classmethod
    def from_model(cls, model_class: Type[BaseModel]) -> MessageSchema:
        return cls(model_class)

    def _introspect(self) -> None:
        for field_name, field_info in self.model_class.model_fields.items():
            self.fields.append(self._extract_field_schema(field_name, field_info))

    def _extract_field_schema(self, name: str, field_info: FieldInfo) -> FieldSchema:
        # Pydantic moves Annotated metadata off the annotation into field_info.metadata
        for meta in field_info.metadata:
            if isinstance(meta, Codec):
                return FieldSchema(name=name, annotation=field_info.annotation, codec=meta)

        annotation = field_info.annotation
        if annotation is None:
            raise SchemaError(f"Field {name} has no type annotation")
        try:
            codec = resolve_codec(annotation)
        except SchemaError as err:
            raise SchemaError(f"{self.model_class.__name__}.{name}: {err}") from err
        return FieldSchema(name=name, annotation=annotation, codec=codec)

    @property
    def fixed_size(self) -> Optional[int]:
        """Total encoded width, or None if any field is variable-length."""
        total = 0
        for field_schema in self.fields:
            if field_schema.fixed_size is None:
                return None
            total += field_schema.fixed_size
        return total


class MessageCodec(Codec[M], Generic[M]):
    """Codec for a Pydantic model: its fields back to back, no header.

    The schema is resolved on first use so that models can refer to
    themselves through a list field.
    """

    def __init__(self, model_class: Type[M]) -> None:
        self.model_class = model_class
        self.name = model_class.__name__
        self._schema: Optional[MessageSchema] = None

    @property
    def schema(self) -> MessageSchema:
        if self._schema is None:
            self._schema = MessageSchema.from_model(self.model_class)
        return self._schema

    @property  # type: ignore[override]
    def fixed_size(self) -> Optional[int]:
        return self.schema.fixed_size

    def pack_into(self, value: M, sink: Sink) -> int:
        if not isinstance(value, self.model_class):
            raise EncodeError(f"{self.name}: expected {self.name}, got {type(value).__name__}")
        written = 0
        for field_schema in self.schema.fields:
            try:
                written += field_schema.codec.pack_into(getattr(value, field_schema.name), sink)
            except EncodeError as err:
                raise EncodeError(f"{self.name}.{field_schema.name}: {err}") from err
        return written

    def unpack_from(self, source: Source) -> M:
        values: Dict[str, Any] = {}
        for field_schema in self.schema.fields:
            try:
                values[field_schema.name] = field_schema.codec.unpack_from(source)
            except DecodeError as err:
                logger.debug("Decoding %s.%s failed: %s", self.name, field_schema.name, err)
                raise
        try:
            return self.model_class(**values)
        except ValidationError as e:
            raise DecodeError(f"Failed to construct {self.name}: {e}", cause=e) from e
