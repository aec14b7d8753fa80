"""Base message class and wirepack-specific Pydantic configuration.

This module provides the BaseMessage class that application structures should
inherit from. Field declaration order is wire order.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseMessage(BaseModel):
    """Base class for wirepack messages.

    Each field is annotated with the codec that lays it out on the wire.
    ``bool``, ``str``, ``float`` (f64), lists and nested models resolve
    without an explicit codec; integers always need one.

    Example:
        >>> from typing import Annotated
        >>> from wirepack import U16, I32, BaseMessage
        >>> class Reading(BaseMessage):
        ...     sensor_id: Annotated[int, U16]
        ...     offset: Annotated[int, I32]
        ...     label: str
        ...     valid: bool
    """

    model_config = ConfigDict(
        strict=False,
        # Box / Shared / AtomicShared fields
        arbitrary_types_allowed=True,
        validate_assignment=True,
        extra="forbid",
    )
