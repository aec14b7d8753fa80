"""Wire layout analysis CLI command."""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from pathlib import Path

from pydantic import BaseModel

from ..codec.schema import MessageSchema
from ..models.base import BaseMessage

logger = logging.getLogger(__name__)

_WIDTH = 54


def analyze_file(file_path: Path) -> None:
    """Print the wire layout of every model class defined in a Python file.

    Args:
        file_path: Path to Python file containing message definitions
    """
    spec = importlib.util.spec_from_file_location("user_module", file_path)
    if spec is None or spec.loader is None:
        raise ValueError(f"Could not load module from {file_path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules["user_module"] = module
    spec.loader.exec_module(module)

    # Only classes defined in this file (not imported)
    message_classes = [
        obj
        for _name, obj in inspect.getmembers(module, inspect.isclass)
        if issubclass(obj, BaseModel)
        and obj not in (BaseModel, BaseMessage)
        and obj.__module__ == "user_module"
    ]
    logger.debug("Found %d model classes in %s", len(message_classes), file_path)

    if not message_classes:
        print(f"No message classes found in {file_path}")
        return

    print("|" * 7, "wirepack: binary layout report", "|" * 7)
    print(f"{len(message_classes)} message{'s' if len(message_classes) != 1 else ''} loaded.")
    print("Sizes are in bytes; length-prefixed fields are variable.")
    print()

    for msg_class in message_classes:
        analyze_message_class(msg_class)


def analyze_message_class(msg_class: type[BaseModel]) -> None:
    """Print the field-by-field layout of one message class.

    Args:
        msg_class: Message class to analyze
    """
    schema = MessageSchema.from_model(msg_class)

    print(f"{'=' * 19} {msg_class.__name__} {'=' * 19}")
    total = schema.fixed_size
    if total is not None:
        print(f"Fixed size: {total} bytes")
    else:
        known = sum(f.fixed_size for f in schema.fields if f.fixed_size is not None)
        print(f"Variable size: at least {known} bytes plus length-prefixed payloads")
    print()

    offset: int | None = 0
    for i, field_schema in enumerate(schema.fields, 1):
        size = field_schema.fixed_size
        size_text = f"{size} bytes" if size is not None else "variable"
        offset_text = f"@{offset}" if offset is not None else "@?"
        field_desc = f"{i}. {field_schema.name} ({field_schema.codec.name})"
        dots = "." * max(1, _WIDTH - len(field_desc) - len(size_text) - len(offset_text) - 1)
        print(f"        {field_desc}{dots}{size_text} {offset_text}")
        if offset is not None and size is not None:
            offset += size
        else:
            offset = None

    print()
