#!/usr/bin/env python3
"""Basic usage example for wirepack.

This example demonstrates:
1. Defining a message with Pydantic and explicit field codecs
2. Encoding to bytes and to a file
3. Decoding back to a Pydantic model
4. Inspecting sizes and handling decode errors
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Annotated

from wirepack import (
    F32,
    I16,
    U32,
    BaseMessage,
    DecodeError,
    NonZeroU16,
    decode,
    decode_from,
    encode,
    encode_into,
    field_sizes,
)


class TankReading(BaseMessage):
    """Level reading for one tank."""

    tank_id: Annotated[int, NonZeroU16]
    level_mm: Annotated[int, U32]
    temperature_c: Annotated[float, F32]
    trend: Annotated[int, I16]
    label: str
    alarm: bool


class ReadingBatch(BaseMessage):
    """A batch of readings from one site."""

    site: str
    readings: list[TankReading]


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("wirepack Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Creating a reading...")
    reading = TankReading(
        tank_id=3, level_mm=1820, temperature_c=11.5, trend=-4, label="north", alarm=False
    )
    print(f"   {reading}")
    print()

    print("2. Field sizes (bytes, None = length-prefixed)...")
    for field_name, size in field_sizes(TankReading).items():
        print(f"   {field_name}: {size}")
    print()

    print("3. Encoding...")
    data = encode(reading)
    print(f"   Encoded size: {len(data)} bytes")
    print(f"   Hex: {data.hex()}")
    print()

    print("4. Decoding...")
    decoded = decode(TankReading, data)
    print(f"   Match: {decoded == reading}")
    print()

    print("5. Streaming a batch through a file...")
    batch = ReadingBatch(site="plant-a", readings=[reading, reading.model_copy(update={"tank_id": 4})])
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "batch.bin"
        with path.open("wb") as f:
            written = encode_into(batch, f)
        with path.open("rb") as f:
            restored = decode_from(ReadingBatch, f)
    print(f"   Wrote {written} bytes, read back {len(restored.readings)} readings")
    print()

    print("6. Decoding a zero tank id...")
    corrupt = bytes(2) + data[2:]
    try:
        decode(TankReading, corrupt)
    except DecodeError as e:
        print(f"   {e.kind.value}: {e}")


if __name__ == "__main__":
    main()
