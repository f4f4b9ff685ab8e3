from __future__ import annotations

from typing import BinaryIO


def read_u16(data: bytes, offset: int) -> int:
    """Read an unsigned little-endian 16-bit integer."""
    return int.from_bytes(data[offset : offset + 2], "little", signed=False)


def read_u32(data: bytes, offset: int) -> int:
    """Read an unsigned little-endian 32-bit integer."""
    return int.from_bytes(data[offset : offset + 4], "little", signed=False)


def read_i32(data: bytes, offset: int) -> int:
    """Read a signed little-endian 32-bit integer."""
    return int.from_bytes(data[offset : offset + 4], "little", signed=True)


def write_u16(sink: BinaryIO, value: int) -> None:
    """Append an unsigned little-endian 16-bit integer to the sink."""
    sink.write(value.to_bytes(2, "little", signed=False))


def write_u32(sink: BinaryIO, value: int) -> None:
    """Append an unsigned little-endian 32-bit integer to the sink."""
    sink.write(value.to_bytes(4, "little", signed=False))


def write_i32(sink: BinaryIO, value: int) -> None:
    """Append a signed little-endian 32-bit integer to the sink."""
    sink.write(value.to_bytes(4, "little", signed=True))
