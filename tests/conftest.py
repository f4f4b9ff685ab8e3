from __future__ import annotations

from typing import Optional, Sequence

import pytest

from mage.image import RGBA, Image

RGBA_MASKS = (0xFF000000, 0x00FF0000, 0x0000FF00, 0x000000FF)


def build_bmp(
    width: int,
    height: int,
    pixel_data: bytes = b"",
    header_size: int = 108,
    planes: int = 1,
    bit_count: int = 32,
    compression: int = 3,
    image_bytes: Optional[int] = None,
    masks: Sequence[int] = RGBA_MASKS,
    reserved: bytes = b"\x00\x00\x00\x00",
    offset: int = 122,
    file_size: Optional[int] = None,
) -> bytes:
    """Assemble a BMP byte stream field by field, independently of the encoder."""
    if image_bytes is None:
        image_bytes = len(pixel_data)
    if file_size is None:
        file_size = offset + len(pixel_data)
    out = bytearray(b"BM")
    out += file_size.to_bytes(4, "little")
    out += reserved
    out += offset.to_bytes(4, "little")
    out += header_size.to_bytes(4, "little")
    out += width.to_bytes(4, "little")
    out += height.to_bytes(4, "little", signed=True)
    out += planes.to_bytes(2, "little")
    out += bit_count.to_bytes(2, "little")
    out += compression.to_bytes(4, "little")
    out += image_bytes.to_bytes(4, "little")
    out += (2835).to_bytes(4, "little") * 2
    out += bytes(8)
    for mask in masks:
        out += mask.to_bytes(4, "little")
    out += bytes(max(0, offset - len(out)))
    out += pixel_data
    return bytes(out)


@pytest.fixture
def build():
    return build_bmp


@pytest.fixture
def checker() -> Image:
    image = Image(3, 2)
    image.write(0, 0, RGBA(255, 0, 0, 255))
    image.write(1, 0, RGBA(0, 255, 0, 255))
    image.write(2, 0, RGBA(0, 0, 255, 255))
    image.write(0, 1, RGBA(10, 20, 30, 40))
    image.write(1, 1, RGBA(0, 0, 0, 0))
    image.write(2, 1, RGBA(255, 255, 255, 128))
    return image
