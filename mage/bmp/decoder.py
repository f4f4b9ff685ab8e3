from __future__ import annotations

import logging
from typing import Tuple

from ..image import RGBA, Image
from .constants import BYTES_PER_PIXEL
from .errors import InvalidFormat
from .header import parse_header
from .primitives import read_u32

logger = logging.getLogger(__name__)


def parse_image(data: bytes) -> Image:
    """Decode a complete BMP stream into an Image.

    Raises InvalidFormat or UnsupportedFormat, see parse_header.
    """
    header = parse_header(data)
    file_header = header.file_header
    image_header = header.image_header
    if len(data) < file_header.size:
        raise InvalidFormat(f"File header declares {file_header.size} bytes, only {len(data)} available")

    width = image_header.width
    height = image_header.abs_height
    row_bytes = BYTES_PER_PIXEL * width
    pixel_bytes = row_bytes * height
    if image_header.image_bytes and image_header.image_bytes < pixel_bytes:
        raise InvalidFormat(
            f"Declared pixel data of {image_header.image_bytes} bytes is too small for a {width}x{height} image"
        )
    if file_header.offset + pixel_bytes > len(data):
        raise InvalidFormat(
            f"Pixel data needs {pixel_bytes} bytes at offset {file_header.offset}, "
            f"only {len(data) - file_header.offset} available"
        )
    if image_header.image_bytes not in (0, pixel_bytes):
        logger.debug(
            "Declared pixel data of %d bytes, reading %d", image_header.image_bytes, pixel_bytes
        )

    image = Image(width, height)
    if not pixel_bytes:
        return image
    masks = header.color_format.masks
    channels = tuple(zip((masks.r, masks.g, masks.b, masks.a), masks.shifts()))
    for row in range(height):
        # Bottom-up files store the last logical row first
        y = row if image_header.is_top_down else height - 1 - row
        start = file_header.offset + row * row_bytes
        for x in range(width):
            i = start + x * BYTES_PER_PIXEL
            word = read_u32(data, i)
            image.write(x, y, _unpack_pixel(word, channels))
    logger.debug(
        "Decoded %dx%d image (%s)", width, height, "top-down" if image_header.is_top_down else "bottom-up"
    )
    return image


def _unpack_pixel(word: int, channels: Tuple[Tuple[int, int], ...]) -> RGBA:
    return RGBA(*((word & mask) >> shift for mask, shift in channels))
