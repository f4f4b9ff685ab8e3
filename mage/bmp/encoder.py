from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import BinaryIO, Optional

from ..image import Image
from .constants import (
    BYTES_PER_PIXEL,
    DEFAULT_PIXELS_PER_METER,
    LCS_SRGB,
    PIXEL_DATA_OFFSET,
    PLANES,
    SIGNATURE,
    SUPPORTED_BIT_COUNT,
    V4_HEADER_SIZE,
    V4_RESERVED_SIZE,
)
from .primitives import write_i32, write_u16, write_u32
from .types import ColorFormat, CompressionType, FileHeader, ImageHeader

logger = logging.getLogger(__name__)


@dataclass
class EncodeSettings:
    x_pixels_per_meter: int = DEFAULT_PIXELS_PER_METER
    y_pixels_per_meter: int = DEFAULT_PIXELS_PER_METER
    color_format: ColorFormat = ColorFormat.RGBA


def write_image(sink: BinaryIO, image: Image, settings: Optional[EncodeSettings] = None) -> None:
    """Write a complete 32 bit BITFIELDS BMP for the image to the sink.

    Rows are written top-down (negative height). Errors raised by the sink
    propagate unchanged; bytes already written are not rolled back.
    """
    settings = settings or EncodeSettings()
    pixel_bytes = BYTES_PER_PIXEL * image.width * image.height
    file_header = FileHeader(size=PIXEL_DATA_OFFSET + pixel_bytes, offset=PIXEL_DATA_OFFSET)
    image_header = ImageHeader(
        size=V4_HEADER_SIZE,
        width=image.width,
        height=-image.height,
        bit_count=SUPPORTED_BIT_COUNT,
        compression=CompressionType.BITFIELDS,
        image_bytes=pixel_bytes,
        x_pixels_per_meter=settings.x_pixels_per_meter,
        y_pixels_per_meter=settings.y_pixels_per_meter,
        color_used=0,
        color_important=0,
    )
    _write_file_header(sink, file_header)
    _write_image_header(sink, image_header)
    _write_color_format(sink, settings.color_format)
    _write_pixels(sink, image, settings.color_format)
    logger.debug("Wrote %dx%d image, %d bytes", image.width, image.height, file_header.size)


def encode_image(image: Image, settings: Optional[EncodeSettings] = None) -> bytes:
    """Return the BMP bytes for the image."""
    buffer = io.BytesIO()
    write_image(buffer, image, settings)
    return buffer.getvalue()


def _write_file_header(sink: BinaryIO, header: FileHeader) -> None:
    sink.write(SIGNATURE)
    write_u32(sink, header.size)
    write_u32(sink, 0)
    write_u32(sink, header.offset)


def _write_image_header(sink: BinaryIO, header: ImageHeader) -> None:
    write_u32(sink, header.size)
    write_u32(sink, header.width)
    write_i32(sink, header.height)
    write_u16(sink, PLANES)
    write_u16(sink, header.bit_count)
    write_u32(sink, header.compression.code)
    write_u32(sink, header.image_bytes)
    write_u32(sink, header.x_pixels_per_meter)
    write_u32(sink, header.y_pixels_per_meter)
    write_u32(sink, header.color_used)
    write_u32(sink, header.color_important)


def _write_color_format(sink: BinaryIO, color_format: ColorFormat) -> None:
    masks = color_format.masks
    for mask in (masks.r, masks.g, masks.b, masks.a):
        write_u32(sink, mask)
    write_u32(sink, LCS_SRGB)
    sink.write(bytes(V4_RESERVED_SIZE))


def _write_pixels(sink: BinaryIO, image: Image, color_format: ColorFormat) -> None:
    shifts = color_format.masks.shifts()
    out = bytearray()
    for pixel in image:
        word = 0
        for value, shift in zip(pixel, shifts):
            word |= value << shift
        # RGBA masks put alpha in the low byte, so this is A, B, G, R on disk
        out += word.to_bytes(BYTES_PER_PIXEL, "little")
    sink.write(bytes(out))
