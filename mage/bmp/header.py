from __future__ import annotations

import logging

from .constants import (
    FILE_HEADER_SIZE,
    INFO_HEADER_SIZE,
    MASKS_OFFSET,
    MASKS_SIZE,
    PLANES,
    SIGNATURE,
    SUPPORTED_BIT_COUNT,
    SUPPORTED_HEADER_SIZES,
)
from .errors import InvalidFormat, UnsupportedFormat
from .primitives import read_i32, read_u16, read_u32
from .types import ColorFormat, ColorMasks, CompressionType, FileHeader, Header, ImageHeader

logger = logging.getLogger(__name__)


def parse_header(data: bytes) -> Header:
    """Parse and validate every header of a BMP stream.

    Raises InvalidFormat when the bytes are not a well formed BMP, and
    UnsupportedFormat when they are but use a pixel layout other than
    32 bit RGBA bitfields.
    """
    file_header = parse_file_header(data)
    if len(data) < file_header.offset:
        raise InvalidFormat(
            f"Pixel data offset {file_header.offset} is past the end of the data ({len(data)} bytes)"
        )
    image_header = parse_image_header(data)
    _check_supported(image_header)
    color_format = parse_color_format(data)
    return Header(file_header, image_header, color_format)


def parse_file_header(data: bytes) -> FileHeader:
    if len(data) < FILE_HEADER_SIZE:
        raise InvalidFormat(f"File header needs {FILE_HEADER_SIZE} bytes, got {len(data)}")
    if data[0:2] != SIGNATURE:
        raise InvalidFormat(f"Bad signature {bytes(data[0:2])!r}, expected {SIGNATURE!r}")
    size = read_u32(data, 2)
    if any(data[6:10]):
        raise InvalidFormat("Reserved file header bytes must be zero")
    offset = read_u32(data, 10)
    if offset > size:
        raise InvalidFormat(f"Pixel data offset {offset} is larger than the file size {size}")
    logger.debug("File header: size=%d offset=%d", size, offset)
    return FileHeader(size=size, offset=offset)


def parse_image_header(data: bytes) -> ImageHeader:
    start = FILE_HEADER_SIZE
    if len(data) - start < INFO_HEADER_SIZE:
        raise InvalidFormat(f"Image header needs {INFO_HEADER_SIZE} bytes, got {max(0, len(data) - start)}")
    size = read_u32(data, start)
    if size not in SUPPORTED_HEADER_SIZES:
        raise InvalidFormat(f"Unexpected image header size {size}")
    planes = read_u16(data, start + 12)
    if planes != PLANES:
        raise InvalidFormat(f"Plane count must be {PLANES}, got {planes}")
    header = ImageHeader(
        size=size,
        width=read_u32(data, start + 4),
        height=read_i32(data, start + 8),
        bit_count=read_u16(data, start + 14),
        compression=CompressionType.from_code(read_u32(data, start + 16)),
        image_bytes=read_u32(data, start + 20),
        x_pixels_per_meter=read_u32(data, start + 24),
        y_pixels_per_meter=read_u32(data, start + 28),
        color_used=read_u32(data, start + 32),
        color_important=read_u32(data, start + 36),
    )
    logger.debug(
        "Image header: size=%d %dx%d bit_count=%d compression=%s image_bytes=%d",
        header.size,
        header.width,
        header.height,
        header.bit_count,
        header.compression.name,
        header.image_bytes,
    )
    return header


def _check_supported(header: ImageHeader) -> None:
    if header.compression is CompressionType.UNKNOWN:
        raise UnsupportedFormat("Unknown compression type")
    if header.compression is not CompressionType.BITFIELDS:
        raise UnsupportedFormat(f"Unsupported compression {header.compression.name}, only BITFIELDS is decoded")
    if header.bit_count != SUPPORTED_BIT_COUNT:
        raise UnsupportedFormat(
            f"Unsupported bit count {header.bit_count}, only {SUPPORTED_BIT_COUNT} bit pixels are decoded"
        )


def parse_color_format(data: bytes) -> ColorFormat:
    if len(data) - MASKS_OFFSET < MASKS_SIZE:
        raise InvalidFormat(f"Color masks need {MASKS_SIZE} bytes, got {max(0, len(data) - MASKS_OFFSET)}")
    masks = ColorMasks(
        r=read_u32(data, MASKS_OFFSET),
        g=read_u32(data, MASKS_OFFSET + 4),
        b=read_u32(data, MASKS_OFFSET + 8),
        a=read_u32(data, MASKS_OFFSET + 12),
    )
    color_format = ColorFormat.from_masks(masks)
    if color_format is None:
        raise UnsupportedFormat(
            f"Unsupported color masks r={masks.r:#010x} g={masks.g:#010x} b={masks.b:#010x} a={masks.a:#010x}"
        )
    return color_format
