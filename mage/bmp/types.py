from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class FileHeader:
    """The 14-byte header at the start of every BMP file."""

    # Total length of the file, this header included
    size: int
    # Index of the first byte of pixel data
    offset: int


class CompressionType(Enum):
    UNCOMPRESSED = 0
    # Only valid with 4 bit pixels
    RLE4 = 1
    # Only valid with 8 bit pixels
    RLE8 = 2
    # Required for 16 and 32 bit pixels described by channel masks
    BITFIELDS = 3
    UNKNOWN = None

    @classmethod
    def from_code(cls, code: int) -> "CompressionType":
        """Map an on-disk compression code, falling back to UNKNOWN."""
        for member in cls:
            if member.value == code:
                return member
        return cls.UNKNOWN

    @property
    def code(self) -> int:
        if self is CompressionType.UNKNOWN:
            raise ValueError("Unknown compression has no on-disk code")
        return self.value


@dataclass(frozen=True)
class ImageHeader:
    """Information about the image, read from the header that follows the file header."""

    size: int
    width: int
    # Positive heights are stored bottom-up, negative heights top-down
    height: int
    bit_count: int
    compression: CompressionType
    image_bytes: int
    x_pixels_per_meter: int
    y_pixels_per_meter: int
    color_used: int
    color_important: int

    @property
    def abs_height(self) -> int:
        return abs(self.height)

    @property
    def is_top_down(self) -> bool:
        return self.height < 0


@dataclass(frozen=True)
class ColorMasks:
    """One mask per channel of a 32 bit pixel word."""

    r: int
    g: int
    b: int
    a: int

    def shifts(self) -> Tuple[int, int, int, int]:
        """Bit position of the lowest set bit of each mask, in r, g, b, a order."""
        return (_lowest_bit(self.r), _lowest_bit(self.g), _lowest_bit(self.b), _lowest_bit(self.a))


def _lowest_bit(mask: int) -> int:
    return (mask & -mask).bit_length() - 1


class ColorFormat(Enum):
    RGBA = ColorMasks(r=0xFF000000, g=0x00FF0000, b=0x0000FF00, a=0x000000FF)

    @classmethod
    def from_masks(cls, masks: ColorMasks) -> Optional["ColorFormat"]:
        for member in cls:
            if member.value == masks:
                return member
        return None

    @property
    def masks(self) -> ColorMasks:
        return self.value


@dataclass(frozen=True)
class Header:
    """Everything parsed from the front of a BMP file."""

    file_header: FileHeader
    image_header: ImageHeader
    color_format: ColorFormat
