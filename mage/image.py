from __future__ import annotations

from typing import Iterator, NamedTuple

RGBA_BYTES = 4


class RGBA(NamedTuple):
    """A color with 8 bit red, green, blue and alpha components.

    An alpha of 0 is fully transparent, 255 fully opaque.
    """

    r: int
    g: int
    b: int
    a: int


TRANSPARENT = RGBA(0, 0, 0, 0)


class Image:
    """Row-major RGBA pixel buffer, with (0, 0) at the top left corner.

    Pixels are kept as raw bytes, 4 per pixel, since that is the layout
    renderers such as Pillow expect.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("Image dimensions must not be negative")
        self.width = width
        self.height = height
        self._data = bytearray(RGBA_BYTES * width * height)

    @classmethod
    def from_bytes(cls, width: int, height: int, data: bytes) -> "Image":
        """Build an image from raw RGBA bytes laid out row by row."""
        image = cls(width, height)
        if len(data) != len(image._data):
            raise ValueError(f"Expected {len(image._data)} bytes of RGBA data, got {len(data)}")
        image._data[:] = data
        return image

    def to_bytes(self) -> bytes:
        return bytes(self._data)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def read(self, x: int, y: int) -> RGBA:
        """Read the pixel at (x, y). The position is not bounds checked."""
        i = RGBA_BYTES * (self.width * y + x)
        return RGBA(*self._data[i : i + RGBA_BYTES])

    def write(self, x: int, y: int, pixel: RGBA) -> None:
        """Write the pixel at (x, y). The position is not bounds checked."""
        i = RGBA_BYTES * (self.width * y + x)
        self._data[i : i + RGBA_BYTES] = bytes(pixel)

    def __iter__(self) -> Iterator[RGBA]:
        data = self._data
        for i in range(0, len(data), RGBA_BYTES):
            yield RGBA(data[i], data[i + 1], data[i + 2], data[i + 3])

    def __len__(self) -> int:
        return self.width * self.height

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return self.width == other.width and self.height == other.height and self._data == other._data

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height})"


def make_gradient(width: int = 255, height: int = 200) -> Image:
    """Build the sample image: full red, green along x and blue along y."""
    image = Image(width, height)
    for y in range(height):
        for x in range(width):
            image.write(x, y, RGBA(0xFF, x & 0xFF, y & 0xFF, 0xFF))
    return image
