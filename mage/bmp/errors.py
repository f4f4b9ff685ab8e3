from __future__ import annotations


class BMPError(ValueError):
    """Base class for errors raised while reading a BMP stream."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidFormat(BMPError):
    """The stream does not follow the BMP file format."""


class UnsupportedFormat(BMPError):
    """The stream is a valid BMP, but uses a layout this codec does not decode.

    Palette images, RLE compression and 24 bit pixels all end up here.
    """
