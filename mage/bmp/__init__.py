from .decoder import parse_image
from .encoder import EncodeSettings, encode_image, write_image
from .errors import BMPError, InvalidFormat, UnsupportedFormat
from .files import read_bmp, write_bmp
from .header import parse_header
from .types import ColorFormat, ColorMasks, CompressionType, FileHeader, Header, ImageHeader

__all__ = [
    "BMPError",
    "ColorFormat",
    "ColorMasks",
    "CompressionType",
    "EncodeSettings",
    "encode_image",
    "FileHeader",
    "Header",
    "ImageHeader",
    "InvalidFormat",
    "parse_header",
    "parse_image",
    "read_bmp",
    "UnsupportedFormat",
    "write_bmp",
    "write_image",
]
