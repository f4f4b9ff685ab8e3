from __future__ import annotations

SIGNATURE = b"BM"

FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
V4_HEADER_SIZE = 108
V5_HEADER_SIZE = 124
SUPPORTED_HEADER_SIZES = (INFO_HEADER_SIZE, V4_HEADER_SIZE, V5_HEADER_SIZE)

MASKS_OFFSET = FILE_HEADER_SIZE + INFO_HEADER_SIZE
MASKS_SIZE = 16

# 'sRGB' as a little-endian u32, i.e. the bytes b"BGRs" on disk
LCS_SRGB = 0x73524742
# CIEXYZTRIPLE endpoints (36) + three gamma values (12)
V4_RESERVED_SIZE = 48

PIXEL_DATA_OFFSET = FILE_HEADER_SIZE + V4_HEADER_SIZE
BYTES_PER_PIXEL = 4
SUPPORTED_BIT_COUNT = 32
PLANES = 1

# 72 DPI
DEFAULT_PIXELS_PER_METER = 2835
