from __future__ import annotations

import logging

import pytest

from mage.bmp import InvalidFormat, UnsupportedFormat, parse_image
from mage.image import RGBA


def disk_pixel(r: int, g: int, b: int, a: int) -> bytes:
    # RGBA masks store alpha in the lowest byte of the little-endian word
    return bytes([a, b, g, r])


def test_decodes_top_down_rows(build):
    data = build(
        2,
        -2,
        disk_pixel(1, 2, 3, 4) + disk_pixel(5, 6, 7, 8) + disk_pixel(9, 10, 11, 12) + disk_pixel(13, 14, 15, 16),
    )
    image = parse_image(data)
    assert (image.width, image.height) == (2, 2)
    assert image.read(0, 0) == RGBA(1, 2, 3, 4)
    assert image.read(1, 0) == RGBA(5, 6, 7, 8)
    assert image.read(0, 1) == RGBA(9, 10, 11, 12)
    assert image.read(1, 1) == RGBA(13, 14, 15, 16)


def test_decodes_bottom_up_rows(build):
    bottom = disk_pixel(0, 0, 255, 255)
    top = disk_pixel(255, 0, 0, 255)
    image = parse_image(build(1, 2, bottom + top))
    assert image.read(0, 0) == RGBA(255, 0, 0, 255)
    assert image.read(0, 1) == RGBA(0, 0, 255, 255)


@pytest.mark.parametrize("width, height", [(0, 0), (0, 5), (5, 0)])
def test_empty_images(build, width, height):
    image = parse_image(build(width, height))
    assert (image.width, image.height) == (width, height)
    assert list(image) == []


def test_zero_width_with_huge_height_is_empty(build):
    image = parse_image(build(0, -(2**31)))
    assert (image.width, image.height) == (0, 2**31)
    assert list(image) == []


def test_logs_mismatched_image_bytes(build, caplog):
    caplog.set_level(logging.DEBUG, logger="mage.bmp.decoder")
    data = build(1, -1, disk_pixel(1, 2, 3, 4) + bytes(4), image_bytes=8)
    assert parse_image(data).read(0, 0) == RGBA(1, 2, 3, 4)
    assert "Declared pixel data of 8 bytes, reading 4" in caplog.text


def test_accepts_zero_image_bytes(build):
    image = parse_image(build(1, -1, disk_pixel(1, 2, 3, 4), image_bytes=0))
    assert image.read(0, 0) == RGBA(1, 2, 3, 4)


def test_ignores_trailing_bytes(build):
    data = build(1, -1, disk_pixel(1, 2, 3, 4)) + b"\xde\xad"
    assert parse_image(data).read(0, 0) == RGBA(1, 2, 3, 4)


def test_rejects_data_shorter_than_file_size(build):
    data = build(2, -1, disk_pixel(1, 2, 3, 4) * 2)
    with pytest.raises(InvalidFormat, match="declares"):
        parse_image(data[:-1])


def test_rejects_missing_pixel_data(build):
    # headers agree with each other but the pixels were never written
    data = build(4, -4, b"", image_bytes=64)
    with pytest.raises(InvalidFormat, match="Pixel data needs"):
        parse_image(data)


def test_rejects_image_bytes_smaller_than_image(build):
    data = build(2, -1, disk_pixel(1, 2, 3, 4) * 2, image_bytes=4)
    with pytest.raises(InvalidFormat, match="too small"):
        parse_image(data)


def test_propagates_header_errors(build):
    with pytest.raises(UnsupportedFormat):
        parse_image(build(1, 1, bytes(4), bit_count=24))


def test_decoding_is_deterministic(build):
    data = build(2, 2, bytes(range(16)))
    assert parse_image(data) == parse_image(data)
