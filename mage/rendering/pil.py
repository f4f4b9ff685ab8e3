from __future__ import annotations

from typing import Optional

from PIL import Image as PILImage

from ..image import Image


def to_pil(image: Image) -> PILImage.Image:
    return PILImage.frombytes("RGBA", (image.width, image.height), image.to_bytes())


def from_pil(img: PILImage.Image) -> Image:
    if img.mode != "RGBA":
        img = img.convert("RGBA")
    width, height = img.size
    return Image.from_bytes(width, height, img.tobytes())


def show_image(image: Image, title: Optional[str] = None) -> None:
    """Hand the image to Pillow's external viewer."""
    if image.width == 0 or image.height == 0:
        raise ValueError("Cannot show an empty image")
    to_pil(image).show(title=title)
