from __future__ import annotations

import os
from typing import Dict, Optional, Set

from PIL import Image as PILImage
from PIL import ImageOps

from ..bmp import read_bmp
from ..image import Image
from .pil import from_pil


class ImageLoader:
    def load(self, path: str) -> Image:
        raise NotImplementedError


class BmpLoader(ImageLoader):
    def load(self, path: str) -> Image:
        return read_bmp(path)


class PillowLoader(ImageLoader):
    def load(self, path: str) -> Image:
        with PILImage.open(path) as img:
            img = ImageOps.exif_transpose(img)
            return from_pil(img)


class LoaderRegistry:
    def __init__(self, loaders: Optional[Dict[str, ImageLoader]] = None) -> None:
        if loaders is None:
            loaders = {".bmp": BmpLoader()}
            pillow_loader = PillowLoader()
            for ext in (".png", ".jpg", ".jpeg", ".gif"):
                loaders[ext] = pillow_loader
        self._loaders = loaders

    @property
    def supported_extensions(self) -> Set[str]:
        return set(self._loaders.keys())

    def load(self, path: str) -> Image:
        if not os.path.isfile(path):
            raise FileNotFoundError(f"File not found: {path}")
        ext = os.path.splitext(path)[1].lower()
        loader = self._loaders.get(ext)
        if not loader:
            raise ValueError("Supported formats: " + ", ".join(sorted(self.supported_extensions)))
        return loader.load(path)


def load_any(path: str) -> Image:
    return LoaderRegistry().load(path)
