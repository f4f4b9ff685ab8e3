from __future__ import annotations

import os
from typing import Optional, Union

from ..image import Image
from .decoder import parse_image
from .encoder import EncodeSettings, write_image

PathLike = Union[str, "os.PathLike[str]"]


def read_bmp(path: PathLike) -> Image:
    with open(path, "rb") as handle:
        data = handle.read()
    return parse_image(data)


def write_bmp(path: PathLike, image: Image, settings: Optional[EncodeSettings] = None) -> None:
    with open(path, "wb") as handle:
        write_image(handle, image, settings)
