from .loaders import BmpLoader, ImageLoader, LoaderRegistry, PillowLoader, load_any
from .pil import from_pil, show_image, to_pil

__all__ = [
    "BmpLoader",
    "from_pil",
    "ImageLoader",
    "load_any",
    "LoaderRegistry",
    "PillowLoader",
    "show_image",
    "to_pil",
]
