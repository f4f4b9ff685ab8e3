from .image import RGBA, Image, make_gradient

__version__ = "0.1.0"

__all__ = ["Image", "make_gradient", "RGBA"]
