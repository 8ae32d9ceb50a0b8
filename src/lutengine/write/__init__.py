from .image import read_image, write_image
from .texture import export_texture, write_texture

__all__ = [
    "read_image",
    "write_image",
    "export_texture",
    "write_texture",
]
