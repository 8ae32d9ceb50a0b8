from .application import LUTApplication
from .transform import sample_lattice, transform, transform_image

__all__ = ["LUTApplication", "sample_lattice", "transform", "transform_image"]
