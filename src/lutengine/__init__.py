from __future__ import annotations

__version__ = "0.3.0"

from .color import LUTApplication, transform, transform_image
from .formats import (
    LutParseError,
    MalformedSampleLineError,
    MissingDirectiveError,
    SampleCountMismatchError,
    load_lut,
    parse_3dl,
    parse_cube,
    parse_lut,
)
from .lattice import LatticeTable, build_lattice
from .write import export_texture

__all__ = [
    "__version__",
    "LUTApplication",
    "transform",
    "transform_image",
    "LutParseError",
    "MalformedSampleLineError",
    "MissingDirectiveError",
    "SampleCountMismatchError",
    "load_lut",
    "parse_3dl",
    "parse_cube",
    "parse_lut",
    "LatticeTable",
    "build_lattice",
    "export_texture",
]
