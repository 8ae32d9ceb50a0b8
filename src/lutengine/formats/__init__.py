from .base import (
    InvalidDirectiveError,
    LutParseError,
    MalformedSampleLineError,
    MissingDirectiveError,
    ParsedTable,
    SampleCountMismatchError,
    TableSource,
    UnsupportedFormatError,
)
from .cube import CubeSource, parse_cube
from .registry import SourceRegistry, load_lut, parse_lut
from .threedl import ThreeDLSource, parse_3dl

__all__ = [
    "InvalidDirectiveError",
    "LutParseError",
    "MalformedSampleLineError",
    "MissingDirectiveError",
    "ParsedTable",
    "SampleCountMismatchError",
    "TableSource",
    "UnsupportedFormatError",
    "CubeSource",
    "parse_cube",
    "SourceRegistry",
    "load_lut",
    "parse_lut",
    "ThreeDLSource",
    "parse_3dl",
]
