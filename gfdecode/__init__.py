from .errors import (
    DecompressionError,
    GraphicFieldError,
    MalformedEncoding,
    MalformedHeader,
    OutOfRange,
    ParseError,
    UnsupportedEncoding,
)
from .field import Bitmap, FieldHeader, decode, parse_field

__version__ = "0.1.0"

__all__ = [
    "Bitmap",
    "decode",
    "DecompressionError",
    "FieldHeader",
    "GraphicFieldError",
    "MalformedEncoding",
    "MalformedHeader",
    "OutOfRange",
    "parse_field",
    "ParseError",
    "UnsupportedEncoding",
]
