from __future__ import annotations


class GraphicFieldError(ValueError):
    """Base class for graphic field decoding failures."""


class UnsupportedEncoding(GraphicFieldError):
    """Field lacks a recognized envelope or compression marker."""


class MalformedHeader(GraphicFieldError):
    """Header fields are missing, non-numeric or inconsistent."""


class DecompressionError(GraphicFieldError):
    """Base64 or inflate rejected the compressed payload."""


class MalformedEncoding(GraphicFieldError):
    """Run-length code or row shortcut cannot be expanded."""


class ParseError(GraphicFieldError):
    """Expanded hex stream cannot be packed into the bitmap buffer."""


class OutOfRange(GraphicFieldError, IndexError):
    """Pixel query outside the bitmap dimensions."""
