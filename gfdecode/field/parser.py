from __future__ import annotations

import logging
import re
from typing import Tuple

from ..errors import DecompressionError, MalformedHeader, UnsupportedEncoding
from .types import AsciiPayload, Bitmap, FieldHeader, Payload, Z64Payload
from .z64 import is_z64

logger = logging.getLogger(__name__)

FIELD_PREFIX = "^GF"
FIELD_SUFFIX = "^FS"
ASCII_COMPRESSION = "A"

_COUNT_RE = re.compile(r"[0-9]+")


def strip_envelope(text: str) -> str:
    """Remove the '^GF' prefix and '^FS' suffix around a graphic field."""
    text = text.strip()
    if not text.startswith(FIELD_PREFIX + ASCII_COMPRESSION) and not text.startswith(ASCII_COMPRESSION):
        raise UnsupportedEncoding("Unsupported encoding: expected '^GFA' or 'A' field")
    if text.startswith(FIELD_PREFIX):
        text = text[len(FIELD_PREFIX) :]
    if text.endswith(FIELD_SUFFIX):
        text = text[: -len(FIELD_SUFFIX)]
    return text


def _parse_count(name: str, value: str) -> int:
    if not _COUNT_RE.fullmatch(value):
        raise MalformedHeader(f"Invalid {name}: {value!r}")
    return int(value)


def parse_header(text: str) -> Tuple[FieldHeader, str]:
    """Split 'tag,total,field,bytes_per_row,payload' into a header and payload text."""
    parts = text.split(",", 4)
    if len(parts) < 5:
        raise MalformedHeader("Graphic field header needs four comma separated values before the data")
    compression, total, field, per_row, payload = parts
    if compression != ASCII_COMPRESSION:
        raise UnsupportedEncoding(f"Unsupported compression type: {compression!r}")
    header = FieldHeader(
        compression=compression,
        total_byte_count=_parse_count("total byte count", total),
        field_byte_count=_parse_count("field byte count", field),
        bytes_per_row=_parse_count("bytes per row", per_row),
    )
    header.validate()
    return header, payload


def parse_field(text: str) -> Tuple[FieldHeader, Payload]:
    """Parse a graphic field into its header and tagged payload."""
    header, payload = parse_header(strip_envelope(text))
    if is_z64(payload):
        logger.debug("Z64 payload, header %s", header)
        return header, Z64Payload.from_text(payload)
    logger.debug("ASCII payload, header %s", header)
    return header, AsciiPayload(payload)


def decode(text: str, verify_checksum: bool = False) -> Bitmap:
    """Decode a graphic field into a Bitmap."""
    header, payload = parse_field(text)
    buffer = payload.decode(header, verify_checksum=verify_checksum)
    if len(buffer) != header.total_byte_count:
        raise DecompressionError(
            f"Decoded {len(buffer)} bytes, header declares {header.total_byte_count}"
        )
    bitmap = Bitmap(width=header.width, height=header.height, buffer=buffer)
    bitmap.validate()
    logger.debug("Decoded %dx%d bitmap", bitmap.width, bitmap.height)
    return bitmap
