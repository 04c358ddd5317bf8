from __future__ import annotations

import base64
import binascii
import logging
import zlib
from typing import Optional, Tuple

from ..errors import DecompressionError

logger = logging.getLogger(__name__)

Z64_MARKER = ":Z64:"
CHECKSUM_LENGTH = 5


def is_z64(payload: str) -> bool:
    return payload.startswith(Z64_MARKER)


def split_z64(payload: str) -> Tuple[str, str]:
    """Split a Z64 payload into its base64 text and checksum trailer."""
    if not is_z64(payload):
        raise DecompressionError(f"Z64 payload must start with {Z64_MARKER}")
    if len(payload) < len(Z64_MARKER) + CHECKSUM_LENGTH:
        raise DecompressionError("Z64 payload is too short")
    data = payload[len(Z64_MARKER) : len(payload) - CHECKSUM_LENGTH]
    return data, payload[len(payload) - CHECKSUM_LENGTH :]


def z64_checksum(data: str) -> str:
    """Return the CRC-16/CCITT trailer (':XXXX') for base64 text."""
    return ":" + format(binascii.crc_hqx(data.encode("ascii"), 0), "04X")


def inflate_z64(data: str, max_length: Optional[int] = None) -> bytes:
    """Base64-decode and inflate the Z64 body, producing at most max_length bytes."""
    try:
        compressed = base64.b64decode(data, validate=True)
    except ValueError as exc:
        raise DecompressionError(f"Invalid base64 data: {exc}") from exc
    inflater = zlib.decompressobj()
    try:
        if max_length is None:
            buffer = inflater.decompress(compressed)
        else:
            buffer = inflater.decompress(compressed, max_length + 1)
    except zlib.error as exc:
        raise DecompressionError(f"Invalid compressed data: {exc}") from exc
    if max_length is not None and (len(buffer) > max_length or inflater.unconsumed_tail):
        raise DecompressionError(f"Compressed data inflates beyond {max_length} bytes")
    if not inflater.eof:
        raise DecompressionError("Invalid compressed data: incomplete stream")
    return buffer


def decode_z64_parts(
    data: str, checksum: str, verify_checksum: bool = False, max_length: Optional[int] = None
) -> bytes:
    """Inflate an already split Z64 body, optionally checking its trailer."""
    buffer = inflate_z64(data, max_length)
    if verify_checksum:
        expected = z64_checksum(data)
        if checksum.upper() != expected:
            raise DecompressionError(f"Checksum mismatch: got {checksum}, expected {expected}")
    else:
        logger.debug("Skipping Z64 checksum %s", checksum)
    logger.debug("Z64 payload: %d base64 characters, %d inflated bytes", len(data), len(buffer))
    return buffer


def decode_z64(payload: str, verify_checksum: bool = False, max_length: Optional[int] = None) -> bytes:
    """Decode a ':Z64:' payload into the raw bitmap buffer."""
    data, checksum = split_z64(payload)
    return decode_z64_parts(data, checksum, verify_checksum, max_length)
