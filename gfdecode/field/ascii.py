from __future__ import annotations

import logging
from typing import List, Optional

from ..errors import MalformedEncoding, MalformedHeader, ParseError
from .alphabet import count_for_code, is_run_char

logger = logging.getLogger(__name__)

FILL_ZERO = ","
FILL_ONE = "!"
REPEAT_ROW = ":"
HEX_DIGITS = frozenset("0123456789ABCDEFabcdef")


def expand_runs(text: str, limit: Optional[int] = None) -> str:
    """Replace every run-length code with the character it repeats.

    Expansion stops once ``limit`` characters are produced; later passes only
    ever read a prefix of this output.
    """
    out: List[str] = []
    size = 0
    index = 0
    length = len(text)
    while index < length and (limit is None or size < limit):
        character = text[index]
        index += 1
        if not is_run_char(character):
            out.append(character)
            size += 1
            continue
        start = index - 1
        while index < length and is_run_char(text[index]):
            index += 1
        code = text[start:index]
        if index >= length:
            raise MalformedEncoding(f"Run-length code '{code}' at offset {start} has no character to repeat")
        count = count_for_code(code, None if limit is None else limit - size)
        if count <= 0:
            raise MalformedEncoding(f"Run-length code '{code}' at offset {start} has no weight")
        out.append(text[index] * count)
        size += count
        index += 1
    return "".join(out)


def expand_rows(text: str, line_word_count: int, limit: Optional[int] = None) -> str:
    """Expand row fill and row repeat shortcuts into plain hex digits."""
    if line_word_count <= 0:
        raise MalformedHeader("Line word count must be greater than zero")
    out: List[str] = []
    for character in text:
        if limit is not None and len(out) >= limit:
            break
        remaining = line_word_count - (len(out) % line_word_count)
        if character == FILL_ZERO:
            out.extend("0" * remaining)
        elif character == FILL_ONE:
            out.extend("F" * remaining)
        elif character == REPEAT_ROW:
            if len(out) < line_word_count:
                raise MalformedEncoding("Row repeat before the first complete row")
            out.extend(out[-line_word_count:])
        else:
            out.append(character)
    return "".join(out)


def pack_hex(text: str, total_byte_count: int, line_word_count: int) -> bytes:
    """Pack hex digit pairs into a buffer of exactly total_byte_count bytes."""
    needed = total_byte_count * 2
    if len(text) < needed and len(text) % line_word_count != 0:
        raise ParseError(f"Expanded data ends mid-row: {len(text)} of {needed} hex digits")
    digits = text[:needed]
    for offset, character in enumerate(digits):
        if character not in HEX_DIGITS:
            raise ParseError(f"Invalid hex digit {character!r} at offset {offset}")
    buffer = bytearray(bytes.fromhex(digits))
    if len(buffer) < total_byte_count:
        logger.debug("Zero-filling %d trailing bytes", total_byte_count - len(buffer))
        buffer.extend(bytes(total_byte_count - len(buffer)))
    return bytes(buffer)


def decode_ascii(text: str, total_byte_count: int, bytes_per_row: int) -> bytes:
    """Decode a run-length encoded hex payload into the raw bitmap buffer."""
    line_word_count = bytes_per_row * 2
    needed = total_byte_count * 2
    inflated = expand_runs(text, limit=needed)
    expanded = expand_rows(inflated, line_word_count, limit=needed)
    logger.debug(
        "ASCII payload: %d encoded, %d inflated, %d expanded characters",
        len(text),
        len(inflated),
        len(expanded),
    )
    return pack_hex(expanded, total_byte_count, line_word_count)
