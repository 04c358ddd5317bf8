from .alphabet import RUN_WEIGHTS, count_for_code, is_run_char
from .ascii import decode_ascii, expand_rows, expand_runs, pack_hex
from .parser import decode, parse_field, parse_header, strip_envelope
from .types import AsciiPayload, Bitmap, FieldHeader, Payload, Z64Payload
from .z64 import decode_z64, decode_z64_parts, inflate_z64, split_z64, z64_checksum

__all__ = [
    "AsciiPayload",
    "Bitmap",
    "count_for_code",
    "decode",
    "decode_ascii",
    "decode_z64",
    "decode_z64_parts",
    "expand_rows",
    "expand_runs",
    "FieldHeader",
    "inflate_z64",
    "is_run_char",
    "pack_hex",
    "parse_field",
    "parse_header",
    "Payload",
    "RUN_WEIGHTS",
    "split_z64",
    "strip_envelope",
    "z64_checksum",
    "Z64Payload",
]
