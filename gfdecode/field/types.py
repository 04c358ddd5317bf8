from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from ..errors import MalformedHeader, OutOfRange
from .ascii import decode_ascii
from .z64 import decode_z64_parts, split_z64


@dataclass(frozen=True)
class FieldHeader:
    """Comma-delimited header of a graphic field."""

    compression: str
    total_byte_count: int
    field_byte_count: int
    bytes_per_row: int

    def validate(self) -> None:
        """Validate the counts describe a whole number of rows."""
        if self.bytes_per_row <= 0:
            raise MalformedHeader("Bytes per row must be greater than zero")
        if self.total_byte_count < 0 or self.field_byte_count < 0:
            raise MalformedHeader("Byte counts must not be negative")
        if self.total_byte_count % self.bytes_per_row != 0:
            raise MalformedHeader(
                f"Total byte count {self.total_byte_count} is not a multiple of "
                f"{self.bytes_per_row} bytes per row"
            )

    @property
    def width(self) -> int:
        return self.bytes_per_row * 8

    @property
    def height(self) -> int:
        return self.total_byte_count // self.bytes_per_row


@dataclass(frozen=True)
class AsciiPayload:
    """Run-length encoded hex payload."""

    text: str

    def decode(self, header: FieldHeader, verify_checksum: bool = False) -> bytes:
        return decode_ascii(self.text, header.total_byte_count, header.bytes_per_row)


@dataclass(frozen=True)
class Z64Payload:
    """Base64 encoded, zlib compressed payload and its checksum trailer."""

    data: str
    checksum: str

    @classmethod
    def from_text(cls, text: str) -> "Z64Payload":
        data, checksum = split_z64(text)
        return cls(data, checksum)

    def decode(self, header: FieldHeader, verify_checksum: bool = False) -> bytes:
        return decode_z64_parts(
            self.data,
            self.checksum,
            verify_checksum=verify_checksum,
            max_length=header.total_byte_count,
        )


Payload = Union[AsciiPayload, Z64Payload]


@dataclass(frozen=True)
class Bitmap:
    """Monochrome bitmap, eight pixels per byte with bit 7 leftmost."""

    width: int
    height: int
    buffer: bytes

    def validate(self) -> None:
        if self.width <= 0 or self.width % 8 != 0:
            raise MalformedHeader("Width must be a positive multiple of 8")
        if self.height < 0:
            raise MalformedHeader("Height must not be negative")
        if len(self.buffer) != self.height * self.bytes_per_row:
            raise MalformedHeader("Buffer length does not match bitmap dimensions")

    @property
    def bytes_per_row(self) -> int:
        return self.width // 8

    def get_pixel_bit(self, x: int, y: int) -> int:
        """Return 1 for a printed dot at (x, y), 0 otherwise."""
        if not 0 <= x < self.width or not 0 <= y < self.height:
            raise OutOfRange(f"Pixel ({x}, {y}) outside {self.width}x{self.height} bitmap")
        byte = self.buffer[y * self.bytes_per_row + x // 8]
        return (byte >> (7 - x % 8)) & 0x01

    def row(self, y: int) -> bytes:
        """Return the raw bytes of one row."""
        if not 0 <= y < self.height:
            raise OutOfRange(f"Row {y} outside {self.height} rows")
        start = y * self.bytes_per_row
        return self.buffer[start : start + self.bytes_per_row]

    def rows(self) -> Iterator[bytes]:
        for y in range(self.height):
            yield self.row(y)
