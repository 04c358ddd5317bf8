from __future__ import annotations

from typing import List

from PIL import Image

from ..field import Bitmap


def bitmap_to_image(bitmap: Bitmap) -> Image.Image:
    # Pillow "1" mode stores 0 as black, printed dots are 1 bits.
    inverted = bytes(byte ^ 0xFF for byte in bitmap.buffer)
    return Image.frombytes("1", (bitmap.width, bitmap.height), inverted)


def bitmap_to_text(bitmap: Bitmap, on: str = "#", off: str = ".") -> str:
    lines: List[str] = []
    for y in range(bitmap.height):
        lines.append("".join(on if bitmap.get_pixel_bit(x, y) else off for x in range(bitmap.width)))
    return "\n".join(lines)
