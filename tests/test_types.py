import pytest

from gfdecode.errors import MalformedHeader, OutOfRange
from gfdecode.field.types import Bitmap, FieldHeader


@pytest.mark.parametrize("total, per_row, width, height", [(4, 1, 8, 4), (60, 30, 240, 2), (0, 3, 24, 0)])
def test_header_dimensions(total, per_row, width, height):
    header = FieldHeader("A", total, total, per_row)
    header.validate()
    assert header.width == width
    assert header.height == height


@pytest.mark.parametrize("total, per_row", [(4, 0), (5, 2), (-2, 1)])
def test_header_validate(total, per_row):
    with pytest.raises(MalformedHeader):
        FieldHeader("A", total, total, per_row).validate()


def test_pixel_bits_of_full_byte():
    bitmap = Bitmap(8, 1, b"\xff")
    assert [bitmap.get_pixel_bit(x, 0) for x in range(8)] == [1] * 8


def test_pixel_bits_of_empty_byte():
    bitmap = Bitmap(8, 1, b"\x00")
    assert [bitmap.get_pixel_bit(x, 0) for x in range(8)] == [0] * 8


def test_pixel_bit_order_is_msb_first():
    bitmap = Bitmap(16, 2, b"\x80\x00\x00\x01")
    assert bitmap.get_pixel_bit(0, 0) == 1
    assert bitmap.get_pixel_bit(1, 0) == 0
    assert bitmap.get_pixel_bit(15, 1) == 1
    assert bitmap.get_pixel_bit(7, 1) == 0


@pytest.mark.parametrize("x, y", [(8, 0), (0, 2), (-1, 0), (0, -1)])
def test_pixel_out_of_range(x, y):
    bitmap = Bitmap(8, 2, b"\xff\x00")
    with pytest.raises(OutOfRange):
        bitmap.get_pixel_bit(x, y)
    with pytest.raises(IndexError):
        bitmap.get_pixel_bit(x, y)


def test_every_pixel_readable():
    bitmap = Bitmap(24, 3, bytes(range(9)))
    bits = [bitmap.get_pixel_bit(x, y) for y in range(bitmap.height) for x in range(bitmap.width)]
    assert len(bits) == 72
    assert sum(bits) == sum(bin(value).count("1") for value in range(9))


def test_rows():
    bitmap = Bitmap(16, 2, b"\x01\x02\x03\x04")
    assert list(bitmap.rows()) == [b"\x01\x02", b"\x03\x04"]
    with pytest.raises(OutOfRange):
        bitmap.row(2)


def test_validate_buffer_length():
    with pytest.raises(MalformedHeader):
        Bitmap(8, 2, b"\xff").validate()
