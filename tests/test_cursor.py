"""
Tests for the bounds-checked byte cursor
"""

import pytest
from construct import Int16ul, Int32ul, Struct

from dw2level import ByteCursor, FieldOverflow, OutOfBounds

Pair = Struct(
    "a" / Int16ul,
    "b" / Int32ul,
)


class TestReading:
    """Typed reads"""

    def test_little_endian_integers(self):
        cursor = ByteCursor(bytes([0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07]))
        assert cursor.read_u8() == 0x01
        assert cursor.read_u16() == 0x0302
        assert cursor.read_u32() == 0x07060504
        assert cursor.position == 7
        assert cursor.remaining == 0

    def test_big_endian_integers(self):
        cursor = ByteCursor(bytes([0x01, 0x02, 0x03, 0x04, 0x05, 0x06]), byteorder='>')
        assert cursor.read_u16() == 0x0102
        assert cursor.read_u32() == 0x03040506

    def test_invalid_byteorder(self):
        with pytest.raises(ValueError):
            ByteCursor(b'', byteorder='!')

    def test_read_bytes_and_fixed_string(self):
        cursor = ByteCursor(b'AB\x00\x00xyz')
        assert cursor.read_fixed_string(4) == 'AB'
        assert cursor.read_bytes(3) == b'xyz'

    def test_read_struct(self):
        cursor = ByteCursor(b'\x01\x00\x02\x00\x00\x00')
        record = cursor.read_struct(Pair)
        assert record.a == 1
        assert record.b == 2
        assert cursor.position == 6

    def test_overrun_names_range_and_keeps_position(self):
        cursor = ByteCursor(b'\x00\x01\x02')
        cursor.read_u8()
        with pytest.raises(OutOfBounds) as exc_info:
            cursor.read_u32()
        assert exc_info.value.start == 1
        assert exc_info.value.size == 4
        assert exc_info.value.limit == 3
        assert cursor.position == 1
        assert cursor.read_u16() == 0x0201

    def test_struct_overrun(self):
        cursor = ByteCursor(b'\x00' * 5)
        with pytest.raises(OutOfBounds):
            cursor.read_struct(Pair)
        assert cursor.position == 0

    def test_negative_read_size(self):
        with pytest.raises(OutOfBounds):
            ByteCursor(b'abc').read_bytes(-1)

    def test_peek_does_not_advance(self):
        cursor = ByteCursor(b'\x07\x08')
        assert cursor.peek_u8() == 7
        assert cursor.position == 0


class TestNavigation:
    """Seeking and slicing"""

    def test_seek(self):
        cursor = ByteCursor(b'\x00\x11\x22\x33')
        cursor.seek(2)
        assert cursor.read_u8() == 0x22
        cursor.seek(4)
        assert cursor.remaining == 0

    def test_seek_out_of_bounds(self):
        cursor = ByteCursor(b'\x00' * 4)
        with pytest.raises(OutOfBounds):
            cursor.seek(5)
        with pytest.raises(OutOfBounds):
            cursor.seek(-1)
        assert cursor.position == 0

    def test_skip(self):
        cursor = ByteCursor(b'\x00\x11\x22')
        cursor.skip(2)
        assert cursor.read_u8() == 0x22
        with pytest.raises(OutOfBounds):
            cursor.skip(1)

    def test_slice_is_confined(self):
        cursor = ByteCursor(bytes(range(10)))
        sub = cursor.slice(4, 3)
        assert sub.position == 4
        assert sub.start == 4
        assert sub.end == 7
        assert sub.read_bytes(3) == bytes([4, 5, 6])
        assert sub.consumed == 3
        with pytest.raises(OutOfBounds):
            sub.read_u8()
        with pytest.raises(OutOfBounds):
            sub.seek(3)
        assert cursor.position == 0

    def test_slice_out_of_bounds(self):
        cursor = ByteCursor(bytes(10))
        with pytest.raises(OutOfBounds):
            cursor.slice(8, 3)

    def test_window_out_of_bounds(self):
        with pytest.raises(OutOfBounds):
            ByteCursor(b'abc', start=1, end=5)


class TestWriting:
    """Write-mode duals"""

    def test_write_integers(self):
        cursor = ByteCursor.allocate(7)
        cursor.write_u8(0x01)
        cursor.write_u16(0x0302)
        cursor.write_u32(0x07060504)
        assert cursor.getvalue() == bytes([1, 2, 3, 4, 5, 6, 7])

    def test_write_big_endian(self):
        cursor = ByteCursor.allocate(2, byteorder='>')
        cursor.write_u16(0x0102)
        assert cursor.getvalue() == b'\x01\x02'

    def test_write_past_capacity(self):
        cursor = ByteCursor.allocate(3)
        cursor.write_u8(1)
        with pytest.raises(OutOfBounds):
            cursor.write_u32(0)
        assert cursor.position == 1
        assert cursor.getvalue() == b'\x01\x00\x00'

    def test_write_overflowing_value(self):
        cursor = ByteCursor.allocate(2)
        with pytest.raises(FieldOverflow) as exc_info:
            cursor.write_u16(0x10000)
        assert exc_info.value.field == 'u16'
        assert cursor.position == 0

    def test_write_negative_value(self):
        with pytest.raises(FieldOverflow):
            ByteCursor.allocate(1).write_u8(-1)

    def test_write_to_read_only_buffer(self):
        cursor = ByteCursor(b'\x00\x00')
        assert not cursor.writable
        with pytest.raises(TypeError):
            cursor.write_u8(1)

    def test_write_fixed_string(self):
        cursor = ByteCursor.allocate(6)
        cursor.write_fixed_string('DW2', 6)
        assert cursor.getvalue() == b'DW2\x00\x00\x00'

    def test_write_fixed_string_too_long(self):
        with pytest.raises(FieldOverflow):
            ByteCursor.allocate(2).write_fixed_string('DW2L', 2)

    def test_write_struct(self):
        cursor = ByteCursor.allocate(6)
        cursor.write_struct(Pair, dict(a=1, b=2))
        assert cursor.getvalue() == b'\x01\x00\x02\x00\x00\x00'

    def test_write_struct_overflow(self):
        cursor = ByteCursor.allocate(6)
        with pytest.raises(FieldOverflow):
            cursor.write_struct(Pair, dict(a=0x10000, b=0))
        assert cursor.position == 0

    def test_write_inside_slice(self):
        cursor = ByteCursor.allocate(6)
        sub = cursor.slice(2, 2)
        sub.write_u16(0xBEEF)
        with pytest.raises(OutOfBounds):
            sub.write_u8(0)
        assert cursor.getvalue() == b'\x00\x00\xEF\xBE\x00\x00'
