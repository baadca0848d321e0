"""
Tests for the bit-level helpers of the record format.
"""
import pytest
from gomoku.core.binary import (deinterleave, interleave, read_var_u14,
                                write_var_u14, zigzag_decode, zigzag_encode)
from gomoku.core.errors import CorruptInputError


def test_zigzag_ordering():
    """Test that small magnitudes map to small codes."""
    assert [zigzag_encode(n) for n in (0, -1, 1, -2, 2, -7, 7)] == [0, 1, 2, 3, 4, 13, 14]


def test_zigzag_inverse():
    """Test that decoding inverts encoding over the board offsets."""
    for n in range(-8, 9):
        assert zigzag_decode(zigzag_encode(n)) == n
    for u in range(16):
        assert zigzag_encode(zigzag_decode(u)) == u


def test_interleave_bit_positions():
    """Test that x lands on even bits and y on odd bits."""
    assert interleave(0, 0) == 0
    assert interleave(1, 0) == 0b01
    assert interleave(0, 1) == 0b10
    assert interleave(0b11, 0b00) == 0b0101
    assert interleave(0b10, 0b01) == 0b0110
    assert interleave(0b1111, 0b1111) == 0xff
    assert interleave(0xffff, 0) == 0x55555555


def test_deinterleave_inverse():
    """Test that deinterleave recovers both coordinates."""
    for x in range(16):
        for y in range(16):
            assert deinterleave(interleave(x, y)) == (x, y)


def test_write_var_u14():
    """Test one and two byte encodings."""
    buf = bytearray()
    write_var_u14(buf, 0)
    write_var_u14(buf, 0x7f)
    write_var_u14(buf, 0x80)
    write_var_u14(buf, 0x3fff)

    assert bytes(buf) == b'\x00\x7f\x80\x01\xff\x7f'


@pytest.mark.parametrize("value", [-1, 0x4000])
def test_write_var_u14_rejects_out_of_range(value):
    """Test that values outside 14 bits are refused."""
    with pytest.raises(ValueError):
        write_var_u14(bytearray(), value)


def test_read_var_u14():
    """Test reading consecutive groups."""
    buf = b'\x05\xe6\x03\x7f'

    value, pos = read_var_u14(buf, 0)
    assert (value, pos) == (5, 1)
    value, pos = read_var_u14(buf, pos)
    assert (value, pos) == (486, 3)
    value, pos = read_var_u14(buf, pos)
    assert (value, pos) == (0x7f, 4)


@pytest.mark.parametrize("buf,pos", [
    (b'', 0),           # nothing left
    (b'\x00', 1),       # read past the end
    (b'\x80', 0),       # lone continuation byte
    (b'\x00\x81', 1),   # trailing continuation byte
    (b'\x80\x80', 0),   # second byte continues too
])
def test_read_var_u14_corrupt(buf, pos):
    """Test that truncated or overlong groups are rejected."""
    with pytest.raises(CorruptInputError):
        read_var_u14(buf, pos)
