"""
Bit-level helpers for the game record format.
"""
from typing import Tuple

from .errors import CorruptInputError

VAR_U14_MAX = 0x3fff


def zigzag_encode(n: int) -> int:
    """Map a signed integer to an unsigned one: 0, -1, 1, -2, 2 -> 0, 1, 2, 3, 4."""
    return n << 1 if n >= 0 else (-n << 1) - 1


def zigzag_decode(u: int) -> int:
    """Inverse of ``zigzag_encode``."""
    return (u >> 1) ^ -(u & 1)


def _scatter(x):
    x &= 0xffff
    x = (x | (x << 8)) & 0x00ff00ff
    x = (x | (x << 4)) & 0x0f0f0f0f
    x = (x | (x << 2)) & 0x33333333
    return (x | (x << 1)) & 0x55555555


def _gather(x):
    x &= 0x55555555
    x = (x | (x >> 1)) & 0x33333333
    x = (x | (x >> 2)) & 0x0f0f0f0f
    x = (x | (x >> 4)) & 0x00ff00ff
    return (x | (x >> 8)) & 0x0000ffff


def interleave(x: int, y: int) -> int:
    """
    Morton-encode two 16-bit values.

    Bits of ``x`` go to the even positions, bits of ``y`` to the odd ones.
    """
    return _scatter(x) | (_scatter(y) << 1)


def deinterleave(i: int) -> Tuple[int, int]:
    """Inverse of ``interleave``."""
    return _gather(i), _gather(i >> 1)


def write_var_u14(buf: bytearray, value: int) -> None:
    """
    Append a value in [0, 16383] as one or two bytes.

    Values below 128 take one byte. Larger values are written low 7 bits
    first with the high bit set, then the next 7 bits.

    Raises:
        ValueError: If value does not fit in 14 bits
    """
    if not 0 <= value <= VAR_U14_MAX:
        raise ValueError(f"value does not fit in 14 bits: {value}")
    if value & 0x3f80:
        buf.append((value & 0x7f) | 0x80)
        value >>= 7
    buf.append(value & 0x7f)


def read_var_u14(buf, pos: int) -> Tuple[int, int]:
    """
    Read one value written by ``write_var_u14``.

    Args:
        buf: bytes-like object to read from
        pos: Offset of the first byte of the group

    Returns:
        tuple: (value, offset just past the group)

    Raises:
        CorruptInputError: If the buffer ends inside the group or the second
            byte carries a continuation bit
    """
    if pos >= len(buf):
        raise CorruptInputError(f"unexpected end of data at offset {pos}")

    lo = buf[pos]
    pos += 1
    hi = 0
    if lo & 0x80:
        if pos >= len(buf):
            raise CorruptInputError(f"truncated group at offset {pos - 1}")
        hi = buf[pos]
        pos += 1
        if hi & 0x80:
            raise CorruptInputError(f"group longer than two bytes at offset {pos - 2}")
    return (hi << 7) | (lo & 0x7f), pos
