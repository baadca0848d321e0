"""
Binary codec for Gomoku game records.

Each move is written as one var-u14 group holding
``(interleave(zigzag(x - 7), zigzag(y - 7)) << 1) | colour`` where colour
is 0 for black and 1 for white. Only the moves on the board are written.
"""
import logging
from typing import Iterable, List

from .binary import (deinterleave, interleave, read_var_u14, write_var_u14,
                     zigzag_decode, zigzag_encode)
from .board import CENTER, Point, Stone, in_board
from .errors import CorruptInputError
from .game import GameRecord, Move

logger = logging.getLogger(__name__)


def pack_move(move: Move) -> int:
    """Pack a move into the integer written to the buffer."""
    point, stone = move
    if stone == Stone.NONE:
        raise ValueError("cannot encode an empty stone")
    index = interleave(zigzag_encode(point[0] - CENTER),
                       zigzag_encode(point[1] - CENTER))
    return (index << 1) | (int(stone) - 1)


def unpack_move(value: int) -> Move:
    """Inverse of ``pack_move``. The point is not bounds-checked."""
    stone = Stone((value & 1) + 1)
    ux, uy = deinterleave(value >> 1)
    return Move(Point(zigzag_decode(ux) + CENTER, zigzag_decode(uy) + CENTER), stone)


def encode_moves(moves: Iterable[Move]) -> bytes:
    """
    Encode a sequence of moves.

    Args:
        moves: Moves in placement order

    Returns:
        bytes: The encoded buffer
    """
    buf = bytearray()
    for move in moves:
        write_var_u14(buf, pack_move(move))
    return bytes(buf)


def encode_record(record: GameRecord) -> bytes:
    """Encode the moves currently on the board; undone moves are left out."""
    return encode_moves(record.past_moves())


def decode_record(data) -> GameRecord:
    """
    Decode a buffer into a fresh game record.

    Moves are replayed through ``GameRecord.set``, so the win cache ends up
    exactly as in live play. The returned record has its cursor at the end.

    Args:
        data: bytes-like buffer from ``encode_moves``

    Returns:
        GameRecord: The decoded record

    Raises:
        CorruptInputError: If a group is truncated or malformed, or a move
            lands outside the board or on an occupied point
    """
    data = bytes(data)
    record = GameRecord()
    pos = 0

    while pos < len(data):
        start = pos
        value, pos = read_var_u14(data, pos)
        point, stone = unpack_move(value)
        if not in_board(point):
            raise CorruptInputError(
                f"move {record.total() + 1} at offset {start} is off the board: {tuple(point)}")
        if not record.set(point, stone):
            raise CorruptInputError(
                f"move {record.total() + 1} at offset {start} reuses {tuple(point)}")

    logger.debug("decoded %d moves from %d bytes", record.total(), len(data))
    return record


def decode_moves(data) -> List[Move]:
    """Decode a buffer into its list of moves."""
    return list(decode_record(data).past_moves())
