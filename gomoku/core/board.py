"""
Board implementation for Gomoku game.
"""
from enum import Enum, IntEnum
from typing import NamedTuple, Optional, Tuple

import numpy as np

from .errors import OutOfRangeError

BOARD_SIZE = 15
CENTER = BOARD_SIZE // 2
WIN_LENGTH = 5


class Stone(IntEnum):
    """A stone on the board, or the absence of one."""
    NONE = 0
    BLACK = 1
    WHITE = 2

    def opposite(self) -> 'Stone':
        """Return the stone of the other player (NONE stays NONE)."""
        if self is Stone.NONE:
            return self
        return Stone(self ^ 3)


def opposite(stone: Stone) -> Stone:
    return Stone(stone).opposite()


class Axis(Enum):
    """The four undirected lines through a point, as unit vectors (dx, dy)."""
    VERTICAL = (0, 1)
    ASCENDING = (1, -1)
    HORIZONTAL = (1, 0)
    DESCENDING = (1, 1)


# Scan order for win detection; the first axis that wins is the one reported.
AXES = (Axis.VERTICAL, Axis.ASCENDING, Axis.HORIZONTAL, Axis.DESCENDING)


class Point(NamedTuple):
    """A board coordinate. x grows to the right, y grows downwards."""
    x: int
    y: int

    def adjacent(self, axis: Axis, forward: bool = True) -> 'Point':
        """
        Get the neighbouring point along an axis.

        The result is not bounds-checked and may lie outside the board.

        Args:
            axis: Axis to step along
            forward: Step along the unit vector if True, against it otherwise

        Returns:
            Point: The adjacent point
        """
        dx, dy = axis.value
        if forward:
            return Point(self.x + dx, self.y + dy)
        return Point(self.x - dx, self.y - dy)


class Row(NamedTuple):
    """Inclusive endpoints of a run of same-coloured stones."""
    start: Point
    end: Point


def in_board(p) -> bool:
    """Check whether a point lies on the 15x15 board."""
    return 0 <= p[0] < BOARD_SIZE and 0 <= p[1] < BOARD_SIZE


class Board:
    """
    Represents a 15x15 Gomoku board.

    Board state representation (``state[y, x]``):
    - 0: empty cell
    - 1: black stone
    - 2: white stone

    The board only stores stones. It does not check occupancy on writes;
    that is the job of the game record that owns it.
    """

    def __init__(self):
        """Initialize an empty 15x15 board."""
        self.size = BOARD_SIZE
        self.state = np.zeros((self.size, self.size), dtype=np.int8)

    def _check(self, p) -> Point:
        if not in_board(p):
            raise OutOfRangeError(f"point out of board: {tuple(p)}")
        return Point(*p)

    def get(self, p) -> Stone:
        """
        Get the stone at a point.

        Raises:
            OutOfRangeError: If the point is outside the board
        """
        x, y = self._check(p)
        return Stone(int(self.state[y, x]))

    def set(self, p, stone: Stone) -> None:
        """Put a stone at a point, overwriting whatever is there."""
        x, y = self._check(p)
        self.state[y, x] = int(stone)

    def unset(self, p) -> None:
        """Clear a point."""
        x, y = self._check(p)
        self.state[y, x] = int(Stone.NONE)

    def scan_row(self, p, axis: Axis) -> Tuple[Row, int]:
        """
        Scan the run of stones through a point along an axis.

        Walks backward then forward from ``p`` while the next point is on the
        board and holds the same stone as ``p``.

        Args:
            p: Starting point
            axis: Axis to scan along

        Returns:
            tuple: (Row, length) where length counts ``p`` itself
        """
        p = self._check(p)
        stone = self.state[p.y, p.x]
        length = 1

        ends = []
        for forward in (False, True):
            cur = p
            nxt = cur.adjacent(axis, forward)
            while in_board(nxt) and self.state[nxt.y, nxt.x] == stone:
                length += 1
                cur = nxt
                nxt = cur.adjacent(axis, forward)
            ends.append(cur)

        return Row(ends[0], ends[1]), length

    def find_win_row(self, p) -> Optional[Row]:
        """
        Search for a winning row through a point.

        Overlines count: any run of five or more stones wins.

        Args:
            p: Point of the stone just placed

        Returns:
            Row or None: Row of the first axis in AXES with a run of at
            least five stones, None if there is none or ``p`` is empty
        """
        if self.get(p) == Stone.NONE:
            return None

        for axis in AXES:
            row, length = self.scan_row(p, axis)
            if length >= WIN_LENGTH:
                return row
        return None

    def count(self) -> int:
        """Number of stones on the board."""
        return int(np.count_nonzero(self.state))

    def copy(self) -> 'Board':
        board = Board()
        board.state = self.state.copy()
        return board

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.state, other.state))

    def __repr__(self):
        chars = {Stone.NONE: '.', Stone.BLACK: 'X', Stone.WHITE: 'O'}
        return '\n'.join(
            ' '.join(chars[Stone(int(v))] for v in row) for row in self.state
        )
