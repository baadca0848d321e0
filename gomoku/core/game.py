"""
Game record implementation for Gomoku.
"""
from typing import NamedTuple, Optional, Tuple

from .board import Board, Point, Row, Stone
from .errors import OutOfRangeError


class Move(NamedTuple):
    """A stone placed at a point."""
    point: Point
    stone: Stone


class Win(NamedTuple):
    """A winning row and the move count at which it was completed."""
    index: int
    row: Row


class GameRecord:
    """
    Records a Gomoku game as a move history with a cursor.

    ``moves[:idx]`` are the stones currently on the board, in placement
    order. ``moves[idx:]`` are kept for redo but are not on the board. The
    record does not track whose turn it is; callers decide the stone of
    each move, and ``infer_turn`` gives the usual alternation.
    """

    def __init__(self):
        """Initialize an empty game record."""
        self.board = Board()
        self._moves = []
        self._idx = 0
        self._win: Optional[Win] = None

    # Queries

    def total(self) -> int:
        """Number of recorded moves, on or off the board."""
        return len(self._moves)

    def index(self) -> int:
        """Number of moves currently on the board."""
        return self._idx

    def past_moves(self) -> Tuple[Move, ...]:
        """Moves currently on the board, in placement order."""
        return tuple(self._moves[:self._idx])

    def future_moves(self) -> Tuple[Move, ...]:
        """Moves undone but still available for redo."""
        return tuple(self._moves[self._idx:])

    def first_win(self) -> Optional[Win]:
        """
        Get the first win witnessed in the past.

        Returns:
            Win or None: The cached win if it was completed at or before
            the current index, None otherwise
        """
        if self._win is not None and self._win.index <= self._idx:
            return self._win
        return None

    def get(self, p) -> Stone:
        """Get the stone at a point."""
        return self.board.get(p)

    def is_occupied(self, p) -> bool:
        return self.board.get(p) != Stone.NONE

    def last_move(self) -> Optional[Move]:
        if self._idx == 0:
            return None
        return self._moves[self._idx - 1]

    def infer_turn(self) -> Stone:
        """Infer the next stone to play: black first, then alternating."""
        if self._idx == 0:
            return Stone.BLACK
        return self._moves[self._idx - 1].stone.opposite()

    # Mutators

    def set(self, p, stone: Stone) -> bool:
        """
        Place a stone, discarding every move after the current index.

        The win cache is only recomputed when there is no cached win or the
        cached one lies in the discarded future.

        Args:
            p: Point to place the stone at
            stone: Stone.BLACK or Stone.WHITE

        Returns:
            bool: True if the stone was placed, False if the point is occupied

        Raises:
            OutOfRangeError: If the point is outside the board
            ValueError: If stone is Stone.NONE
        """
        stone = Stone(stone)
        if stone == Stone.NONE:
            raise ValueError("cannot place an empty stone")

        p = Point(*p)
        if self.board.get(p) != Stone.NONE:
            return False
        self.board.set(p, stone)

        del self._moves[self._idx:]
        self._moves.append(Move(p, stone))
        self._idx += 1

        if self._win is None or self._win.index >= self._idx:
            row = self.board.find_win_row(p)
            self._win = Win(self._idx, row) if row is not None else None
        return True

    def unset(self) -> bool:
        """Undo the last move on the board. Returns False if there is none."""
        if self._idx == 0:
            return False
        self._idx -= 1
        self.board.unset(self._moves[self._idx].point)
        return True

    def reset(self) -> bool:
        """Redo the next undone move. Returns False if there is none."""
        if self._idx >= len(self._moves):
            return False
        move = self._moves[self._idx]
        self._idx += 1
        self.board.set(move.point, move.stone)
        return True

    def jump(self, target: int) -> bool:
        """
        Move the cursor to ``target`` by undoing or redoing moves.

        Returns:
            bool: False if already at ``target``, True otherwise

        Raises:
            OutOfRangeError: If target is not in [0, total()]
        """
        if not 0 <= target <= len(self._moves):
            raise OutOfRangeError(
                f"index out of range: {target} (total {len(self._moves)})")
        if target == self._idx:
            return False

        if self._idx < target:
            for move in self._moves[self._idx:target]:
                self.board.set(move.point, move.stone)
        else:
            for move in reversed(self._moves[target:self._idx]):
                self.board.unset(move.point)
        self._idx = target
        return True

    def __eq__(self, other):
        if not isinstance(other, GameRecord):
            return NotImplemented
        return self._idx == other._idx and self._moves == other._moves

    def __repr__(self):
        return f"GameRecord(index={self._idx}, total={len(self._moves)})"
