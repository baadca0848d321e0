"""
Interactive Gomoku session.

A session wraps a game record together with the state a front end keeps
around it: the stone the next click places and a handful of display and
input flags. The record itself never reads these flags.
"""
import logging
from typing import Callable, Optional

from .config import SessionConfig
from .core.board import Stone
from .core.errors import CorruptInputError
from .core.game import GameRecord
from .core import uri

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[str], bool]


def _always(consequence: str) -> bool:
    return True


class Session:
    """
    Manages a Gomoku session for a single front end.

    Actions return True when they changed the record or the active stone,
    so the caller knows when to redraw.
    """

    def __init__(self,
                 config: Optional[SessionConfig] = None,
                 confirm: Optional[ConfirmCallback] = None):
        """
        Initialize a session with an empty record.

        Args:
            config: Initial flags, defaults to SessionConfig()
            confirm: Called with a description of a destructive consequence;
                the action goes ahead only if it returns True
        """
        config = config or SessionConfig()
        self.record = GameRecord()
        self.stone = Stone.BLACK
        self.reviewing = config.reviewing
        self.show_win_hint = config.show_win_hint
        self.show_ordinals = config.show_ordinals
        self.stone_locked = config.stone_locked
        self.confirm = confirm or _always

    def _updated(self):
        if not self.stone_locked:
            self.stone = self.record.infer_turn()

    # Playing

    def place(self, p) -> bool:
        """
        Place the active stone at a point.

        Refused while reviewing. If moves have been undone, placing discards
        them, so the user is asked first.

        Returns:
            bool: True if the stone was placed
        """
        if self.reviewing or self.record.is_occupied(p):
            return False

        future = len(self.record.future_moves())
        if future and not self.confirm(f"overwrite {future} future move(s)"):
            return False
        if not self.record.set(p, self.stone):
            return False

        self._updated()
        return True

    def pass_turn(self) -> bool:
        """Give the turn away by switching the active stone."""
        self.stone = self.stone.opposite()
        return True

    def winner(self) -> Optional[Stone]:
        """Stone of the win visible at the current index, if any."""
        win = self.record.first_win()
        if win is None:
            return None
        return self.record.get(win.row.start)

    # Navigation

    def undo(self) -> bool:
        if not self.record.unset():
            return False
        self._updated()
        return True

    def redo(self) -> bool:
        if not self.record.reset():
            return False
        self._updated()
        return True

    def jump(self, target: int) -> bool:
        if not self.record.jump(target):
            return False
        self._updated()
        return True

    def home(self) -> bool:
        return self.jump(0)

    def end(self) -> bool:
        return self.jump(self.record.total())

    # Import / export

    def export_uri(self) -> str:
        """Game URI of the moves currently on the board."""
        text = uri.export_uri(self.record)
        logger.info("exported %d moves", self.record.index())
        return text

    def import_uri(self, text: str) -> bool:
        """
        Replace the record with the one encoded in a game URI.

        The current record is left untouched if decoding fails or the user
        declines to overwrite a non-empty game. On success the session
        switches to reviewing.

        Returns:
            bool: True if the import was accepted

        Raises:
            CorruptInputError: If the URI or the record inside it is invalid
        """
        try:
            record = uri.import_uri(text)
        except CorruptInputError as e:
            logger.info("import failed: %s", e)
            raise

        if self.record.total() != 0 and not self.confirm(
                f"import {record.total()} move(s) and replace the current game"):
            return False

        if record != self.record:
            self.record = record
            self._updated()
        self.reviewing = True
        logger.info("imported %d moves", record.total())
        return True

    def new_game(self) -> bool:
        """Start over with an empty record."""
        if self.record.total() == 0:
            return False
        if not self.confirm(f"discard all {self.record.total()} move(s)"):
            return False
        self.record = GameRecord()
        self._updated()
        return True

    def can_close(self) -> bool:
        """Check whether the session may be closed, asking before losing moves."""
        return self.record.total() == 0 or self.confirm("lose the unsaved game")
