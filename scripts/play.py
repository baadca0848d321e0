#!/usr/bin/env python3
"""
CLI interface for recording and reviewing Gomoku games.
"""
import argparse
import logging
import sys
import os

# Add the parent directory to Python path so we can import gomoku
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from gomoku.config import SessionConfig
from gomoku.core.board import BOARD_SIZE, Point, Stone
from gomoku.core.errors import CorruptInputError
from gomoku.log import setup_logging
from gomoku.session import Session

logger = logging.getLogger("gomoku.play")

HELP = """Commands:
  x y          place the active stone at column x, row y
  u / r        undo / redo
  home / end   jump to the start / end of the game
  j N          jump to move N
  p            pass (switch the active stone)
  review       toggle review mode (no placing)
  lock         toggle stone lock
  hint         toggle win hint
  ord          toggle move numbers
  export       print the game URI
  import URI   load a game URI
  new          start a new game
  h            show this help
  q            quit"""


def display_board(session):
    """Display the current board state in ASCII format."""
    record = session.record
    ordinals = {}
    if session.show_ordinals:
        for i, move in enumerate(record.past_moves(), 1):
            ordinals[move.point] = i
    last = record.last_move()
    # Numbered cells need room for "[225X"
    width = 6 if session.show_ordinals else 3

    print("\n   ", end="")
    # Column headers
    for col in range(BOARD_SIZE):
        print(f"{col:>{width - 1}}", end=" ")
    print()

    print("   " + "-" * width * BOARD_SIZE)

    # Board rows
    for y in range(BOARD_SIZE):
        print(f"{y:2d}|", end="")
        for x in range(BOARD_SIZE):
            p = Point(x, y)
            stone = record.get(p)
            mark = {Stone.BLACK: "X", Stone.WHITE: "O"}.get(stone, ".")
            if p in ordinals:
                label = f"{ordinals[p]}{mark}"
            else:
                label = mark
            if last is not None and last.point == p:
                label = "[" + label
            print(f"{label:>{width - 1}}", end=" ")
        print(f"|{y:2d}")

    print("   " + "-" * width * BOARD_SIZE)
    print(f"Move {record.index()}/{record.total()}  "
          f"to play: {get_stone_name(session.stone)}"
          f"{' (locked)' if session.stone_locked else ''}"
          f"{'  [review]' if session.reviewing else ''}")

    win = record.first_win()
    if win is not None and session.show_win_hint:
        start, end = win.row
        print(f"{get_stone_name(session.winner())} wins at move {win.index}: "
              f"({start.x}, {start.y}) - ({end.x}, {end.y})")


def get_stone_name(stone):
    """Get display name for a stone."""
    return "Black (X)" if stone == Stone.BLACK else "White (O)"


def parse_move(move_input):
    """
    Parse move input from user.

    Args:
        move_input (str): User input like "7 7" or "7,7" (column first)

    Returns:
        Point: The point, or None if invalid
    """
    try:
        # Handle both space and comma separated input
        if ',' in move_input:
            parts = move_input.split(',')
        else:
            parts = move_input.split()

        if len(parts) != 2:
            return None

        x = int(parts[0].strip())
        y = int(parts[1].strip())

        # Validate range
        if 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE:
            return Point(x, y)
        else:
            return None

    except ValueError:
        return None


def ask_confirmation(consequence):
    """Ask the user to confirm a destructive action on stdin."""
    try:
        answer = input(f"This will {consequence}. Continue? [y/N] ").strip()
    except (KeyboardInterrupt, EOFError):
        return False
    return answer.lower() in ('y', 'yes')


def handle_command(session, line):
    """
    Run one command against the session.

    Returns:
        bool: False if the user quit, True to keep reading commands
    """
    line = line.strip()
    if not line:
        return True
    command, _, arg = line.partition(' ')
    command = command.lower()
    arg = arg.strip()

    if command in ('q', 'quit', 'exit'):
        return not session.can_close()
    elif command in ('h', 'help', '?'):
        print(HELP)
    elif command in ('u', 'undo'):
        if not session.undo():
            print("Nothing to undo.")
    elif command in ('r', 'redo'):
        if not session.redo():
            print("Nothing to redo.")
    elif command == 'home':
        session.home()
    elif command == 'end':
        session.end()
    elif command in ('j', 'jump'):
        try:
            target = int(arg)
        except ValueError:
            print("Usage: j N")
            return True
        if not 0 <= target <= session.record.total():
            print(f"Move number must be between 0 and {session.record.total()}.")
            return True
        session.jump(target)
    elif command in ('p', 'pass'):
        session.pass_turn()
    elif command == 'review':
        session.reviewing = not session.reviewing
    elif command == 'lock':
        session.stone_locked = not session.stone_locked
    elif command == 'hint':
        session.show_win_hint = not session.show_win_hint
    elif command == 'ord':
        session.show_ordinals = not session.show_ordinals
    elif command == 'export':
        print(session.export_uri())
    elif command == 'import':
        try:
            session.import_uri(arg)
        except CorruptInputError as e:
            print(f"Import failed: {e}")
    elif command == 'new':
        session.new_game()
    else:
        p = parse_move(line)
        if p is None:
            print("Invalid input! Please enter: x y (e.g., '7 7'), or 'h' for help")
        elif session.reviewing:
            print("Review mode is on; type 'review' to resume placing stones.")
        elif session.record.is_occupied(p):
            print(f"Position ({p.x}, {p.y}) is already occupied!")
        else:
            session.place(p)
    return True


def main(argv=None):
    """Main game loop."""
    parser = argparse.ArgumentParser(description='Record and review Gomoku games')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to a JSON session config')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        help='Logging level (DEBUG, INFO, WARNING, ...)')
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    config = SessionConfig.load(args.config) if args.config else SessionConfig()
    session = Session(config, confirm=ask_confirmation)
    logger.info("session started")

    print("=" * 60)
    print("           GOMOKU (Freestyle, five or more wins)")
    print("=" * 60)
    print(HELP)
    print("=" * 60)

    try:
        while True:
            display_board(session)
            line = input("> ")
            if not handle_command(session, line):
                break
    except (KeyboardInterrupt, EOFError):
        pass

    print("\nThanks for playing!")


if __name__ == "__main__":
    main()
