#!/usr/bin/env python3
"""
Minesweeper - interactive terminal game.

Usage:
    python main.py [--width W] [--height H] [--mines M] [--seed S]
                   [--emoji] [--verbose]

Commands at the prompt:
    o X Y   open the cell at column X, row Y (zero-based)
    f X Y   toggle a flag on the cell
    q       quit
"""
import argparse
import logging
from typing import Callable, Optional

from minesweeper import (
    ASCII_SYMBOLS,
    EMOJI_SYMBOLS,
    GameSession,
    GameState,
    MinesweeperError,
    PythonRandomSource,
)

logger = logging.getLogger(__name__)

HELP = "Commands: o X Y (open), f X Y (flag), q (quit)"


def handle_command(session: GameSession, line: str) -> Optional[str]:
    """
    Apply one command line to the session.

    Returns:
        A message to show the player, or None to quit.
    """
    parts = line.split()
    if not parts:
        return HELP
    command = parts[0].lower()
    if command in ("q", "quit"):
        return None
    if command not in ("o", "open", "f", "flag") or len(parts) != 3:
        return HELP

    try:
        x, y = int(parts[1]), int(parts[2])
    except ValueError:
        return "Coordinates must be integers"

    try:
        if command in ("o", "open"):
            result = session.open_field(x, y)
            return result.outcome.name
        toggled = session.toggle_flag(x, y)
        return "FLAG" if toggled else "NO_OP"
    except MinesweeperError as exc:
        return f"Error: {exc}"


def play(session: GameSession, read: Callable[[str], str] = input) -> None:
    """Run the prompt loop until the game ends or the player quits."""
    print(HELP)
    while True:
        print()
        print(session.get_state())
        state = session.game_state
        if state != GameState.PLAYING:
            print(f"\n*** {'WIN!' if state == GameState.WON else 'LOST (hit mine)'} ***")
            return

        print(f"Flags left: {session.remaining_flags}")
        try:
            line = read("> ")
        except EOFError:
            return

        message = handle_command(session, line)
        if message is None:
            return
        print(message)


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Minesweeper")
    parser.add_argument("--width", type=int, default=10, help="Number of columns")
    parser.add_argument("--height", type=int, default=10, help="Number of rows")
    parser.add_argument("--mines", type=int, default=5, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--emoji", action="store_true", help="Draw with emoji")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        session = GameSession(
            width=args.width,
            height=args.height,
            mine_count=args.mines,
            random_source=PythonRandomSource(args.seed),
            symbols=EMOJI_SYMBOLS if args.emoji else ASCII_SYMBOLS,
        )
    except MinesweeperError as exc:
        parser.error(str(exc))

    logger.debug("Session ready: %r", session.board.config)
    play(session)


if __name__ == "__main__":
    main()
