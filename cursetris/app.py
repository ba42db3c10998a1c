"""Command-line entry point and frame loop."""

from __future__ import annotations

import argparse
import curses
import random
import time
from typing import Any, Sequence

from .game import Game
from .pieces import classic_tetrominoes, standard_tetrominoes
from .ui import Screen

FRAME_SECONDS = 0.05
DEFAULT_SEED = 888

_PIECE_SETS = {
    "standard": standard_tetrominoes,
    "classic": classic_tetrominoes,
}


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Read the command-line options."""
    parser = argparse.ArgumentParser(
        prog="cursetris", description="Falling-block puzzle game for the terminal."
    )
    parser.add_argument(
        "--pieces",
        choices=sorted(_PIECE_SETS),
        default="standard",
        help="piece set to play with (default: standard)",
    )
    parser.add_argument(
        "--random",
        action="store_true",
        help="pick each next piece at random instead of in turn",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help=f"random seed (default: {DEFAULT_SEED})",
    )
    parser.add_argument(
        "--debug", action="store_true", help="show the falling piece's position"
    )
    return parser.parse_args(argv)


def build_game(options: argparse.Namespace) -> Game:
    """Create a game configured by the parsed options."""
    shapes = _PIECE_SETS[options.pieces]()
    return Game(shapes, random.Random(options.seed), sequential=not options.random)


def run(stdscr: Any, game: Game, debug: bool = False) -> Game:
    """Play ``game`` on ``stdscr`` at a fixed frame rate until it ends."""
    screen = Screen(stdscr, debug)
    last_frame = time.monotonic()
    while game.running:
        now = time.monotonic()
        elapsed = now - last_frame
        if elapsed >= FRAME_SECONDS:
            screen.draw(game)
            game.handle_action(screen.read_action())
            game.update()
            last_frame = now
        else:
            time.sleep(FRAME_SECONDS - elapsed)
    screen.wait_for_key()
    return game


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game in the terminal."""
    options = parse_args(argv)
    game = build_game(options)
    curses.wrapper(run, game, options.debug)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())