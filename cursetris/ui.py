"""Terminal drawing and keyboard input."""

from __future__ import annotations

import curses
from typing import Any

from .game import BOARD_HEIGHT, BOARD_WIDTH, FILLED, Action, Game

OFFSET_X = 1
OFFSET_Y = 1
SIDEBAR_X = OFFSET_X + BOARD_WIDTH + 2

_KEY_ACTIONS = {
    ord("q"): Action.QUIT,
    curses.KEY_LEFT: Action.LEFT,
    curses.KEY_RIGHT: Action.RIGHT,
    curses.KEY_DOWN: Action.DOWN,
    curses.KEY_UP: Action.ROTATE,
    ord(" "): Action.DROP,
}


class _Canvas:
    """A sparse grid of characters that can be flattened into lines."""

    def __init__(self) -> None:
        self._rows: dict[int, dict[int, str]] = {}

    def put(self, y: int, x: int, text: str) -> None:
        row = self._rows.setdefault(y, {})
        for offset, char in enumerate(text):
            row[x + offset] = char

    def lines(self) -> list[str]:
        if not self._rows:
            return []
        result = []
        for y in range(max(self._rows) + 1):
            row = self._rows.get(y, {})
            width = max(row) + 1 if row else 0
            result.append("".join(row.get(x, " ") for x in range(width)))
        return result


def render_lines(game: Game, debug: bool = False) -> list[str]:
    """Lay out the board, the falling piece and the sidebar as text lines."""
    canvas = _Canvas()
    border = "+" + "-" * BOARD_WIDTH + "+"

    canvas.put(OFFSET_Y - 1, OFFSET_X - 1, border)
    for y, row in enumerate(game.board[:BOARD_HEIGHT]):
        line = "".join(row[:BOARD_WIDTH])
        canvas.put(OFFSET_Y + y, OFFSET_X - 1, "|" + line + "|")
    canvas.put(OFFSET_Y + BOARD_HEIGHT, OFFSET_X - 1, border)

    for i, block_row in enumerate(game.current_block):
        for j, cell in enumerate(block_row):
            if not cell:
                continue
            bx, by = game.block_x + j, game.block_y + i
            if 0 <= by < BOARD_HEIGHT and 0 <= bx < BOARD_WIDTH:
                canvas.put(OFFSET_Y + by, OFFSET_X + bx, FILLED)

    canvas.put(OFFSET_Y, SIDEBAR_X, f"Score: {game.score}")
    canvas.put(OFFSET_Y + 1, SIDEBAR_X, f"High Score: {game.high_score}")
    canvas.put(OFFSET_Y + 2, SIDEBAR_X, f"Level: {game.level}")
    canvas.put(OFFSET_Y + 4, SIDEBAR_X, "Next:")
    preview = game.shapes[game.next_tetromino][0]
    for i, preview_row in enumerate(preview):
        text = "".join(FILLED if cell else " " for cell in preview_row)
        canvas.put(OFFSET_Y + 5 + i, SIDEBAR_X, text)

    if debug:
        canvas.put(
            OFFSET_Y + BOARD_HEIGHT + 2,
            SIDEBAR_X,
            f"x:{game.block_x} y:{game.block_y} "
            f"r:{game.current_rotation} t:{game.current_tetromino}",
        )
    return canvas.lines()


def key_to_action(key: int) -> Action:
    """Map a key code to the player command it stands for."""
    return _KEY_ACTIONS.get(key, Action.NONE)


class Screen:
    """A curses window that shows a game and reads commands without blocking."""

    def __init__(self, stdscr: Any, debug: bool = False) -> None:
        self.stdscr = stdscr
        self.debug = debug
        stdscr.keypad(True)
        stdscr.timeout(0)
        try:
            curses.curs_set(0)
        except curses.error:
            pass

    def draw(self, game: Game) -> None:
        """Paint the current game state and refresh the window."""
        for y, line in enumerate(render_lines(game, self.debug)):
            if not line:
                continue
            try:
                self.stdscr.addstr(y, 0, line)
            except curses.error:
                # Text that falls outside a small terminal is dropped.
                pass
        self.stdscr.refresh()

    def read_action(self) -> Action:
        """Return the command for the pending key, or Action.NONE."""
        return key_to_action(self.stdscr.getch())

    def wait_for_key(self) -> int:
        """Block until a key is pressed and return its code."""
        self.stdscr.nodelay(False)
        return self.stdscr.getch()