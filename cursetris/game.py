"""Falling-block game rules and state."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import Protocol, Sequence

from .pieces import Grid, ShapeSet, standard_tetrominoes

BOARD_WIDTH = 10
BOARD_HEIGHT = 20
EMPTY = "."
FILLED = "#"
HIGH_SCORE = 2200
POINTS_PER_LINE = 100
LINES_PER_LEVEL = 10


class Action(IntEnum):
    """Player commands."""

    NONE = 0
    QUIT = 1
    LEFT = 2
    RIGHT = 3
    DOWN = 4
    ROTATE = 5
    DROP = 6


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def load_high_score() -> int:
    """Return the stored high score."""
    return HIGH_SCORE


def _fall_interval(level: int) -> int:
    return max(1, 10 - (level - 1))


def _empty_row() -> list[str]:
    return [EMPTY] * BOARD_WIDTH


def is_valid_position(
    block: Sequence[Sequence[int]], x: int, y: int, board: Sequence[Sequence[str]]
) -> bool:
    """Tell whether ``block`` placed with its corner at (x, y) fits on ``board``."""
    height = len(board)
    width = len(board[0]) if height else 0
    for i, row in enumerate(block):
        for j, cell in enumerate(row):
            if cell != 1:
                continue
            by, bx = y + i, x + j
            if not (0 <= by < height and 0 <= bx < width):
                return False
            if board[by][bx] == FILLED:
                return False
    return True


class Game:
    """State of one game: the board, the falling piece, score and level."""

    def __init__(
        self,
        shapes: ShapeSet | None = None,
        rng: _RandomSource | None = None,
        sequential: bool = True,
    ) -> None:
        self.shapes: ShapeSet = shapes if shapes is not None else standard_tetrominoes()
        if not self.shapes:
            raise ValueError("at least one piece is required")
        self.rng: _RandomSource = rng if rng is not None else random.Random()
        self.sequential = sequential

        self.board: list[list[str]] = [_empty_row() for _ in range(BOARD_HEIGHT)]
        self.current_block: Grid = tuple(tuple(0 for _ in range(4)) for _ in range(4))
        self.current_tetromino = 0
        self.current_rotation = 0
        self.block_x = 0
        self.block_y = 0
        self.score = 0
        self.level = 1
        self.lines_cleared = 0
        self.high_score = load_high_score()
        self.running = True
        self.next_tetromino = self.rng.randrange(len(self.shapes))
        self.fall_timer = 0
        self.fall_interval = _fall_interval(self.level)
        self.spawn()

    def handle_action(self, action: Action | int) -> None:
        """Apply a player command; unknown commands are ignored."""
        try:
            action = Action(action)
        except ValueError:
            return
        if action is Action.QUIT:
            self.running = False
        elif action is Action.LEFT:
            self.move(-1, 0)
        elif action is Action.RIGHT:
            self.move(1, 0)
        elif action is Action.DOWN:
            self.move(0, 1)
        elif action is Action.ROTATE:
            self.rotate()
        elif action is Action.DROP:
            self.drop()

    def update(self) -> None:
        """Advance gravity by one frame."""
        self.fall_timer += 1
        if self.fall_timer >= self.fall_interval:
            self.move(0, 1)
            self.fall_timer = 0
            self.fall_interval = _fall_interval(self.level)

    def move(self, dx: int, dy: int) -> bool:
        """Shift the falling piece; a blocked downward step lands it.

        Returns True if the piece moved.
        """
        new_x, new_y = self.block_x + dx, self.block_y + dy
        if is_valid_position(self.current_block, new_x, new_y, self.board):
            self.block_x, self.block_y = new_x, new_y
            return True
        if dx == 0 and dy == 1:
            self.land()
            self.spawn()
            self.clear_lines()
        return False

    def drop(self) -> None:
        """Move the piece straight down until it lands."""
        while self.move(0, 1):
            pass

    def spawn(self) -> None:
        """Bring in the next piece at the top; end the game if it does not fit."""
        self.block_x = BOARD_WIDTH // 2 - 2
        self.block_y = 0
        self.current_tetromino = self.next_tetromino
        self.current_rotation = 0
        self.current_block = self.shapes[self.current_tetromino][0]
        count = len(self.shapes)
        if self.sequential:
            self.next_tetromino = (self.current_tetromino + 1) % count
        else:
            self.next_tetromino = self.rng.randrange(count)
        if not is_valid_position(self.current_block, self.block_x, self.block_y, self.board):
            self.running = False

    def land(self) -> None:
        """Fix the falling piece's cells onto the board."""
        for i, row in enumerate(self.current_block):
            for j, cell in enumerate(row):
                if cell == 1:
                    self.board[self.block_y + i][self.block_x + j] = FILLED

    def clear_lines(self) -> int:
        """Remove full rows, score them and return how many were removed."""
        kept: list[list[str]] = []
        removed = 0
        for row in self.board:
            if all(cell == FILLED for cell in row):
                removed += 1
                self.score += POINTS_PER_LINE * self.level
                self.lines_cleared += 1
                self.level = self.lines_cleared // LINES_PER_LEVEL + 1
                self.fall_interval = _fall_interval(self.level)
            else:
                kept.append(row)
        self.board = [_empty_row() for _ in range(removed)] + kept
        return removed

    def rotate(self) -> bool:
        """Turn the piece to its next rotation state if it fits there."""
        rotations = self.shapes[self.current_tetromino]
        next_rotation = (self.current_rotation + 1) % len(rotations)
        candidate = rotations[next_rotation]
        if is_valid_position(candidate, self.block_x, self.block_y, self.board):
            self.current_rotation = next_rotation
            self.current_block = candidate
            return True
        return False