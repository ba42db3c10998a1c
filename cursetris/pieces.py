"""Tetromino shape tables.

A shape set is a sequence of pieces. Each piece is a sequence of rotation
states, and each rotation state is a 4x4 grid of 0/1 cells.
"""

from __future__ import annotations

Grid = tuple[tuple[int, ...], ...]
Piece = tuple[Grid, ...]
ShapeSet = tuple[Piece, ...]


def _grid(*rows: str) -> Grid:
    return tuple(tuple(int(cell) for cell in row) for row in rows)


_I: Piece = (
    _grid("0000", "1111", "0000", "0000"),
    _grid("0010", "0010", "0010", "0010"),
)

_O: Piece = (
    _grid("0110", "0110", "0000", "0000"),
)

_T: Piece = (
    _grid("0100", "1110", "0000", "0000"),
    _grid("0100", "0110", "0100", "0000"),
    _grid("0000", "1110", "0100", "0000"),
    _grid("0100", "1100", "0100", "0000"),
)

_S: Piece = (
    _grid("0110", "1100", "0000", "0000"),
    _grid("0100", "0110", "0010", "0000"),
)

_Z: Piece = (
    _grid("1100", "0110", "0000", "0000"),
    _grid("0010", "0110", "0100", "0000"),
)

_J: Piece = (
    _grid("1000", "1110", "0000", "0000"),
    _grid("0110", "0100", "0100", "0000"),
    _grid("0000", "1110", "0010", "0000"),
    _grid("0100", "0100", "1100", "0000"),
)

_L: Piece = (
    _grid("0010", "1110", "0000", "0000"),
    _grid("0100", "0100", "0110", "0000"),
    _grid("0000", "1110", "1000", "0000"),
    _grid("1100", "0100", "0100", "0000"),
)


def standard_tetrominoes() -> ShapeSet:
    """Return all seven pieces in the order I, O, T, S, Z, J, L."""
    return (_I, _O, _T, _S, _Z, _J, _L)


def classic_tetrominoes() -> ShapeSet:
    """Return the reduced set holding only the I and O pieces."""
    return (_I, _O)