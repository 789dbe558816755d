from __future__ import annotations

from enum import IntEnum
from typing import Dict

import numpy as np


BOARD_WIDTH = 10
BOARD_HEIGHT = 20


class TetrominoType(IntEnum):
    I = 1
    O = 2
    T = 3
    L = 4
    J = 5
    S = 6
    Z = 7


class Color(IntEnum):
    # 0 marks an empty cell in the board array
    CYAN = 1
    YELLOW = 2
    MAGENTA = 3
    WHITE = 4
    BLUE = 5
    GREEN = 6
    RED = 7


Shape = np.ndarray


def _shape(rows: list[str]) -> Shape:
    grid = np.array([[ch == "X" for ch in row] for row in rows], dtype=np.bool_)
    grid.setflags(write=False)
    return grid


BASE_SHAPES: Dict[TetrominoType, Shape] = {
    TetrominoType.I: _shape(["XXXX", "....", "....", "...."]),
    TetrominoType.O: _shape(["XX", "XX"]),
    TetrominoType.T: _shape([".X.", "XXX", "..."]),
    TetrominoType.L: _shape(["..X", "XXX", "..."]),
    TetrominoType.J: _shape(["X..", "XXX", "..."]),
    TetrominoType.S: _shape([".XX", "XX.", "..."]),
    TetrominoType.Z: _shape(["XX.", ".XX", "..."]),
}

COLORS: Dict[TetrominoType, Color] = {
    TetrominoType.I: Color.CYAN,
    TetrominoType.O: Color.YELLOW,
    TetrominoType.T: Color.MAGENTA,
    TetrominoType.L: Color.WHITE,
    TetrominoType.J: Color.BLUE,
    TetrominoType.S: Color.GREEN,
    TetrominoType.Z: Color.RED,
}


def shape_for(kind: TetrominoType) -> Shape:
    """Spawn-orientation occupancy grid for `kind` (read-only)."""
    return BASE_SHAPES[kind]


def color_for(kind: TetrominoType) -> Color:
    return COLORS[kind]


def glyph_for(kind: TetrominoType) -> str:
    return kind.name


def require_square(shape: Shape) -> None:
    if shape.ndim != 2 or shape.shape[0] != shape.shape[1]:
        raise ValueError(f"expected a square 2-D grid, got shape {shape.shape}")
