from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from .shapes import BOARD_WIDTH, Color, Shape, TetrominoType, color_for, require_square, shape_for


def rotate_clockwise(shape: Shape) -> Shape:
    """Return `shape` turned 90 degrees clockwise as a new array.

    For an n x n grid, output cell (j, n-1-i) holds input cell (i, j).
    """
    require_square(shape)
    return np.rot90(shape, 1, axes=(1, 0)).copy()


@dataclass(eq=False)
class Piece:
    kind: TetrominoType
    grid: Shape = field(repr=False)
    x: int = 0
    y: int = 0

    @classmethod
    def spawn(cls, kind: TetrominoType) -> "Piece":
        grid = shape_for(kind).copy()
        width = grid.shape[1]
        return cls(kind=kind, grid=grid, x=(BOARD_WIDTH - width) // 2, y=0)

    @property
    def color(self) -> Color:
        return color_for(self.kind)

    def rotate_clockwise(self) -> Shape:
        # Pure: the caller decides whether to commit the result
        return rotate_clockwise(self.grid)

    def moved(self, dx: int, dy: int) -> "Piece":
        return Piece(self.kind, self.grid, self.x + dx, self.y + dy)

    def with_grid(self, grid: Shape, x: int) -> "Piece":
        return Piece(self.kind, grid, x, self.y)

    def cells_at(self, origin_x: int, origin_y: int) -> List[Tuple[int, int]]:
        cells: List[Tuple[int, int]] = []
        h, w = self.grid.shape
        for dy in range(h):
            for dx in range(w):
                if self.grid[dy, dx]:
                    cells.append((origin_x + dx, origin_y + dy))
        return cells

    def cells(self) -> List[Tuple[int, int]]:
        return self.cells_at(self.x, self.y)
