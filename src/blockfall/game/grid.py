from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np

from .pieces import Piece
from .shapes import BOARD_HEIGHT, BOARD_WIDTH, Color, Shape, require_square


@dataclass(frozen=True)
class Cell:
    """One board cell: empty when `color` is None, otherwise filled."""

    color: Optional[Color] = None

    @property
    def filled(self) -> bool:
        return self.color is not None

    @classmethod
    def from_value(cls, value: int) -> "Cell":
        return EMPTY if value == 0 else cls(Color(int(value)))


EMPTY = Cell()


class GameGrid:
    """Fixed-size board, row 0 at the top.

    The grid uses 0 for empty cells and `Color` values for filled cells.
    """

    def __init__(self) -> None:
        self.width = BOARD_WIDTH
        self.height = BOARD_HEIGHT
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> Cell:
        return Cell.from_value(int(self.grid[y, x]))

    def is_valid_position(self, shape: Shape, x: int, y: int) -> bool:
        require_square(shape)
        h, w = shape.shape
        for r in range(h):
            for c in range(w):
                if not shape[r, c]:
                    continue
                bx, by = x + c, y + r
                if bx < 0 or bx >= self.width or by >= self.height:
                    return False
                # Rows above the board are allowed and never collide
                if by >= 0 and self.grid[by, bx] != 0:
                    return False
        return True

    def place(self, piece: Piece) -> None:
        value = int(piece.color)
        for x, y in piece.cells():
            if self.is_inside(x, y):
                self.grid[y, x] = value

    def is_full_row(self, y: int) -> bool:
        return bool(np.all(self.grid[y] != 0))

    def clear_full_lines(self) -> int:
        """Remove full rows bottom-up and return how many were removed.

        Row 0 is never tested; the sweep stops once it reaches the top row.
        """
        cleared = 0
        y = self.height - 1
        while y > 0:
            if self.is_full_row(y):
                self.grid[1 : y + 1] = self.grid[0:y].copy()
                self.grid[0] = 0
                cleared += 1
            else:
                y -= 1
        return cleared

    def fill_row(self, y: int, color: Color, skip: Iterable[int] = ()) -> None:
        self.grid[y] = int(color)
        for x in skip:
            self.grid[y, x] = 0

    def filled_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
