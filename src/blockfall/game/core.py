from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Optional, Tuple

import numpy as np

from .grid import Cell, GameGrid
from .pieces import Piece
from .rules import ScoringRules
from .shapes import Color, TetrominoType


logger = logging.getLogger(__name__)

ROTATION_KICKS: Tuple[int, ...] = (0, -1, 1)


class Action(IntEnum):
    QUIT = 0
    LEFT = 1
    RIGHT = 2
    SOFT_DROP = 3
    ROTATE = 4


class GamePhase(Enum):
    RUNNING = auto()
    GAME_OVER = auto()


@dataclass
class GameConfig:
    random_seed: Optional[int] = None
    tick_interval_ms: int = 500
    input_poll_ms: int = 50


@dataclass(frozen=True, eq=False)
class GameSnapshot:
    """Read-only view of the game handed to renderers."""

    cells: np.ndarray
    piece_kind: TetrominoType
    piece_cells: Tuple[Tuple[int, int], ...]
    piece_color: Color
    score: int
    lines_cleared: int
    game_over: bool

    def cell_at(self, x: int, y: int) -> Cell:
        return Cell.from_value(int(self.cells[y, x]))

    def composited(self) -> np.ndarray:
        """Board values with the live piece drawn in its color."""
        out = self.cells.copy()
        h, w = out.shape
        for x, y in self.piece_cells:
            if 0 <= y < h and 0 <= x < w:
                out[y, x] = int(self.piece_color)
        return out


def resolve_rotation(grid: GameGrid, piece: Piece) -> Optional[Piece]:
    """First valid clockwise rotation of `piece`, trying kicks of 0, -1, +1 columns."""
    rotated = piece.rotate_clockwise()
    for dx in ROTATION_KICKS:
        if grid.is_valid_position(rotated, piece.x + dx, piece.y):
            return piece.with_grid(rotated, piece.x + dx)
    return None


class BlockfallGame:
    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.rng = random.Random(self.config.random_seed)
        self.grid = GameGrid()
        self.score = 0
        self.lines_cleared_total = 0
        self.pieces_spawned = 0
        self.phase = GamePhase.RUNNING
        self.last_tick = 0.0
        self.current_piece: Piece
        self.reset()

    @property
    def game_over(self) -> bool:
        return self.phase is GamePhase.GAME_OVER

    @property
    def tick_interval(self) -> float:
        return self.config.tick_interval_ms / 1000.0

    def reset(self, now: float = 0.0) -> None:
        self.grid.reset()
        self.score = 0
        self.lines_cleared_total = 0
        self.pieces_spawned = 0
        self.phase = GamePhase.RUNNING
        self.last_tick = now
        self.spawn_piece()

    def _random_kind(self) -> TetrominoType:
        return self.rng.choice(list(TetrominoType))

    def spawn_piece(self, kind: Optional[TetrominoType] = None) -> None:
        self.current_piece = Piece.spawn(kind if kind is not None else self._random_kind())
        self.pieces_spawned += 1
        piece = self.current_piece
        # Immediate collision check: if the spawn position is blocked, game over
        if not self.grid.is_valid_position(piece.grid, piece.x, piece.y):
            self.phase = GamePhase.GAME_OVER
            logger.info("game over: %s blocked at spawn, score=%d", piece.kind.name, self.score)

    def _move(self, dx: int, dy: int) -> bool:
        if self.game_over:
            return False
        candidate = self.current_piece.moved(dx, dy)
        if not self.grid.is_valid_position(candidate.grid, candidate.x, candidate.y):
            return False
        self.current_piece = candidate
        return True

    def move_left(self) -> bool:
        return self._move(-1, 0)

    def move_right(self) -> bool:
        return self._move(1, 0)

    def soft_drop(self) -> bool:
        return self._move(0, 1)

    def rotate(self) -> bool:
        if self.game_over:
            return False
        rotated = resolve_rotation(self.grid, self.current_piece)
        if rotated is None:
            return False
        self.current_piece = rotated
        return True

    def _lock_piece(self) -> int:
        piece = self.current_piece
        self.grid.place(piece)
        lines = self.grid.clear_full_lines()
        self.lines_cleared_total += lines
        self.score += self.rules.score_for_lines(lines)
        logger.debug("locked %s at (%d, %d), cleared %d", piece.kind.name, piece.x, piece.y, lines)
        return lines

    def tick(self) -> None:
        if self.game_over:
            return
        if not self._move(0, 1):
            self._lock_piece()
            self.spawn_piece()

    def tick_if_due(self, now: float) -> bool:
        if now - self.last_tick < self.tick_interval:
            return False
        self.tick()
        self.last_tick = now
        return True

    def apply(self, action: Action) -> bool:
        if action == Action.LEFT:
            return self.move_left()
        if action == Action.RIGHT:
            return self.move_right()
        if action == Action.SOFT_DROP:
            return self.soft_drop()
        if action == Action.ROTATE:
            return self.rotate()
        if action == Action.QUIT:
            # Handled by the adapter; the engine has nothing to do
            return False
        raise ValueError(f"unknown action: {action!r}")

    def snapshot(self) -> GameSnapshot:
        cells = self.grid.clone_state()
        cells.setflags(write=False)
        piece = self.current_piece
        return GameSnapshot(
            cells=cells,
            piece_kind=piece.kind,
            piece_cells=tuple(piece.cells()),
            piece_color=piece.color,
            score=self.score,
            lines_cleared=self.lines_cleared_total,
            game_over=self.game_over,
        )

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid for observation
        state = self.grid.clone_state()
        if not self.game_over:
            for x, y in self.current_piece.cells():
                if self.grid.is_inside(x, y):
                    # Use negative to indicate falling piece overlay
                    state[y, x] = -int(self.current_piece.color)
        return state
