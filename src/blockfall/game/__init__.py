"""Game module for blockfall.

Exports the core game engine and supporting classes:
- TetrominoType / Color: the piece catalog and display colors
- Piece: live piece with a pure clockwise rotation
- GameGrid / Cell: board representation, collision and line clearing
- ScoringRules: line-clear score table
- BlockfallGame: piece lifecycle, scoring and game-over detection
"""

from .shapes import BOARD_HEIGHT, BOARD_WIDTH, Color, TetrominoType, color_for, glyph_for, shape_for
from .pieces import Piece, rotate_clockwise
from .grid import EMPTY, Cell, GameGrid
from .rules import ScoringRules
from .core import Action, BlockfallGame, GameConfig, GamePhase, GameSnapshot, resolve_rotation

__all__ = [
    "BOARD_HEIGHT",
    "BOARD_WIDTH",
    "Color",
    "TetrominoType",
    "color_for",
    "glyph_for",
    "shape_for",
    "Piece",
    "rotate_clockwise",
    "EMPTY",
    "Cell",
    "GameGrid",
    "ScoringRules",
    "Action",
    "BlockfallGame",
    "GameConfig",
    "GamePhase",
    "GameSnapshot",
    "resolve_rotation",
]
