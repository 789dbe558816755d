from __future__ import annotations

from typing import List

from blockfall.game import GameSnapshot, TetrominoType, glyph_for


EMPTY_CELL = " ."
GLYPHS = {int(kind.value): glyph_for(kind) for kind in TetrominoType}


def board_lines(snapshot: GameSnapshot) -> List[str]:
    """Board rows as text, two characters per cell, framed by walls."""
    state = snapshot.composited()
    h, w = state.shape
    lines: List[str] = []
    for y in range(h):
        row = "".join(EMPTY_CELL if v == 0 else "[]" for v in state[y])
        lines.append(f"|{row}|")
    lines.append("+" + "--" * w + "+")
    return lines


def render_text(snapshot: GameSnapshot) -> str:
    lines = board_lines(snapshot)
    lines.append(f"Score: {snapshot.score}  Lines: {snapshot.lines_cleared}  Piece: {GLYPHS[int(snapshot.piece_kind)]}")
    if snapshot.game_over:
        lines.append("GAME OVER")
    return "\n".join(lines)
