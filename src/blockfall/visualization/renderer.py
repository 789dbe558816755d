from __future__ import annotations

from typing import Tuple

import pygame

from blockfall.game import GameSnapshot


PALETTE = {
    0: (20, 20, 26),
    1: (0, 240, 240),    # cyan, I
    2: (240, 240, 0),    # yellow, O
    3: (160, 0, 240),    # magenta, T
    4: (230, 230, 230),  # white, L
    5: (0, 0, 240),      # blue, J
    6: (0, 240, 0),      # green, S
    7: (240, 0, 0),      # red, Z
}


def _color_for_value(v: int) -> Tuple[int, int, int]:
    return PALETTE.get(abs(v), (200, 200, 200))


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20, panel_width: int = 180) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.panel_width = panel_width

    def window_size(self, snapshot: GameSnapshot) -> Tuple[int, int]:
        h, w = snapshot.cells.shape
        width = w * self.cell_size + self.margin * 3 + self.panel_width
        height = h * self.cell_size + self.margin * 2
        return width, height

    def _grid_surface(self, snapshot: GameSnapshot) -> pygame.Surface:
        state = snapshot.composited()
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, _color_for_value(int(state[y, x])), rect)
        return surf

    def draw(self, screen: pygame.Surface, snapshot: GameSnapshot, font: pygame.font.Font) -> None:
        grid_surf = self._grid_surface(snapshot)
        screen.fill((10, 10, 14))
        screen.blit(grid_surf, (self.margin, self.margin))
        panel_x = self.margin * 2 + grid_surf.get_width()
        lines = [f"Score: {snapshot.score}", f"Lines: {snapshot.lines_cleared}"]
        if snapshot.game_over:
            lines += ["", "GAME OVER", "R: restart", "Esc: quit"]
        for i, text in enumerate(lines):
            screen.blit(font.render(text, True, (230, 230, 230)), (panel_x, self.margin + i * 28))
        pygame.display.flip()
