from __future__ import annotations

from typing import Dict, Optional

import pygame

from blockfall.game import Action, BlockfallGame
from .renderer import Renderer


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_UP: Action.ROTATE,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_ESCAPE: Action.QUIT,
}


def _now() -> float:
    return pygame.time.get_ticks() / 1000.0


def run(game: Optional[BlockfallGame] = None) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = game or BlockfallGame()
        renderer = Renderer(cell_size=28)
        font = pygame.font.SysFont(None, 28)

        screen = pygame.display.set_mode(renderer.window_size(game.snapshot()))
        pygame.display.set_caption("Blockfall")

        game.last_tick = _now()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_r and game.game_over:
                        game.reset(_now())
                        continue
                    action = KEY_TO_ACTION.get(event.key)
                    if action is Action.QUIT:
                        running = False
                    elif action is not None:
                        game.apply(action)

            game.tick_if_due(_now())
            renderer.draw(screen, game.snapshot(), font)
            clock.tick(1000 // game.config.input_poll_ms)
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
