from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from blockfall.game import Action, BlockfallGame, GameConfig
from blockfall.visualization.renderer import PALETTE
from blockfall.visualization.text import render_text


# Index 0 lets gravity act alone
ENV_ACTIONS: Tuple[Optional[Action], ...] = (
    None,
    Action.LEFT,
    Action.RIGHT,
    Action.SOFT_DROP,
    Action.ROTATE,
)


class FallingBlocksEnv(gym.Env):
    metadata = {"render_modes": ["ansi", "rgb_array"], "render_fps": 2}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 max_episode_steps: int = 5000,
                 step_penalty: float = 0.0,
                 terminal_penalty: float = 0.0) -> None:
        super().__init__()
        self.game = BlockfallGame(config)
        self.render_mode = render_mode
        self.max_episode_steps = int(max_episode_steps)
        self.step_penalty = float(step_penalty)
        self.terminal_penalty = float(terminal_penalty)

        h, w = self.game.grid.height, self.game.grid.width
        # Board values 1..7, live piece overlaid as -1..-7
        self.observation_space = spaces.Box(low=-7, high=7, shape=(h, w), dtype=np.int8)
        self.action_space = spaces.Discrete(len(ENV_ACTIONS))

        self._steps = 0

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "lines_cleared_total": self.game.lines_cleared_total,
            "pieces_spawned": self.game.pieces_spawned,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game.rng.seed(seed)
        self.game.reset()
        self._steps = 0
        return self.game.get_state(), self._get_info()

    def step(self, action: int):
        if not 0 <= int(action) < len(ENV_ACTIONS):
            raise ValueError(f"action out of range: {action!r}")
        score_before = self.game.score

        command = ENV_ACTIONS[int(action)]
        moved = self.game.apply(command) if command is not None else False
        self.game.tick()
        self._steps += 1

        reward = float(self.game.score - score_before) + self.step_penalty
        terminated = self.game.game_over
        truncated = not terminated and self._steps >= self.max_episode_steps
        if terminated:
            reward += self.terminal_penalty

        info = self._get_info()
        info["action_applied"] = moved
        return self.game.get_state(), reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray | str]:
        if self.render_mode == "ansi":
            return render_text(self.game.snapshot())
        if self.render_mode == "rgb_array":
            state = self.game.snapshot().composited()
            cell = 12
            h, w = state.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = PALETTE[int(state[y, x])]
            return img
        return None

    def close(self) -> None:
        pass
