import gymnasium as gym
import numpy as np
import pytest

import blockfall.env  # noqa: F401
from blockfall.env.falling_blocks_env import ENV_ACTIONS, FallingBlocksEnv
from blockfall.game import Color, Piece, TetrominoType, rotate_clockwise, shape_for


def test_registered_env_reset_and_step():
    env = gym.make("FallingBlocks-10x20-v0")
    obs, info = env.reset(seed=0)
    assert obs.shape == (20, 10)
    assert obs.dtype == np.int8
    assert info["score"] == 0
    for action in range(len(ENV_ACTIONS)):
        obs, reward, terminated, truncated, info = env.step(action)
        assert env.observation_space.contains(obs)
        assert reward == 0.0
        assert not terminated
    env.close()


def test_episode_terminates_when_stack_reaches_top():
    env = FallingBlocksEnv()
    env.reset(seed=7)
    terminated = False
    for _ in range(2000):
        _, _, terminated, truncated, _ = env.step(0)
        if terminated:
            break
    assert terminated
    assert env.game.game_over


def test_reward_is_score_delta():
    env = FallingBlocksEnv()
    env.reset(seed=1)
    env.game.grid.fill_row(19, Color.RED, skip=(9,))
    grid = rotate_clockwise(shape_for(TetrominoType.I))
    env.game.current_piece = Piece(TetrominoType.I, grid, x=6, y=16)
    _, reward, terminated, _, info = env.step(0)
    assert reward == 100.0
    assert info["lines_cleared_total"] == 1
    assert not terminated


def test_truncation_after_max_steps():
    env = FallingBlocksEnv(max_episode_steps=3)
    env.reset(seed=2)
    results = [env.step(1) for _ in range(3)]
    assert [r[3] for r in results] == [False, False, True]


def test_invalid_action_rejected():
    env = FallingBlocksEnv()
    env.reset()
    with pytest.raises(ValueError):
        env.step(len(ENV_ACTIONS))


def test_render_modes():
    env = FallingBlocksEnv(render_mode="ansi")
    env.reset(seed=3)
    text = env.render()
    assert "Score: 0" in text

    env = FallingBlocksEnv(render_mode="rgb_array")
    env.reset(seed=3)
    img = env.render()
    assert img.shape == (240, 120, 3)
    assert img.dtype == np.uint8


def test_random_agent_runs(capsys):
    from blockfall.rl.random_agent import run_random

    total = run_random(steps=300, seed=0)
    assert total >= 0.0
    assert "Random agent total reward" in capsys.readouterr().out
