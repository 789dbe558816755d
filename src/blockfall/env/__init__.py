"""Gymnasium environments for blockfall."""

from __future__ import annotations

from gymnasium.envs.registration import register

# Register the default falling-block environment (one gravity tick per step)
register(
    id="FallingBlocks-10x20-v0",
    entry_point="blockfall.env.falling_blocks_env:FallingBlocksEnv",
)

__all__ = ["FallingBlocks-10x20-v0"]
