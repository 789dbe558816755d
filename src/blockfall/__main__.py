from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from blockfall.game import BlockfallGame, GameConfig


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="blockfall", description="Falling-block puzzle game")
    p.add_argument("--seed", type=int, default=None, help="seed for the piece sequence")
    p.add_argument("--tick-ms", type=int, default=500, help="gravity interval in milliseconds")
    p.add_argument("--window", action="store_true", help="play in a pygame window instead of the terminal")
    p.add_argument("--log-file", type=str, default=None)
    p.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="INFO")
    return p


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    # Logging to stderr would draw over the curses screen
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, args.log_level),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    game = BlockfallGame(GameConfig(random_seed=args.seed, tick_interval_ms=args.tick_ms))
    if args.window:
        from blockfall.visualization.human_play import run
    else:
        from blockfall.visualization.terminal import run
    run(game)
    print(f"Final score: {game.score}  lines: {game.lines_cleared_total}")


if __name__ == "__main__":  # pragma: no cover
    main()
