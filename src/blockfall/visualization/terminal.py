"""Curses front-end: draws the board and maps keys to engine commands."""

from __future__ import annotations

import curses
import time
from typing import Callable, Dict, Optional

from blockfall.game import Action, BlockfallGame, Color, GameSnapshot

from .text import EMPTY_CELL


KEY_TO_ACTION: Dict[int, Action] = {
    curses.KEY_LEFT: Action.LEFT,
    curses.KEY_RIGHT: Action.RIGHT,
    curses.KEY_DOWN: Action.SOFT_DROP,
    curses.KEY_UP: Action.ROTATE,
    ord("q"): Action.QUIT,
    ord("Q"): Action.QUIT,
}

CURSES_COLORS: Dict[Color, int] = {
    Color.CYAN: curses.COLOR_CYAN,
    Color.YELLOW: curses.COLOR_YELLOW,
    Color.MAGENTA: curses.COLOR_MAGENTA,
    Color.WHITE: curses.COLOR_WHITE,
    Color.BLUE: curses.COLOR_BLUE,
    Color.GREEN: curses.COLOR_GREEN,
    Color.RED: curses.COLOR_RED,
}

HELP_LINES = (
    "Controls:",
    "Left/Right: Move",
    "Up: Rotate",
    "Down: Soft Drop",
    "Q: Quit",
)


class TerminalView:
    def __init__(self, screen, use_color: bool = False) -> None:
        self.screen = screen
        self.use_color = use_color

    def setup_colors(self) -> None:
        curses.start_color()
        for color, curses_color in CURSES_COLORS.items():
            # Pair number doubles as the board value; blocks are drawn as background
            curses.init_pair(int(color), curses.COLOR_BLACK, curses_color)
        self.use_color = True

    def _cell_attr(self, value: int) -> int:
        if not self.use_color:
            return curses.A_REVERSE
        return curses.color_pair(value)

    def _put(self, y: int, x: int, text: str, attr: int = 0) -> None:
        max_y, max_x = self.screen.getmaxyx()
        if y >= max_y or x >= max_x:
            return
        try:
            self.screen.addstr(y, x, text[: max_x - x], attr)
        except curses.error:
            # Writing the bottom-right cell raises even though it succeeds
            pass

    def draw(self, snapshot: GameSnapshot) -> None:
        self.screen.erase()
        state = snapshot.composited()
        h, w = state.shape
        self._put(0, 0, "Blockfall")
        for y in range(h):
            self._put(y + 1, 0, "|")
            for x in range(w):
                v = int(state[y, x])
                if v == 0:
                    self._put(y + 1, 1 + 2 * x, EMPTY_CELL)
                else:
                    self._put(y + 1, 1 + 2 * x, "  ", self._cell_attr(v))
            self._put(y + 1, 1 + 2 * w, "|")
        self._put(h + 1, 0, "+" + "--" * w + "+")

        panel_x = 2 * w + 4
        self._put(1, panel_x, f"Score: {snapshot.score}", curses.A_BOLD)
        self._put(2, panel_x, f"Lines: {snapshot.lines_cleared}")
        for i, line in enumerate(HELP_LINES):
            self._put(4 + i, panel_x, line)
        if snapshot.game_over:
            self._put(5 + len(HELP_LINES), panel_x, "GAME OVER", curses.A_BOLD)
        self.screen.refresh()


def run_loop(view: TerminalView, game: BlockfallGame, clock: Callable[[], float] = time.monotonic) -> None:
    """Draw, tick when due, then wait up to the poll interval for one key."""
    view.screen.timeout(game.config.input_poll_ms)
    game.last_tick = clock()
    while True:
        view.draw(game.snapshot())
        game.tick_if_due(clock())
        action = KEY_TO_ACTION.get(view.screen.getch())
        if action is Action.QUIT:
            break
        if action is not None:
            game.apply(action)


def run(game: Optional[BlockfallGame] = None) -> None:
    game = game or BlockfallGame()

    def _main(stdscr) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        stdscr.keypad(True)
        view = TerminalView(stdscr)
        if curses.has_colors():
            view.setup_colors()
        run_loop(view, game)

    curses.wrapper(_main)


if __name__ == "__main__":  # pragma: no cover
    run()
