"""Terminal front-end built on :mod:`curses`.

Each cell is drawn two columns wide so the board looks roughly square.  The
first screen row holds the score; the board starts on the row below.
"""

from __future__ import annotations

from typing import List, Optional
import curses
import logging

from .config import GameConfig
from .engine import Outcome, SnakeEngine
from .grid import CELL_CHARS, render_grid
from .runner import GameRunner
from .run_text import format_result


LOGGER = logging.getLogger(__name__)

HUD_ROWS = 1
# Rows needed below the board for the end-of-game message
FOOTER_ROWS = 2

_SPECIAL_KEYS = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    27: "escape",
}


def key_name(code: int) -> Optional[str]:
    """Translate a ``getch`` code into a key name understood by the controls."""

    if code in _SPECIAL_KEYS:
        return _SPECIAL_KEYS[code]
    if 0 <= code < 256 and chr(code).isprintable():
        return chr(code).lower()
    return None


def required_size(config: GameConfig) -> tuple[int, int]:
    """Return the ``(rows, cols)`` the terminal needs for ``config``."""

    return config.height + HUD_ROWS + FOOTER_ROWS, config.width * 2


class CursesRenderer:
    """Draw the game into a curses window and read keys without blocking."""

    def __init__(self, stdscr: "curses.window") -> None:
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            LOGGER.debug("Terminal cannot hide the cursor")
        stdscr.nodelay(True)
        stdscr.keypad(True)

    def _addstr(self, row: int, col: int, text: str) -> None:
        try:
            self.stdscr.addstr(row, col, text)
        except curses.error:
            # Writing the bottom-right cell raises even though it succeeds.
            pass

    def poll_keys(self) -> List[str]:
        keys: List[str] = []
        while True:
            code = self.stdscr.getch()
            if code == -1:
                break
            name = key_name(code)
            if name is not None:
                keys.append(name)
        return keys

    def draw(self, engine: SnakeEngine, *, paused: bool = False) -> None:
        self.stdscr.erase()
        hud = f"Score: {engine.score}"
        if paused:
            hud += "  [paused - p to resume]"
        self._addstr(0, 0, hud)
        grid = render_grid(engine)
        for y, row in enumerate(grid):
            line = "".join(CELL_CHARS[int(cell)] + " " for cell in row)
            self._addstr(y + HUD_ROWS, 0, line)
        self.stdscr.refresh()

    def finish(self, engine: SnakeEngine) -> None:
        if engine.outcome is None or not engine.over:
            return
        row = engine.bounds.height + HUD_ROWS
        self._addstr(row, 0, format_result(engine))
        self._addstr(row + 1, 0, "Press any key to exit.")
        self.stdscr.refresh()
        # Drop keys typed during play so the message waits for a fresh press.
        curses.flushinp()
        self.stdscr.nodelay(False)
        self.stdscr.getch()


def play(stdscr: "curses.window", config: GameConfig) -> Optional[Outcome]:
    """Run one game inside an initialised curses screen."""

    rows, cols = required_size(config)
    max_rows, max_cols = stdscr.getmaxyx()
    if max_rows < rows or max_cols < cols:
        raise RuntimeError(
            f"Terminal too small: need {cols}x{rows}, have {max_cols}x{max_rows}"
        )
    engine = SnakeEngine(config)
    runner = GameRunner(engine, CursesRenderer(stdscr))
    return runner.run()


def main(config: Optional[GameConfig] = None) -> Optional[Outcome]:
    return curses.wrapper(play, config or GameConfig())


__all__ = ["CursesRenderer", "key_name", "required_size", "play", "main"]
