"""Simple pygame front-end for the snake engine.

A windowed alternative to the terminal front-end.  It shares the engine, the
key bindings and the tick loop with every other front-end; this module only
turns pygame events into key names and draws the render grid as rectangles.
"""

from __future__ import annotations

from typing import List, Optional

import pygame

from .config import CELL_SIZE, GameConfig
from .engine import Outcome, SnakeEngine
from .grid import BODY, EMPTY, FOOD, HEAD, WALL, render_grid
from .runner import GameRunner
from .run_text import format_result


# Mapping from the integer stored in the render grid to a colour
CELL_COLORS = {
    EMPTY: (0, 0, 0),
    BODY: (0, 170, 0),
    HEAD: (0, 255, 0),
    FOOD: (255, 0, 0),
    WALL: (90, 90, 90),
}

GRID_LINE_COLOR = (30, 30, 30)
# How long the final frame stays up before the window closes
GAME_OVER_MS = 2000


def key_name(event: pygame.event.Event) -> Optional[str]:
    """Translate a pygame event into a key name understood by the controls."""

    if event.type == pygame.QUIT:
        return "escape"
    if event.type != pygame.KEYDOWN:
        return None
    name = pygame.key.name(event.key)
    if name == "space":
        return " "
    return name.lower()


class PygameRenderer:
    """Draw the game into a pygame window."""

    def __init__(self, config: GameConfig, *, cell_size: int = CELL_SIZE) -> None:
        pygame.init()
        self.cell_size = cell_size
        self.screen = pygame.display.set_mode(
            (config.width * cell_size, config.height * cell_size)
        )
        pygame.display.set_caption("Snake")

    def poll_keys(self) -> List[str]:
        keys: List[str] = []
        for event in pygame.event.get():
            name = key_name(event)
            if name is not None:
                keys.append(name)
        return keys

    def draw(self, engine: SnakeEngine, *, paused: bool = False) -> None:
        size = self.cell_size
        grid = render_grid(engine)
        self.screen.fill(CELL_COLORS[EMPTY])
        for r, row in enumerate(grid):
            for c, value in enumerate(row):
                rect = pygame.Rect(c * size, r * size, size, size)
                pygame.draw.rect(self.screen, CELL_COLORS[int(value)], rect)
                pygame.draw.rect(self.screen, GRID_LINE_COLOR, rect, 1)
        pygame.display.set_caption(
            f"Snake - {'Paused - ' if paused else ''}Score: {engine.score}"
        )
        pygame.display.flip()

    def finish(self, engine: SnakeEngine) -> None:
        if engine.over:
            pygame.display.set_caption(f"Snake - {format_result(engine)}")
            pygame.display.flip()
            pygame.time.wait(GAME_OVER_MS)
        pygame.quit()


def _wait(seconds: float) -> None:
    pygame.time.wait(int(seconds * 1000))


def main(config: Optional[GameConfig] = None) -> Optional[Outcome]:
    config = config or GameConfig()
    engine = SnakeEngine(config)
    runner = GameRunner(engine, PygameRenderer(config), sleep=_wait)
    return runner.run()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
