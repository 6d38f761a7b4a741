"""Fixed-tick game loop shared by every front-end.

The loop owns the engine for its whole lifetime.  Each tick it drains the
keys the renderer collected since the last tick, applies them (the last
accepted direction wins), advances the engine once, redraws and then sleeps
for the rest of the tick.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Protocol
import logging
import time

from .controls import Command, command_for_key, direction_for_key
from .engine import Outcome, SnakeEngine


LOGGER = logging.getLogger(__name__)


class Renderer(Protocol):
    """What the loop needs from a front-end."""

    def draw(self, engine: SnakeEngine, *, paused: bool = False) -> None: ...

    def poll_keys(self) -> List[str]: ...

    def finish(self, engine: SnakeEngine) -> None: ...


class GameRunner:
    """Drive a :class:`SnakeEngine` at a fixed tick rate with pause/quit."""

    def __init__(
        self,
        engine: SnakeEngine,
        renderer: Renderer,
        *,
        tick_ms: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        max_ticks: Optional[int] = None,
    ) -> None:
        self.engine = engine
        self.renderer = renderer
        self.tick_ms = tick_ms if tick_ms is not None else engine.config.tick_ms
        self.max_ticks = max_ticks
        self._clock = clock
        self._sleep = sleep
        self._running = False
        self._paused = False
        self._quit = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def paused(self) -> bool:
        return self._paused

    def handle_key(self, key: str) -> None:
        """Apply a single key press."""

        command = command_for_key(key)
        if command is Command.QUIT:
            LOGGER.info("Quit requested")
            self._quit = True
            self._running = False
            return
        if command is Command.PAUSE:
            self._paused = not self._paused
            LOGGER.info("Paused" if self._paused else "Resumed")
            return
        direction = direction_for_key(key)
        if direction is not None and not self._paused:
            self.engine.turn(direction)

    def tick(self) -> Optional[Outcome]:
        """Run one iteration of the loop.

        Returns the step outcome, or ``None`` when paused or stopped by a key.
        """

        for key in self.renderer.poll_keys():
            self.handle_key(key)
            if self._quit:
                return None
        outcome = None if self._paused else self.engine.step()
        self.renderer.draw(self.engine, paused=self._paused)
        return outcome

    def run(self) -> Optional[Outcome]:
        """Loop until the game ends or the player quits.

        Returns the engine's last outcome (``None`` if it never stepped).
        """

        interval = self.tick_ms / 1000.0
        self._running = True
        self._paused = False
        self._quit = False
        LOGGER.info(
            "Game started on %dx%d grid", self.engine.bounds.width, self.engine.bounds.height
        )
        self.renderer.draw(self.engine)
        while self._running:
            started = self._clock()
            self.tick()
            if not self._running or self.engine.over:
                break
            if self.max_ticks is not None and self.engine.ticks >= self.max_ticks:
                break
            remaining = interval - (self._clock() - started)
            if remaining > 0:
                self._sleep(remaining)
        self._running = False
        self.renderer.finish(self.engine)
        LOGGER.info("Game stopped. Score: %d", self.engine.score)
        return self.engine.outcome


__all__ = ["Renderer", "GameRunner"]
