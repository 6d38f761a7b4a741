"""Plain-text renderer.

Prints each frame as rows of characters.  It reads no keyboard input: keys
can be queued with :meth:`TextRenderer.feed`, which makes it handy for
headless runs and scripted demos.
"""

from __future__ import annotations

from typing import List, Optional, TextIO
import sys

from .engine import Outcome, SnakeEngine
from .grid import render_grid, render_text


def format_frame(engine: SnakeEngine, *, paused: bool = False) -> str:
    """Return the board plus a status line as a single string."""

    rows = render_text(render_grid(engine))
    status = f"Score: {engine.score}"
    if paused:
        status += "  [paused]"
    return "\n".join(rows + [status])


def format_result(engine: SnakeEngine) -> str:
    if engine.outcome is Outcome.WON:
        return f"You win! Final score: {engine.score}"
    if engine.outcome is Outcome.DIED:
        reason = engine.cause.value.replace("_", " ") if engine.cause else "unknown"
        return f"Game over ({reason}). Final score: {engine.score}"
    return f"Stopped. Final score: {engine.score}"


class TextRenderer:
    """Write frames to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream or sys.stdout
        self._pending: List[str] = []
        self.frames = 0

    def feed(self, *keys: str) -> None:
        """Queue key names to be returned by the next :meth:`poll_keys`."""

        self._pending.extend(keys)

    def poll_keys(self) -> List[str]:
        keys, self._pending = self._pending, []
        return keys

    def draw(self, engine: SnakeEngine, *, paused: bool = False) -> None:
        self.stream.write(format_frame(engine, paused=paused) + "\n\n")
        self.frames += 1

    def finish(self, engine: SnakeEngine) -> None:
        self.stream.write(format_result(engine) + "\n")
        self.stream.flush()


__all__ = ["TextRenderer", "format_frame", "format_result"]
