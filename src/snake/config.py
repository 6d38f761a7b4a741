"""Game configuration and defaults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .geometry import Bounds, Coordinate, Direction


# Dimensions of the default board.
WIDTH = 10
HEIGHT = 10
# Milliseconds between engine steps
TICK_MS = 100
# Size of a single cell in pixels for the pygame front-end
CELL_SIZE = 30

INITIAL_LENGTH = 4
INITIAL_DIRECTION = Direction.SOUTH


@dataclass(frozen=True)
class GameConfig:
    """Settings fixed for the lifetime of one game.

    ``initial_body`` is head first.  When omitted a vertical snake of
    ``INITIAL_LENGTH`` cells is placed in column 1 (offset by the inset) with
    its head at the bottom, matching ``initial_direction`` of south.
    """

    width: int = WIDTH
    height: int = HEIGHT
    inset: int = 0
    tick_ms: int = TICK_MS
    initial_direction: Direction = INITIAL_DIRECTION
    initial_body: Optional[Tuple[Coordinate, ...]] = None
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.tick_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {self.tick_ms}")
        # Raises for bad dimensions or inset.
        Bounds(self.width, self.height, self.inset)

    @property
    def bounds(self) -> Bounds:
        return Bounds(self.width, self.height, self.inset)

    def starting_body(self) -> Tuple[Coordinate, ...]:
        """Return the head-first body the game starts with."""

        if self.initial_body is not None:
            return tuple(Coordinate(*cell) for cell in self.initial_body)
        bounds = self.bounds
        length = min(INITIAL_LENGTH, bounds.playable_height)
        x = bounds.inset + min(1, bounds.playable_width - 1)
        top = bounds.inset
        return tuple(Coordinate(x, top + i) for i in reversed(range(length)))
