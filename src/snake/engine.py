"""Snake game engine.

:class:`SnakeEngine` owns the whole world: the body, the direction of travel,
the food and the score.  A driver calls :meth:`SnakeEngine.turn` whenever the
player presses a direction key and :meth:`SnakeEngine.step` once per tick.
Each step reports exactly one :class:`Outcome`.

Once a step reports :attr:`Outcome.DIED` or :attr:`Outcome.WON` the engine is
terminal: further ``turn`` and ``step`` calls leave the state untouched, and
``step`` keeps returning the terminal outcome.  Call :meth:`SnakeEngine.reset`
to start a new game.
"""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Deque, Optional, Set, Tuple
import logging
import random

from .config import GameConfig
from .geometry import (
    Bounds,
    Coordinate,
    Direction,
    apply_offset,
    are_adjacent,
    is_in_bounds,
)
from .grid import free_cells


LOGGER = logging.getLogger(__name__)


class Outcome(str, Enum):
    """Result of a single :meth:`SnakeEngine.step`."""

    CONTINUED = "continued"
    ATE_FOOD = "ate_food"
    DIED = "died"
    WON = "won"

    @property
    def terminal(self) -> bool:
        return self in (Outcome.DIED, Outcome.WON)


class DeathCause(str, Enum):
    """Why the snake died."""

    OUT_OF_BOUNDS = "out_of_bounds"
    SELF_COLLISION = "self_collision"


def validate_body(
    body: Tuple[Coordinate, ...],
    bounds: Bounds,
    direction: Optional[Direction] = None,
) -> None:
    """Raise ``ValueError`` unless ``body`` is a legal snake on ``bounds``.

    A legal body is non-empty, has no repeated cells, lies in the playable
    area and forms an unbroken chain of edge-adjacent cells.  When
    ``direction`` is given it must not point from the head into the neck.
    """

    if not body:
        raise ValueError("Snake body must contain at least one cell")
    if len(set(body)) != len(body):
        raise ValueError(f"Snake body has duplicate cells: {body}")
    for cell in body:
        if not is_in_bounds(cell, bounds):
            raise ValueError(f"Snake body cell {cell} is outside the playable area")
    for a, b in zip(body, body[1:]):
        if not are_adjacent(a, b):
            raise ValueError(f"Snake body cells {a} and {b} are not adjacent")
    if direction is not None and len(body) >= 2 and apply_offset(body[0], direction) == body[1]:
        raise ValueError(f"Initial direction {direction.value} points into the snake's neck")


class SnakeEngine:
    """Mutable state for one snake game."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        food: Optional[Tuple[int, int]] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.bounds = self.config.bounds
        self._rng = rng or random.Random(self.config.seed)
        validate_body(
            self.config.starting_body(), self.bounds, self.config.initial_direction
        )
        self._body: Deque[Coordinate] = deque()
        self._cells: Set[Coordinate] = set()
        self.direction = self.config.initial_direction
        self.heading = self.config.initial_direction
        self.food: Optional[Coordinate] = None
        self.score = 0
        self.ticks = 0
        self.outcome: Optional[Outcome] = None
        self.cause: Optional[DeathCause] = None
        self.reset(food=food)

    # Read-only views --------------------------------------------------
    @property
    def body(self) -> Tuple[Coordinate, ...]:
        """Head-first snapshot of the body."""

        return tuple(self._body)

    @property
    def head(self) -> Coordinate:
        return self._body[0]

    @property
    def tail(self) -> Coordinate:
        return self._body[-1]

    def __len__(self) -> int:
        return len(self._body)

    @property
    def alive(self) -> bool:
        return self.outcome is not Outcome.DIED

    @property
    def over(self) -> bool:
        """``True`` once the game has ended by death or a full board."""

        return self.outcome is not None and self.outcome.terminal

    def occupies(self, cell: Tuple[int, int]) -> bool:
        return Coordinate(*cell) in self._cells

    # Lifecycle --------------------------------------------------------
    def reset(self, *, food: Optional[Tuple[int, int]] = None) -> None:
        """Reset the entire state for a new game.

        ``food`` pins the first food cell instead of sampling one, which keeps
        scripted scenarios reproducible.  It must be a free playable cell.
        """

        body = self.config.starting_body()
        self._body = deque(body)
        self._cells = set(body)
        self.direction = self.config.initial_direction
        self.heading = self.config.initial_direction
        self.score = 0
        self.ticks = 0
        self.outcome = None
        self.cause = None
        if food is None:
            self.food = self.generate_food()
        else:
            food = Coordinate(*food)
            if not is_in_bounds(food, self.bounds) or food in self._cells:
                raise ValueError(f"Food cell {food} must be a free playable cell")
            self.food = food
        if self.food is None:
            # The starting body already fills the board.
            self.outcome = Outcome.WON

    def generate_food(self) -> Optional[Coordinate]:
        """Pick a uniformly random free playable cell.

        Free cells are enumerated up front so the choice always terminates.
        Returns ``None`` when the body covers every playable cell.
        """

        if len(self._body) >= self.bounds.playable_area:
            return None
        candidates = free_cells(self.bounds, self._body)
        if not candidates:
            return None
        return self._rng.choice(candidates)

    # Transitions ------------------------------------------------------
    def turn(self, direction: Direction) -> bool:
        """Request a new direction for the next step.

        A request that reverses either the pending direction or the direction
        of the last move is ignored, as is any request once the game is over.
        Returns ``True`` if the request was accepted.
        """

        if self.over:
            return False
        if direction is self.direction.opposite or direction is self.heading.opposite:
            return False
        self.direction = direction
        return True

    def step(self) -> Outcome:
        """Advance the world by one tick and report what happened."""

        if self.over:
            return self.outcome  # type: ignore[return-value]

        candidate = apply_offset(self.head, self.direction)
        self.ticks += 1
        self.heading = self.direction

        if not is_in_bounds(candidate, self.bounds):
            return self._die(DeathCause.OUT_OF_BOUNDS, candidate)
        # The tail has not moved yet, so its cell still counts.
        if candidate in self._cells:
            return self._die(DeathCause.SELF_COLLISION, candidate)

        self._body.appendleft(candidate)
        self._cells.add(candidate)

        if candidate == self.food:
            self.score += 1
            self.food = self.generate_food()
            if self.food is None:
                self.outcome = Outcome.WON
                LOGGER.info("Board full after %d ticks. Score: %d", self.ticks, self.score)
                return self.outcome
            LOGGER.debug("Ate food at %s. Score: %d", candidate, self.score)
            self.outcome = Outcome.ATE_FOOD
            return self.outcome

        self._cells.discard(self._body.pop())
        self.outcome = Outcome.CONTINUED
        return self.outcome

    def _die(self, cause: DeathCause, candidate: Coordinate) -> Outcome:
        self.outcome = Outcome.DIED
        self.cause = cause
        LOGGER.info(
            "Game over (%s at %s) after %d ticks. Score: %d",
            cause.value,
            tuple(candidate),
            self.ticks,
            self.score,
        )
        return self.outcome


__all__ = ["Outcome", "DeathCause", "SnakeEngine", "validate_body"]
