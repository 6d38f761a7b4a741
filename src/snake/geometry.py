"""Coordinates, directions and bounds for the snake playfield.

Coordinates are ``(x, y)`` pairs where ``x`` grows to the east and ``y`` grows
to the south, so the top-left cell is ``(0, 0)``.  Nothing in this module
clamps or wraps: moving off the board simply produces a coordinate that
:func:`is_in_bounds` rejects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Tuple


class Coordinate(NamedTuple):
    """A single grid cell."""

    x: int
    y: int


class Direction(str, Enum):
    """The four directions the snake can travel in."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def offset(self) -> Tuple[int, int]:
        """Unit ``(dx, dy)`` step for this direction."""

        return _OFFSETS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OFFSETS = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}

_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


@dataclass(frozen=True)
class Bounds:
    """Fixed rectangular extent of the world.

    ``inset`` reserves that many rows and columns on every edge.  Reserved
    cells still exist on the grid (renderers draw them as wall) but the snake
    may not enter them and food is never placed there.
    """

    width: int
    height: int
    inset: int = 0

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Grid must be at least 1x1, got {self.width}x{self.height}")
        if self.inset < 0:
            raise ValueError(f"Inset must be non-negative, got {self.inset}")
        if 2 * self.inset >= min(self.width, self.height):
            raise ValueError(
                f"Inset {self.inset} leaves no playable cells on a "
                f"{self.width}x{self.height} grid"
            )

    @property
    def playable_width(self) -> int:
        return self.width - 2 * self.inset

    @property
    def playable_height(self) -> int:
        return self.height - 2 * self.inset

    @property
    def playable_area(self) -> int:
        return self.playable_width * self.playable_height


def apply_offset(origin: Coordinate, direction: Direction) -> Coordinate:
    """Return the cell one step from ``origin`` towards ``direction``."""

    dx, dy = direction.offset
    return Coordinate(origin.x + dx, origin.y + dy)


def is_in_bounds(coord: Tuple[int, int], bounds: Bounds) -> bool:
    """Return ``True`` if ``coord`` lies inside the playable area of ``bounds``.

    The check is inclusive at the low edge and exclusive at the high edge,
    after removing ``bounds.inset`` cells from each side.
    """

    x, y = coord
    lo = bounds.inset
    return lo <= x < bounds.width - lo and lo <= y < bounds.height - lo


def are_adjacent(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    """Return ``True`` if ``a`` and ``b`` share an edge."""

    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


__all__ = [
    "Coordinate",
    "Direction",
    "Bounds",
    "apply_offset",
    "is_in_bounds",
    "are_adjacent",
]
