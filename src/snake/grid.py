"""Numpy views of the playfield.

The engine keeps the snake as an ordered sequence of coordinates; this module
derives 2-D arrays from it.  Arrays are indexed ``[y, x]`` (row, column) so they
can be printed or blitted row by row.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .geometry import Bounds, Coordinate

if TYPE_CHECKING:  # pragma: no cover
    from .engine import SnakeEngine


Grid = NDArray[np.uint8]

# Values stored in a render grid.  ``0`` must stay the empty cell.
EMPTY = 0
BODY = 1
HEAD = 2
FOOD = 3
WALL = 4

CELL_CHARS = {
    EMPTY: ".",
    BODY: "o",
    HEAD: "@",
    FOOD: "$",
    WALL: "#",
}


def create_empty_grid(bounds: Bounds) -> Grid:
    """Return a new ``height x width`` grid filled with zeros."""

    return np.zeros((bounds.height, bounds.width), dtype=np.uint8)


def occupancy_grid(bounds: Bounds, body: Iterable[Tuple[int, int]]) -> NDArray[np.bool_]:
    """Return a boolean grid that is ``True`` on every body cell.

    Cells outside the grid are skipped rather than raising so the helper can be
    used on a freshly killed snake whose last candidate head left the board.
    """

    occupied = np.zeros((bounds.height, bounds.width), dtype=bool)
    for x, y in body:
        if 0 <= x < bounds.width and 0 <= y < bounds.height:
            occupied[y, x] = True
    return occupied


def playable_mask(bounds: Bounds) -> NDArray[np.bool_]:
    """Return a boolean grid that is ``True`` on cells outside the inset."""

    mask = np.zeros((bounds.height, bounds.width), dtype=bool)
    lo = bounds.inset
    mask[lo : bounds.height - lo, lo : bounds.width - lo] = True
    return mask


def free_cells(bounds: Bounds, body: Iterable[Tuple[int, int]]) -> List[Coordinate]:
    """Return playable cells not covered by ``body`` in row-major order."""

    free = playable_mask(bounds) & ~occupancy_grid(bounds, body)
    # ``argwhere`` yields (row, col) pairs already sorted row-major.
    return [Coordinate(int(x), int(y)) for y, x in np.argwhere(free)]


def render_grid(engine: "SnakeEngine") -> Grid:
    """Return a grid with walls, body, head and food marked.

    This is what renderers consume: a single array to draw without touching
    the engine's own state.
    """

    bounds = engine.bounds
    grid = create_empty_grid(bounds)
    grid[~playable_mask(bounds)] = WALL
    for x, y in engine.body:
        grid[y, x] = BODY
    head = engine.head
    grid[head.y, head.x] = HEAD
    food: Optional[Coordinate] = engine.food
    if food is not None:
        grid[food.y, food.x] = FOOD
    return grid


def render_text(grid: Grid) -> List[str]:
    """Convert a render grid to one string per row."""

    return ["".join(CELL_CHARS[int(cell)] for cell in row) for row in grid]


__all__ = [
    "Grid",
    "EMPTY",
    "BODY",
    "HEAD",
    "FOOD",
    "WALL",
    "CELL_CHARS",
    "create_empty_grid",
    "occupancy_grid",
    "playable_mask",
    "free_cells",
    "render_grid",
    "render_text",
]
