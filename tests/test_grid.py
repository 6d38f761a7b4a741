from __future__ import annotations

from snake.config import GameConfig
from snake.engine import SnakeEngine
from snake.geometry import Bounds
from snake.grid import BODY, FOOD, HEAD, WALL, free_cells, occupancy_grid, render_grid, render_text


def test_free_cells_row_major_and_excludes_body() -> None:
    bounds = Bounds(3, 2)
    cells = free_cells(bounds, [(1, 0), (1, 1)])
    assert cells == [(0, 0), (2, 0), (0, 1), (2, 1)]


def test_free_cells_skips_inset() -> None:
    bounds = Bounds(4, 4, inset=1)
    assert free_cells(bounds, []) == [(1, 1), (2, 1), (1, 2), (2, 2)]


def test_occupancy_ignores_cells_off_the_board() -> None:
    bounds = Bounds(2, 2)
    occupied = occupancy_grid(bounds, [(0, 0), (-1, 0), (2, 1)])
    assert occupied.sum() == 1
    assert bool(occupied[0, 0])


def test_render_grid_marks_every_kind_of_cell() -> None:
    config = GameConfig(width=5, height=5, inset=1, initial_body=((2, 2), (2, 1)))
    engine = SnakeEngine(config, food=(3, 3))
    grid = render_grid(engine)

    assert grid.shape == (5, 5)
    assert grid[2, 2] == HEAD
    assert grid[1, 2] == BODY
    assert grid[3, 3] == FOOD
    assert grid[0, 0] == WALL and grid[4, 2] == WALL
    assert render_text(grid) == [
        "#####",
        "#.o.#",
        "#.@.#",
        "#..$#",
        "#####",
    ]
