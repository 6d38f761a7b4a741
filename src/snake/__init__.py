"""A small snake game engine with terminal and pygame front-ends."""

from .geometry import Bounds, Coordinate, Direction, apply_offset, is_in_bounds
from .config import GameConfig
from .engine import DeathCause, Outcome, SnakeEngine
from .grid import free_cells, render_grid, render_text
from .controls import Command, direction_for_key
from .runner import GameRunner, Renderer
from .run_text import TextRenderer

__all__ = [
    "Bounds",
    "Coordinate",
    "Direction",
    "apply_offset",
    "is_in_bounds",
    "GameConfig",
    "DeathCause",
    "Outcome",
    "SnakeEngine",
    "free_cells",
    "render_grid",
    "render_text",
    "Command",
    "direction_for_key",
    "GameRunner",
    "Renderer",
    "TextRenderer",
]
