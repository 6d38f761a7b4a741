"""Key bindings shared by every front-end.

Front-ends translate their native key events into lower-case key names
(``"up"``, ``"a"``, ``"escape"`` ...) and look them up here, so the
bindings are defined exactly once.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from .geometry import Direction


class Command(str, Enum):
    """Non-movement actions the player can trigger."""

    QUIT = "quit"
    PAUSE = "pause"


# Arrow keys, WASD and vi-style hjkl.
KEY_DIRECTIONS: Dict[str, Direction] = {
    "up": Direction.NORTH,
    "down": Direction.SOUTH,
    "left": Direction.WEST,
    "right": Direction.EAST,
    "w": Direction.NORTH,
    "s": Direction.SOUTH,
    "a": Direction.WEST,
    "d": Direction.EAST,
    "k": Direction.NORTH,
    "j": Direction.SOUTH,
    "h": Direction.WEST,
    "l": Direction.EAST,
}

KEY_COMMANDS: Dict[str, Command] = {
    "q": Command.QUIT,
    "escape": Command.QUIT,
    "p": Command.PAUSE,
    " ": Command.PAUSE,
}


def direction_for_key(key: Optional[str]) -> Optional[Direction]:
    """Return the direction bound to ``key`` or ``None``."""

    if key is None:
        return None
    return KEY_DIRECTIONS.get(key.lower())


def command_for_key(key: Optional[str]) -> Optional[Command]:
    if key is None:
        return None
    return KEY_COMMANDS.get(key.lower())


__all__ = [
    "Command",
    "KEY_DIRECTIONS",
    "KEY_COMMANDS",
    "direction_for_key",
    "command_for_key",
]
