import curses

import pytest

from snake.config import GameConfig
from snake.controls import Command, command_for_key, direction_for_key
from snake.geometry import Direction
from snake.engine import SnakeEngine
from snake.run_curses import CursesRenderer, key_name, required_size


@pytest.mark.parametrize(
    "keys,direction",
    [
        (("up", "w", "k", "W"), Direction.NORTH),
        (("down", "s", "j"), Direction.SOUTH),
        (("left", "a", "h"), Direction.WEST),
        (("right", "d", "l"), Direction.EAST),
    ],
)
def test_arrows_wasd_and_hjkl(keys, direction):
    for key in keys:
        assert direction_for_key(key) is direction


def test_unbound_keys():
    assert direction_for_key(None) is None
    assert direction_for_key("x") is None
    assert command_for_key("x") is None
    assert command_for_key("q") is Command.QUIT
    assert command_for_key("escape") is Command.QUIT
    assert command_for_key("p") is Command.PAUSE


def test_curses_key_names():
    assert key_name(curses.KEY_UP) == "up"
    assert key_name(curses.KEY_LEFT) == "left"
    assert key_name(27) == "escape"
    assert key_name(ord("W")) == "w"
    assert key_name(curses.KEY_RESIZE) is None
    assert key_name(-1) is None


def test_curses_required_size_fits_board_and_hud():
    rows, cols = required_size(GameConfig(width=10, height=8))
    assert rows == 11
    assert cols == 20


class FakeScreen:
    def __init__(self) -> None:
        self.calls = []

    def nodelay(self, flag):
        self.calls.append(("nodelay", flag))

    def keypad(self, flag):
        pass

    def addstr(self, row, col, text):
        pass

    def refresh(self):
        pass

    def getch(self):
        self.calls.append(("getch",))
        return ord("x")


def test_game_over_screen_discards_buffered_keys(monkeypatch):
    screen = FakeScreen()
    monkeypatch.setattr(curses, "curs_set", lambda _v: None)
    monkeypatch.setattr(curses, "flushinp", lambda: screen.calls.append(("flushinp",)))
    renderer = CursesRenderer(screen)

    config = GameConfig(width=5, height=5, initial_body=((2, 4), (2, 3)))
    engine = SnakeEngine(config, food=(0, 0))
    engine.step()
    screen.calls.clear()
    renderer.finish(engine)

    assert screen.calls == [("flushinp",), ("nodelay", False), ("getch",)]


def test_finish_does_not_wait_when_player_quit(monkeypatch):
    screen = FakeScreen()
    monkeypatch.setattr(curses, "curs_set", lambda _v: None)
    renderer = CursesRenderer(screen)
    screen.calls.clear()
    renderer.finish(SnakeEngine(GameConfig(seed=0)))
    assert screen.calls == []
