import io
import logging

from snake.config import GameConfig
from snake.engine import Outcome, SnakeEngine
from snake.geometry import Direction
from snake.runner import GameRunner
from snake.run_text import TextRenderer


class FakeClock:
    def __init__(self) -> None:
        self.current = 0.0

    def advance(self, delta: float) -> None:
        self.current += delta

    def __call__(self) -> float:
        return self.current


class ScriptedRenderer:
    """Return one batch of keys per poll and record what was drawn."""

    def __init__(self, batches=None) -> None:
        self.batches = list(batches or [])
        self.draws = []
        self.finished = 0

    def poll_keys(self):
        return self.batches.pop(0) if self.batches else []

    def draw(self, engine, *, paused=False):
        self.draws.append((engine.head, paused))

    def finish(self, engine):
        self.finished += 1


def _engine():
    config = GameConfig(
        width=5, height=5, tick_ms=100, initial_body=((2, 2), (2, 1), (2, 0))
    )
    return SnakeEngine(config, food=(0, 0))


def test_run_stops_on_death_and_sleeps_between_ticks():
    sleeps = []
    renderer = ScriptedRenderer()
    runner = GameRunner(_engine(), renderer, clock=FakeClock(), sleep=sleeps.append)

    assert runner.run() is Outcome.DIED

    # (2, 3), (2, 4), then off the board.
    assert runner.engine.ticks == 3
    assert sleeps == [0.1, 0.1]
    assert len(renderer.draws) == 4
    assert renderer.finished == 1
    assert not runner.running


def test_slow_tick_shortens_sleep():
    clock = FakeClock()
    sleeps = []

    class SlowRenderer(ScriptedRenderer):
        def draw(self, engine, *, paused=False):
            clock.advance(0.03)

    runner = GameRunner(_engine(), SlowRenderer(), clock=clock, sleep=sleeps.append)
    runner.run()
    assert sleeps and all(abs(s - 0.07) < 1e-9 for s in sleeps)


def test_key_applied_before_step():
    runner = GameRunner(_engine(), ScriptedRenderer([["right"]]))
    assert runner.tick() is Outcome.CONTINUED
    assert runner.engine.head == (3, 2)
    assert runner.engine.heading is Direction.EAST


def test_latest_valid_key_in_a_tick_wins():
    runner = GameRunner(_engine(), ScriptedRenderer([["left", "up", "down"]]))
    runner.tick()
    # "up" reverses the last move and is dropped; "down" replaces "left".
    assert runner.engine.head == (2, 3)


def test_pause_skips_steps():
    renderer = ScriptedRenderer([["p"], [], ["p"]])
    runner = GameRunner(_engine(), renderer)
    assert runner.tick() is None
    assert runner.paused
    assert runner.tick() is None
    assert runner.engine.ticks == 0
    assert runner.tick() is Outcome.CONTINUED
    assert not runner.paused
    assert [paused for _, paused in renderer.draws] == [True, True, False]


def test_direction_keys_ignored_while_paused():
    runner = GameRunner(_engine(), ScriptedRenderer([["p", "right"]]))
    runner.tick()
    assert runner.engine.direction is Direction.SOUTH


def test_quit_key_stops_without_stepping(caplog):
    sleeps = []
    renderer = ScriptedRenderer([["q"]])
    runner = GameRunner(_engine(), renderer, clock=FakeClock(), sleep=sleeps.append)
    with caplog.at_level(logging.INFO, logger="snake.runner"):
        assert runner.run() is None
    assert runner.engine.ticks == 0
    assert sleeps == []
    assert not runner.running
    assert renderer.finished == 1
    assert "Quit requested" in caplog.text


def test_max_ticks_limits_run():
    config = GameConfig(width=10, height=10, initial_body=((0, 0),), initial_direction=Direction.EAST)
    engine = SnakeEngine(config, food=(9, 9))
    runner = GameRunner(engine, ScriptedRenderer(), sleep=lambda _s: None, max_ticks=3)
    assert runner.run() is Outcome.CONTINUED
    assert engine.ticks == 3


def test_text_renderer_prints_frames_and_result():
    stream = io.StringIO()
    renderer = TextRenderer(stream)
    runner = GameRunner(_engine(), renderer, sleep=lambda _s: None)
    runner.run()
    output = stream.getvalue()
    assert renderer.frames == 4
    assert "$...." in output
    assert "Game over (out of bounds). Final score: 0" in output


def test_text_renderer_feed_queues_keys():
    renderer = TextRenderer(io.StringIO())
    renderer.feed("left", "q")
    assert renderer.poll_keys() == ["left", "q"]
    assert renderer.poll_keys() == []
