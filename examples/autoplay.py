"""Play headless games with a greedy food-seeking policy.

Run with::

    PYTHONPATH=src python examples/autoplay.py

Pass ``--help`` to see options for the number of games, board size and
logging.  Each game is summarised in the log; a table of all games is printed
at the end.
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import Optional

from snake.config import GameConfig
from snake.engine import Outcome, SnakeEngine
from snake.geometry import Direction, apply_offset, is_in_bounds


LOGGER = logging.getLogger(__name__)


def _distance(a, b) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def choose_direction(engine: SnakeEngine) -> Optional[Direction]:
    """Return the safe direction that gets closest to the food.

    A move is safe when it stays on the board and does not hit the body.  The
    tail is treated as blocking, matching the engine's collision rule.
    Returns ``None`` when every move is fatal.
    """

    best: Optional[Direction] = None
    best_distance = None
    for direction in Direction:
        if direction is engine.heading.opposite:
            continue
        candidate = apply_offset(engine.head, direction)
        if not is_in_bounds(candidate, engine.bounds) or engine.occupies(candidate):
            continue
        target = engine.food if engine.food is not None else candidate
        distance = _distance(candidate, target)
        if best_distance is None or distance < best_distance:
            best, best_distance = direction, distance
    return best


def play_game(config: GameConfig, *, max_ticks: int) -> SnakeEngine:
    engine = SnakeEngine(config)
    while not engine.over and engine.ticks < max_ticks:
        direction = choose_direction(engine)
        if direction is not None:
            engine.turn(direction)
        engine.step()
    return engine


def summarise(engine: SnakeEngine) -> dict[str, object]:
    outcome = engine.outcome.value if engine.outcome else "none"
    return {
        "score": engine.score,
        "ticks": engine.ticks,
        "length": len(engine),
        "outcome": outcome,
        "cause": engine.cause.value if engine.cause else "",
    }


def log_summary(engine: SnakeEngine, *, index: int) -> dict[str, object]:
    row = summarise(engine)
    LOGGER.info(
        "Game %d: score=%d, ticks=%d, length=%d, outcome=%s",
        index,
        row["score"],
        row["ticks"],
        row["length"],
        row["outcome"],
    )
    return row


def print_table(rows: list[dict[str, object]]) -> None:
    if not rows:
        print("No games played.")
        return
    header = f"{'Game':>4}  {'Score':>5}  {'Ticks':>6}  Outcome"
    print(header)
    print("-" * len(header))
    for index, row in enumerate(rows, start=1):
        outcome = row["outcome"]
        if row["cause"]:
            outcome = f"{outcome} ({row['cause']})"
        print(f"{index:4d}  {row['score']:5d}  {row['ticks']:6d}  {outcome}")
    won = sum(1 for row in rows if row["outcome"] == Outcome.WON.value)
    best = max(int(row["score"]) for row in rows)
    print(f"Best score: {best}, boards filled: {won}/{len(rows)}")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--games", type=int, default=10, help="Number of games to play.")
    parser.add_argument("--width", type=int, default=10, help="Grid width in cells.")
    parser.add_argument("--height", type=int, default=10, help="Grid height in cells.")
    parser.add_argument("--max-ticks", type=int, default=5000, help="Tick limit per game.")
    parser.add_argument("--seed", type=int, default=None, help="Base seed for food placement.")
    parser.add_argument(
        "--no-table",
        dest="print_table",
        action="store_false",
        help="Skip printing the final table (logging only).",
    )
    parser.set_defaults(print_table=True)
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    seeds = random.Random(args.seed)
    rows: list[dict[str, object]] = []
    for index in range(1, args.games + 1):
        config = GameConfig(width=args.width, height=args.height, seed=seeds.randrange(2**32))
        engine = play_game(config, max_ticks=args.max_ticks)
        rows.append(log_summary(engine, index=index))

    if args.print_table:
        print_table(rows)


if __name__ == "__main__":
    main()
