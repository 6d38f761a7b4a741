"""Command-line entry point.

Run with: `python -m snake`

The default front-end is the curses terminal UI.  ``--frontend text`` prints
frames to stdout without reading the keyboard, which is mostly useful as a
smoke test; ``--frontend pygame`` opens a window.
"""

from __future__ import annotations

from typing import Optional, Sequence
import argparse
import logging
import sys

from .config import HEIGHT, TICK_MS, WIDTH, GameConfig
from .engine import Outcome, SnakeEngine
from .runner import GameRunner
from .run_text import TextRenderer


FRONTENDS = ("curses", "pygame", "text")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="snake", description="Play snake in the terminal.")
    parser.add_argument("--width", type=int, default=WIDTH, help="Grid width in cells.")
    parser.add_argument("--height", type=int, default=HEIGHT, help="Grid height in cells.")
    parser.add_argument(
        "--inset",
        type=int,
        default=0,
        help="Rows/columns reserved as wall on every edge.",
    )
    parser.add_argument(
        "--tick-ms", type=int, default=TICK_MS, help="Milliseconds between moves."
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument("--frontend", choices=FRONTENDS, default="curses")
    parser.add_argument(
        "--max-ticks",
        type=int,
        default=None,
        help="Stop after this many ticks (text front-end only).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write log messages to this file instead of stderr. Use it with the "
        "curses front-end, where stderr output garbles the screen.",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        width=args.width,
        height=args.height,
        inset=args.inset,
        tick_ms=args.tick_ms,
        seed=args.seed,
    )


def run_text(config: GameConfig, max_ticks: Optional[int] = None) -> Optional[Outcome]:
    runner = GameRunner(SnakeEngine(config), TextRenderer(), max_ticks=max_ticks)
    return runner.run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        filename=args.log_file,
    )
    try:
        config = build_config(args)
    except ValueError as exc:
        print(f"snake: {exc}", file=sys.stderr)
        return 2

    if args.frontend == "text":
        run_text(config, max_ticks=args.max_ticks)
        return 0
    if args.frontend == "pygame":
        from .run_pygame import main as run_pygame

        run_pygame(config)
        return 0

    from .run_curses import main as run_curses

    try:
        run_curses(config)
    except RuntimeError as exc:
        print(f"snake: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
