"""Module entry point for `python -m wallj`."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console

from wallj.app import run_play, run_walk
from wallj.db.replay_log import RUN_LOG_NAME
from wallj.render.replay_reader import read_tick_payloads
from wallj.render.viewer import render_tick
from wallj.sim.grid import Cell

DEFAULT_REPLAY_DIR = Path("replay")


def main() -> None:
    parser = argparse.ArgumentParser(description="Walk Wall-J across a level.")
    parser.add_argument(
        "--level", type=int, default=0, help="Level number to load."
    )
    parser.add_argument(
        "--level-dir",
        type=Path,
        default=None,
        help=(
            "Directory holding levelN.txt files "
            "(defaults to $WALLJ_LEVEL_DIR or levels)."
        ),
    )
    parser.add_argument(
        "--start",
        type=parse_cell,
        default=None,
        help="Player start cell as X,Y (headless mode).",
    )
    parser.add_argument(
        "--to",
        type=parse_cell,
        action="append",
        default=[],
        help="Destination cell as X,Y. Repeat to queue several walks.",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=None,
        help="Number of ticks to run. Omit to stop once every walk is done.",
    )
    parser.add_argument(
        "--tick-ms",
        type=int,
        default=None,
        help="Tick duration in milliseconds (defaults to $WALLJ_TICK_MS or 30).",
    )
    parser.add_argument(
        "--realtime",
        action="store_true",
        help="Sleep between ticks instead of running as fast as possible.",
    )
    parser.add_argument(
        "--replay-dir",
        type=Path,
        default=DEFAULT_REPLAY_DIR,
        help="Base replay directory for new runs.",
    )
    parser.add_argument(
        "--replay",
        type=Path,
        default=None,
        help="Print a saved run folder instead of running.",
    )
    parser.add_argument(
        "--play",
        action="store_true",
        help="Open the interactive board (click to move).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.replay is not None:
        _replay_run(args.replay)
        return

    try:
        if args.play:
            run_play(level=args.level, level_dir=args.level_dir, tick_ms=args.tick_ms)
            return

        if args.start is None:
            raise SystemExit("--start is required outside --play mode.")
        created_run = run_walk(
            args.replay_dir,
            level=args.level,
            start=args.start,
            destinations=args.to,
            ticks=args.ticks,
            level_dir=args.level_dir,
            tick_ms=args.tick_ms,
            realtime=args.realtime,
        )
    except (FileNotFoundError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc

    _replay_run(created_run)
    print(f"Run saved to {created_run}")


def parse_cell(value: str) -> Cell:
    try:
        x_text, y_text = value.split(",")
        return Cell(int(x_text), int(y_text))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Expected a cell as X,Y with positive integers, got {value!r}."
        ) from exc


def _replay_run(run_folder: Path) -> None:
    console = Console()
    log_path = run_folder / RUN_LOG_NAME
    for payload in read_tick_payloads(log_path):
        console.print(render_tick(payload))


if __name__ == "__main__":
    main()
