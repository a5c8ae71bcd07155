"""Command-line interface for Scale Comparison."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import Iterable, Optional, Sequence

from scale_comparison.config import load_config, resolve_data_path
from scale_comparison.logging_setup import init_logging
from scale_comparison.store import default_things, load_things, save_things
from scale_comparison.thing import Thing

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="scale-comparison",
        description="Animate durations on a shared logarithmic scale",
    )
    parser.add_argument(
        "data_file",
        nargs="?",
        default=None,
        help="JSON file holding the things to compare",
    )
    parser.add_argument(
        "--play",
        action="store_true",
        help="Start the animation immediately",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the things with their formatted durations and exit",
    )
    return parser


def prepare_things(path: Path) -> list[Thing]:
    """Load things, seeding the file with the sample list when it is missing."""
    if not path.exists():
        things = default_things()
        try:
            save_things(things, path)
        except OSError:
            logger.exception("Failed to write sample things to %s", path)
        return things
    return load_things(path)


def format_listing(things: Sequence[Thing]) -> str:
    return "\n".join(f"{thing.name}: {thing.value}" for thing in things)


def _run_tui(things: list[Thing], path: Path, autoplay: bool, show_debug: bool) -> int:
    try:
        from scale_comparison.tui import run_tui
    except ImportError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return run_tui(things, path, autoplay=autoplay, show_debug=show_debug)


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Entry point for the CLI."""
    init_logging()
    logger.info("App start")

    def excepthook(exc_type, exc, tb) -> None:
        logger.exception("Uncaught exception", exc_info=(exc_type, exc, tb))

    sys.excepthook = excepthook

    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    cfg = load_config()
    path = resolve_data_path(cfg, args.data_file)
    things = prepare_things(path)

    if args.list:
        print(format_listing(things))
        return 0

    exit_code = _run_tui(things, path, args.play or cfg.autoplay, cfg.show_debug)
    logger.info("App exit code=%s", exit_code)
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
