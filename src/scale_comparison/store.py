"""JSON persistence for the things list."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Iterable

from scale_comparison.thing import Thing

logger = logging.getLogger(__name__)


def default_things() -> list[Thing]:
    """Sample list spanning from sub-atomic to stellar lifetimes."""
    return [
        Thing.new("Hydrogen-7 half-life", (2.3, -23)),
        Thing.new("Time for sunlight to reach earth", 8.0 * 60.0 + 20.0),
        Thing.new("Week", (6.048, 5)),
        Thing.new("Sun's lifespan", (3.1556952, 17)),
    ]


def load_things(path: Path) -> list[Thing]:
    """Load things from ``path``; missing or corrupt files yield an empty list."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.info("No data file at %s", path)
        return []
    except (OSError, json.JSONDecodeError):
        logger.exception("Failed to load things from %s", path)
        return []
    if not isinstance(raw, list):
        logger.warning("Ignoring data file %s: expected a list", path)
        return []
    things: list[Thing] = []
    for index, entry in enumerate(raw):
        try:
            things.append(Thing.from_mapping(entry))
        except ValueError as exc:
            logger.warning("Skipping entry %s in %s: %s", index, path, exc)
    logger.info("Loaded %s things from %s", len(things), path)
    return things


def save_things(things: Iterable[Thing], path: Path) -> None:
    """Write things to ``path`` atomically."""
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_suffix(".tmp")
    data = [thing.to_mapping() for thing in things]
    temp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    os.replace(temp_path, path)
    logger.info("Saved %s things to %s", len(data), path)
