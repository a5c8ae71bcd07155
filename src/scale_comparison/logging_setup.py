"""Logging setup for Scale Comparison."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import os
from pathlib import Path
from typing import Iterator

LOG_LEVEL_ENV = "SCALE_COMPARISON_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _default_log_dir() -> Path:
    local_appdata = os.getenv("LOCALAPPDATA")
    if local_appdata:
        return Path(local_appdata) / "ScaleComparison" / "logs"
    return Path.home() / ".scale_comparison" / "logs"


def _resolve_level() -> int:
    level = logging.getLevelName(os.getenv(LOG_LEVEL_ENV, "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def _console_handlers(root: logging.Logger) -> Iterator[logging.Handler]:
    for handler in root.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(
            handler, logging.FileHandler
        ):
            yield handler


def init_logging(app_name: str = "scale_comparison") -> Path:
    """Attach a rotating file handler and a console handler to the root logger.

    Calling it again does not add duplicate handlers. When the log directory
    cannot be created, logging falls back to ``basicConfig`` on stderr.
    """
    log_path = _default_log_dir() / "app.log"
    level = _resolve_level()
    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        if not any(isinstance(h, RotatingFileHandler) for h in root.handlers):
            file_handler = RotatingFileHandler(
                log_path,
                maxBytes=1_000_000,
                backupCount=3,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
        if not any(True for _ in _console_handlers(root)):
            stream_handler = logging.StreamHandler()
            stream_handler.setLevel(level)
            stream_handler.setFormatter(formatter)
            root.addHandler(stream_handler)
    except OSError:
        logging.basicConfig(level=level, format=LOG_FORMAT)

    logging.getLogger(app_name).info("Logging initialized at %s", log_path)
    return log_path


def set_console_level(level: int) -> None:
    """Adjust console (stderr) handler level, leaving the log file untouched."""
    for handler in _console_handlers(logging.getLogger()):
        handler.setLevel(level)
