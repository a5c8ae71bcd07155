"""Configuration persistence for Scale Comparison."""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

APP_NAME = "scale-comparison"


@dataclass(frozen=True)
class AppConfig:
    """Immutable user configuration loaded from disk."""

    data_file: Optional[str] = None
    autoplay: bool = False
    show_debug: bool = True


def get_config_dir(app_name: str = APP_NAME) -> Path:
    """Return the per-user config directory for the current platform."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            root = Path(base)
        else:
            root = Path.home() / "AppData" / "Roaming"
        return _ensure_dir(root / app_name)
    elif os.name == "posix":
        if _is_macos():
            return _ensure_dir(
                Path.home() / "Library" / "Application Support" / app_name
            )
        base = os.environ.get("XDG_CONFIG_HOME")
        root = Path(base) if base else Path.home() / ".config"
        return _ensure_dir(root / app_name)
    else:
        return _ensure_dir(Path.home() / ".config" / app_name)


def get_config_path() -> Path:
    """Return the full config file path."""
    return get_config_dir() / "config.json"


def default_data_path() -> Path:
    """Return where the things list lives when no data file is configured."""
    return get_config_dir() / "data.json"


def resolve_data_path(cfg: AppConfig, override: Optional[str] = None) -> Path:
    """Pick the data file: explicit override, then config, then the default."""
    if override:
        return Path(override).expanduser()
    if cfg.data_file:
        return Path(cfg.data_file).expanduser()
    return default_data_path()


def load_config() -> AppConfig:
    """Load configuration from disk, falling back to defaults on error."""
    path = get_config_path()
    if not path.exists():
        return AppConfig()
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        logger.exception("Failed to load config from %s", path)
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()
    return _config_from_mapping(raw)


def save_config(cfg: AppConfig) -> None:
    """Persist configuration to disk atomically."""
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_suffix(".tmp")
    data = {
        "data_file": cfg.data_file,
        "autoplay": cfg.autoplay,
        "show_debug": cfg.show_debug,
    }
    temp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    os.replace(temp_path, path)


def _ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def _is_macos() -> bool:
    return os.uname().sysname == "Darwin" if hasattr(os, "uname") else False


def _get_bool(raw: dict[str, Any], key: str, default: bool) -> bool:
    value = raw.get(key, default)
    if isinstance(value, bool):
        return value
    return default


def _config_from_mapping(raw: dict[str, Any]) -> AppConfig:
    """Normalize raw JSON data into an AppConfig."""
    data_file = raw.get("data_file")
    if not isinstance(data_file, str) or not data_file:
        data_file = None
    return AppConfig(
        data_file=data_file,
        autoplay=_get_bool(raw, "autoplay", False),
        show_debug=_get_bool(raw, "show_debug", True),
    )
