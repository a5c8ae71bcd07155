"""Tests for CLI parsing and dispatch."""

from __future__ import annotations

import builtins
from pathlib import Path
import sys

from scale_comparison import cli
from scale_comparison.config import AppConfig
from scale_comparison.store import default_things, load_things, save_things
from scale_comparison.thing import Thing


def _quiet_main(monkeypatch, cfg: AppConfig = AppConfig()) -> None:
    monkeypatch.setattr(cli, "init_logging", lambda: Path("app.log"))
    monkeypatch.setattr(cli, "load_config", lambda: cfg)
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)


def test_parse_defaults() -> None:
    args = cli.build_parser().parse_args([])
    assert args.data_file is None
    assert args.play is False
    assert args.list is False


def test_parse_data_file_and_flags() -> None:
    args = cli.build_parser().parse_args(["things.json", "--play", "--list"])
    assert args.data_file == "things.json"
    assert args.play is True
    assert args.list is True


def test_prepare_things_seeds_missing_file(tmp_path: Path) -> None:
    path = tmp_path / "things.json"
    things = cli.prepare_things(path)
    assert things == default_things()
    assert load_things(path) == things


def test_prepare_things_reads_existing_file(tmp_path: Path) -> None:
    path = tmp_path / "things.json"
    save_things([Thing.new("Minute", 60.0)], path)
    assert [thing.name for thing in cli.prepare_things(path)] == ["Minute"]


def test_format_listing() -> None:
    things = [Thing.new("Minute", 60.0), Thing.new("Day", 86400.0)]
    assert cli.format_listing(things) == "Minute: 60 s\nDay: 24 h"


def test_run_tui_handles_import_error(monkeypatch, capsys, tmp_path: Path) -> None:
    original_import = builtins.__import__

    def fake_import(name, *args, **kwargs):
        if name == "scale_comparison.tui":
            raise ImportError("boom")
        return original_import(name, *args, **kwargs)

    monkeypatch.setattr(builtins, "__import__", fake_import)
    result = cli._run_tui([], tmp_path / "things.json", False, True)
    assert result == 1
    assert "boom" in capsys.readouterr().err


def test_main_lists_things(monkeypatch, capsys, tmp_path: Path) -> None:
    _quiet_main(monkeypatch)
    path = tmp_path / "things.json"
    save_things([Thing.new("Minute", 60.0)], path)
    assert cli.main([str(path), "--list"]) == 0
    assert capsys.readouterr().out.strip() == "Minute: 60 s"


def test_main_runs_tui_with_config(monkeypatch, tmp_path: Path) -> None:
    path = tmp_path / "configured.json"
    _quiet_main(monkeypatch, AppConfig(data_file=str(path), autoplay=True))
    calls: list[tuple[int, Path, bool, bool]] = []

    def fake_run_tui(things, data_path, autoplay, show_debug) -> int:
        calls.append((len(things), data_path, autoplay, show_debug))
        return 0

    monkeypatch.setattr(cli, "_run_tui", fake_run_tui)
    assert cli.main([]) == 0
    assert calls == [(len(default_things()), path, True, True)]
    assert path.exists()


def test_main_play_flag_overrides_config(monkeypatch, tmp_path: Path) -> None:
    _quiet_main(monkeypatch, AppConfig(show_debug=False))
    calls: list[tuple[bool, bool]] = []

    def fake_run_tui(things, data_path, autoplay, show_debug) -> int:
        calls.append((autoplay, show_debug))
        return 0

    monkeypatch.setattr(cli, "_run_tui", fake_run_tui)
    assert cli.main([str(tmp_path / "things.json"), "--play"]) == 0
    assert calls == [(True, False)]
