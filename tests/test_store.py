"""Tests for things persistence."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from scale_comparison.store import default_things, load_things, save_things
from scale_comparison.thing import Thing


def test_default_things_are_ordered_by_scale() -> None:
    things = default_things()
    assert [thing.name for thing in things][0] == "Hydrogen-7 half-life"
    scales = [thing.scale() for thing in things]
    assert scales == sorted(scales)
    assert str(things[1].value) == "8 m 20 s"


def test_save_and_load_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "things.json"
    things = default_things()
    save_things(things, path)
    assert path.exists()
    assert not path.with_suffix(".tmp").exists()
    assert load_things(path) == things


def test_save_writes_plain_json(tmp_path: Path) -> None:
    path = tmp_path / "things.json"
    save_things([Thing.new("Minute", 60.0)], path)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == [{"name": "Minute", "value": {"significand": 6.0, "exponent": 1.0}}]


def test_load_missing_file_returns_empty(tmp_path: Path) -> None:
    assert load_things(tmp_path / "missing.json") == []


def test_load_corrupt_file_logs(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "things.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.ERROR):
        assert load_things(path) == []
    assert "Failed to load things" in caplog.text


def test_load_rejects_non_list(tmp_path: Path) -> None:
    path = tmp_path / "things.json"
    path.write_text(json.dumps({"name": "x"}), encoding="utf-8")
    assert load_things(path) == []


def test_load_skips_bad_entries(tmp_path: Path) -> None:
    path = tmp_path / "things.json"
    entries = [
        {"name": "ok", "value": {"significand": 1.5, "exponent": 2}},
        {"name": "broken"},
        "junk",
    ]
    path.write_text(json.dumps(entries), encoding="utf-8")
    things = load_things(path)
    assert [thing.name for thing in things] == ["ok"]
