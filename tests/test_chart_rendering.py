"""Tests for chart rendering helpers."""

from __future__ import annotations

from scale_comparison.thing import Thing
from scale_comparison.ui.chart_rendering import (
    BAR_COLOR,
    MIN_WIDTH,
    center_message,
    ellipsize,
    fade,
    render_chart,
)
from scale_comparison.viewport import Viewport


def _revealed(things: list[Thing], shift: float) -> Viewport:
    viewport = Viewport.init(things)
    viewport.shift = shift
    viewport.sync_camera()
    return viewport


def test_fade_blends_over_background() -> None:
    assert fade((255, 255, 255), 1.0) == "#ffffff"
    assert fade((255, 255, 255), 0.5) == "#808080"
    assert fade(BAR_COLOR, 0.0) == "#000000"
    assert fade(BAR_COLOR, 4.0) == fade(BAR_COLOR, 1.0)


def test_ellipsize() -> None:
    assert ellipsize("hello", 10) == "hello"
    assert ellipsize("hello world", 8) == "hello..."
    assert ellipsize("hello", 2) == ".."
    assert ellipsize("hello", 0) == ""


def test_center_message_pads_block() -> None:
    lines = center_message("hi", 6, 3).split("\n")
    assert lines == ["      ", "  hi  ", "      "]


def test_render_chart_too_small() -> None:
    text = render_chart([], Viewport.init([]), 20, 3)
    assert "Chart too small" in text.plain


def test_render_chart_dimensions() -> None:
    things = [Thing.new("Minute", 60.0)]
    text = render_chart(things, _revealed(things, 1.0), 80, 20)
    lines = text.plain.split("\n")
    assert len(lines) == 20
    assert all(len(line) == 80 for line in lines)
    assert MIN_WIDTH <= 80


def test_render_chart_draws_revealed_bar() -> None:
    things = [Thing.new("Minute", 60.0)]
    lines = render_chart(things, _revealed(things, 1.0), 80, 20).plain.split("\n")
    assert lines[18].startswith("━")
    assert "█" in lines[10]
    assert "█" in lines[17]
    assert "Minute" in lines[4]
    assert "60 s" in lines[19]


def test_render_chart_draws_major_grid_label() -> None:
    things = [Thing.new("Minute", 60.0)]
    plain = render_chart(things, _revealed(things, 1.0), 80, 20).plain
    assert "10 s" in plain
    assert "─" in plain


def test_render_chart_hides_unrevealed_things() -> None:
    things = [Thing.new("Minute", 60.0)]
    plain = render_chart(things, _revealed(things, 0.0), 80, 20).plain
    assert "█" not in plain
    assert "Minute" not in plain


def test_render_chart_underlines_selected_name() -> None:
    things = [Thing.new("Minute", 60.0)]
    viewport = _revealed(things, 1.0)
    plain_spans = render_chart(things, viewport, 80, 20).spans
    selected_spans = render_chart(things, viewport, 80, 20, selected=0).spans
    assert not any("underline" in str(span.style) for span in plain_spans)
    assert any("underline" in str(span.style) for span in selected_spans)
