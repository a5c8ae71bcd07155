"""Render the viewport as styled terminal text."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from rich.text import Text

from scale_comparison.enumber import ENumber
from scale_comparison.geometry import Vec2
from scale_comparison.thing import BAR_OFFSET, BAR_WIDTH, Thing
from scale_comparison.units import TimeScale
from scale_comparison.viewport import MAX_HEIGHT, MINOR_LINES, MINOR_OFFSET, Viewport

RGB = tuple[int, int, int]

BACKGROUND: RGB = (0, 0, 0)
BAR_COLOR: RGB = (60, 179, 113)
NAME_COLOR: RGB = (255, 255, 255)
VALUE_COLOR: RGB = (0, 250, 154)
MAJOR_COLOR: RGB = (211, 211, 211)
MINOR_COLOR: RGB = (85, 85, 85)
AXIS_COLOR: RGB = (25, 25, 25)

LABEL_MARGIN = 12
MIN_WIDTH = LABEL_MARGIN + int(BAR_OFFSET)
MIN_HEIGHT = 6


def fade(color: RGB, alpha: float) -> str:
    """Blend ``color`` over the background and return a hex style."""
    alpha = max(0.0, min(1.0, alpha))
    mixed = [round(bg + (fg - bg) * alpha) for fg, bg in zip(color, BACKGROUND)]
    return "#{:02x}{:02x}{:02x}".format(*mixed)


def ellipsize(text: str, max_len: int) -> str:
    if max_len <= 0:
        return ""
    if len(text) <= max_len:
        return text
    if max_len <= 3:
        return "." * max_len
    return text[: max_len - 3] + "..."


def center_message(message: str, width: int, height: int) -> str:
    line = ellipsize(message, width)
    pad = max(0, (width - len(line)) // 2)
    centered = (" " * pad + line).ljust(width)
    top_pad = max(0, (height - 1) // 2)
    lines = [" " * width for _ in range(top_pad)]
    lines.append(centered)
    lines.extend([" " * width for _ in range(max(0, height - len(lines)))])
    return "\n".join(lines[:height])


class _Canvas:
    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._chars = [[" "] * width for _ in range(height)]
        self._styles: list[list[Optional[str]]] = [
            [None] * width for _ in range(height)
        ]

    def put(self, row: int, col: int, text: str, style: Optional[str]) -> None:
        if not 0 <= row < self.height:
            return
        for offset, char in enumerate(text):
            column = col + offset
            if 0 <= column < self.width:
                self._chars[row][column] = char
                self._styles[row][column] = style

    def hline(self, row: int, start: int, char: str, style: Optional[str]) -> None:
        self.put(row, start, char * max(0, self.width - start), style)

    def to_text(self) -> Text:
        text = Text()
        for row in range(self.height):
            if row:
                text.append("\n")
            run = ""
            run_style: Optional[str] = None
            for char, style in zip(self._chars[row], self._styles[row]):
                if style != run_style and run:
                    text.append(run, style=run_style)
                    run = ""
                run_style = style
                run += char
            if run:
                text.append(run, style=run_style)
        return text


def _centered_col(center: int, text: str) -> int:
    return center - len(text) // 2


def render_chart(
    things: Sequence[Thing],
    viewport: Viewport,
    width: int,
    height: int,
    *,
    selected: Optional[int] = None,
) -> Text:
    """Draw grid lines, bars, names and values for the current frame.

    The name of the ``selected`` thing is underlined.
    """
    if width < MIN_WIDTH or height < MIN_HEIGHT:
        return Text(center_message("Chart too small", max(0, width), max(0, height)))
    canvas = _Canvas(width, height)
    axis_row = height - 2
    value_row = height - 1
    plot_rows = axis_row

    def row_for(position: float) -> int:
        return axis_row - int(round(position / MAX_HEIGHT * plot_rows))

    def visible(position: float) -> bool:
        return 0 < position < MAX_HEIGHT and row_for(position) < axis_row

    decades = [math.floor(viewport.scale + offset) for offset in range(-1, 4)]
    for decade in decades:
        for i in range(1, MINOR_LINES + 1):
            minor = ENumber.from_exp(decade + MINOR_OFFSET * i)
            position = minor.to_scale(viewport.scale, MAX_HEIGHT)
            if visible(position):
                alpha = min(1.0, position)
                style = fade(MINOR_COLOR, alpha)
                canvas.hline(row_for(position), LABEL_MARGIN, "┈", style)
    for decade in decades:
        major = ENumber.from_exp(decade)
        position = major.to_scale(viewport.scale, MAX_HEIGHT)
        if not visible(position):
            continue
        style = fade(MAJOR_COLOR, min(1.0, position))
        row = row_for(position)
        label = ellipsize(TimeScale(major).fmt_secs(), LABEL_MARGIN - 1)
        canvas.put(row, 0, label, style)
        canvas.hline(row, LABEL_MARGIN, "─", style)

    canvas.hline(axis_row, 0, "━", fade(VALUE_COLOR, 1.0))
    canvas.hline(value_row, 0, " ", f"on {fade(AXIS_COLOR, 1.0)}")

    camera = viewport.camera.inverse()
    bar_width = int(BAR_WIDTH)
    label_width = int(BAR_OFFSET) - 2
    for index, thing in enumerate(things):
        alpha = viewport.alpha(index)
        if alpha <= 0:
            continue
        height_px = thing.y_position(viewport.scale, MAX_HEIGHT)
        world = Vec2(Thing.x_position(index), height_px)
        screen = camera.apply(world)
        left = LABEL_MARGIN + 1 + int(round(screen.x))
        if left >= width or left + bar_width <= LABEL_MARGIN:
            continue
        center = left + bar_width // 2
        top_row = row_for(max(0.0, screen.y))
        bar_style = fade(BAR_COLOR, alpha)
        bar_left = max(left, LABEL_MARGIN)
        bar = "█" * (left + bar_width - bar_left)
        for row in range(max(0, top_row), axis_row):
            canvas.put(row, bar_left, bar, bar_style)
        name = ellipsize(thing.name, label_width)
        name_style = fade(NAME_COLOR, alpha)
        if index == selected:
            name_style = f"bold underline {name_style}"
        canvas.put(top_row - 1, _centered_col(center, name), name, name_style)
        value = ellipsize(str(thing.value), label_width)
        canvas.put(
            value_row,
            _centered_col(center, value),
            value,
            f"bold {fade(VALUE_COLOR, alpha)} on {fade(AXIS_COLOR, 1.0)}",
        )
    return canvas.to_text()
