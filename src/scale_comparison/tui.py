"""Textual-based TUI for Scale Comparison."""

from __future__ import annotations

from dataclasses import replace
import logging
import math
from pathlib import Path
import time
from typing import Any, Callable, Iterable, Optional, Sequence

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.timer import Timer
from textual.widgets import Footer, Header, Static

from scale_comparison.animation import FRAME_DURATION_MS
from scale_comparison.config import load_config, save_config
from scale_comparison.logging_setup import set_console_level
from scale_comparison.store import save_things
from scale_comparison.thing import Thing
from scale_comparison.ui.chart_rendering import render_chart
from scale_comparison.ui.status_controller import StatusController
from scale_comparison.ui.thing_editor import ThingEditor
from scale_comparison.viewport import Viewport

logger = logging.getLogger(__name__)


class ChartView(Static):
    """Chart pane, redrawn on every frame."""

    def __init__(
        self,
        source: Callable[[], tuple[Sequence[Thing], Viewport, Optional[int]]],
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self._source = source

    def render(self) -> Text:
        things, viewport, selected = self._source()
        return render_chart(
            things, viewport, self.size.width, self.size.height, selected=selected
        )


class StatusBar(Static):
    """Status bar widget."""

    def __init__(self, controller: StatusController, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._controller = controller

    def render(self) -> Text:
        app = self.app
        viewport: Optional[Viewport] = getattr(app, "viewport", None)
        if viewport is None:
            return self._controller.render_line(max(1, self.size.width))
        return self._controller.render_line(
            max(1, self.size.width),
            step=viewport.step_label() if getattr(app, "show_debug", True) else "",
            active=viewport.animation.active,
        )


class ScaleComparisonApp(App):
    """Animated comparison of durations on a logarithmic scale."""

    TITLE = "Scale Comparison"
    CSS = """
    #chart {
        height: 1fr;
    }
    #status_bar {
        height: 1;
        background: $panel;
    }
    """

    BINDINGS = [
        Binding("space", "toggle_playback", "Play/Pause"),
        Binding("up,k", "select_previous", "Prev"),
        Binding("down,j", "select_next", "Next"),
        Binding("a", "add_thing", "Add"),
        Binding("e", "edit_thing", "Edit"),
        Binding("d", "delete_thing", "Delete"),
        Binding("r", "reset_view", "Reset"),
        Binding("g", "toggle_debug", "Debug"),
        Binding("q", "quit_app", "Quit"),
    ]

    def __init__(
        self,
        *,
        things: Iterable[Thing],
        data_path: Path,
        autoplay: bool = False,
        show_debug: bool = True,
        now: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__()
        self.things: list[Thing] = list(things)
        self.data_path = data_path
        self.show_debug = show_debug
        self.selected: Optional[int] = None
        self.viewport = Viewport.init(self.things)
        self._autoplay = autoplay
        self._ticker: Optional[Timer] = None
        self._status = StatusController(now)

    def compose(self) -> ComposeResult:
        yield Header()
        yield ChartView(self._chart_source, id="chart")
        yield StatusBar(self._status, id="status_bar")
        yield Footer()

    def on_mount(self) -> None:
        if not self.things:
            self._status.show_message("No things loaded, press a to add one")
        self.set_playing(self._autoplay)
        logger.info("TUI mounted with %s things", len(self.things))

    def on_unmount(self) -> None:
        self._stop_ticker()

    # --- Animation ---
    def _chart_source(self) -> tuple[Sequence[Thing], Viewport, Optional[int]]:
        return self.things, self.viewport, self.target_index()

    @property
    def is_playing(self) -> bool:
        return self.viewport.animation.active

    def set_playing(self, active: bool) -> None:
        """Flip the animation and start or stop the frame timer to match."""
        self.viewport.animation.active = active
        if active and self._ticker is None:
            self._ticker = self.set_interval(FRAME_DURATION_MS / 1000.0, self._on_frame)
        elif not active:
            self._stop_ticker()
        self._refresh_view()

    def _stop_ticker(self) -> None:
        if self._ticker is not None:
            self._ticker.stop()
            self._ticker = None

    def _on_frame(self) -> None:
        if not self.viewport.animation.active:
            return
        self.viewport.update_animation(self.things)
        self._refresh_view()

    def _refresh_view(self) -> None:
        self.title = f"{self.TITLE}{self.viewport.animation.info()}"
        for widget_id in ("#chart", "#status_bar"):
            for widget in self.query(widget_id):
                widget.refresh()

    def current_index(self) -> Optional[int]:
        """Index of the most recently revealed thing."""
        if not self.things:
            return None
        index = math.floor(self.viewport.shift) - 1
        return max(0, min(len(self.things) - 1, index))

    def target_index(self) -> Optional[int]:
        """Index that edit and delete act on: the selection, else the current."""
        if self.selected is not None and 0 <= self.selected < len(self.things):
            return self.selected
        return self.current_index()

    def _move_selection(self, delta: int) -> None:
        index = self.target_index()
        if index is None:
            self._status.show_message("Nothing to select", level="warn")
            return
        self.selected = (index + delta) % len(self.things)
        thing = self.things[self.selected]
        self._status.show_message(
            f"Selected {self.selected + 1}/{len(self.things)}: {thing.name}"
        )
        self._refresh_view()

    # --- Editing ---
    def _commit_things(self, message: str) -> None:
        try:
            save_things(self.things, self.data_path)
        except OSError as exc:
            logger.exception("Failed to save things to %s", self.data_path)
            self._status.show_message(f"Save failed: {exc}", level="error")
        else:
            self._status.show_message(message)
        self.reset_view()

    def reset_view(self) -> None:
        self._stop_ticker()
        self.viewport = Viewport.init(self.things)
        self._refresh_view()

    def _on_thing_added(self, thing: Optional[Thing]) -> None:
        if thing is None:
            return
        self.things.append(thing)
        self._commit_things(f"Added {thing.name}")

    def _on_thing_edited(self, index: int, thing: Optional[Thing]) -> None:
        if thing is None or index >= len(self.things):
            return
        self.things[index] = thing
        self._commit_things(f"Updated {thing.name}")

    # --- Actions ---
    def action_toggle_playback(self) -> None:
        self.set_playing(not self.is_playing)

    def action_add_thing(self) -> None:
        self.set_playing(False)
        self.push_screen(ThingEditor(), self._on_thing_added)

    def action_select_previous(self) -> None:
        self._move_selection(-1)

    def action_select_next(self) -> None:
        self._move_selection(1)

    def action_edit_thing(self) -> None:
        index = self.target_index()
        if index is None:
            self._status.show_message("Nothing to edit", level="warn")
            return
        self.set_playing(False)

        def on_result(thing: Optional[Thing]) -> None:
            self._on_thing_edited(index, thing)

        self.push_screen(ThingEditor(self.things[index]), on_result)

    def action_delete_thing(self) -> None:
        index = self.target_index()
        if index is None:
            self._status.show_message("Nothing to delete", level="warn")
            return
        removed = self.things.pop(index)
        if self.selected is not None:
            self.selected = min(index, len(self.things) - 1) if self.things else None
        self._commit_things(f"Deleted {removed.name}")

    def action_reset_view(self) -> None:
        self.reset_view()
        self._status.show_message("Viewport reset")

    def action_toggle_debug(self) -> None:
        """Show or hide the step label and remember the choice in the config."""
        self.show_debug = not self.show_debug
        try:
            save_config(replace(load_config(), show_debug=self.show_debug))
        except OSError as exc:
            logger.exception("Failed to save config")
            self._status.show_message(f"Config save failed: {exc}", level="error")
        self._refresh_view()

    def action_quit_app(self) -> None:
        self._stop_ticker()
        self.exit()


def run_tui(
    things: Iterable[Thing],
    data_path: Path,
    *,
    autoplay: bool = False,
    show_debug: bool = True,
) -> int:
    """Run the TUI and return an exit code."""
    logger.info("TUI start data=%s autoplay=%s", data_path, autoplay)
    set_console_level(logging.WARNING)
    app = ScaleComparisonApp(
        things=things, data_path=data_path, autoplay=autoplay, show_debug=show_debug
    )
    app.run()
    logger.info("TUI exit")
    return 0
