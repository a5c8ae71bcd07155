"""Modal editor for a single thing."""

from __future__ import annotations

from typing import Optional

from textual import events
from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Static

from scale_comparison.enumber import ENumberEditor
from scale_comparison.thing import Thing
from scale_comparison.units import TimeScale


class ThingEditor(ModalScreen[Optional[Thing]]):
    """Edit the name and significand/exponent of a thing.

    Invalid numbers are rejected: the fields snap back to the last committed
    value and the modal stays open.
    """

    DEFAULT_CSS = """
    ThingEditor {
        align: center middle;
    }
    #thing_editor {
        width: 60;
        height: auto;
        border: round $accent;
        padding: 1 2;
    }
    #thing_editor_fields {
        height: auto;
    }
    #thing_editor_fields Input {
        width: 1fr;
    }
    #thing_editor_buttons {
        height: auto;
        align: center middle;
    }
    #thing_editor_error {
        color: $error;
    }
    """

    def __init__(self, thing: Optional[Thing] = None) -> None:
        super().__init__()
        self._original = thing
        if thing is None:
            self._committed = ENumberEditor(significand="1", exponent="0")
        else:
            self._committed = ENumberEditor.from_enumber(thing.value.inner())

    def compose(self) -> ComposeResult:
        title = "Add thing" if self._original is None else "Edit thing"
        name = self._original.name if self._original else ""
        with Container(id="thing_editor"):
            yield Static(title, id="thing_editor_title")
            yield Input(name, placeholder="name", id="thing_editor_name")
            with Horizontal(id="thing_editor_fields"):
                yield Input(
                    self._committed.significand,
                    placeholder="significand",
                    id="thing_editor_significand",
                )
                yield Input(
                    self._committed.exponent,
                    placeholder="exponent",
                    id="thing_editor_exponent",
                )
            yield Static("", id="thing_editor_error")
            with Horizontal(id="thing_editor_buttons"):
                yield Button("Save", id="thing_editor_ok")
                yield Button("Cancel", id="thing_editor_cancel")

    def on_mount(self) -> None:
        self.query_one("#thing_editor_name", Input).focus()

    def _field(self, widget_id: str) -> Input:
        return self.query_one(f"#{widget_id}", Input)

    def _reject(self, message: str) -> None:
        self._field("thing_editor_significand").value = self._committed.significand
        self._field("thing_editor_exponent").value = self._committed.exponent
        self.query_one("#thing_editor_error", Static).update(message)

    def build_thing(self) -> Optional[Thing]:
        """Return the edited thing, or None after reporting why it was rejected."""
        name = self._field("thing_editor_name").value.strip()
        if not name:
            self.query_one("#thing_editor_error", Static).update("Name is required")
            return None
        editor = ENumberEditor(
            significand=self._field("thing_editor_significand").value,
            exponent=self._field("thing_editor_exponent").value,
            editing=True,
        )
        try:
            value = editor.commit()
        except ValueError as exc:
            self._reject(str(exc))
            return None
        if value.significand <= 0:
            self._reject("Duration must be positive")
            return None
        return Thing(name=name, value=TimeScale(value))

    def _confirm(self) -> None:
        thing = self.build_thing()
        if thing is not None:
            self.dismiss(thing)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "thing_editor_ok":
            self._confirm()
            return
        self.dismiss(None)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._confirm()

    def on_key(self, event: events.Key) -> None:
        if event.key == "escape":
            event.stop()
            self.dismiss(None)
