"""Status bar controller for the TUI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from rich.text import Text

from scale_comparison.ui.chart_rendering import ellipsize


@dataclass(frozen=True)
class StatusMessage:
    text: str
    level: str
    until: Optional[float]


class StatusController:
    """Status bar state and rendering."""

    def __init__(self, now: Callable[[], float]) -> None:
        self._now = now
        self._message: Optional[StatusMessage] = None

    def show_message(
        self,
        text: str,
        *,
        level: str = "info",
        timeout: Optional[float] = None,
    ) -> None:
        if timeout is None:
            timeout = 6.0 if level in {"warn", "error"} else 3.0
        until = None if timeout == 0 else self._now() + max(0.0, timeout)
        self._message = StatusMessage(text=text, level=level, until=until)

    def clear_message(self) -> None:
        self._message = None

    def render_line(self, width: int, *, step: str = "", active: bool = False) -> Text:
        message = self._current_message()
        if message:
            line = ellipsize(message.text, width)
            style = None
            if message.level == "warn":
                style = "#ffcc66"
            elif message.level == "error":
                style = "#ff5f52"
            return Text(line, style=style) if style else Text(line)
        return Text(ellipsize(self._render_hint(step, active), width))

    def _current_message(self) -> Optional[StatusMessage]:
        if not self._message:
            return None
        if self._message.until is None:
            return self._message
        if self._message.until > self._now():
            return self._message
        self._message = None
        return None

    def _render_hint(self, step: str, active: bool) -> str:
        playback = "Space: pause" if active else "Space: play"
        hint = (
            f"{playback}  up/down: select  a: add  e: edit  d: delete"
            "  r: reset  g: debug  q: quit"
        )
        if step:
            return f"[{step}]  {hint}"
        return hint
