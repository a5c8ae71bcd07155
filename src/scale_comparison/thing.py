"""Named durations shown as bars in the viewport."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from scale_comparison.easing import cubic_in
from scale_comparison.enumber import ENumber
from scale_comparison.units import TimeScale

BAR_WIDTH = 6.0
BAR_HALF = BAR_WIDTH / 2
BAR_GAP = 14.0
BAR_OFFSET = BAR_WIDTH + BAR_GAP


@dataclass
class Thing:
    name: str = ""
    value: TimeScale = field(default_factory=TimeScale)

    @classmethod
    def new(
        cls, name: str, value: Union[TimeScale, ENumber, float, tuple[float, int]]
    ) -> Thing:
        if not isinstance(value, TimeScale):
            value = TimeScale.of(value)
        return cls(name=name, value=value)

    def scale(self) -> float:
        """Continuous log10 position of the value."""
        return self.value.inner().erect()[1]

    @staticmethod
    def alpha(index: int, shift: float) -> float:
        return cubic_in(min(1.0, max(0.0, shift - index)))

    @staticmethod
    def x_position(index: int) -> float:
        return -BAR_OFFSET * index

    def y_position(self, scale: float, max_height: float) -> float:
        return self.value.inner().to_scale(scale, max_height)

    def to_mapping(self) -> dict[str, Any]:
        inner = self.value.inner()
        return {
            "name": self.name,
            "value": {"significand": inner.significand, "exponent": inner.exponent},
        }

    @classmethod
    def from_mapping(cls, raw: Any) -> Thing:
        """Build a Thing from decoded JSON; raises ValueError on bad shapes."""
        if not isinstance(raw, dict):
            raise ValueError("Thing entry must be an object")
        name = raw.get("name")
        value = raw.get("value")
        if not isinstance(name, str) or not isinstance(value, dict):
            raise ValueError("Thing entry needs a name and a value")
        significand = value.get("significand")
        exponent = value.get("exponent")
        if isinstance(significand, bool) or isinstance(exponent, bool):
            raise ValueError("Thing value must be numeric")
        if not isinstance(significand, (int, float)) or not isinstance(
            exponent, (int, float)
        ):
            raise ValueError("Thing value must be numeric")
        number = ENumber.normalize(float(significand), float(exponent))
        return cls(name, TimeScale(number))
