"""Human readable time durations built on ENumber."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from scale_comparison.enumber import ENumber, precision

SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0
SECONDS_PER_YEAR = 31556952.0
SECONDS_EXP_BREAK = 3

MINUTE = ENumber.from_float(SECONDS_PER_MINUTE)
HOUR = ENumber.from_float(SECONDS_PER_HOUR)
DAY = ENumber.from_float(SECONDS_PER_DAY)
YEAR = ENumber.from_float(SECONDS_PER_YEAR)

_YEAR_UNITS: tuple[tuple[ENumber, float, str], ...] = (
    (ENumber.new(1, 6), 1.0, "y"),
    (ENumber.new(1, 9), 1e6, "My"),
    (ENumber.new(1, 12), 1e9, "Gy"),
    (ENumber.new(1, 15), 1e12, "Ty"),
)


def _fixed(value: float, digits: int = 2) -> str:
    return f"{value:.{precision(value, digits)}f}"


@dataclass(frozen=True)
class TimeScale:
    """An ENumber interpreted as a count of seconds."""

    value: ENumber = ENumber()

    @classmethod
    def of(cls, value: Union[ENumber, float, tuple[float, int]]) -> TimeScale:
        if isinstance(value, ENumber):
            return cls(value)
        if isinstance(value, tuple):
            return cls(ENumber.new(*value))
        return cls(ENumber.from_float(value))

    def inner(self) -> ENumber:
        return self.value

    def fmt_secs(self) -> str:
        """Format as plain seconds, used for axis labels."""
        return f"{self.value.fmt_exp_break(SECONDS_EXP_BREAK)} s"

    def __str__(self) -> str:
        if self.value.collapse() is not None:
            text = self._format_units()
            if text is not None:
                return text
        if self.value.exponent > 0:
            return f"{self.value / YEAR} y"
        return f"{self.value} s"

    def _format_units(self) -> Optional[str]:
        value = self.value
        seconds = value.collapse()
        if seconds is None:
            return None
        if value <= MINUTE:
            return self.fmt_secs()
        if value <= HOUR:
            mins, secs = divmod(round(seconds), 60)
            text = f"{mins} m"
            if secs:
                text += f" {secs} s"
            return text
        if value <= DAY:
            hrs, mins = divmod(round(seconds / SECONDS_PER_MINUTE), 60)
            text = f"{hrs} h"
            if mins:
                text += f" {mins} m"
            return text
        if value <= YEAR:
            return f"{_fixed(seconds / SECONDS_PER_DAY)} d"
        years = value / YEAR
        for limit, divisor, suffix in _YEAR_UNITS:
            if years < limit:
                collapsed = years.collapse()
                if collapsed is None:
                    return None
                return f"{_fixed(collapsed / divisor)} {suffix}"
        return None
