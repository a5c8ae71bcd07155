"""Significand/exponent numbers that survive very large and very small scales."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
import math
from typing import Optional, Union

DEFAULT_SIGNIFICANT_DIGITS = 4


def _pow10(exponent: float) -> float:
    try:
        return 10.0**exponent
    except OverflowError:
        return math.inf


def _shift_decimal(value: float, places: int) -> float:
    """Return ``value / 10**places`` using exact powers of ten where possible."""
    if places >= 0:
        return value / _pow10(places)
    if places < -300:
        value *= 1e300
        places += 300
    return value * _pow10(-places)


def precision(value: float, digits: int) -> int:
    """Return how many decimals are needed to show ``value`` to ``digits`` places."""
    if value == 0 or not math.isfinite(value):
        return 0
    magnitude = math.floor(math.log10(abs(value)))
    places = max(digits, digits - 1 - magnitude)
    text = f"{abs(value):.{places}f}"
    if "." not in text:
        return 0
    return len(text.split(".", 1)[1].rstrip("0"))


def float_to_string(value: float, digits: int = DEFAULT_SIGNIFICANT_DIGITS) -> str:
    """Render a float with at most ``digits`` significant digits."""
    if value == 0:
        return "0"
    if not math.isfinite(value):
        return str(value)
    magnitude = math.floor(math.log10(abs(value)))
    places = max(0, digits - 1 - magnitude)
    text = f"{value:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in {"-0", ""}:
        return "0"
    return text


def _exponent_to_string(exponent: float) -> str:
    exponent = float(exponent)
    if exponent.is_integer():
        return str(int(exponent))
    return float_to_string(exponent)


@total_ordering
@dataclass(frozen=True)
class ENumber:
    """A real number stored as ``significand * 10**exponent``.

    Either both fields are zero or ``1 <= |significand| < 10``. The exponent
    is a float so that positions on a logarithmic scale can be interpolated.
    """

    significand: float = 0.0
    exponent: float = 0.0

    @classmethod
    def normalize(cls, significand: float, exponent: float) -> ENumber:
        if significand == 0:
            return cls(0.0, 0.0)
        if not math.isfinite(significand):
            raise ValueError(f"Significand must be finite, got {significand!r}")
        adjustment = math.floor(math.log10(abs(significand)))
        significand = _shift_decimal(significand, adjustment)
        # log10 may land one step off near exact powers of ten.
        if abs(significand) >= 10:
            significand /= 10
            adjustment += 1
        elif abs(significand) < 1:
            significand *= 10
            adjustment -= 1
        return cls(float(significand), float(exponent) + adjustment)

    @classmethod
    def new(cls, significand: float, exponent: int = 0) -> ENumber:
        return cls.normalize(significand, float(exponent))

    @classmethod
    def from_float(cls, value: float) -> ENumber:
        return cls.new(value, 0)

    @classmethod
    def from_exp(cls, exponent: float) -> ENumber:
        """Return ``10**exponent``."""
        return cls.normalize(1.0, exponent)

    def __mul__(self, other: Union[ENumber, float]) -> ENumber:
        if isinstance(other, ENumber):
            return ENumber.normalize(
                self.significand * other.significand,
                self.exponent + other.exponent,
            )
        return ENumber.normalize(self.significand * other, self.exponent)

    def __truediv__(self, other: Union[ENumber, float]) -> ENumber:
        if isinstance(other, ENumber):
            if other.significand == 0:
                raise ZeroDivisionError("ENumber division by zero")
            return ENumber.normalize(
                self.significand / other.significand,
                self.exponent - other.exponent,
            )
        if other == 0:
            raise ZeroDivisionError("ENumber division by zero")
        return ENumber.normalize(self.significand / other, self.exponent)

    def __lt__(self, other: ENumber) -> bool:
        if not isinstance(other, ENumber):
            return NotImplemented
        if float(self.exponent).is_integer() and float(other.exponent).is_integer():
            return self._order_key() < other._order_key()
        return self._signed_log() < other._signed_log()

    def _order_key(self) -> tuple[int, float, float]:
        if self.significand == 0:
            return (0, 0.0, 0.0)
        if self.significand > 0:
            return (1, self.exponent, self.significand)
        return (-1, -self.exponent, self.significand)

    def _signed_log(self) -> tuple[int, float]:
        sign, log = self.erect()
        if sign == 0:
            return (0, 0.0)
        return (int(sign), log * sign)

    def __str__(self) -> str:
        return (
            f"{float_to_string(self.significand)}e"
            f"{_exponent_to_string(self.exponent)}"
        )

    def fmt_exp_break(self, exp_break: int) -> str:
        """Plain decimal inside ``[-exp_break, exp_break]``, scientific outside."""
        if -exp_break <= self.exponent <= exp_break:
            collapsed = self.collapse()
            if collapsed is not None:
                return float_to_string(collapsed)
        return str(self)

    def erect(self) -> tuple[float, float]:
        """Return ``(sign, log10(|value|))`` as one continuous position."""
        if self.significand == 0:
            return (0.0, -math.inf)
        return (
            math.copysign(1.0, self.significand),
            self.exponent + math.log10(abs(self.significand)),
        )

    def collapse(self) -> Optional[float]:
        """Return the value as a float, or None when it does not fit."""
        result = self._raw()
        return result if math.isfinite(result) else None

    def limit_collapse(self, maximum: float) -> float:
        return min(self._raw(), maximum)

    def to_scale(self, scale: float, maximum: float) -> float:
        """Position relative to a ``10**scale`` camera, clamped to ``maximum``."""
        return (self / ENumber.from_exp(scale)).limit_collapse(maximum)

    def _raw(self) -> float:
        if self.significand == 0:
            return 0.0
        return self.significand * _pow10(self.exponent)


@dataclass
class ENumberEditor:
    """Text fields backing an editable ENumber."""

    significand: str = ""
    exponent: str = ""
    editing: bool = False

    @classmethod
    def from_enumber(cls, value: ENumber) -> ENumberEditor:
        return cls(
            significand=repr(value.significand),
            exponent=_exponent_to_string(value.exponent),
            editing=True,
        )

    def commit(self) -> ENumber:
        """Parse the fields; raises ValueError when either is not a finite number."""
        significand = _parse_finite(self.significand, "significand")
        exponent = _parse_finite(self.exponent, "exponent")
        return ENumber.normalize(significand, exponent)


def _parse_finite(raw: str, field: str) -> float:
    text = raw.strip()
    try:
        value = float(text)
    except ValueError:
        raise ValueError(f"Invalid {field}: {raw!r}") from None
    if not math.isfinite(value):
        raise ValueError(f"Invalid {field}: {raw!r}")
    return value
