"""Cubic easing curves on the unit interval."""

from __future__ import annotations


def cubic_in(t: float) -> float:
    return t * t * t


def cubic_out(t: float) -> float:
    """Fast start, decelerating to rest at ``t == 1``."""
    inv = 1.0 - t
    return 1.0 - inv * inv * inv


def cubic_in_out(t: float) -> float:
    if t < 0.5:
        return 4.0 * t * t * t
    inv = -2.0 * t + 2.0
    return 1.0 - inv * inv * inv / 2.0
