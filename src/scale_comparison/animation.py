"""Fixed-timestep animation steps for the scale viewport."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
import logging
from typing import Union

logger = logging.getLogger(__name__)

FRAME_DURATION_MS = 16
FPS = 1000.0 / FRAME_DURATION_MS

IDLE_TIME = 1.0
PAUSING_TIME = 3.0
SLOWING_TIME = 0.1
SHIFTING_TIME = 2.0

IDLE_FRAMES = int(IDLE_TIME * FPS)
PAUSING_FRAMES = int(PAUSING_TIME * FPS)
SLOWING_FRAMES = int(SLOWING_TIME * FPS)
SHIFTING_FRAMES = int(SHIFTING_TIME * FPS)


@dataclass(frozen=True)
class Idle:
    countdown: int = IDLE_FRAMES


@dataclass(frozen=True)
class Scaling:
    pass


@dataclass(frozen=True)
class Slowing:
    countdown: int = SLOWING_FRAMES


@dataclass(frozen=True)
class Pausing:
    countdown: int = PAUSING_FRAMES


@dataclass(frozen=True)
class Shifting:
    countdown: int = SHIFTING_FRAMES


AnimStep = Union[Idle, Scaling, Slowing, Pausing, Shifting]


def next_step(step: AnimStep) -> AnimStep:
    """Return the following phase, seeded with its full countdown."""
    if isinstance(step, Idle):
        return Scaling()
    if isinstance(step, Scaling):
        return Slowing()
    if isinstance(step, Slowing):
        return Pausing()
    if isinstance(step, Pausing):
        return Shifting()
    return Idle()


def advance(step: AnimStep, scaling_done: bool, slowing_done: bool) -> AnimStep:
    """Apply one tick to ``step`` and return the resulting step."""
    if isinstance(step, Scaling):
        return next_step(step) if scaling_done else step
    if isinstance(step, Slowing):
        if slowing_done or step.countdown == 0:
            return next_step(step)
        return replace(step, countdown=step.countdown - 1)
    if step.countdown > 0:
        return replace(step, countdown=step.countdown - 1)
    return next_step(step)


def describe(step: AnimStep) -> str:
    """Short debug label such as ``Shifting(125)``."""
    name = type(step).__name__
    if isinstance(step, Scaling):
        return name
    return f"{name}({step.countdown})"


@dataclass
class Animation:
    """Frame counter plus the current step of the motion cycle."""

    active: bool = False
    frame: int = 0
    step: AnimStep = field(default_factory=Shifting)

    def tick(self, scaling_done: bool, slowing_done: bool) -> None:
        self.frame += 1
        previous = self.step
        self.step = advance(previous, scaling_done, slowing_done)
        if type(self.step) is not type(previous):
            logger.debug(
                "Frame %s: %s -> %s",
                self.frame,
                describe(previous),
                describe(self.step),
            )

    def secs(self) -> float:
        return self.frame / FPS

    def info(self) -> str:
        if self.frame == 0:
            return ""
        paused = "" if self.active else " [paused]"
        return f" | frame: {self.frame}, time: {self.secs():.1f} s{paused}"
