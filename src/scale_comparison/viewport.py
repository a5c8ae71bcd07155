"""Logarithmic camera that walks through a list of things."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Sequence

from scale_comparison.animation import (
    FPS,
    SHIFTING_FRAMES,
    SLOWING_FRAMES,
    Animation,
    Idle,
    Pausing,
    Scaling,
    Shifting,
    Slowing,
    describe,
)
from scale_comparison.easing import cubic_in_out, cubic_out
from scale_comparison.geometry import Affine, Vec2
from scale_comparison.thing import BAR_OFFSET, Thing

logger = logging.getLogger(__name__)

MAX_HEIGHT = 1000.0
MINOR_LINES = 3
MINOR_OFFSET = 1.0 / (MINOR_LINES + 1)
SCALE_PADDING = 2.85
IDLE_SCALE_SPEED = 0.025
SCALE_ACCELERATION = 0.25
INITIAL_SLOW_SCALE_SPEED = 3.0
INITIAL_CAMERA_POSITION = Vec2(0.0, 0.0)


@dataclass
class Viewport:
    """Camera state driven one fixed-length frame at a time.

    ``scale`` is the log10 value at the bottom of the view, ``shift`` is a
    continuous index into the things list and ``camera`` is derived from it.
    """

    animation: Animation = field(default_factory=Animation)
    scale: float = 0.0
    scale_speed: float = IDLE_SCALE_SPEED
    slow_scale_speed: float = 0.0
    prev_shift: float = 0.0
    shift: float = 0.0
    camera: Affine = field(
        default_factory=lambda: Affine.translate(INITIAL_CAMERA_POSITION)
    )

    @classmethod
    def init(cls, things: Sequence[Thing]) -> Viewport:
        scale = 0.0
        if things:
            scale = things[0].scale() - SCALE_PADDING
            if not math.isfinite(scale):
                logger.warning("First thing %r has no log position", things[0].name)
                scale = 0.0
        return cls(scale=scale)

    def scaling_done(self, things: Sequence[Thing]) -> bool:
        index = math.floor(self.shift)
        if index <= 0:
            return True
        if index - 1 < len(things):
            return things[index - 1].scale() - self.scale <= SCALE_PADDING
        return False

    def slowing_done(self) -> bool:
        return self.scale_speed <= IDLE_SCALE_SPEED

    def update_animation(self, things: Sequence[Thing]) -> None:
        """Advance one frame and recompute speed, shift and camera."""
        self.animation.tick(self.scaling_done(things), self.slowing_done())
        step = self.animation.step

        if isinstance(step, (Idle, Pausing)):
            self.scale_speed = IDLE_SCALE_SPEED
        elif isinstance(step, Scaling):
            self.scale_speed += SCALE_ACCELERATION / FPS
        elif isinstance(step, Slowing):
            if step.countdown == SLOWING_FRAMES:
                self.slow_scale_speed = min(self.scale_speed, INITIAL_SLOW_SCALE_SPEED)
            if step.countdown > 0:
                progress = step.countdown / SLOWING_FRAMES
                self.scale_speed = IDLE_SCALE_SPEED + (
                    self.slow_scale_speed - IDLE_SCALE_SPEED
                ) * cubic_out(progress)
            else:
                self.scale_speed = IDLE_SCALE_SPEED
        elif isinstance(step, Shifting):
            if step.countdown > 0:
                progress = 1.0 - step.countdown / SHIFTING_FRAMES
                self.shift = self.prev_shift + cubic_in_out(progress)
            else:
                self.prev_shift += 1.0
                self.shift = self.prev_shift
                logger.debug("Shifted to %s", self.shift)

        self.scale += self.scale_speed / FPS
        self.sync_camera()

    def sync_camera(self) -> None:
        """Place the camera from the current shift."""
        self.camera = self.camera.with_translation(
            INITIAL_CAMERA_POSITION - Vec2(BAR_OFFSET * self.shift, 0.0)
        )

    def alpha(self, index: int) -> float:
        return Thing.alpha(index, self.shift)

    def step_label(self) -> str:
        return describe(self.animation.step)
