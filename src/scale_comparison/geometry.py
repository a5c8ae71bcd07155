"""Minimal 2D vector and translation transform used by the camera."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)


@dataclass(frozen=True)
class Affine:
    """Translation-only affine transform."""

    translation: Vec2 = Vec2()

    @classmethod
    def translate(cls, offset: Vec2) -> Affine:
        return cls(offset)

    def with_translation(self, offset: Vec2) -> Affine:
        return Affine(offset)

    def inverse(self) -> Affine:
        return Affine(-self.translation)

    def apply(self, point: Vec2) -> Vec2:
        return point + self.translation
