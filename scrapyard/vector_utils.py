"""Small 2D/3D vector types and the geometry helpers built on them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: zero denominators yield inf or nan."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


@dataclass(frozen=True)
class Vec2:
    """An immutable two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(_divide(self.x, scalar), _divide(self.y, scalar))

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        return Vec3(
            _divide(self.x, scalar), _divide(self.y, scalar), _divide(self.z, scalar)
        )

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> Vec3:
        """Return the unit vector in this direction (nan components for zero length)."""
        return self / self.magnitude()


def get_rotation_angle_2(vec1: Vec2, vec2: Vec2) -> float:
    """Angle in radians of the heading from ``vec1`` towards ``vec2``."""
    return math.atan2(vec2.y - vec1.y, vec2.x - vec1.x)


def get_point_after_rotation(vec: Vec2, center: Vec2, angle: float) -> Vec2:
    """Rotate ``vec`` around ``center`` by ``angle`` radians, counter-clockwise."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    dx = vec.x - center.x
    dy = vec.y - center.y
    return Vec2(dx * cos_a - dy * sin_a + center.x, dx * sin_a + dy * cos_a + center.y)


def get_box_corners(center: Vec2, scale: Vec2) -> list[Vec2]:
    """Corners of an axis-aligned box: (max,max), (max,min), (min,max), (min,min)."""
    max_x = center.x + scale.x * 0.5
    min_x = center.x - scale.x * 0.5
    max_y = center.y + scale.y * 0.5
    min_y = center.y - scale.y * 0.5
    return [Vec2(max_x, max_y), Vec2(max_x, min_y), Vec2(min_x, max_y), Vec2(min_x, min_y)]


def get_rotated_corners(corners: Iterable[Vec2], center: Vec2, angle: float) -> list[Vec2]:
    """Rotate every corner around ``center`` by ``angle`` radians."""
    return [get_point_after_rotation(corner, center, angle) for corner in corners]


def get_direction_2d(origin: Vec2, destination: Vec2) -> Vec2:
    """Unit vector pointing from ``origin`` to ``destination``."""
    heading = destination - origin
    return heading / heading.magnitude()


def get_projection_2d(vec: Vec2, axis: Vec2) -> Vec2:
    """Vector projection of ``vec`` onto ``axis``."""
    scalar = _divide(vec.dot(axis), axis.dot(axis))
    return Vec2(scalar * axis.x, scalar * axis.y)