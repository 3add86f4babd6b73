"""Four-component tuples used for points, vectors and colours, plus small 3D and 2D rows."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

EPSILON = 0.00001


def fequals(f1: float, f2: float) -> bool:
    """Compare two floats, allowing for round-off error."""
    return abs(f1 - f2) < EPSILON


@dataclass(frozen=True, eq=False)
class Vec4:
    """A homogeneous tuple: w is 1.0 for points and 0.0 for vectors and colours."""

    x: float
    y: float
    z: float
    w: float

    def __iter__(self) -> Iterator[float]:
        yield from (self.x, self.y, self.z, self.w)

    @property
    def red(self) -> float:
        return self.x

    @property
    def green(self) -> float:
        return self.y

    @property
    def blue(self) -> float:
        return self.z

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec4):
            return NotImplemented
        return all(fequals(a, b) for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        if self.w + other.w == 2.0:
            raise ValueError("Attempted to add two points, w component cannot be 2.0")
        return Vec4(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(*(a - b for a, b in zip(self, other)))

    def __mul__(self, other: float | Vec4) -> Vec4:
        if isinstance(other, Vec4):
            return Vec4(*(a * b for a, b in zip(self, other)))
        if isinstance(other, (int, float)):
            return Vec4(*(a * other for a in self))
        return NotImplemented

    def __rmul__(self, scalar: float) -> Vec4:
        if isinstance(scalar, (int, float)):
            return Vec4(*(a * scalar for a in self))
        return NotImplemented

    def __neg__(self) -> Vec4:
        return Vec4(-self.x, -self.y, -self.z, -self.w)

    def reflect(self, normal: Vec4) -> Vec4:
        """Reflect this vector about ``normal``."""
        return self - normal * 2.0 * self.dot(normal)

    def mag(self) -> float:
        return math.sqrt(sum(a * a for a in self))

    def normalize(self) -> Vec4:
        magnitude = self.mag()
        return Vec4(*(a / magnitude for a in self))

    def dot(self, other: Vec4) -> float:
        return sum(a * b for a, b in zip(self, other))

    def cross(self, other: Vec4) -> Vec4:
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def clamp(self, limit: float) -> Vec4:
        """Scale every component by ``limit`` and cap it at 255."""
        return Vec4(*(min(a * limit, 255.0) for a in self))


@dataclass(frozen=True, eq=False)
class Vec3:
    """A row of three floats."""

    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        yield from (self.x, self.y, self.z)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return all(fequals(a, b) for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(*(a - b for a, b in zip(self, other)))

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(*(a * scalar for a in self))

    __rmul__ = __mul__

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)


@dataclass(frozen=True, eq=False)
class Vec2:
    """A row of two floats."""

    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield from (self.x, self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return all(fequals(a, b) for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)


def color(r: float, g: float, b: float) -> Vec4:
    return Vec4(r, g, b, 0.0)


def point(x: float, y: float, z: float) -> Vec4:
    return Vec4(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Vec4:
    return Vec4(x, y, z, 0.0)