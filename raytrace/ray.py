"""Rays cast through the scene."""

from __future__ import annotations

from dataclasses import dataclass

from raytrace.matrices import Matrix4x4
from raytrace.tuples import Vec4


@dataclass(frozen=True)
class Ray:
    origin: Vec4
    direction: Vec4

    def position(self, t: float) -> Vec4:
        """The point at distance ``t`` along the ray."""
        return self.origin + self.direction * t

    def transform(self, m: Matrix4x4) -> Ray:
        return Ray(m @ self.origin, m @ self.direction)