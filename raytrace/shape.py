"""Spheres and planes that rays can strike."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from raytrace.intersection import Intersection
from raytrace.material import Material
from raytrace.matrices import Matrix4x4
from raytrace.ray import Ray
from raytrace.tuples import EPSILON, Vec4, fequals, point, vector


class ShapeType(Enum):
    PLANE = "plane"
    SPHERE = "sphere"


@dataclass
class Shape:
    """A unit sphere or the xz plane, placed in the world by ``transform``."""

    shape_type: ShapeType
    transform: Matrix4x4 = field(default_factory=Matrix4x4.identity)
    material: Material = field(default_factory=Material)
    origin: Vec4 = field(default_factory=lambda: point(0.0, 0.0, 0.0))

    def _local_intersect(self, ray: Ray) -> list[float]:
        if self.shape_type is ShapeType.SPHERE:
            sphere_to_ray = ray.origin - self.origin
            a = ray.direction.dot(ray.direction)
            b = 2.0 * ray.direction.dot(sphere_to_ray)
            c = sphere_to_ray.dot(sphere_to_ray) - 1.0
            discriminant = b * b - 4.0 * a * c
            if fequals(discriminant, 0.0):
                return [-b / (2.0 * a)]
            if discriminant > 0.0:
                root = math.sqrt(discriminant)
                return [(-b - root) / (2.0 * a), (-b + root) / (2.0 * a)]
            return []
        if abs(ray.direction.y) < EPSILON:
            return []
        return [-ray.origin.y / ray.direction.y]

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Every intersection of ``ray`` with this shape, in order along the ray."""
        local_ray = ray.transform(self.transform.invert())
        return [Intersection(self, t) for t in self._local_intersect(local_ray)]

    def _local_normal_at(self, local_point: Vec4) -> Vec4:
        if self.shape_type is ShapeType.PLANE:
            return vector(0.0, 1.0, 0.0)
        return (local_point - self.origin).normalize()

    def normal_at(self, point: Vec4) -> Vec4:
        """The world-space surface normal at ``point``."""
        inverse = self.transform.invert()
        local_normal = self._local_normal_at(inverse @ point)
        world_normal = inverse.transpose() @ local_normal
        return vector(world_normal.x, world_normal.y, world_normal.z).normalize()


def glass_sphere() -> Shape:
    """A fully transparent sphere with the refractive index of glass."""
    shape = Shape(ShapeType.SPHERE)
    shape.material.transparency = 1.0
    shape.material.refractive_index = 1.5
    return shape