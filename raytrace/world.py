"""A collection of shapes lit by a single point light."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import cmp_to_key

from raytrace.intersection import Computations, Intersection, hit
from raytrace.light import Light, lighting
from raytrace.matrices import scaling
from raytrace.ray import Ray
from raytrace.shape import Shape, ShapeType
from raytrace.tuples import Vec4, color, fequals, point

_BLACK = color(0.0, 0.0, 0.0)


def _default_shapes() -> list[Shape]:
    outer = Shape(ShapeType.SPHERE)
    outer.material.color = color(0.8, 1.0, 0.6)
    outer.material.diffuse = 0.7
    outer.material.specular = 0.2
    inner = Shape(ShapeType.SPHERE, transform=scaling(0.5, 0.5, 0.5))
    return [outer, inner]


def _default_light() -> Light:
    return Light(position=point(-10.0, 10.0, -10.0), intensity=color(1.0, 1.0, 1.0))


def _by_distance(a: Intersection, b: Intersection) -> int:
    if fequals(a.t, b.t):
        return 0
    return 1 if a.t > b.t else -1


def _refractive_indices(comps: Computations) -> tuple[float, float]:
    if comps.n1 is None or comps.n2 is None:
        raise ValueError("Refractive indices are unknown for this intersection")
    return comps.n1, comps.n2


@dataclass
class World:
    """The scene: two concentric spheres and a light unless told otherwise."""

    shapes: list[Shape] = field(default_factory=_default_shapes)
    light: Light = field(default_factory=_default_light)
    quick_rendered: bool = False

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Every intersection of ``ray`` with every shape, nearest first."""
        found = [i for shape in self.shapes for i in shape.intersect(ray)]
        return sorted(found, key=cmp_to_key(_by_distance))

    def shade_hit(self, comps: Computations, remaining: int) -> Vec4:
        """The colour at a prepared intersection, including reflection and refraction."""
        material = comps.object.material
        surface = lighting(
            material,
            comps.object,
            self.light,
            comps.point,
            comps.eyev,
            comps.normalv,
            self.is_shadowed(comps.over_point),
        )
        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)
        if material.reflective > 0.0 and material.transparency > 0.0:
            reflectance = comps.schlick()
            return surface + (reflected * reflectance + refracted * (1.0 - reflectance))
        return surface + reflected + refracted

    def color_at(self, ray: Ray, remaining: int) -> Vec4:
        """The colour seen along ``ray``; black if it strikes nothing."""
        intersections = self.intersect(ray)
        nearest = hit(intersections)
        if nearest is None:
            return _BLACK
        comps = nearest.prepare_computations(ray, intersections)
        if self.quick_rendered:
            material = comps.object.material
            if material.pattern is not None:
                return material.pattern.color_at(comps.object, comps.over_point)
            return material.color
        return self.shade_hit(comps, remaining)

    def is_shadowed(self, p: Vec4) -> bool:
        """Whether some shape lies between ``p`` and the light."""
        to_light = self.light.position - p
        distance = to_light.mag()
        nearest = hit(self.intersect(Ray(p, to_light.normalize())))
        return nearest is not None and nearest.t < distance

    def reflected_color(self, comps: Computations, remaining: int) -> Vec4:
        material = comps.object.material
        if remaining <= 0 or fequals(material.reflective, 0.0):
            return _BLACK
        reflect_ray = Ray(comps.over_point, comps.reflectv)
        return self.color_at(reflect_ray, remaining - 1) * material.reflective

    def refracted_color(self, comps: Computations, remaining: int) -> Vec4:
        material = comps.object.material
        if material.transparency == 0.0 or remaining == 0:
            return _BLACK

        n1, n2 = _refractive_indices(comps)
        n_ratio = n1 / n2
        cos_i = comps.eyev.dot(comps.normalv)
        sin2_t = n_ratio**2 * (1.0 - cos_i**2)
        if sin2_t > 1.0:
            # total internal reflection
            return _BLACK

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normalv * (n_ratio * cos_i - cos_t) - comps.eyev * n_ratio
        refract_ray = Ray(comps.under_point, direction)
        return self.color_at(refract_ray, remaining - 1) * material.transparency