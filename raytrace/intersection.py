"""Ray-object intersections and the values precomputed for shading them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from raytrace.ray import Ray
from raytrace.tuples import Vec4

if TYPE_CHECKING:
    from raytrace.shape import Shape

BUMP_EPSILON = 0.01


@dataclass
class Computations:
    """Shading inputs gathered at an intersection."""

    t: float
    object: Shape
    point: Vec4
    eyev: Vec4
    normalv: Vec4
    inside: bool
    over_point: Vec4
    under_point: Vec4
    reflectv: Vec4
    n1: float | None
    n2: float | None

    def schlick(self) -> float:
        """Schlick's approximation of the reflectance at this intersection."""
        if self.n1 is None or self.n2 is None:
            raise ValueError("Refractive indices are unknown for this intersection")
        n1, n2 = self.n1, self.n2
        cos = self.eyev.dot(self.normalv)
        if n1 > n2:
            n = n1 / n2
            sin2_t = n**2 * (1.0 - cos**2)
            if sin2_t > 1.0:
                return 1.0
            cos = math.sqrt(1.0 - sin2_t)
        r0 = ((n1 - n2) / (n1 + n2)) ** 2
        return r0 + (1.0 - r0) * (1.0 - cos) ** 5


@dataclass(frozen=True)
class Intersection:
    """A shape struck at distance ``t`` along a ray."""

    object: Shape
    t: float

    def prepare_computations(self, ray: Ray, intersections: list[Intersection]) -> Computations:
        """Precompute shading values, with refractive indices taken from ``intersections``."""
        n1: float | None = None
        n2: float | None = None
        containers: list[Shape] = []
        for candidate in intersections:
            is_this = candidate == self
            if is_this:
                n1 = containers[-1].material.refractive_index if containers else 1.0
            if candidate.object in containers:
                containers.remove(candidate.object)
            else:
                containers.append(candidate.object)
            if is_this:
                n2 = containers[-1].material.refractive_index if containers else 1.0
                break

        position = ray.position(self.t)
        normal = self.object.normal_at(position)
        bump = normal * BUMP_EPSILON
        eyev = -ray.direction
        inside = normal.dot(eyev) < 0.0
        return Computations(
            t=self.t,
            object=self.object,
            point=position,
            eyev=eyev,
            normalv=-normal if inside else normal,
            inside=inside,
            over_point=position + bump,
            under_point=position - bump,
            reflectv=ray.direction.reflect(normal),
            n1=n1,
            n2=n2,
        )


def hit(intersections: Iterable[Intersection]) -> Intersection | None:
    """The nearest intersection with a non-negative ``t``, or None."""
    return min(
        (i for i in intersections if not i.t < 0.0),
        key=lambda i: i.t,
        default=None,
    )