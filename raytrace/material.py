"""Surface properties used when shading."""

from __future__ import annotations

from dataclasses import dataclass, field

from raytrace.patterns import Pattern
from raytrace.tuples import Vec4, color


@dataclass
class Material:
    """Phong lighting parameters, reflectivity, transparency and an optional pattern."""

    color: Vec4 = field(default_factory=lambda: color(1.0, 1.0, 1.0))
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = 1.0
    pattern: Pattern | None = None