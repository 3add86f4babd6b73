"""Point lights and Phong shading."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from raytrace.tuples import Vec4, color

if TYPE_CHECKING:
    from raytrace.material import Material
    from raytrace.shape import Shape


@dataclass(frozen=True)
class Light:
    """A point light source."""

    position: Vec4
    intensity: Vec4


def lighting(
    material: Material,
    shape: Shape,
    light: Light,
    point: Vec4,
    eyev: Vec4,
    normalv: Vec4,
    is_shadowed: bool,
) -> Vec4:
    """The Phong-shaded colour of ``point`` on ``shape`` as seen along ``eyev``."""
    if material.pattern is not None:
        material_color = material.pattern.color_at(shape, point)
    else:
        material_color = material.color
    effective_color = material_color * light.intensity
    lightv = (light.position - point).normalize()
    ambient = effective_color * material.ambient
    if is_shadowed:
        return ambient

    black = color(0.0, 0.0, 0.0)
    light_dot_normal = lightv.dot(normalv)
    if light_dot_normal < 0.0:
        diffuse = specular = black
    else:
        diffuse = effective_color * material.diffuse * light_dot_normal
        reflect_dot_eye = (-lightv).reflect(normalv).dot(eyev)
        if reflect_dot_eye <= 0.0:
            specular = black
        else:
            factor = reflect_dot_eye**material.shininess
            specular = light.intensity * material.specular * factor
    return specular + ambient + diffuse