"""Demonstration scenes, each written as a PPM file into the output directory."""

from __future__ import annotations

import math
from dataclasses import dataclass

from raytrace.camera import Camera
from raytrace.canvas import Canvas
from raytrace.intersection import hit
from raytrace.light import Light, lighting
from raytrace.matrices import Matrix4x4, rotation_y, translation, view_transform
from raytrace.patterns import CheckerPattern, RingPattern, TexturePattern
from raytrace.ray import Ray
from raytrace.shape import Shape, ShapeType
from raytrace.tuples import Vec4, color, point, vector
from raytrace.world import World

DEFAULT_TEXTURE = "santaclaus100x100.png"


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _to_index(value: float) -> int:
    """Truncate to a non-negative integer, saturating at zero."""
    return int(value) if value > 0 else 0


def draw_clock(width: int, height: int, x: float, y: float) -> None:
    """Mark the twelve hour positions of a clock face around (50, 50)."""
    start = point(x, 0.0, y)
    canvas = Canvas(width, height)
    for hour in range(12):
        p = rotation_y(hour * 30.0) @ start
        px = _to_index(_round_half_away(p.x) + 50.0)
        py = _to_index(_round_half_away(p.z) + 50.0)
        canvas.set(px, py, color(1.0, 1.0, 1.0))
    canvas.write_to_ppm("clock.ppm")


@dataclass(frozen=True)
class _Environment:
    gravity: Vec4
    wind: Vec4


@dataclass(frozen=True)
class _Projectile:
    position: Vec4
    velocity: Vec4

    def tick(self, env: _Environment) -> _Projectile:
        return _Projectile(
            self.position + self.velocity,
            self.velocity + env.gravity + env.wind,
        )


def draw_tick(
    width: int, height: int, position: Vec4, velocity: Vec4, gravity: Vec4, wind: Vec4
) -> None:
    """Plot a projectile's flight until it falls to the ground."""
    projectile = _Projectile(position, velocity)
    env = _Environment(gravity, wind)
    canvas = Canvas(width, height)
    while projectile.position.y > 0.0:
        projectile = projectile.tick(env)
        x = _round_half_away(projectile.position.x)
        y = _round_half_away(projectile.position.y)
        if x >= width or y >= height:
            continue
        canvas.set(_to_index(x), height - 1 - _to_index(y), color(1.0, 0.0, 0.0))
    canvas.write_to_ppm("tick.ppm")


def draw_sphere() -> None:
    """Cast rays from a fixed eye through a wall to shade a red sphere."""
    ray_origin = point(0.0, 0.0, -5.0)
    wall_z = 10.0
    wall_size = 7.0
    canvas_pixels = 100
    pixel_size = wall_size / canvas_pixels
    half = wall_size / 2.0

    canvas = Canvas(canvas_pixels, canvas_pixels)
    shape = Shape(ShapeType.SPHERE)
    shape.material.color = color(1.0, 0.0, 0.0)
    light = Light(position=point(-10.0, 10.0, -10.0), intensity=color(1.0, 1.0, 1.0))

    for y in range(canvas_pixels):
        world_y = half - pixel_size * y
        for x in range(canvas_pixels):
            world_x = -half + pixel_size * x
            target = point(world_x, world_y, wall_z)
            ray = Ray(ray_origin, (target - ray_origin).normalize())
            nearest = hit(shape.intersect(ray))
            if nearest is None:
                continue
            position = ray.position(nearest.t)
            normal = nearest.object.normal_at(position)
            shade = lighting(
                nearest.object.material,
                nearest.object,
                light,
                position,
                -ray.direction,
                normal,
                False,
            )
            canvas.set(x, y, shade)
    canvas.write_to_ppm("sphere.ppm")


def _reflective_sphere(transform: Matrix4x4, tint: Vec4) -> Shape:
    sphere = Shape(ShapeType.SPHERE, transform=transform)
    sphere.material.color = tint
    sphere.material.diffuse = 0.7
    sphere.material.specular = 0.3
    sphere.material.reflective = 0.8
    return sphere


def draw_scene() -> None:
    """Three reflective spheres on a reflective checkered floor."""
    floor = Shape(ShapeType.PLANE)
    floor.material.pattern = CheckerPattern(color(0.8, 0.8, 0.8), color(0.0, 0.0, 0.0))
    floor.material.reflective = 0.6

    middle = _reflective_sphere(translation(-0.5, 1.0, 0.5), color(0.1, 1.0, 0.5))
    middle.material.pattern = RingPattern(color(0.0, 1.0, 0.0), color(1.0, 0.0, 0.0))
    right = _reflective_sphere(
        translation(1.5, 0.5, -0.5).scale(0.5, 0.5, 0.5), color(0.5, 1.0, 0.1)
    )
    left = _reflective_sphere(
        translation(-1.5, 0.33, -0.75).scale(0.33, 0.33, 0.33), color(1.0, 0.8, 0.1)
    )

    world = World()
    world.shapes = [floor, middle, right, left]
    world.light = Light(position=point(-10.0, 10.0, -10.0), intensity=color(1.0, 1.0, 1.0))

    camera = Camera(300, 150, 60.0)
    camera.transform = view_transform(
        point(0.0, 1.5, -5.0), point(0.0, 1.0, 0.0), vector(0.0, 1.0, 0.0)
    )
    camera.render(world, 3).write_to_ppm("scene.ppm")


def draw_sphere_on_checkerboard(image_path: str = DEFAULT_TEXTURE) -> None:
    """A textured, reflective sphere on a floor tiled with the same image."""
    floor = Shape(ShapeType.PLANE)
    floor.material.pattern = TexturePattern.from_file(image_path, 30.0, 30.0, 0.0, True, False)

    sphere = Shape(ShapeType.SPHERE, transform=translation(11.4, 1.0, 0.0))
    sphere.material.pattern = TexturePattern.from_file(image_path, 50.0, 50.0, 0.0, False, True)
    sphere.material.reflective = 0.8

    world = World()
    world.shapes = [floor, sphere]
    world.light = Light(position=point(-9.6, 10.0, -30.0), intensity=color(1.0, 1.0, 1.0))

    camera = Camera(300, 200, 60.0)
    camera.transform = view_transform(
        point(0.0, 1.5, -3.0), point(0.0, 1.0, 0.0), vector(0.0, 1.0, 0.0)
    ).translate(-11.4, 0.0, 0.0)
    camera.render(world, 3).write_to_ppm("sphere_on_checkerboard.ppm")