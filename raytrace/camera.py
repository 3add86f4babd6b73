"""A pinhole camera that renders a world onto a canvas."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from raytrace.canvas import Canvas
from raytrace.matrices import Matrix4x4, degrees_to_radians
from raytrace.ray import Ray
from raytrace.tuples import point
from raytrace.world import World


def _progress_line(percentage: int) -> str:
    arrow = "=" * percentage
    if percentage != 10:
        arrow += ">" + " " * (9 - percentage)
    label = " " if percentage == 0 else str(percentage)
    gap = " " if percentage != 10 else ""
    return (
        f"\x1b[37;1mRender is  \x1b[33;1m{label}0%\x1b[37;1m {gap}complete "
        f"\x1b[32;1m[{arrow}]"
    )


@dataclass
class Camera:
    """Maps pixels of an ``hsize`` by ``vsize`` canvas to rays in the world."""

    hsize: int
    vsize: int
    field_of_view: float
    transform: Matrix4x4 = field(default_factory=Matrix4x4.identity)
    half_width: float = field(init=False)
    half_height: float = field(init=False)
    pixel_size: float = field(init=False)

    def __post_init__(self) -> None:
        half_view = math.tan(degrees_to_radians(self.field_of_view) / 2.0)
        aspect = self.hsize / self.vsize
        if aspect >= 1.0:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2.0) / self.hsize

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """The ray from the camera through the centre of pixel (px, py)."""
        world_x = self.half_width - (px + 0.5) * self.pixel_size
        world_y = self.half_height - (py + 0.5) * self.pixel_size
        inverse = self.transform.invert()
        pixel = inverse @ point(world_x, world_y, -1.0)
        origin = inverse @ point(0.0, 0.0, 0.0)
        return Ray(origin, (pixel - origin).normalize())

    def render(self, world: World, reflection_limit: int) -> Canvas:
        """Render ``world`` to a canvas, printing progress in tenths."""
        canvas = Canvas(self.hsize, self.vsize)
        last_percentage = 1
        for y in range(self.vsize - 1):
            for x in range(self.hsize - 1):
                percentage = ((x + y * self.hsize) * 10) // (
                    (self.hsize - 1) * (self.vsize - 1)
                )
                if percentage != last_percentage:
                    print(_progress_line(percentage))
                last_percentage = percentage
                ray = self.ray_for_pixel(x, y)
                canvas.set(x, y, world.color_at(ray, reflection_limit))
        return canvas