"""Surface patterns that colour a shape by position."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from PIL import Image

from raytrace.matrices import Matrix4x4
from raytrace.tuples import Vec4, color

if TYPE_CHECKING:
    from raytrace.shape import Shape

_U32_MAX = 2**32 - 1


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _to_index(value: float) -> int:
    """Truncate to a non-negative integer, saturating like an unsigned cast."""
    if not value > 0:
        return 0
    return int(min(value, _U32_MAX))


class Pattern(ABC):
    """A colouring rule evaluated at points on a shape."""

    transform: Matrix4x4

    @abstractmethod
    def color_at(self, shape: Shape, point: Vec4) -> Vec4:
        """The colour of the pattern at a world-space ``point`` on ``shape``."""


def transform_point_to_pattern_space(pattern: Pattern, shape: Shape, point: Vec4) -> Vec4:
    """Move a world-space point into the pattern's own space."""
    object_point = shape.transform.invert() @ point
    return pattern.transform.invert() @ object_point


@dataclass
class _TwoColourPattern(Pattern):
    a: Vec4
    b: Vec4
    transform: Matrix4x4 = field(default_factory=Matrix4x4.identity)


class StripedPattern(_TwoColourPattern):
    """Alternating stripes along the x axis."""

    def color_at(self, shape: Shape, point: Vec4) -> Vec4:
        local = transform_point_to_pattern_space(self, shape, point)
        return self.a if math.floor(local.x) % 2 == 0 else self.b


class GradientPattern(_TwoColourPattern):
    """A linear blend from ``a`` to ``b`` repeating every unit along x."""

    def color_at(self, shape: Shape, point: Vec4) -> Vec4:
        local = transform_point_to_pattern_space(self, shape, point)
        fraction = local.x - math.floor(local.x)
        return self.a + (self.b - self.a) * fraction


class RingPattern(_TwoColourPattern):
    """Rings in the xz plane."""

    def color_at(self, shape: Shape, point: Vec4) -> Vec4:
        local = transform_point_to_pattern_space(self, shape, point)
        return self.a if math.fmod(local.x**2 + local.z**2, 2.0) == 0.0 else self.b


class CheckerPattern(_TwoColourPattern):
    """Alternating cubes in three dimensions."""

    def color_at(self, shape: Shape, point: Vec4) -> Vec4:
        local = transform_point_to_pattern_space(self, shape, point)
        total = (
            int(_round_half_away(local.x + 0.5))
            + int(_round_half_away(local.y) + 0.5)
            + int(_round_half_away(local.z + 0.5))
        )
        return self.a if total % 2 == 0 else self.b


@dataclass
class TexturePattern(Pattern):
    """An RGB image tiled over the surface."""

    image: Image.Image
    image_scale_x: float
    image_scale_y: float
    offset_x: float = 0.0
    z_oriented: bool = False
    flipped: bool = False
    transform: Matrix4x4 = field(default_factory=Matrix4x4.identity)
    _pixels: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.image.mode != "RGB":
            self.image = self.image.convert("RGB")
        self._pixels = self.image.load()

    @classmethod
    def from_file(
        cls, image_path, image_scale_x, image_scale_y, offset_x, z_oriented, flipped
    ) -> TexturePattern:
        """Load the image at ``image_path`` as a texture."""
        try:
            with Image.open(image_path) as img:
                rgb = img.convert("RGB")
        except OSError as exc:
            raise FileNotFoundError(f"Image at {image_path} could not be found!") from exc
        return cls(rgb, image_scale_x, image_scale_y, offset_x, z_oriented, flipped)

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def color_at(self, shape: Shape, point: Vec4) -> Vec4:
        first = _to_index((abs(point.x) + self.offset_x) * self.image_scale_x) % self.width
        across = point.z if self.z_oriented else point.y
        second = _to_index(abs(across) * self.image_scale_y) % self.height
        if self.flipped:
            second = self.height - 1 - second
            first = self.width - 1 - first
        red, green, blue = self._pixels[first, second][:3]
        return color(red / 255.0, green / 255.0, blue / 255.0)