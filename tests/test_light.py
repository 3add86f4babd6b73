import math

import pytest

from raytrace.light import Light, lighting
from raytrace.material import Material
from raytrace.patterns import StripedPattern
from raytrace.shape import Shape, ShapeType
from raytrace.tuples import color, point, vector

HALF_SQRT2 = math.sqrt(2.0) / 2.0


@pytest.fixture
def material():
    return Material()


@pytest.fixture
def shape():
    return Shape(ShapeType.SPHERE)


@pytest.mark.parametrize(
    "eyev, light_position, expected",
    [
        (vector(0.0, 0.0, -1.0), point(0.0, 0.0, -10.0), color(1.9, 1.9, 1.9)),
        (vector(0.0, HALF_SQRT2, -HALF_SQRT2), point(0.0, 0.0, -10.0), color(1.0, 1.0, 1.0)),
        (vector(0.0, 0.0, -1.0), vector(0.0, 10.0, -10.0), color(0.73481, 0.73481, 0.73481)),
        (
            vector(0.0, -HALF_SQRT2, -HALF_SQRT2),
            point(0.0, 10.0, -10.0),
            color(1.6363853, 1.6363853, 1.6363853),
        ),
        (vector(0.0, 0.0, -1.0), point(0.0, 0.0, 10.0), color(0.1, 0.1, 0.1)),
    ],
)
def test_lighting(material, shape, eyev, light_position, expected):
    light = Light(position=light_position, intensity=color(1.0, 1.0, 1.0))
    normalv = vector(0.0, 0.0, -1.0)
    result = lighting(material, shape, light, point(0.0, 0.0, 0.0), eyev, normalv, False)
    assert result == expected


def test_lighting_in_shadow(material, shape):
    light = Light(position=point(0.0, 0.0, -10.0), intensity=color(1.0, 1.0, 1.0))
    eyev = vector(0.0, 0.0, -1.0)
    normalv = vector(0.0, 0.0, -1.0)
    result = lighting(material, shape, light, point(0.0, 0.0, 0.0), eyev, normalv, True)
    assert result == color(0.1, 0.1, 0.1)


def test_lighting_uses_pattern(shape):
    white = color(1.0, 1.0, 1.0)
    black = color(0.0, 0.0, 0.0)
    material = Material(
        ambient=1.0, diffuse=0.0, specular=0.0, pattern=StripedPattern(white, black)
    )
    light = Light(position=point(0.0, 0.0, -10.0), intensity=color(1.0, 1.0, 1.0))
    eyev = vector(0.0, 0.0, -1.0)
    normalv = vector(0.0, 0.0, -1.0)
    c1 = lighting(material, shape, light, point(0.9, 0.0, 0.0), eyev, normalv, False)
    c2 = lighting(material, shape, light, point(1.1, 0.0, 0.0), eyev, normalv, False)
    assert c1 == white
    assert c2 == black


def test_light_fields():
    light = Light(position=point(0.0, 0.0, 0.0), intensity=color(1.0, 1.0, 1.0))
    assert light.position == point(0.0, 0.0, 0.0)
    assert light.intensity == color(1.0, 1.0, 1.0)