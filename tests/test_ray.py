import pytest

from raytrace.matrices import scaling, translation
from raytrace.ray import Ray
from raytrace.tuples import point, vector


def test_transform_ray():
    r = Ray(point(1.0, 2.0, 3.0), vector(0.0, 1.0, 0.0))

    r2 = r.transform(translation(3.0, 4.0, 5.0))
    assert r2.origin == point(4.0, 6.0, 8.0)
    assert r2.direction == vector(0.0, 1.0, 0.0)

    r2 = r.transform(scaling(2.0, 3.0, 4.0))
    assert r2.origin == point(2.0, 6.0, 12.0)
    assert r2.direction == vector(0.0, 3.0, 0.0)


def test_transform_leaves_original_unchanged():
    r = Ray(point(1.0, 2.0, 3.0), vector(0.0, 1.0, 0.0))
    r.transform(translation(3.0, 4.0, 5.0))
    assert r.origin == point(1.0, 2.0, 3.0)


@pytest.mark.parametrize(
    "t, expected",
    [
        (0.0, point(2.0, 3.0, 4.0)),
        (1.0, point(3.0, 3.0, 4.0)),
        (-1.0, point(1.0, 3.0, 4.0)),
        (2.5, point(4.5, 3.0, 4.0)),
    ],
)
def test_position(t, expected):
    r = Ray(point(2.0, 3.0, 4.0), vector(1.0, 0.0, 0.0))
    assert r.position(t) == expected