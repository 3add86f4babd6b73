import math

import pytest

from raytrace.intersection import Intersection, hit
from raytrace.matrices import scaling, translation
from raytrace.ray import Ray
from raytrace.shape import Shape, ShapeType, glass_sphere
from raytrace.tuples import EPSILON, point, vector

HALF_SQRT2 = math.sqrt(2.0) / 2.0


@pytest.fixture
def sphere():
    return Shape(ShapeType.SPHERE)


def test_hit_all_positive(sphere):
    i1 = Intersection(sphere, 1.0)
    i2 = Intersection(sphere, 2.0)
    assert hit([i1, i2]) is i1


def test_hit_some_negative(sphere):
    i1 = Intersection(sphere, -1.0)
    i2 = Intersection(sphere, 1.0)
    assert hit([i1, i2]) is i2


def test_hit_all_negative(sphere):
    assert hit([Intersection(sphere, -2.0), Intersection(sphere, -1.0)]) is None


def test_hit_is_lowest_nonnegative(sphere):
    i4 = Intersection(sphere, 2.0)
    xs = [Intersection(sphere, 5.0), Intersection(sphere, 7.0), Intersection(sphere, -3.0), i4]
    assert hit(xs) is i4


def test_hit_empty():
    assert hit([]) is None


def test_prepare_computations_outside(sphere):
    r = Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0))
    i = Intersection(sphere, 4.0)
    comps = i.prepare_computations(r, [i])
    assert comps.object == i.object
    assert comps.t == 4.0
    assert comps.point == point(0.0, 0.0, -1.0)
    assert comps.eyev == vector(0.0, 0.0, -1.0)
    assert comps.normalv == vector(0.0, 0.0, -1.0)
    assert comps.inside is False


def test_prepare_computations_inside(sphere):
    r = Ray(point(0.0, 0.0, 0.0), vector(0.0, 0.0, 1.0))
    i = Intersection(sphere, 1.0)
    comps = i.prepare_computations(r, [i])
    assert comps.point == point(0.0, 0.0, 1.0)
    assert comps.eyev == vector(0.0, 0.0, -1.0)
    assert comps.normalv == vector(0.0, 0.0, -1.0)
    assert comps.inside is True


def test_reflect_vector():
    plane = Shape(ShapeType.PLANE)
    r = Ray(point(0.0, 1.0, -1.0), vector(0.0, -HALF_SQRT2, HALF_SQRT2))
    i = Intersection(plane, math.sqrt(2.0))
    comps = i.prepare_computations(r, [i])
    assert comps.reflectv == vector(0.0, HALF_SQRT2, HALF_SQRT2)


def _refraction_scene():
    a = glass_sphere()
    a.transform = scaling(2.0, 2.0, 2.0)
    a.material.refractive_index = 1.5
    b = glass_sphere()
    b.transform = translation(0.0, 0.0, -0.25)
    b.material.refractive_index = 2.0
    c = glass_sphere()
    c.transform = translation(0.0, 0.0, 0.25)
    c.material.refractive_index = 2.5
    return [
        Intersection(a, 2.0),
        Intersection(b, 2.75),
        Intersection(c, 3.25),
        Intersection(b, 4.75),
        Intersection(c, 5.25),
        Intersection(a, 6.0),
    ]


@pytest.mark.parametrize(
    "index, n1, n2",
    [
        (0, 1.0, 1.5),
        (1, 1.5, 2.0),
        (2, 2.0, 2.5),
        (3, 2.5, 2.5),
        (4, 2.5, 1.5),
        (5, 1.5, 1.0),
    ],
)
def test_refraction_n1_n2(index, n1, n2):
    xs = _refraction_scene()
    r = Ray(point(0.0, 0.0, -4.0), vector(0.0, 0.0, 1.0))
    comps = xs[index].prepare_computations(r, xs)
    assert comps.n1 == n1
    assert comps.n2 == n2


def test_under_point():
    r = Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0))
    shape = glass_sphere()
    shape.transform = translation(0.0, 0.0, 1.0)
    i = Intersection(shape, 5.0)
    comps = i.prepare_computations(r, [i])
    assert comps.under_point.z > EPSILON / 2.0
    assert comps.point.z < comps.under_point.z


def test_over_point_is_above_surface():
    r = Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0))
    shape = Shape(ShapeType.SPHERE)
    shape.transform = translation(0.0, 0.0, 1.0)
    i = Intersection(shape, 5.0)
    comps = i.prepare_computations(r, [i])
    assert comps.over_point.z < -EPSILON / 2.0
    assert comps.point.z > comps.over_point.z


def test_schlick_total_internal_reflection():
    shape = glass_sphere()
    r = Ray(point(0.0, 0.0, HALF_SQRT2), vector(0.0, 1.0, 0.0))
    xs = [Intersection(shape, -HALF_SQRT2), Intersection(shape, HALF_SQRT2)]
    comps = xs[1].prepare_computations(r, xs)
    assert comps.schlick() == 1.0


def test_schlick_without_indices_raises(sphere):
    r = Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0))
    comps = Intersection(sphere, 4.0).prepare_computations(r, [])
    assert comps.n1 is None and comps.n2 is None
    with pytest.raises(ValueError):
        comps.schlick()