import math

import pytest

from raytrace.camera import Camera
from raytrace.matrices import rotation_y, view_transform
from raytrace.tuples import color, point, vector
from raytrace.world import World


def test_pixel_size_horizontal_canvas():
    assert Camera(200, 125, 90.0).pixel_size == pytest.approx(0.01)


def test_pixel_size_vertical_canvas():
    assert Camera(125, 200, 90.0).pixel_size == pytest.approx(0.01)


def test_ray_through_centre_of_canvas():
    c = Camera(201, 101, 90.0)
    r = c.ray_for_pixel(100, 50)
    assert r.origin == point(0.0, 0.0, 0.0)
    assert r.direction == vector(0.0, 0.0, -1.0)


def test_ray_through_corner_of_canvas():
    c = Camera(201, 101, 90.0)
    r = c.ray_for_pixel(0, 0)
    assert r.origin == point(0.0, 0.0, 0.0)
    assert r.direction == vector(0.66519, 0.33259, -0.66851)


def test_ray_when_camera_is_transformed():
    c = Camera(201, 101, 90.0)
    c.transform = rotation_y(45.0).translate(0.0, -2.0, 5.0)
    r = c.ray_for_pixel(100, 50)
    half = math.sqrt(2.0) / 2.0
    assert r.origin == point(0.0, 2.0, -5.0)
    assert r.direction == vector(half, 0.0, -half)


def test_render_world():
    w = World()
    c = Camera(11, 11, 90.0)
    c.transform = view_transform(
        point(0.0, 0.0, -5.0), point(0.0, 0.0, 0.0), vector(0.0, 1.0, 0.0)
    )
    image = c.render(w, 1)
    assert image.get(5, 5) == color(0.38066, 0.47583, 0.2855)
    assert (image.width, image.height) == (11, 11)


def test_render_reports_progress(capsys):
    c = Camera(11, 11, 90.0)
    c.transform = view_transform(
        point(0.0, 0.0, -5.0), point(0.0, 0.0, 0.0), vector(0.0, 1.0, 0.0)
    )
    c.render(World(), 1)
    lines = capsys.readouterr().out.splitlines()
    assert lines
    assert all("complete" in line for line in lines)
    assert "100%" in lines[-1]