"""Tests for shared math helpers."""

import math

import pytest

from mesh_primitives.models.geometry import Triangle, Vector3
from mesh_primitives.utils.math_utils import (
    flat_normal,
    midpoint,
    project_to_sphere,
    rim_pairs,
    rim_points,
    subdivide_triangle,
)


def test_midpoint():
    assert midpoint(Vector3(0.0, 0.0, 0.0), Vector3(2.0, 4.0, -6.0)) == Vector3(1.0, 2.0, -3.0)


def test_subdivide_triangle_order():
    v0 = Vector3(0.0, 0.0, 0.0)
    v1 = Vector3(4.0, 0.0, 0.0)
    v2 = Vector3(0.0, 4.0, 0.0)
    a = Vector3(2.0, 0.0, 0.0)
    b = Vector3(2.0, 2.0, 0.0)
    c = Vector3(0.0, 2.0, 0.0)

    children = subdivide_triangle(Triangle(v0, v1, v2))

    assert children == (
        Triangle(v0, a, c),
        Triangle(a, v1, b),
        Triangle(c, b, v2),
        Triangle(a, b, c),
    )


def test_subdivide_keeps_winding():
    parent = Triangle(Vector3(0.0, 0.0, 0.0), Vector3(4.0, 0.0, 0.0), Vector3(0.0, 4.0, 0.0))

    for child in subdivide_triangle(parent):
        assert child.normal() == parent.normal()


def test_project_to_sphere():
    p = project_to_sphere(Vector3(1.0, 1.0, 0.0), 3.0)

    assert p.length() == pytest.approx(3.0)
    assert p.x == pytest.approx(p.y)


def test_flat_normal():
    n = flat_normal(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 2.0), Vector3(2.0, 0.0, 0.0))

    assert n == Vector3(0.0, 1.0, 0.0)


def test_rim_points():
    points = rim_points(2.0, 0.5, 4)

    assert len(points) == 4
    assert points[0] == Vector3(2.0, 0.5, -0.0)
    assert points[1].x == pytest.approx(0.0)
    assert points[1].z == pytest.approx(-2.0)
    assert points[2].x == pytest.approx(-2.0)
    assert points[3].z == pytest.approx(2.0)
    assert all(p.y == 0.5 for p in points)


def test_rim_points_evenly_spaced():
    points = rim_points(1.0, 0.0, 24)
    step = math.radians(15)

    for p, q in rim_pairs(points):
        assert (q - p).length() == pytest.approx(2 * math.sin(step / 2))


def test_rim_pairs_wrap_around():
    points = rim_points(1.0, 0.0, 3)
    pairs = rim_pairs(points)

    assert len(pairs) == 3
    assert pairs[0] == (points[0], points[1])
    assert pairs[-1] == (points[2], points[0])
