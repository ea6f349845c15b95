"""Tests for the cylinder generator."""

import math

import pytest

from mesh_primitives.generators.cylinder import VERTICES_PER_SEGMENT, generate_cylinder
from mesh_primitives.generators.validation import InvalidParameter
from mesh_primitives.models.geometry import Vector3
from mesh_primitives.models.mesh import SolidMesh, WireframeMesh

from .mesh_checks import assert_flat_shaded, dot


RADIUS = 1.5
HEIGHT = 4.0


def _cylinder(segments=24):
    mesh = SolidMesh()
    generate_cylinder(mesh, RADIUS, HEIGHT, segments)
    return mesh


def test_default_segment_counts():
    mesh = SolidMesh()
    generate_cylinder(mesh, RADIUS, HEIGHT)

    assert VERTICES_PER_SEGMENT == 12
    assert mesh.vertex_count() == 288
    assert len(mesh.normals) == 288
    assert mesh.index_count() == 288
    assert mesh.triangle_count() == 96


def test_flat_shaded_caps_face_outward():
    # Triangles 0 and 1 of each segment are the caps
    assert_flat_shaded(_cylinder(), oriented=lambda t: t % 4 < 2)


def test_heights_per_segment_block():
    mesh = _cylinder(8)
    top = HEIGHT / 2
    bottom = -HEIGHT / 2

    for start in range(0, mesh.vertex_count(), VERTICES_PER_SEGMENT):
        ys = [p[1] for p in mesh.positions[start:start + VERTICES_PER_SEGMENT]]
        assert ys[0:3] == [top, top, top]
        assert ys[3:6] == [bottom, bottom, bottom]
        assert ys[6:9] == [top, top, bottom]
        assert ys[9:12] == [top, bottom, bottom]


def test_cap_centres_and_normals():
    mesh = _cylinder(6)

    for start in range(0, mesh.vertex_count(), VERTICES_PER_SEGMENT):
        assert mesh.positions[start + 2] == (0.0, HEIGHT / 2, 0.0)
        assert mesh.positions[start + 4] == (0.0, -HEIGHT / 2, 0.0)
        assert mesh.normals[start:start + 3] == [(0.0, 1.0, 0.0)] * 3
        assert mesh.normals[start + 3:start + 6] == [(0.0, -1.0, 0.0)] * 3


def test_rim_points_on_circle():
    mesh = _cylinder(10)

    for x, y, z in mesh.positions:
        r = math.hypot(x, z)
        assert r == pytest.approx(RADIUS) or r == pytest.approx(0.0)


def test_first_rim_point_on_positive_x():
    mesh = _cylinder(4)

    assert mesh.positions[0] == (RADIUS, HEIGHT / 2, 0.0)
    # Second rim point is a quarter turn away, toward -z
    x, _, z = mesh.positions[1]
    assert x == pytest.approx(0.0)
    assert z == pytest.approx(-RADIUS)


def test_side_normal_is_rim_edge_cross_side_edge():
    segments = 12
    mesh = _cylinder(segments)

    for start in range(0, mesh.vertex_count(), VERTICES_PER_SEGMENT):
        t1, t0, b0 = (Vector3(*p) for p in mesh.positions[start + 6:start + 9])
        expected = (t1 - t0).cross(b0 - t0).normalized().as_tuple()
        for normal in mesh.normals[start + 6:start + 12]:
            assert normal == pytest.approx(expected)


def test_side_normals_face_the_axis():
    segments = 12
    mesh = _cylinder(segments)

    for i in range(segments):
        theta = (i + 0.5) * 2 * math.pi / segments
        radial = (math.cos(theta), 0.0, -math.sin(theta))
        start = i * VERTICES_PER_SEGMENT
        for normal in mesh.normals[start + 6:start + 12]:
            assert dot(normal, radial) < -0.99
            assert normal[1] == pytest.approx(0.0)


def test_first_side_normal_at_default_segments():
    mesh = _cylinder()
    nx, ny, nz = mesh.normals[6]

    # Points at the axis from the middle of the first 15 degree segment
    assert nx == pytest.approx(-math.cos(math.radians(7.5)))
    assert ny == 0.0
    assert nz == pytest.approx(math.sin(math.radians(7.5)))


def test_indices_offset_into_non_empty_sink():
    mesh = SolidMesh()
    generate_cylinder(mesh, RADIUS, HEIGHT, 3)
    generate_cylinder(mesh, RADIUS, HEIGHT, 3)

    assert mesh.vertex_count() == 72
    assert mesh.indices == list(range(72))
    assert mesh.validate() == []


@pytest.mark.parametrize("radius,height,segments", [
    (1.0, 1.0, 2),
    (1.0, 1.0, 0),
    (1.0, 1.0, 3.5),
    (0.0, 1.0, 8),
    (1.0, -2.0, 8),
    (float("inf"), 1.0, 8),
])
def test_invalid_parameters_leave_sink_unmodified(radius, height, segments):
    mesh = _cylinder(3)
    before = (list(mesh.positions), list(mesh.normals), list(mesh.indices))

    with pytest.raises(InvalidParameter):
        generate_cylinder(mesh, radius, height, segments)

    assert (mesh.positions, mesh.normals, mesh.indices) == before


def test_requires_solid_sink():
    with pytest.raises(TypeError):
        generate_cylinder(WireframeMesh(), RADIUS, HEIGHT)


def test_deterministic():
    assert _cylinder(17) == _cylinder(17)
