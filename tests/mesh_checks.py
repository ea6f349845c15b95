"""Geometry assertions shared by the generator tests."""

import math


def sub(a, b):
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def cross(a, b):
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def dot(a, b):
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def length(a):
    return math.sqrt(dot(a, a))


def triangles(mesh):
    """Yield (p0, p1, p2, n0) for every index triple of a solid mesh."""
    idx = mesh.indices
    for i in range(0, len(idx), 3):
        a, b, c = idx[i:i + 3]
        yield mesh.positions[a], mesh.positions[b], mesh.positions[c], mesh.normals[a]


def winding_normal(p0, p1, p2):
    """Unnormalized normal implied by CCW winding."""
    return cross(sub(p1, p0), sub(p2, p0))


def assert_flat_shaded(mesh, unshared=True, oriented=None):
    """Each triangle carries one unit normal.

    With unshared=True, no vertex is referenced by more than one triangle.
    oriented(t) selects which triangle numbers must have a normal agreeing
    with their winding; all of them when it is None.
    """
    assert mesh.validate() == []
    if unshared:
        assert len(mesh.indices) == len(set(mesh.indices))
    idx = mesh.indices
    for i in range(0, len(idx), 3):
        a, b, c = idx[i:i + 3]
        assert mesh.normals[a] == mesh.normals[b] == mesh.normals[c]
    for t, (p0, p1, p2, n) in enumerate(triangles(mesh)):
        assert abs(length(n) - 1.0) < 1e-9
        if oriented is None or oriented(t):
            assert dot(winding_normal(p0, p1, p2), n) > 0
