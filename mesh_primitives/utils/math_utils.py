"""
Mathematical utilities for Mesh Primitives.

Provides the vector and triangle helpers shared by the shape generators:
midpoints, triangle subdivision, sphere projection and rim generation.
"""

from typing import List, Tuple
import math

from ..models.geometry import Triangle, Vector3


def midpoint(a: Vector3, b: Vector3) -> Vector3:
    """
    Un-normalized midpoint of the segment a-b.

    Args:
        a, b: Segment endpoints

    Returns:
        a + (b - a) / 2
    """
    return a + (b - a) / 2


def subdivide_triangle(triangle: Triangle) -> Tuple[Triangle, Triangle, Triangle, Triangle]:
    """
    Split a triangle into four by its edge midpoints.

    Children keep the parent's winding. Order is fixed:
    the three corner triangles (at v0, v1, v2) then the center triangle.

    Args:
        triangle: Triangle to split

    Returns:
        Tuple of four child triangles
    """
    v0, v1, v2 = triangle.v0, triangle.v1, triangle.v2
    a = midpoint(v0, v1)
    b = midpoint(v1, v2)
    c = midpoint(v2, v0)
    return (
        Triangle(v0, a, c),
        Triangle(a, v1, b),
        Triangle(c, b, v2),
        Triangle(a, b, c),
    )


def project_to_sphere(v: Vector3, radius: float) -> Vector3:
    """
    Push a point onto the sphere of given radius centred at the origin.

    Args:
        v: Point to project (must not be the origin)
        radius: Sphere radius

    Returns:
        normalize(v) * radius
    """
    return v.normalized() * radius


def flat_normal(v0: Vector3, v1: Vector3, v2: Vector3) -> Vector3:
    """Unit normal of the plane through v0, v1, v2 (CCW front face)."""
    return (v1 - v0).cross(v2 - v0).normalized()


def rim_points(radius: float, y: float, segments: int) -> List[Vector3]:
    """
    Generate evenly spaced points on a horizontal circle.

    Point i sits at angle theta = i * 360 / segments degrees:
    (r * cos(theta), y, -r * sin(theta)). The negated sine makes the
    rim run counter-clockwise when seen from +y.

    Args:
        radius: Circle radius
        y: Height of the circle
        segments: Number of points

    Returns:
        List of segments points
    """
    step = 360.0 / segments
    points = []
    for i in range(segments):
        theta = math.radians(i * step)
        points.append(Vector3(
            radius * math.cos(theta),
            y,
            -radius * math.sin(theta),
        ))
    return points


def rim_pairs(points: List[Vector3]) -> List[Tuple[Vector3, Vector3]]:
    """
    Consecutive pairs around a closed rim, wrapping the last point to the first.

    Args:
        points: Rim points in order

    Returns:
        List of (points[i], points[(i + 1) % n])
    """
    n = len(points)
    return [(points[i], points[(i + 1) % n]) for i in range(n)]
