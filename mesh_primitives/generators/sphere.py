"""
Sphere mesh generator for Mesh Primitives.

Approximates a sphere by repeatedly subdividing a unit octahedron and
projecting every corner onto the sphere surface. Output is flat-shaded:
each final triangle gets its own three vertices and one face normal.

Triangle count after d subdivisions is 8 * 4^d.
"""

from typing import List
import logging

from ..config import DEFAULT_SPHERE_DEPTH
from ..models.geometry import Triangle, Vector3
from ..models.mesh import MeshKind, SolidMesh
from ..utils.math_utils import flat_normal, project_to_sphere, subdivide_triangle
from .validation import check_depth, check_kind, check_positive

logger = logging.getLogger(__name__)


def octahedron_triangles() -> List[Triangle]:
    """
    Build the 8 faces of the unit octahedron.

    Four faces fan from the bottom pole and four from the top pole
    around the equator (+x, +z, -x, -z), all wound CCW from outside.

    Returns:
        List of 8 triangles
    """
    bottom = Vector3(0.0, -1.0, 0.0)
    top = Vector3(0.0, 1.0, 0.0)
    equator = [
        Vector3(1.0, 0.0, 0.0),
        Vector3(0.0, 0.0, 1.0),
        Vector3(-1.0, 0.0, 0.0),
        Vector3(0.0, 0.0, -1.0),
    ]

    triangles = []
    for i in range(4):
        triangles.append(Triangle(bottom, equator[i], equator[(i + 1) % 4]))
    for i in range(4):
        triangles.append(Triangle(equator[i], top, equator[(i + 1) % 4]))
    return triangles


def subdivide_octahedron(depth: int) -> List[Triangle]:
    """
    Subdivide the unit octahedron depth times.

    Two lists are reused across levels: one is read while the other is
    filled, then they swap.

    Args:
        depth: Number of subdivision passes (>= 0)

    Returns:
        8 * 4^depth triangles, corners not yet projected
    """
    current = octahedron_triangles()
    scratch: List[Triangle] = []

    for _ in range(depth):
        scratch.clear()
        for triangle in current:
            scratch.extend(subdivide_triangle(triangle))
        current, scratch = scratch, current

    return current


def sphere_triangle_count(depth: int) -> int:
    """Number of triangles generate_sphere emits for a depth."""
    return 8 * 4 ** depth


def generate_sphere(
    destination: SolidMesh,
    radius: float,
    depth: int = DEFAULT_SPHERE_DEPTH
) -> None:
    """
    Generate a flat-shaded sphere centred at the origin.

    Args:
        destination: Solid mesh to append to
        radius: Sphere radius (positive)
        depth: Subdivision passes (non-negative, default 3)

    Raises:
        InvalidParameter: If radius is not positive or depth is negative
        TypeError: If destination is not a solid mesh
    """
    check_kind(destination, MeshKind.SOLID, "sphere")
    radius = check_positive("radius", radius)
    depth = check_depth(depth)

    triangles = subdivide_octahedron(depth)

    for triangle in triangles:
        v0 = project_to_sphere(triangle.v0, radius)
        v1 = project_to_sphere(triangle.v1, radius)
        v2 = project_to_sphere(triangle.v2, radius)
        normal = flat_normal(v0, v1, v2)
        destination.add_flat_triangle(v0, v1, v2, normal)

    logger.debug(
        f"Sphere r={radius} depth={depth}: {len(triangles)} triangles, "
        f"{len(triangles) * 3} vertices"
    )
