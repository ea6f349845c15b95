"""
Cylinder mesh generator for Mesh Primitives.

Generates a flat-shaded cylinder along the y axis, centred at the origin.
Each rim segment contributes four unshared triangles:
top cap, bottom cap, and two side triangles sharing one side normal.
"""

import logging

from ..config import DEFAULT_SEGMENTS
from ..models.geometry import Vector3, UNIT_Y, UNIT_Y_NEG
from ..models.mesh import MeshKind, SolidMesh
from ..utils.math_utils import rim_pairs, rim_points
from .validation import check_kind, check_positive, check_segments

logger = logging.getLogger(__name__)

# Vertices emitted per rim segment (4 triangles x 3 corners)
VERTICES_PER_SEGMENT = 12


def generate_cylinder(
    destination: SolidMesh,
    radius: float,
    height: float,
    segments: int = DEFAULT_SEGMENTS
) -> None:
    """
    Generate a flat-shaded cylinder.

    Args:
        destination: Solid mesh to append to
        radius: Radius of the top and bottom caps (positive)
        height: Distance from bottom cap to top cap (positive)
        segments: Rim segments (at least 3, default 24)

    Raises:
        InvalidParameter: If radius or height is not positive, or segments < 3
        TypeError: If destination is not a solid mesh
    """
    check_kind(destination, MeshKind.SOLID, "cylinder")
    radius = check_positive("radius", radius)
    height = check_positive("height", height)
    segments = check_segments(segments)

    # Origin sits halfway up the axis
    half_height = height / 2
    top = Vector3(0.0, half_height, 0.0)
    bottom = Vector3(0.0, -half_height, 0.0)

    for t0, t1 in rim_pairs(rim_points(radius, half_height, segments)):
        b0 = Vector3(t0.x, -t0.y, t0.z)
        b1 = Vector3(t1.x, -t1.y, t1.z)

        # Along the rim crossed with down the side; faces the axis
        side_normal = (t1 - t0).cross(b0 - t0).normalized()

        destination.add_flat_triangle(t0, t1, top, UNIT_Y)
        destination.add_flat_triangle(b0, bottom, b1, UNIT_Y_NEG)
        destination.add_flat_triangle(t1, t0, b0, side_normal)
        destination.add_flat_triangle(t1, b0, b1, side_normal)

    logger.debug(
        f"Cylinder r={radius} h={height} segments={segments}: "
        f"{segments * VERTICES_PER_SEGMENT} vertices"
    )
