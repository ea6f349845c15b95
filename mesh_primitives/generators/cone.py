"""
Cone mesh generator for Mesh Primitives.

Generates a flat-shaded cone along the y axis, apex up, centred at the
origin. Each rim segment contributes a bottom cap triangle and a side
triangle running up to the apex.
"""

import logging

from ..config import DEFAULT_SEGMENTS
from ..models.geometry import Vector3, UNIT_Y_NEG
from ..models.mesh import MeshKind, SolidMesh
from ..utils.math_utils import rim_pairs, rim_points
from .validation import check_kind, check_positive, check_segments

logger = logging.getLogger(__name__)

# Vertices emitted per rim segment (2 triangles x 3 corners)
VERTICES_PER_SEGMENT = 6


def generate_cone(
    destination: SolidMesh,
    radius: float,
    height: float,
    segments: int = DEFAULT_SEGMENTS
) -> None:
    """
    Generate a flat-shaded cone.

    Args:
        destination: Solid mesh to append to
        radius: Radius of the base (positive)
        height: Distance from base to apex (positive)
        segments: Rim segments (at least 3, default 24)

    Raises:
        InvalidParameter: If radius or height is not positive, or segments < 3
        TypeError: If destination is not a solid mesh
    """
    check_kind(destination, MeshKind.SOLID, "cone")
    radius = check_positive("radius", radius)
    height = check_positive("height", height)
    segments = check_segments(segments)

    half_height = height / 2
    apex = Vector3(0.0, half_height, 0.0)
    bottom = Vector3(0.0, -half_height, 0.0)

    for b0, b1 in rim_pairs(rim_points(radius, -half_height, segments)):
        # Faces the axis, opposite to the (apex, b0, b1) winding
        side_normal = (apex - b0).cross(b1 - b0).normalized()

        destination.add_flat_triangle(b0, bottom, b1, UNIT_Y_NEG)
        destination.add_flat_triangle(apex, b0, b1, side_normal)

    logger.debug(
        f"Cone r={radius} h={height} segments={segments}: "
        f"{segments * VERTICES_PER_SEGMENT} vertices"
    )
