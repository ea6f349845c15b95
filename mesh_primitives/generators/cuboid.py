"""
Cuboid mesh generator for Mesh Primitives.

Generates an axis-aligned cuboid centred at the origin, either as a
wireframe outline (8 shared corners, edge pairs per face) or as a
flat-shaded solid (4 fresh vertices per face).

Corner numbering:

          ^ y
          |
          4------5
          |\\     |\\
          | 7------6
          | |    | |
          0-|----1 |   --> x
           \\|     \\|
            3------2
             \\
              v z
"""

from typing import List, Tuple
import logging

from ..models.geometry import (
    Vector3,
    UNIT_X,
    UNIT_Y,
    UNIT_Z,
    UNIT_X_NEG,
    UNIT_Y_NEG,
    UNIT_Z_NEG,
)
from ..models.mesh import Mesh, MeshKind, SolidMesh, WireframeMesh
from .validation import check_kind, check_size

logger = logging.getLogger(__name__)


# Outline of each face as index pairs, in +x, +y, +z, -x, -y, -z order.
# Edges shared by two faces appear once per face.
WIREFRAME_FACE_EDGES: Tuple[Tuple[int, ...], ...] = (
    (1, 2, 2, 6, 6, 5, 5, 1),  # +x
    (4, 5, 5, 6, 6, 7, 7, 4),  # +y
    (2, 3, 3, 7, 7, 6, 6, 2),  # +z
    (0, 3, 3, 7, 7, 4, 4, 0),  # -x
    (0, 1, 1, 2, 2, 3, 3, 0),  # -y
    (0, 1, 1, 5, 5, 4, 4, 0),  # -z
)

# Corners of each solid face with its outward normal.
# Corner order matches SOLID_FACE_INDICES so both triangles wind CCW from outside.
SOLID_FACES: Tuple[Tuple[Tuple[int, int, int, int], Vector3], ...] = (
    ((2, 6, 5, 1), UNIT_X),
    ((4, 5, 6, 7), UNIT_Y),
    ((3, 7, 6, 2), UNIT_Z),
    ((0, 4, 7, 3), UNIT_X_NEG),
    ((0, 3, 2, 1), UNIT_Y_NEG),
    ((1, 5, 4, 0), UNIT_Z_NEG),
)

# Two triangles splitting a face quad along its 0-2 diagonal
SOLID_FACE_INDICES = (0, 2, 1, 0, 3, 2)


def cuboid_corners(size: Vector3) -> List[Vector3]:
    """
    Compute the 8 corners of a cuboid centred at the origin.

    Args:
        size: Extent on x, y and z

    Returns:
        Corners 0-7 (bottom face 0-3, top face 4-7)
    """
    p = size / 2
    p6 = Vector3(p.x, p.y, p.z)
    p7 = Vector3(-p.x, p.y, p.z)
    p4 = Vector3(-p.x, p.y, -p.z)
    p5 = Vector3(p.x, p.y, -p.z)
    return [-p6, -p7, -p4, -p5, p4, p5, p6, p7]


def generate_cuboid_wireframe(destination: WireframeMesh, size: Vector3) -> None:
    """
    Generate the outline of a cuboid.

    Adds 8 corner positions and 24 indices (4 edges per face).

    Args:
        destination: Wireframe mesh to append to
        size: Extent on x, y and z (all positive)

    Raises:
        InvalidParameter: If any size component is not positive
        TypeError: If destination is not a wireframe mesh
    """
    check_kind(destination, MeshKind.WIREFRAME, "cuboid wireframe")
    check_size(size)

    offset = destination.vertex_count()

    for corner in cuboid_corners(size):
        destination.add_position(corner.x, corner.y, corner.z)

    for edges in WIREFRAME_FACE_EDGES:
        destination.add_indices(offset + idx for idx in edges)

    logger.debug(
        f"Cuboid wireframe {size.as_tuple()}: 8 vertices, "
        f"{sum(len(e) for e in WIREFRAME_FACE_EDGES)} indices"
    )


def generate_cuboid_solid(destination: SolidMesh, size: Vector3) -> None:
    """
    Generate a flat-shaded solid cuboid.

    Adds 24 vertices (4 per face, each with the face normal) and
    36 indices (2 triangles per face).

    Args:
        destination: Solid mesh to append to
        size: Extent on x, y and z (all positive)

    Raises:
        InvalidParameter: If any size component is not positive
        TypeError: If destination is not a solid mesh
    """
    check_kind(destination, MeshKind.SOLID, "cuboid solid")
    check_size(size)

    corners = cuboid_corners(size)
    offset = destination.vertex_count()

    for face_corners, normal in SOLID_FACES:
        for corner_idx in face_corners:
            destination.add_vertex(corners[corner_idx], normal)
        destination.add_indices(offset + idx for idx in SOLID_FACE_INDICES)
        offset += 4

    logger.debug(f"Cuboid solid {size.as_tuple()}: 24 vertices, 36 indices")


def generate_cuboid(destination: Mesh, size: Vector3) -> None:
    """
    Generate a cuboid into either sink variant.

    Dispatches on destination.kind: wireframe sinks get the outline,
    solid sinks get the flat-shaded faces.

    Args:
        destination: WireframeMesh or SolidMesh
        size: Extent on x, y and z (all positive)
    """
    kind = getattr(destination, "kind", None)
    if kind is MeshKind.WIREFRAME:
        generate_cuboid_wireframe(destination, size)
    elif kind is MeshKind.SOLID:
        generate_cuboid_solid(destination, size)
    else:
        raise TypeError(
            f"cuboid requires a WireframeMesh or SolidMesh, got {type(destination).__name__}"
        )
