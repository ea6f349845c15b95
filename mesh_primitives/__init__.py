"""
Mesh Primitives

Procedural flat-shaded meshes for canonical solids (cuboid wireframe,
cuboid solid, subdivided-octahedron sphere, cylinder, cone), written into
caller-owned position/normal/index buffers for a rendering pipeline.

Can be used as:
- Library: from mesh_primitives import SolidMesh, generate_sphere
- CLI tool: python -m mesh_primitives.main sphere --output sphere.obj
"""

__version__ = "0.1.0"

from .models import Vector3, Triangle, MeshKind, WireframeMesh, SolidMesh, create_mesh
from .generators import (
    InvalidParameter,
    generate_cuboid,
    generate_cuboid_wireframe,
    generate_cuboid_solid,
    generate_sphere,
    generate_cylinder,
    generate_cone,
    ShapeType,
    ShapeRequest,
    generate_shape,
)

__all__ = [
    'Vector3',
    'Triangle',
    'MeshKind',
    'WireframeMesh',
    'SolidMesh',
    'create_mesh',
    'InvalidParameter',
    'generate_cuboid',
    'generate_cuboid_wireframe',
    'generate_cuboid_solid',
    'generate_sphere',
    'generate_cylinder',
    'generate_cone',
    'ShapeType',
    'ShapeRequest',
    'generate_shape',
]
