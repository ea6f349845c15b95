"""
Data models for Mesh Primitives.
"""

from .geometry import Vector3, Triangle
from .mesh import MeshKind, WireframeMesh, SolidMesh, Mesh, create_mesh, merge_meshes

__all__ = [
    'Vector3', 'Triangle',
    'MeshKind', 'WireframeMesh', 'SolidMesh', 'Mesh',
    'create_mesh', 'merge_meshes',
]
