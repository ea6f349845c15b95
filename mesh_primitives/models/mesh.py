"""
Mesh sink models for Mesh Primitives.

Provides the two output buffers the generators write into:

- WireframeMesh: positions + index pairs (line segments)
- SolidMesh: positions + normals + index triples (triangles)

The pair is a closed variant tagged by MeshKind. Callers pick the variant
explicitly when they create the sink; generators check the tag rather than
relying on isinstance chains over an open hierarchy.

Note on indexing:
    - Indices are 0-based (GPU index buffer convention)
    - The OBJ exporter converts to 1-based on write
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Iterable, List, Optional, Tuple, Union

from .geometry import Vector3


Position = Tuple[float, float, float]

# Anything unpacking to x, y, z: a Position tuple or a Vector3
PointLike = Union[Position, Vector3]


class MeshKind(Enum):
    """Which sink variant a mesh is."""
    WIREFRAME = "wireframe"
    SOLID = "solid"

    @property
    def indices_per_primitive(self) -> int:
        """2 for line segments, 3 for triangles."""
        return 2 if self is MeshKind.WIREFRAME else 3


@dataclass
class _MeshBuffers:
    """Position and index storage shared by both sink variants."""
    positions: List[Position] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)

    kind: ClassVar[MeshKind]

    def vertex_count(self) -> int:
        """Get number of vertices."""
        return len(self.positions)

    def index_count(self) -> int:
        """Get number of indices."""
        return len(self.indices)

    def add_position(self, x: float, y: float, z: float) -> int:
        """
        Add a vertex position and return its 0-based index.

        Args:
            x, y, z: Vertex coordinates

        Returns:
            0-based index of the new vertex
        """
        self.positions.append((x, y, z))
        return len(self.positions) - 1

    def add_indices(self, indices: Iterable[int]) -> None:
        """
        Append indices referencing already emitted vertices.

        Args:
            indices: 0-based vertex indices

        Raises:
            IndexError: If any index is negative or not below vertex_count()
        """
        new_indices = list(indices)
        count = len(self.positions)
        for idx in new_indices:
            if idx < 0 or idx >= count:
                raise IndexError(
                    f"Index {idx} out of range for {count} vertices"
                )
        self.indices.extend(new_indices)

    def is_empty(self) -> bool:
        """Check if mesh has no geometry."""
        return len(self.positions) == 0

    def compute_bounds(self) -> Optional[Tuple[Position, Position]]:
        """
        Compute bounding box of the mesh.

        Returns:
            ((min_x, min_y, min_z), (max_x, max_y, max_z)) or None if empty
        """
        if not self.positions:
            return None

        xs = [p[0] for p in self.positions]
        ys = [p[1] for p in self.positions]
        zs = [p[2] for p in self.positions]

        return (
            (min(xs), min(ys), min(zs)),
            (max(xs), max(ys), max(zs))
        )

    def _validate_indices(self) -> List[str]:
        errors = []
        max_idx = len(self.positions)
        per_primitive = self.kind.indices_per_primitive

        if len(self.indices) % per_primitive != 0:
            errors.append(
                f"Index count {len(self.indices)} is not a multiple of {per_primitive}"
            )

        for i, idx in enumerate(self.indices):
            if idx < 0 or idx >= max_idx:
                errors.append(
                    f"Index {i} references vertex {idx} "
                    f"(valid range: 0-{max_idx - 1})"
                )

        return errors


@dataclass
class WireframeMesh(_MeshBuffers):
    """
    Line-segment mesh.

    Attributes:
        positions: List of (x, y, z) vertex positions
        indices: Flat list of vertex indices, consumed in pairs
    """
    kind: ClassVar[MeshKind] = MeshKind.WIREFRAME

    def edge_count(self) -> int:
        """Get number of line segments."""
        return len(self.indices) // 2

    def merge(self, other: 'WireframeMesh') -> None:
        """
        Merge another wireframe into this one.

        Args:
            other: WireframeMesh to append, indices adjusted by vertex offset
        """
        _check_same_kind(self, other)
        vertex_offset = len(self.positions)
        self.positions.extend(other.positions)
        self.indices.extend(idx + vertex_offset for idx in other.indices)

    def clear(self) -> None:
        """Clear all positions and indices."""
        self.positions.clear()
        self.indices.clear()

    def validate(self) -> List[str]:
        """
        Validate mesh integrity.

        Returns:
            List of validation error messages (empty if valid)
        """
        return self._validate_indices()

    def __repr__(self) -> str:
        return f"WireframeMesh(vertices={len(self.positions)}, edges={self.edge_count()})"


@dataclass
class SolidMesh(_MeshBuffers):
    """
    Flat-shaded triangle mesh.

    Attributes:
        positions: List of (x, y, z) vertex positions
        normals: List of (x, y, z) unit normals, parallel to positions
        indices: Flat list of vertex indices, consumed in triples

    Winding:
        Counter-clockwise seen from outside is the front face.
    """
    normals: List[Position] = field(default_factory=list)
    kind: ClassVar[MeshKind] = MeshKind.SOLID

    def add_normal(self, x: float, y: float, z: float) -> int:
        """
        Add a vertex normal and return its 0-based index.

        Args:
            x, y, z: Normal components

        Returns:
            0-based index of the new normal
        """
        self.normals.append((x, y, z))
        return len(self.normals) - 1

    def add_vertex(self, position: PointLike, normal: PointLike) -> int:
        """
        Add a position and its normal together.

        Returns:
            0-based index of the new vertex
        """
        self.add_normal(*normal)
        return self.add_position(*position)

    def add_flat_triangle(
        self, v0: PointLike, v1: PointLike, v2: PointLike, normal: PointLike
    ) -> int:
        """
        Add an unshared triangle: 3 fresh vertices with one normal, 3 indices.

        Args:
            v0, v1, v2: Corner positions (CCW seen from the front face)
            normal: Face normal written for all three corners

        Returns:
            0-based index of the first new vertex
        """
        base = len(self.positions)
        self.add_vertex(v0, normal)
        self.add_vertex(v1, normal)
        self.add_vertex(v2, normal)
        self.indices.extend((base, base + 1, base + 2))
        return base

    def triangle_count(self) -> int:
        """Get number of triangles."""
        return len(self.indices) // 3

    def merge(self, other: 'SolidMesh') -> None:
        """
        Merge another solid mesh into this one.

        Args:
            other: SolidMesh to append, indices adjusted by vertex offset
        """
        _check_same_kind(self, other)
        vertex_offset = len(self.positions)
        self.positions.extend(other.positions)
        self.normals.extend(other.normals)
        self.indices.extend(idx + vertex_offset for idx in other.indices)

    def clear(self) -> None:
        """Clear all positions, normals, and indices."""
        self.positions.clear()
        self.normals.clear()
        self.indices.clear()

    def validate(self) -> List[str]:
        """
        Validate mesh integrity.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []
        if len(self.normals) != len(self.positions):
            errors.append(
                f"Normal count {len(self.normals)} does not match "
                f"vertex count {len(self.positions)}"
            )
        errors.extend(self._validate_indices())
        return errors

    def __repr__(self) -> str:
        return f"SolidMesh(vertices={len(self.positions)}, triangles={self.triangle_count()})"


Mesh = Union[WireframeMesh, SolidMesh]


def _check_same_kind(mesh: Mesh, other: Mesh) -> None:
    if other.kind is not mesh.kind:
        raise TypeError(
            f"Cannot merge {other.kind.value} mesh into {mesh.kind.value} mesh"
        )


def create_mesh(kind: MeshKind) -> Mesh:
    """
    Create an empty sink of the given kind.

    Args:
        kind: MeshKind.WIREFRAME or MeshKind.SOLID

    Returns:
        Empty WireframeMesh or SolidMesh
    """
    if kind is MeshKind.WIREFRAME:
        return WireframeMesh()
    return SolidMesh()


def merge_meshes(meshes: List[Mesh]) -> Mesh:
    """
    Merge multiple meshes of one kind into one.

    Args:
        meshes: Non-empty list of meshes sharing the same MeshKind

    Returns:
        Single merged mesh

    Raises:
        ValueError: If meshes is empty
        TypeError: If the meshes are of different kinds
    """
    if not meshes:
        raise ValueError("No meshes to merge")

    result = create_mesh(meshes[0].kind)

    for mesh in meshes:
        result.merge(mesh)

    return result
