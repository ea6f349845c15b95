"""
OBJ mesh exporter for Mesh Primitives.

Exports sinks to Wavefront OBJ so generated shapes can be inspected in
any model viewer:
- SolidMesh -> v / vn / f (v//vn) records
- WireframeMesh -> v / l records
- Indices are converted from 0-based to OBJ's 1-based references
"""

import os
from typing import List, Optional
from dataclasses import dataclass
import logging

from ..config import OBJ_NORMAL_PRECISION, OBJ_VERTEX_PRECISION
from ..models.mesh import Mesh, MeshKind

logger = logging.getLogger(__name__)


@dataclass
class ExportStats:
    """Statistics from OBJ export."""
    total_vertices: int = 0
    total_normals: int = 0
    total_faces: int = 0
    total_lines: int = 0
    file_size_bytes: int = 0


def export_obj(
    mesh: Mesh,
    filepath: str,
    comment: Optional[str] = None,
    vertex_precision: int = OBJ_VERTEX_PRECISION,
    normal_precision: int = OBJ_NORMAL_PRECISION
) -> ExportStats:
    """
    Export a mesh to an OBJ file.

    Args:
        mesh: WireframeMesh or SolidMesh to export
        filepath: Output file path (.obj)
        comment: Optional comment to include in file header
        vertex_precision: Decimal places for positions
        normal_precision: Decimal places for normals

    Returns:
        ExportStats with export statistics

    Raises:
        ValueError: If the mesh fails validation
    """
    errors = mesh.validate()
    if errors:
        raise ValueError(f"Cannot export invalid mesh: {errors[0]}")

    stats = ExportStats()
    stats.total_vertices = mesh.vertex_count()
    is_solid = mesh.kind is MeshKind.SOLID

    if is_solid:
        stats.total_normals = len(mesh.normals)
        stats.total_faces = mesh.triangle_count()
    else:
        stats.total_lines = mesh.edge_count()

    os.makedirs(os.path.dirname(filepath) or '.', exist_ok=True)

    with open(filepath, 'w', encoding='utf-8') as f:
        # Header comment
        f.write("# Mesh Primitives OBJ Export\n")
        f.write(f"# Vertices: {stats.total_vertices}\n")
        if is_solid:
            f.write(f"# Normals: {stats.total_normals}\n")
            f.write(f"# Faces: {stats.total_faces}\n")
        else:
            f.write(f"# Lines: {stats.total_lines}\n")

        if comment:
            f.write(f"# {comment}\n")

        f.write("\n")

        for x, y, z in mesh.positions:
            f.write(
                f"v {x:.{vertex_precision}f} {y:.{vertex_precision}f} "
                f"{z:.{vertex_precision}f}\n"
            )

        f.write("\n")

        if is_solid:
            for x, y, z in mesh.normals:
                f.write(
                    f"vn {x:.{normal_precision}f} {y:.{normal_precision}f} "
                    f"{z:.{normal_precision}f}\n"
                )
            f.write("\n")

            # Normals are index-aligned with positions, so v and vn share a reference
            indices = mesh.indices
            for i in range(0, len(indices), 3):
                face = indices[i:i + 3]
                face_str = " ".join(f"{idx + 1}//{idx + 1}" for idx in face)
                f.write(f"f {face_str}\n")
        else:
            indices = mesh.indices
            for i in range(0, len(indices), 2):
                f.write(f"l {indices[i] + 1} {indices[i + 1] + 1}\n")

    stats.file_size_bytes = os.path.getsize(filepath)

    if is_solid:
        logger.info(
            f"Exported OBJ: {stats.total_vertices} vertices, "
            f"{stats.total_normals} normals, {stats.total_faces} faces"
        )
    else:
        logger.info(
            f"Exported OBJ: {stats.total_vertices} vertices, "
            f"{stats.total_lines} lines"
        )

    return stats


def validate_obj_file(filepath: str) -> List[str]:
    """
    Validate an OBJ file for common issues.

    Args:
        filepath: Path to OBJ file

    Returns:
        List of error messages (empty if valid)
    """
    errors = []

    if not os.path.exists(filepath):
        errors.append(f"File does not exist: {filepath}")
        return errors

    vertex_count = 0
    normal_count = 0
    element_count = 0
    max_vertex_ref = 0
    max_normal_ref = 0

    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            for line_num, line in enumerate(f, 1):
                line = line.strip()

                if not line or line.startswith('#'):
                    continue

                parts = line.split()

                if parts[0] == 'v':
                    vertex_count += 1
                    if len(parts) < 4:
                        errors.append(
                            f"Line {line_num}: Vertex has < 3 coordinates"
                        )

                elif parts[0] == 'vn':
                    normal_count += 1
                    if len(parts) != 4:
                        errors.append(
                            f"Line {line_num}: Normal must have 3 components"
                        )

                elif parts[0] in ('f', 'l'):
                    element_count += 1
                    min_refs = 3 if parts[0] == 'f' else 2
                    if len(parts) < min_refs + 1:
                        errors.append(
                            f"Line {line_num}: '{parts[0]}' has < {min_refs} vertices"
                        )

                    # Handle v, v/vt, v//vn and v/vt/vn formats
                    for part in parts[1:]:
                        refs = part.split('/')
                        try:
                            vertex_ref = int(refs[0])
                            if vertex_ref < 1:
                                errors.append(
                                    f"Line {line_num}: Invalid vertex reference {vertex_ref}"
                                )
                            max_vertex_ref = max(max_vertex_ref, vertex_ref)
                            if len(refs) == 3 and refs[2]:
                                normal_ref = int(refs[2])
                                if normal_ref < 1:
                                    errors.append(
                                        f"Line {line_num}: Invalid normal reference {normal_ref}"
                                    )
                                max_normal_ref = max(max_normal_ref, normal_ref)
                        except ValueError:
                            errors.append(
                                f"Line {line_num}: Invalid reference '{part}'"
                            )

    except OSError as e:
        errors.append(f"Failed to read file: {e}")
        return errors

    if max_vertex_ref > vertex_count:
        errors.append(
            f"Element references vertex {max_vertex_ref} but only {vertex_count} vertices exist"
        )

    if max_normal_ref > normal_count:
        errors.append(
            f"Face references normal {max_normal_ref} but only {normal_count} normals exist"
        )

    if vertex_count == 0:
        errors.append("File contains no vertices")

    if element_count == 0:
        errors.append("File contains no faces or lines")

    return errors
