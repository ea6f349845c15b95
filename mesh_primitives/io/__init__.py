"""
Input/Output modules for Mesh Primitives.
"""

from .obj_exporter import (
    ExportStats,
    export_obj,
    validate_obj_file,
)

__all__ = [
    'ExportStats',
    'export_obj',
    'validate_obj_file',
]
