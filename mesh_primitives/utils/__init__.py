"""
Utility functions for Mesh Primitives.
"""

from .math_utils import (
    midpoint,
    subdivide_triangle,
    project_to_sphere,
    flat_normal,
    rim_points,
    rim_pairs,
)

__all__ = [
    'midpoint',
    'subdivide_triangle',
    'project_to_sphere',
    'flat_normal',
    'rim_points',
    'rim_pairs',
]
