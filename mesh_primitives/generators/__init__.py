"""
Mesh generators for Mesh Primitives.

Contains the cuboid (wireframe and solid), sphere, cylinder and cone
generators, plus the shape dispatcher that routes requests to them.
"""

from .validation import InvalidParameter
from .cuboid import generate_cuboid, generate_cuboid_wireframe, generate_cuboid_solid
from .sphere import generate_sphere
from .cylinder import generate_cylinder
from .cone import generate_cone
from .shape_generator import (
    ShapeType,
    ShapeRequest,
    ShapeResult,
    expected_counts,
    validate_request,
    generate_shape,
    generate_shapes,
)

__all__ = [
    'InvalidParameter',
    'generate_cuboid',
    'generate_cuboid_wireframe',
    'generate_cuboid_solid',
    'generate_sphere',
    'generate_cylinder',
    'generate_cone',
    'ShapeType',
    'ShapeRequest',
    'ShapeResult',
    'expected_counts',
    'validate_request',
    'generate_shape',
    'generate_shapes',
]
