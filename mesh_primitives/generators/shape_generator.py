"""
Shape generator orchestrator for Mesh Primitives.

Routes a ShapeRequest to the matching generator and reports what was
written. Also predicts element counts for a request, which the CLI uses
for its summary and which must agree with what the generators emit.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple
import logging

from ..config import (
    DEFAULT_CUBOID_SIZE,
    DEFAULT_HEIGHT,
    DEFAULT_RADIUS,
    DEFAULT_SEGMENTS,
    DEFAULT_SPHERE_DEPTH,
    GeneratorConfig,
)
from ..models.geometry import Vector3
from ..models.mesh import Mesh, MeshKind
from .cone import VERTICES_PER_SEGMENT as CONE_VERTICES_PER_SEGMENT, generate_cone
from .cuboid import generate_cuboid
from .cylinder import (
    VERTICES_PER_SEGMENT as CYLINDER_VERTICES_PER_SEGMENT,
    generate_cylinder,
)
from .sphere import generate_sphere, sphere_triangle_count
from .validation import check_depth, check_positive, check_segments, check_size

logger = logging.getLogger(__name__)


class ShapeType(Enum):
    """Canonical solids the package can generate."""
    CUBOID = "cuboid"
    SPHERE = "sphere"
    CYLINDER = "cylinder"
    CONE = "cone"

    @classmethod
    def from_name(cls, name: str) -> 'ShapeType':
        """
        Look up a shape by its lowercase name.

        Raises:
            ValueError: If name is not a known shape
        """
        return cls(name.lower().strip())


@dataclass
class ShapeRequest:
    """
    Parameters for one generated shape.

    Only the fields the shape uses are read:
    cuboid -> size; sphere -> radius, depth;
    cylinder/cone -> radius, height, segments.
    """
    shape: ShapeType
    size: Vector3 = field(default_factory=lambda: Vector3(*DEFAULT_CUBOID_SIZE))
    radius: float = DEFAULT_RADIUS
    height: float = DEFAULT_HEIGHT
    depth: int = DEFAULT_SPHERE_DEPTH
    segments: int = DEFAULT_SEGMENTS

    @classmethod
    def from_config(
        cls,
        shape: ShapeType,
        config: GeneratorConfig,
        **overrides
    ) -> 'ShapeRequest':
        """Build a request whose depth and segments default to the config's."""
        overrides.setdefault("depth", config.sphere_depth)
        overrides.setdefault("segments", config.segments)
        return cls(shape=shape, **overrides)


@dataclass
class ShapeResult:
    """What a generate_shape call wrote into its sink."""
    shape: ShapeType
    kind: MeshKind
    vertices_added: int = 0
    indices_added: int = 0


def expected_counts(request: ShapeRequest, kind: MeshKind) -> Tuple[int, int]:
    """
    Predict the (vertices, indices) a request emits.

    Args:
        request: Shape request (size, depth or segments are validated)
        kind: Sink variant the request will be written into

    Returns:
        Tuple of (vertex count, index count)

    Raises:
        InvalidParameter: If the size, depth or segment count is out of range
    """
    if request.shape is ShapeType.CUBOID:
        check_size(request.size)
        if kind is MeshKind.WIREFRAME:
            return (8, 24)
        return (24, 36)

    if request.shape is ShapeType.SPHERE:
        vertices = sphere_triangle_count(check_depth(request.depth)) * 3
        return (vertices, vertices)

    segments = check_segments(request.segments)
    if request.shape is ShapeType.CYLINDER:
        vertices = segments * CYLINDER_VERTICES_PER_SEGMENT
    else:
        vertices = segments * CONE_VERTICES_PER_SEGMENT
    return (vertices, vertices)


def generate_shape(
    destination: Mesh,
    request: ShapeRequest
) -> ShapeResult:
    """
    Generate the requested shape into destination.

    Cuboids accept either sink variant; sphere, cylinder and cone
    need a SolidMesh.

    Args:
        destination: Caller-owned sink
        request: Shape and its parameters

    Returns:
        ShapeResult with the number of vertices and indices appended

    Raises:
        InvalidParameter: If the request's parameters are out of range
        TypeError: If the sink variant cannot hold the shape
    """
    vertices_before = destination.vertex_count()
    indices_before = destination.index_count()

    if request.shape is ShapeType.CUBOID:
        generate_cuboid(destination, request.size)
    elif request.shape is ShapeType.SPHERE:
        generate_sphere(destination, request.radius, request.depth)
    elif request.shape is ShapeType.CYLINDER:
        generate_cylinder(destination, request.radius, request.height, request.segments)
    elif request.shape is ShapeType.CONE:
        generate_cone(destination, request.radius, request.height, request.segments)
    else:
        raise ValueError(f"Unknown shape: {request.shape!r}")

    result = ShapeResult(
        shape=request.shape,
        kind=destination.kind,
        vertices_added=destination.vertex_count() - vertices_before,
        indices_added=destination.index_count() - indices_before,
    )

    logger.info(
        f"Generated {result.shape.value} ({result.kind.value}): "
        f"{result.vertices_added} vertices, {result.indices_added} indices"
    )

    return result


def validate_request(request: ShapeRequest, kind: MeshKind) -> None:
    """
    Run every check generate_shape would run, without writing anything.

    Raises:
        InvalidParameter: If the request's parameters are out of range
        TypeError: If a sink of this kind cannot hold the shape
    """
    if request.shape is ShapeType.CUBOID:
        check_size(request.size)
        return

    if kind is not MeshKind.SOLID:
        raise TypeError(f"{request.shape.value} requires a solid mesh")

    check_positive("radius", request.radius)
    if request.shape is ShapeType.SPHERE:
        check_depth(request.depth)
    else:
        check_positive("height", request.height)
        check_segments(request.segments)


def generate_shapes(destination: Mesh, requests: List[ShapeRequest]) -> List[ShapeResult]:
    """
    Generate several shapes into one sink, in order.

    All requests are validated before anything is written, so a bad
    request anywhere in the list leaves the sink untouched.

    Args:
        destination: Caller-owned sink
        requests: Shapes to generate

    Returns:
        List of ShapeResult, one per request
    """
    for request in requests:
        validate_request(request, destination.kind)

    return [generate_shape(destination, request) for request in requests]
