"""
Argument validation for Mesh Primitives generators.

Every generator runs its checks before the first write to the sink,
so a rejected call leaves the sink exactly as it was.
"""

from numbers import Integral, Real
import math

from ..config import MIN_SEGMENTS
from ..models.geometry import Vector3
from ..models.mesh import MeshKind


class InvalidParameter(ValueError):
    """Raised when a generator receives an argument that would yield degenerate geometry."""
    pass


def check_positive(name: str, value: float) -> float:
    """
    Check that a scalar is a finite, strictly positive number.

    Args:
        name: Parameter name used in the error message
        value: Value to check

    Returns:
        The value as float

    Raises:
        InvalidParameter: If value is not a finite number > 0
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameter(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidParameter(f"{name} must be positive and finite, got {value}")
    return float(value)


def check_size(size: Vector3) -> Vector3:
    """
    Check that every component of a cuboid size is positive.

    Raises:
        InvalidParameter: If any component is not a finite number > 0
    """
    if not isinstance(size, Vector3):
        raise InvalidParameter(f"size must be a Vector3, got {size!r}")
    check_positive("size.x", size.x)
    check_positive("size.y", size.y)
    check_positive("size.z", size.z)
    return size


def check_depth(depth: int) -> int:
    """
    Check a sphere subdivision depth.

    Raises:
        InvalidParameter: If depth is not an integer >= 0
    """
    if isinstance(depth, bool) or not isinstance(depth, Integral):
        raise InvalidParameter(f"depth must be an integer, got {depth!r}")
    if depth < 0:
        raise InvalidParameter(f"depth must be non-negative, got {depth}")
    return int(depth)


def check_segments(segments: int) -> int:
    """
    Check a rim segment count.

    Raises:
        InvalidParameter: If segments is not an integer >= MIN_SEGMENTS
    """
    if isinstance(segments, bool) or not isinstance(segments, Integral):
        raise InvalidParameter(f"segments must be an integer, got {segments!r}")
    if segments < MIN_SEGMENTS:
        raise InvalidParameter(
            f"segments must be at least {MIN_SEGMENTS}, got {segments}"
        )
    return int(segments)


def check_kind(destination, kind: MeshKind, shape: str) -> None:
    """
    Check that a sink is of the variant a generator writes.

    Raises:
        TypeError: If destination is not a sink of the requested kind
    """
    actual = getattr(destination, "kind", None)
    if actual is not kind:
        raise TypeError(
            f"{shape} requires a {kind.value} mesh, got {type(destination).__name__}"
        )
