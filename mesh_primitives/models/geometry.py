"""
Core geometry types for Mesh Primitives.

Provides Vector3 and Triangle value types used by every shape generator.
Both are immutable, so no vector instance is ever shared mutably between
two generator calls.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple
import math


@dataclass(frozen=True, slots=True)
class Vector3:
    """3D point or direction."""
    x: float
    y: float
    z: float

    def __add__(self, other: 'Vector3') -> 'Vector3':
        """Vector addition."""
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: 'Vector3') -> 'Vector3':
        """Vector subtraction."""
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> 'Vector3':
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> 'Vector3':
        """Scale by a scalar."""
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar: float) -> 'Vector3':
        """Divide by a scalar."""
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other: 'Vector3') -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: 'Vector3') -> 'Vector3':
        """Cross product (right-handed)."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> 'Vector3':
        """
        Unit vector in the same direction.

        Returns the zero vector if this vector has zero length.
        """
        length = self.length()
        if length < 1e-12:
            return Vector3(0.0, 0.0, 0.0)
        return Vector3(self.x / length, self.y / length, self.z / length)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True, slots=True)
class Triangle:
    """
    Triangle with three corners held by value.

    Winding convention:
        - Corners listed counter-clockwise when seen from the front face
        - normal() points out of the front face
    """
    v0: Vector3
    v1: Vector3
    v2: Vector3

    def normal(self) -> Vector3:
        """Flat face normal: normalize(cross(v1 - v0, v2 - v0))."""
        return (self.v1 - self.v0).cross(self.v2 - self.v0).normalized()

    def corners(self) -> Tuple[Vector3, Vector3, Vector3]:
        return (self.v0, self.v1, self.v2)


# Axis-aligned unit normals shared by cuboid, cylinder and cone caps
UNIT_X = Vector3(1.0, 0.0, 0.0)
UNIT_Y = Vector3(0.0, 1.0, 0.0)
UNIT_Z = Vector3(0.0, 0.0, 1.0)
UNIT_X_NEG = Vector3(-1.0, 0.0, 0.0)
UNIT_Y_NEG = Vector3(0.0, -1.0, 0.0)
UNIT_Z_NEG = Vector3(0.0, 0.0, -1.0)
