"""Ray data structure and vector utilities for ray casting.

This module provides the Vector3 value type, the Ray dataclass and the
vector utility functions used throughout the renderer. Everything here is
pure: operations never mutate their inputs and always return new values.

Degenerate input is propagated rather than raised. Normalizing a
zero-length vector yields a vector of NaNs, so a bad direction shows up as
a NaN downstream instead of aborting the render.

Example:
    >>> origin = Vector3(0.0, 0.0, 0.0)
    >>> direction = normalize(Vector3(0.0, 3.0, 4.0))
    >>> ray = Ray(origin=origin, direction=direction)
    >>> point = ray_at(ray, 5.0)  # Point 5 units along the ray
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt


@dataclass(frozen=True)
class Vector3:
    """A 3D vector of doubles.

    Attributes:
        x: The x component.
        y: The y component.
        z: The z component.
    """

    x: float
    y: float
    z: float

    @classmethod
    def of(cls, value: Vector3 | Sequence[float]) -> Vector3:
        """Coerce a Vector3 or a 3-element sequence into a Vector3.

        Args:
            value: An existing vector, or any sequence of three numbers.

        Returns:
            The value as a Vector3.

        Raises:
            ValueError: If a sequence does not have exactly three elements.
        """
        if isinstance(value, Vector3):
            return value
        if len(value) != 3:
            raise ValueError(f"Expected 3 components, got {len(value)}")
        return cls(float(value[0]), float(value[1]), float(value[2]))

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vector3:
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vector3:
        return self * (1.0 / divisor)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def dot(self, other: Vector3) -> float:
        return dot(self, other)

    def cross(self, other: Vector3) -> Vector3:
        return cross(self, other)

    def length(self) -> float:
        return length(self)

    def length_squared(self) -> float:
        return length_squared(self)

    def normalized(self) -> Vector3:
        return normalize(self)

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_numpy(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. Rays produced by the
            camera are unit length, but this is not enforced.
    """

    origin: Vector3
    direction: Vector3


def ray_at(ray: Ray, t: float) -> Vector3:
    """Compute the point along the ray at parameter t.

    Args:
        ray: The ray to evaluate.
        t: The parameter value. Positive values are in front of the origin.

    Returns:
        The point ray.origin + t * ray.direction.
    """
    return ray.origin + ray.direction * t


# =============================================================================
# Vector Utility Functions
# =============================================================================


def add(a: Vector3, b: Vector3) -> Vector3:
    """Component-wise sum a + b."""
    return a + b


def subtract(a: Vector3, b: Vector3) -> Vector3:
    """Component-wise difference a - b."""
    return a - b


def scale(v: Vector3, factor: float) -> Vector3:
    """Multiply every component of v by factor."""
    return v * factor


def dot(a: Vector3, b: Vector3) -> float:
    """Compute the dot product of two vectors.

    Args:
        a: First vector.
        b: Second vector.

    Returns:
        The dot product a . b.
    """
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vector3, b: Vector3) -> Vector3:
    """Compute the cross product of two vectors.

    Args:
        a: First vector.
        b: Second vector.

    Returns:
        The cross product a x b.
    """
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def length_squared(v: Vector3) -> float:
    """Compute the squared length of a vector.

    Cheaper than length() when only comparing magnitudes.
    """
    return dot(v, v)


def length(v: Vector3) -> float:
    """Compute the Euclidean length (magnitude) of a vector."""
    return math.sqrt(dot(v, v))


def normalize(v: Vector3) -> Vector3:
    """Normalize a vector to unit length.

    Args:
        v: The input vector.

    Returns:
        A unit vector in the same direction as v. If v is zero-length the
        result is Vector3(nan, nan, nan).
    """
    norm = length(v)
    if norm == 0.0:
        return Vector3(math.nan, math.nan, math.nan)
    return v / norm
