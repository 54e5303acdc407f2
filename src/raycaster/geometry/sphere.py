"""Sphere primitive with closest-approach ray-sphere intersection.

Intersection projects the sphere center onto the ray, rejects spheres whose
closest approach lies at or behind the ray origin, then steps back from the
closest-approach point to the near surface:

    t_closest = dot(d, c - o) / dot(d, d)
    perp^2    = |o + t_closest * d - c|^2
    t         = t_closest - sqrt(r^2 - perp^2) / |d|

The behind-origin rejection is not a full quadratic solve: a ray starting
inside (or just in front of) a sphere whose center projects behind the
origin reports no hit. For a ray starting inside a sphere whose center
projects in front, the near root lies behind the origin and the returned
distance is negative. Callers discard non-positive distances.

The same test is provided twice: intersect() for plain Python and
hit_sphere_distance() for use inside Taichi kernels. Both compute in
double precision.

Example:
    >>> sphere = Sphere(center=(0.0, 10.0, 0.0), radius=2.0, color=(200, 0, 0))
    >>> ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0))
    >>> intersect(ray, sphere)
    8.0
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

import taichi as ti
import taichi.math as tm

from raycaster.core.color import Color
from raycaster.core.vector import Ray, Vector3, dot, length_squared, ray_at
from raycaster.errors import DegenerateSphereError

# Double-precision 3-vector for kernel code
dvec3 = ti.types.vector(3, ti.f64)


@dataclass(frozen=True)
class Sphere:
    """A sphere defined by center point, radius and flat color.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere (finite, positive).
        color: The color reported when this sphere is the nearest hit.

    Raises:
        DegenerateSphereError: If the radius is not a finite positive number.
    """

    center: Vector3 | Sequence[float] = Vector3(0.0, 0.0, 0.0)
    radius: float = 1.0
    color: Color | Sequence[int] = Color(128, 128, 128)

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", Vector3.of(self.center))
        object.__setattr__(self, "color", Color.of(self.color))
        object.__setattr__(self, "radius", float(self.radius))
        if not (math.isfinite(self.radius) and self.radius > 0.0):
            raise DegenerateSphereError(f"Sphere radius must be positive, got {self.radius}")


def intersect(ray: Ray, sphere: Sphere) -> float | None:
    """Find the near intersection distance of a ray with a sphere.

    Args:
        ray: The ray to test. The direction need not be normalized.
        sphere: The sphere to test against.

    Returns:
        The ray parameter t of the near surface point, or None if the
        sphere is missed, the direction has zero length, or its closest
        approach is at or behind the origin.
        t may be negative when the origin is inside the sphere.
    """
    direction_sq = length_squared(ray.direction)
    if direction_sq == 0.0:
        return None
    t_closest = dot(ray.direction, sphere.center - ray.origin) / direction_sq
    if t_closest <= 0.0:
        return None

    radius_sq = sphere.radius * sphere.radius
    perp_sq = length_squared(ray_at(ray, t_closest) - sphere.center)
    if perp_sq > radius_sq:
        return None

    # Tangent rays give offset == 0
    offset = math.sqrt(radius_sq - perp_sq) / math.sqrt(direction_sq)
    return t_closest - offset


@ti.func
def hit_sphere_distance(
    ray_origin: dvec3,
    ray_direction: dvec3,
    center: dvec3,
    radius: ti.f64,
) -> ti.f64:
    """Kernel-side counterpart of intersect().

    Args:
        ray_origin: The starting point of the ray.
        ray_direction: The direction vector of the ray.
        center: The sphere center.
        radius: The sphere radius.

    Returns:
        The near intersection parameter t, or +inf when there is no hit.
    """
    result = tm.inf
    direction_sq = tm.dot(ray_direction, ray_direction)
    t_closest = 0.0
    if direction_sq > 0.0:
        t_closest = tm.dot(ray_direction, center - ray_origin) / direction_sq
    if t_closest > 0.0:
        radius_sq = radius * radius
        offset_vec = ray_origin + ray_direction * t_closest - center
        perp_sq = tm.dot(offset_vec, offset_vec)
        if perp_sq <= radius_sq:
            result = t_closest - ti.sqrt(radius_sq - perp_sq) / ti.sqrt(direction_sq)
    return result
