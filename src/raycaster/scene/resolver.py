"""Scene container and nearest-hit resolution.

A Scene is an ordered, immutable collection of spheres plus a background
color. Resolving a ray scans every sphere, keeps the smallest strictly
positive hit distance, and reports that sphere's color (or the background
when nothing is hit).

Scene order only matters for exact distance ties: the comparison is strict,
so the sphere listed first keeps the pixel.

Example:
    >>> scene = Scene(
    ...     spheres=(Sphere(center=(0, 10, 0), radius=2, color=(200, 0, 0)),),
    ...     background=(0, 0, 128),
    ... )
    >>> ray = Ray(Vector3(0, 0, 0), Vector3(0, 1, 0))
    >>> resolve(ray, scene, scene.background)
    Color(r=200, g=0, b=0)
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any

from raycaster.core.color import Color
from raycaster.core.vector import Ray, Vector3, ray_at
from raycaster.geometry.sphere import Sphere, intersect

DEFAULT_BACKGROUND = Color(0, 0, 128)


@dataclass
class SceneConfig:
    """Configuration for scene serialization.

    Attributes:
        background: Background color as [r, g, b].
        spheres: List of sphere configurations, each with center, radius
            and color keys.
    """

    background: list[int] = field(default_factory=lambda: list(DEFAULT_BACKGROUND))
    spheres: list[dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class SceneHit:
    """The nearest intersection of a ray with a scene.

    Attributes:
        ray: The ray that was traced.
        distance: Ray parameter of the hit (always > 0).
        sphere: The sphere that was hit.
    """

    ray: Ray
    distance: float
    sphere: Sphere

    @property
    def point(self) -> Vector3:
        """World-space hit point, recomputed from the ray."""
        return ray_at(self.ray, self.distance)

    @property
    def color(self) -> Color:
        return self.sphere.color


@dataclass(frozen=True)
class Scene:
    """An ordered set of spheres and a background color.

    Iterating a Scene yields its spheres in order, so a Scene can be passed
    anywhere a sequence of spheres is expected.

    Attributes:
        spheres: The scene members, in order.
        background: Color for rays that hit nothing.
    """

    spheres: tuple[Sphere, ...] = ()
    background: Color | Sequence[int] = DEFAULT_BACKGROUND

    def __post_init__(self) -> None:
        object.__setattr__(self, "spheres", tuple(self.spheres))
        object.__setattr__(self, "background", Color.of(self.background))

    def __iter__(self) -> Iterator[Sphere]:
        return iter(self.spheres)

    def __len__(self) -> int:
        return len(self.spheres)

    def resolve(self, ray: Ray) -> Color:
        """Resolve ray against this scene's spheres and background."""
        return resolve(ray, self.spheres, self.background)

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_config(self) -> SceneConfig:
        """Export the scene to a configuration object."""
        config = SceneConfig(background=list(self.background))
        for sphere in self.spheres:
            config.spheres.append(
                {
                    "center": list(sphere.center),
                    "radius": sphere.radius,
                    "color": list(sphere.color),
                }
            )
        return config

    @classmethod
    def from_config(cls, config: SceneConfig) -> Scene:
        """Build a scene from a configuration object.

        Missing sphere keys fall back to the Sphere defaults.

        Raises:
            ConfigurationError: If a sphere radius or any color is invalid.
        """
        spheres = []
        for sphere_config in config.spheres:
            spheres.append(
                Sphere(
                    center=sphere_config.get("center", [0.0, 0.0, 0.0]),
                    radius=float(sphere_config.get("radius", 1.0)),
                    color=sphere_config.get("color", [128, 128, 128]),
                )
            )
        return cls(spheres=tuple(spheres), background=config.background)

    def to_dict(self) -> dict[str, Any]:
        """Export the scene to a dictionary (for JSON serialization)."""
        config = self.to_config()
        return {"background": config.background, "spheres": config.spheres}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Scene:
        """Load a scene from a dictionary with 'background' and 'spheres' keys."""
        config = SceneConfig(
            background=data.get("background", list(DEFAULT_BACKGROUND)),
            spheres=data.get("spheres", []),
        )
        return cls.from_config(config)


def find_nearest(ray: Ray, spheres: Iterable[Sphere]) -> SceneHit | None:
    """Find the nearest forward hit of a ray among spheres.

    Every sphere is tested; the first hit is not necessarily the nearest.

    Args:
        ray: The ray to trace.
        spheres: Candidate spheres in scene order.

    Returns:
        The hit with the smallest positive distance, or None. On exact
        distance ties the earliest sphere wins.
    """
    best: SceneHit | None = None
    best_distance = math.inf
    for sphere in spheres:
        distance = intersect(ray, sphere)
        if distance is not None and 0.0 < distance < best_distance:
            best_distance = distance
            best = SceneHit(ray=ray, distance=distance, sphere=sphere)
    return best


def resolve(ray: Ray, spheres: Iterable[Sphere], background: Color) -> Color:
    """Resolve the color seen along a ray.

    Args:
        ray: The ray to trace.
        spheres: The scene (or any iterable of spheres) in scene order.
        background: Color returned when no sphere is hit.

    Returns:
        The color of the nearest sphere hit at a positive distance, or
        background.
    """
    hit = find_nearest(ray, spheres)
    if hit is None:
        return background
    return hit.color
