"""Core rendering module.

This module contains the fundamental building blocks for ray casting:

Components:
    vector: Vector3 and Ray data structures and vector utilities
    frame: Frame driver iterating pixels in row-major order
    integrator: Taichi kernel computing every pixel of a frame in parallel

Note: frame and integrator are NOT imported here to avoid circular imports.
Import them directly from raycaster.core.frame or raycaster.core.integrator.
"""

from .vector import (
    Ray,
    Vector3,
    add,
    cross,
    dot,
    length,
    length_squared,
    normalize,
    ray_at,
    scale,
    subtract,
)

__all__ = [
    "Ray",
    "Vector3",
    "ray_at",
    "add",
    "subtract",
    "scale",
    "dot",
    "cross",
    "length",
    "length_squared",
    "normalize",
]
