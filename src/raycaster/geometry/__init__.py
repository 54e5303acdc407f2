"""Geometry module for shape primitives.

Components:
    sphere: Sphere primitive with ray-sphere intersection

Spheres are the only primitive. Intersection is available both as a plain
Python function and as a Taichi function for the parallel frame kernel:

    t = intersect(ray, sphere)                          # float | None
    t = hit_sphere_distance(origin, direction, c, r)    # inside kernels, inf on miss
"""

from .sphere import Sphere, dvec3, hit_sphere_distance, intersect

__all__ = [
    "Sphere",
    "dvec3",
    "intersect",
    "hit_sphere_distance",
]
