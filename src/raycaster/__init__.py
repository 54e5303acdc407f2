"""Minimal offline ray-casting renderer.

This package renders a scene of flat-colored spheres from a pinhole camera,
one ray per pixel, keeping the nearest hit:
- Pure-Python reference path for every stage
- Parallel frame rendering with Taichi (float64)
- Plain-text P3 pixel-map and PNG output

Subpackages:
    core: Vector algebra, colors, frame driver and the Taichi frame kernel
    camera: Pinhole camera, viewport and primary ray generation
    geometry: Sphere primitive and ray-sphere intersection
    scene: Scene container, nearest-hit resolution and the demo scene
    preview: Image writers
"""

__version__ = "0.1.0"
