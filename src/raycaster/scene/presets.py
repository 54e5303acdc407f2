"""Built-in demo scene.

Two overlapping spheres in front of the camera, sitting on a very large
sphere that stands in for the ground plane, against a dark blue background.

Scene layout (camera at the origin looking along +Y, Z up):
    - Green sphere at (-1, 10, 0), radius 2
    - Red sphere at (1.4, 10, 0), radius 2
    - Ground sphere at (0, 1e5, -1e6), radius 1e6 - 1, light grey-blue

Example:
    >>> scene, camera, viewport = create_default_scene()
    >>> len(scene)
    3
"""

from __future__ import annotations

from raycaster.camera.pinhole import Camera, Viewport
from raycaster.core.color import Color
from raycaster.geometry.sphere import Sphere
from raycaster.scene.resolver import DEFAULT_BACKGROUND, Scene

GREEN = Color(0, 200, 0)
RED = Color(200, 0, 0)
GROUND = Color(200, 200, 222)

GROUND_RADIUS = 1e6 - 1


def create_default_scene() -> tuple[Scene, Camera, Viewport]:
    """Create the demo scene with its camera and viewport.

    Returns:
        A tuple of (scene, camera, viewport). The camera sits at the origin
        looking along +Y with +Z up and a 35 degree field of view; the
        viewport is 800x600.
    """
    scene = Scene(
        spheres=(
            Sphere(center=(-1.0, 10.0, 0.0), radius=2.0, color=GREEN),
            Sphere(center=(1.4, 10.0, 0.0), radius=2.0, color=RED),
            Sphere(center=(0.0, 1e5, -1e6), radius=GROUND_RADIUS, color=GROUND),
        ),
        background=DEFAULT_BACKGROUND,
    )
    camera = Camera(
        position=(0.0, 0.0, 0.0),
        forward=(0.0, 1.0, 0.0),
        up=(0.0, 0.0, 1.0),
        field_of_view_degrees=35.0,
    )
    return scene, camera, Viewport(width=800, height=600)
