"""Pytest configuration for raycaster tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls, which would
    reset the runtime between tests.
    """
    from raycaster.core.integrator import init_taichi

    init_taichi()
    yield


@pytest.fixture
def single_sphere_setup():
    """Scene, camera and viewport with one red sphere straight ahead."""
    from raycaster.camera.pinhole import Camera, Viewport
    from raycaster.geometry.sphere import Sphere
    from raycaster.scene.resolver import Scene

    scene = Scene(
        spheres=(Sphere(center=(0.0, 10.0, 0.0), radius=2.0, color=(200, 0, 0)),),
        background=(0, 0, 128),
    )
    camera = Camera(
        position=(0.0, 0.0, 0.0),
        forward=(0.0, 1.0, 0.0),
        up=(0.0, 0.0, 1.0),
        field_of_view_degrees=35.0,
    )
    return scene, camera, Viewport(width=800, height=600)
