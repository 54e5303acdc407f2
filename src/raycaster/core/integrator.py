"""Parallel frame rendering with Taichi.

This module renders a whole frame in a single Taichi kernel. The outer
pixel loop is parallelised by Taichi; the per-pixel sphere scan runs
serially in scene order, so nearest-hit selection and tie-breaking match
the scalar path in raycaster.scene.resolver exactly.

Scene data is packed into NumPy arrays and handed to the kernel as
ndarray arguments. Nothing is kept in module-level fields, so any number
of scenes and cameras can be rendered from the same process.

All arithmetic is float64. Call init_taichi() (or ti.init with
default_fp=ti.f64) once per process before rendering.

Example:
    >>> init_taichi()
    >>> scene, camera, viewport = create_default_scene()
    >>> image = render_image(scene, camera, viewport)
    >>> image.shape
    (600, 800, 3)
"""

from typing import TYPE_CHECKING, Any

import numpy as np
import numpy.typing as npt
import taichi as ti
import taichi.math as tm

from raycaster.camera.pinhole import Camera, Viewport, camera_frame
from raycaster.geometry.sphere import dvec3, hit_sphere_distance

if TYPE_CHECKING:
    from raycaster.scene.resolver import Scene

ivec3 = ti.types.vector(3, ti.i32)

_initialized = False


def init_taichi(arch: Any = None) -> None:
    """Initialize Taichi for double-precision rendering.

    Safe to call more than once; only the first call initializes.

    Args:
        arch: Taichi backend (default ti.cpu). Float64 support on GPU
            backends depends on the device.
    """
    global _initialized
    if _initialized:
        return
    ti.init(
        arch=ti.cpu if arch is None else arch,
        default_fp=ti.f64,
        fast_math=False,
    )
    _initialized = True


def pack_scene(
    scene: "Scene",
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64], npt.NDArray[np.int32]]:
    """Pack scene spheres into arrays for the render kernel.

    Arrays always hold at least one row so empty scenes still produce
    valid kernel arguments; the real count is passed separately.

    Args:
        scene: The scene to pack.

    Returns:
        A tuple (centers, radii, colors) of shapes (N, 3), (N,), (N, 3).
    """
    count = max(len(scene.spheres), 1)
    centers = np.zeros((count, 3), dtype=np.float64)
    radii = np.zeros(count, dtype=np.float64)
    colors = np.zeros((count, 3), dtype=np.int32)
    for i, sphere in enumerate(scene.spheres):
        centers[i] = sphere.center.to_tuple()
        radii[i] = sphere.radius
        colors[i] = sphere.color.to_tuple()
    return centers, radii, colors


@ti.kernel
def _render_kernel(
    image: ti.types.ndarray(dtype=ti.i32, ndim=3),
    centers: ti.types.ndarray(dtype=ti.f64, ndim=2),
    radii: ti.types.ndarray(dtype=ti.f64, ndim=1),
    colors: ti.types.ndarray(dtype=ti.i32, ndim=2),
    num_spheres: ti.i32,
    origin: dvec3,
    forward: dvec3,
    right: dvec3,
    up: dvec3,
    x_factor: ti.f64,
    y_factor: ti.f64,
    background: ivec3,
):
    """Cast one ray per pixel and write the nearest hit color."""
    height = image.shape[0]
    width = image.shape[1]
    for y, x in ti.ndrange(height, width):
        x_norm = ti.cast(x, ti.f64) / ti.cast(width, ti.f64) - 0.5
        y_norm = ti.cast(height - y - 1, ti.f64) / ti.cast(height, ti.f64) - 0.5
        direction = tm.normalize(
            forward + right * (x_norm * x_factor) + up * (y_norm * y_factor)
        )

        best_distance = tm.inf
        r = background[0]
        g = background[1]
        b = background[2]
        for i in range(num_spheres):
            center = dvec3(centers[i, 0], centers[i, 1], centers[i, 2])
            distance = hit_sphere_distance(origin, direction, center, radii[i])
            if distance > 0.0 and distance < best_distance:
                best_distance = distance
                r = colors[i, 0]
                g = colors[i, 1]
                b = colors[i, 2]

        image[y, x, 0] = r
        image[y, x, 1] = g
        image[y, x, 2] = b


def render_image(scene: "Scene", camera: Camera, viewport: Viewport) -> npt.NDArray[np.uint8]:
    """Render a full frame in parallel.

    Args:
        scene: The spheres and background to render.
        camera: The camera to cast from.
        viewport: Output raster dimensions.

    Returns:
        Image array of shape (height, width, 3) with dtype uint8, row 0 at
        the top.
    """
    frame = camera_frame(camera, viewport)
    centers, radii, colors = pack_scene(scene)
    image = np.zeros((viewport.height, viewport.width, 3), dtype=np.int32)

    _render_kernel(
        image,
        centers,
        radii,
        colors,
        len(scene.spheres),
        dvec3(*frame.origin),
        dvec3(*frame.forward),
        dvec3(*frame.right),
        dvec3(*frame.up),
        frame.x_factor,
        frame.y_factor,
        ivec3(*scene.background),
    )
    ti.sync()

    return image.astype(np.uint8)
