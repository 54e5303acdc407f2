"""Frame driver: iterate every pixel and stream rows to an output sink.

Pixels are produced in row-major order: top row first, left to right
within a row. This order is what ends up in the output file, for both
backends:

- "python": the scalar reference path. Each pixel builds a Ray with
  frame_ray() and resolves it with raycaster.scene.resolver.resolve().
- "taichi": every pixel is computed in parallel by the kernel in
  raycaster.core.integrator, then the finished buffer is streamed row by
  row. Parallelism never changes the output.

Example:
    >>> scene, camera, viewport = create_default_scene()
    >>> with PPMWriter("image.ppm", viewport.width, viewport.height) as sink:
    ...     render_to_sink(scene, camera, viewport, sink, backend="python")
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, Literal, Protocol, Union

import numpy as np
import numpy.typing as npt

from raycaster.camera.pinhole import Camera, Viewport, camera_frame, frame_ray
from raycaster.core.color import Color
from raycaster.scene.resolver import resolve

if TYPE_CHECKING:
    from raycaster.scene.resolver import Scene

Backend = Literal["python", "taichi"]

# A row is an ordered sequence of (r, g, b) triples
Row = Union[Sequence[Color], npt.NDArray[np.uint8]]


class RowSink(Protocol):
    """Anything that accepts completed image rows in order."""

    def write_row(self, row: Row) -> None: ...


def _check_backend(backend: str) -> None:
    if backend not in ("python", "taichi"):
        raise ValueError(f"Unknown backend: {backend!r} (expected 'python' or 'taichi')")


def iter_rows(
    scene: Scene,
    camera: Camera,
    viewport: Viewport,
    *,
    backend: Backend = "python",
) -> Iterator[Row]:
    """Yield the rendered image one row at a time, top row first.

    Args:
        scene: The spheres and background to render.
        camera: The camera to cast from.
        viewport: Output raster dimensions.
        backend: "python" yields lists of Color computed on demand;
            "taichi" renders the frame up front and yields uint8 arrays of
            shape (width, 3).

    Yields:
        One row per image line, pixels ordered left to right.

    Raises:
        ValueError: If backend is not recognised.
    """
    _check_backend(backend)

    if backend == "taichi":
        from raycaster.core.integrator import render_image

        yield from render_image(scene, camera, viewport)
        return

    frame = camera_frame(camera, viewport)
    spheres = scene.spheres
    background = scene.background
    for y in range(viewport.height):
        yield [resolve(frame_ray(frame, x, y), spheres, background) for x in range(viewport.width)]


def render_to_sink(
    scene: Scene,
    camera: Camera,
    viewport: Viewport,
    sink: RowSink,
    *,
    backend: Backend = "python",
) -> None:
    """Render a frame and hand each completed row to sink, in order.

    Args:
        scene: The spheres and background to render.
        camera: The camera to cast from.
        viewport: Output raster dimensions.
        sink: Receives one write_row() call per image row.
        backend: "python" or "taichi".
    """
    for row in iter_rows(scene, camera, viewport, backend=backend):
        sink.write_row(row)


def render_frame(
    scene: Scene,
    camera: Camera,
    viewport: Viewport,
    *,
    backend: Backend = "taichi",
) -> npt.NDArray[np.uint8]:
    """Render a frame into an image array.

    Args:
        scene: The spheres and background to render.
        camera: The camera to cast from.
        viewport: Output raster dimensions.
        backend: "taichi" (default) or "python".

    Returns:
        Image array of shape (height, width, 3) with dtype uint8, row 0 at
        the top.
    """
    _check_backend(backend)

    if backend == "taichi":
        from raycaster.core.integrator import render_image

        return render_image(scene, camera, viewport)

    image = np.zeros((viewport.height, viewport.width, 3), dtype=np.uint8)
    for y, row in enumerate(iter_rows(scene, camera, viewport, backend="python")):
        image[y] = [color.to_tuple() for color in row]
    return image
