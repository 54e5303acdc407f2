"""Pinhole camera model for perspective projection ray generation.

This module implements a pinhole camera that generates one primary ray per
pixel. The camera is described by:
- Position in world space
- Forward (view) direction
- Up direction
- Field of view in degrees

The image plane sits at the tip of the forward vector. Its horizontal axis
is right = forward x up, its vertical axis is the up vector itself. The
vertical half-extent of the plane is tan(fov) and the horizontal
half-extent follows from the viewport aspect ratio.

Pixel coordinates are normalized before projection:
- x in [0, width) maps to x / width - 0.5, left to right
- y in [0, height) maps to (height - y - 1) / height - 0.5, so row 0 is the
  top of the image and pixel (width / 2, height / 2 - 1) looks along forward

Example:
    >>> camera = Camera(
    ...     position=(0.0, 0.0, 0.0),
    ...     forward=(0.0, 1.0, 0.0),
    ...     up=(0.0, 0.0, 1.0),
    ...     field_of_view_degrees=35.0,
    ... )
    >>> viewport = Viewport(width=800, height=600)
    >>> ray = ray_for_pixel(400, 299, camera, viewport)  # Looks along forward
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from raycaster.core.vector import Ray, Vector3, cross, length, normalize
from raycaster.errors import DegenerateCameraError, InvalidViewportError

# Relative tolerance for rejecting forward/up pairs that are (nearly) parallel
PARALLEL_TOLERANCE = 1e-12

# =============================================================================
# Camera Data Structures
# =============================================================================


@dataclass(frozen=True)
class Viewport:
    """Output raster dimensions.

    Attributes:
        width: Image width in pixels (positive).
        height: Image height in pixels (positive).
    """

    width: int = 800
    height: int = 600

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidViewportError(
                    f"Viewport {name} must be a positive integer, got {value!r}"
                )

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height


@dataclass(frozen=True)
class Camera:
    """Configuration for a pinhole (perspective) camera.

    Vectors may be given as Vector3 or as any 3-element sequence; they are
    stored as Vector3. Forward and up are used as given (not normalized).

    Attributes:
        position: Camera position in world space.
        forward: View direction.
        up: Up direction. Must not be parallel to forward.
        field_of_view_degrees: Vertical field of view in degrees.

    Raises:
        DegenerateCameraError: If forward or up is zero-length, if they are
            parallel, or if the field of view is not finite.
    """

    position: Vector3 | Sequence[float] = Vector3(0.0, 0.0, 0.0)
    forward: Vector3 | Sequence[float] = Vector3(0.0, 1.0, 0.0)
    up: Vector3 | Sequence[float] = Vector3(0.0, 0.0, 1.0)
    field_of_view_degrees: float = 35.0

    def __post_init__(self) -> None:
        for name in ("position", "forward", "up"):
            object.__setattr__(self, name, Vector3.of(getattr(self, name)))

        if not math.isfinite(self.field_of_view_degrees):
            raise DegenerateCameraError(
                f"Field of view must be finite, got {self.field_of_view_degrees}"
            )

        forward_length = length(self.forward)
        up_length = length(self.up)
        if forward_length == 0.0 or up_length == 0.0:
            raise DegenerateCameraError("Camera forward and up must be non-zero vectors")

        # |forward x up| = |forward| |up| sin(angle)
        side = length(cross(self.forward, self.up))
        if side <= PARALLEL_TOLERANCE * forward_length * up_length:
            raise DegenerateCameraError(
                f"Camera forward {self.forward.to_tuple()} is parallel to "
                f"up {self.up.to_tuple()}"
            )


@dataclass(frozen=True)
class CameraFrame:
    """Per-render camera constants shared by every pixel.

    Attributes:
        origin: Ray origin (the camera position).
        forward: Camera forward vector.
        right: Horizontal image axis, forward x up.
        up: Vertical image axis.
        x_factor: Horizontal half-extent scale of the image plane.
        y_factor: Vertical half-extent scale of the image plane.
        width: Viewport width in pixels.
        height: Viewport height in pixels.
    """

    origin: Vector3
    forward: Vector3
    right: Vector3
    up: Vector3
    x_factor: float
    y_factor: float
    width: int
    height: int


# =============================================================================
# Ray Generation
# =============================================================================


def camera_frame(camera: Camera, viewport: Viewport) -> CameraFrame:
    """Precompute the image-plane basis for a camera and viewport.

    Args:
        camera: Camera configuration with position, orientation, and FOV.
        viewport: Output raster dimensions.

    Returns:
        A CameraFrame holding everything ray generation needs per pixel.
    """
    y_factor = math.tan(camera.field_of_view_degrees * math.pi / 180.0)
    return CameraFrame(
        origin=camera.position,
        forward=camera.forward,
        right=cross(camera.forward, camera.up),
        up=camera.up,
        x_factor=y_factor * viewport.aspect_ratio,
        y_factor=y_factor,
        width=viewport.width,
        height=viewport.height,
    )


def frame_ray(frame: CameraFrame, x: int, y: int) -> Ray:
    """Generate the ray through pixel (x, y) of a precomputed frame.

    Args:
        frame: Camera constants from camera_frame().
        x: Pixel column, 0 = left.
        y: Pixel row, 0 = top.

    Returns:
        A Ray from the camera position with a unit-length direction.
    """
    x_norm = x / frame.width - 0.5
    y_norm = (frame.height - y - 1) / frame.height - 0.5
    direction = (
        frame.forward
        + frame.right * (x_norm * frame.x_factor)
        + frame.up * (y_norm * frame.y_factor)
    )
    return Ray(origin=frame.origin, direction=normalize(direction))


def ray_for_pixel(x: int, y: int, camera: Camera, viewport: Viewport) -> Ray:
    """Generate the primary ray through pixel (x, y).

    No bounds checking is done; callers iterate inside the viewport.

    Args:
        x: Pixel column, 0 = left edge.
        y: Pixel row, 0 = top edge.
        camera: The camera to cast from.
        viewport: The output raster dimensions.

    Returns:
        A Ray with origin at the camera position and a unit-length direction.
    """
    return frame_ray(camera_frame(camera, viewport), x, y)
