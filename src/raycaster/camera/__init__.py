"""Camera module for view and ray generation.

Components:
    pinhole: Pinhole (perspective) camera model and viewport

Camera responsibilities:
    - Hold the camera pose and output raster size
    - Transform (x, y) pixel coordinates to world-space rays
    - Reject degenerate orientations before rendering starts

Pixel coordinates are integers with (0, 0) at the top-left corner of the
image; rows run top to bottom and columns left to right.
"""

from .pinhole import (
    Camera,
    CameraFrame,
    Viewport,
    camera_frame,
    frame_ray,
    ray_for_pixel,
)

__all__ = [
    "Camera",
    "CameraFrame",
    "Viewport",
    "camera_frame",
    "frame_ray",
    "ray_for_pixel",
]
