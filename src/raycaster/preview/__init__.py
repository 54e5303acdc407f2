"""Preview module for rendered output.

Components:
    export: P3 pixel-map and PNG writers

Writers stage output in a temporary file and only move it into place once
the image is complete, so a failed render never leaves a truncated file.

Example:
    >>> from raycaster.preview import PPMWriter, save_image
    >>> with PPMWriter("image.ppm", viewport.width, viewport.height) as sink:
    ...     render_to_sink(scene, camera, viewport, sink)
    >>> save_image(render_frame(scene, camera, viewport), "image.png")
"""

from raycaster.preview.export import (
    PPMWriter,
    is_png_path,
    save_image,
    save_png,
    save_ppm,
)

__all__ = [
    "PPMWriter",
    "save_ppm",
    "save_png",
    "save_image",
    "is_png_path",
]
