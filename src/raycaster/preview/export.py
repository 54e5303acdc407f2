"""Image export utilities for rendered frames.

Supported formats:
    - PPM "P3" (plain-text pixel map, written row by row)
    - PNG (8-bit RGB via Pillow)

Every writer stages its output in a temporary file next to the
destination and moves it into place only once the whole image has been
written. A failed write leaves no partial file behind; the error is
re-raised to the caller.

P3 layout:

    P3
    # <comment>
    <width> <height>
    255
    r g b r g b ...      <- one line per image row, top row first

Example:
    >>> with PPMWriter("image.ppm", 800, 600) as sink:
    ...     render_to_sink(scene, camera, viewport, sink)
    >>> save_png(image, "image.png")
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from types import TracebackType
from typing import IO

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from raycaster.core.color import MAX_CHANNEL_VALUE
from raycaster.core.frame import Row


def _staging_file(path: Path, mode: str) -> IO:
    """Open a temporary file in the destination directory."""
    return tempfile.NamedTemporaryFile(
        mode,
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
        delete=False,
    )


def _file_mode() -> int:
    """Return the mode open() would give a new file under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _publish(staging_path: str, path: Path) -> None:
    """Move a finished staging file to its final path.

    The staging file is deleted if it cannot be moved into place.
    """
    try:
        # NamedTemporaryFile creates files as 0o600
        os.chmod(staging_path, _file_mode())
        os.replace(staging_path, path)
    except BaseException:
        os.unlink(staging_path)
        raise


class PPMWriter:
    """Row sink writing a plain-text P3 pixel map.

    Use as a context manager. Rows must be written top to bottom; the file
    appears at its final path only when the context exits cleanly after
    exactly `height` rows.

    Attributes:
        path: Destination file path.
        width: Image width in pixels.
        height: Image height in pixels.
        comment: Text of the header comment line (defaults to the file name).
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        width: int,
        height: int,
        comment: str | None = None,
    ) -> None:
        self.path = Path(path)
        self.width = width
        self.height = height
        self.comment = str(self.path) if comment is None else comment
        self._file: IO | None = None
        self._rows_written = 0

    def __enter__(self) -> PPMWriter:
        self._file = _staging_file(self.path, "w")
        self._rows_written = 0
        try:
            self._file.write("P3\n")
            for line in self.comment.splitlines() or [""]:
                self._file.write(f"# {line}\n")
            self._file.write(f"{self.width} {self.height}\n")
            self._file.write(f"{MAX_CHANNEL_VALUE}\n")
        except BaseException:
            self._discard()
            raise
        return self

    def write_row(self, row: Row) -> None:
        """Append one image row of (r, g, b) triples.

        Raises:
            RuntimeError: If the writer is not open or all rows are written.
            ValueError: If the row length does not match the image width.
        """
        if self._file is None:
            raise RuntimeError("PPMWriter is not open. Use it as a context manager.")
        if self._rows_written >= self.height:
            raise RuntimeError(f"All {self.height} rows have already been written")
        if len(row) != self.width:
            raise ValueError(f"Row has {len(row)} pixels, expected {self.width}")

        self._file.write(" ".join(f"{int(r)} {int(g)} {int(b)}" for r, g, b in row))
        self._file.write("\n")
        self._rows_written += 1

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            self._discard()
            return
        if self._rows_written != self.height:
            self._discard()
            raise RuntimeError(
                f"Incomplete image: wrote {self._rows_written} of {self.height} rows"
            )

        staging, self._file = self._file, None
        try:
            # Flushes the last rows; a full disk fails here
            staging.close()
        except OSError:
            os.unlink(staging.name)
            raise
        _publish(staging.name, self.path)

    def _discard(self) -> None:
        """Close and delete the staging file."""
        if self._file is None:
            return
        staging_path = self._file.name
        self._file.close()
        self._file = None
        os.unlink(staging_path)


def save_ppm(
    image: npt.NDArray[np.uint8],
    filepath: str | os.PathLike[str],
    *,
    comment: str | None = None,
) -> None:
    """Save an image array as a P3 pixel map.

    Args:
        image: Image array of shape (H, W, 3), values in [0, 255].
        filepath: Output file path.
        comment: Header comment (defaults to the file path).

    Raises:
        ValueError: If the array is not (H, W, 3).
    """
    _check_image(image)
    height, width = image.shape[:2]
    with PPMWriter(filepath, width, height, comment=comment) as writer:
        for row in image:
            writer.write_row(row)


def save_png(image: npt.NDArray[np.uint8], filepath: str | os.PathLike[str]) -> None:
    """Save an image array as an 8-bit RGB PNG.

    Args:
        image: Image array of shape (H, W, 3), values in [0, 255].
        filepath: Output file path.

    Raises:
        ValueError: If the array is not (H, W, 3).
    """
    _check_image(image)
    path = Path(filepath)
    pil_image = PILImage.fromarray(np.ascontiguousarray(image, dtype=np.uint8))

    staging = _staging_file(path, "wb")
    try:
        with staging:
            pil_image.save(staging, format="PNG")
    except BaseException:
        os.unlink(staging.name)
        raise
    _publish(staging.name, path)


def is_png_path(filepath: str | os.PathLike[str]) -> bool:
    """Return True if filepath names a PNG file (".png" suffix, any case)."""
    return Path(filepath).suffix.lower() == ".png"


def save_image(
    image: npt.NDArray[np.uint8],
    filepath: str | os.PathLike[str],
    *,
    comment: str | None = None,
) -> None:
    """Save an image, choosing the format from the file suffix.

    ".png" files are written with Pillow; everything else as P3.
    """
    if is_png_path(filepath):
        save_png(image, filepath)
    else:
        save_ppm(image, filepath, comment=comment)


def _check_image(image: npt.NDArray[np.uint8]) -> None:
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected image of shape (H, W, 3), got {image.shape}")
