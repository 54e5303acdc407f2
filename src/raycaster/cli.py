"""Render the demo sphere scene to an image file.

Usage:
    raycaster [OUTPUT]
    python -m raycaster [OUTPUT]

Arguments:
    OUTPUT    Output file path (default: image.ppm). A ".png" suffix writes
              a PNG; anything else writes a plain-text P3 pixel map.

Example:
    raycaster spheres.ppm
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

DEFAULT_FILENAME = "image.ppm"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="raycaster",
        description="Render the demo sphere scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "output",
        nargs="?",
        default=DEFAULT_FILENAME,
        help=f"Output file path (default: {DEFAULT_FILENAME})",
    )
    return parser.parse_args(argv)


def render_scene_to_file(output_path: str | Path) -> Path:
    """Render the demo scene and write it to output_path.

    P3 output is streamed row by row; PNG output is encoded from the
    finished frame.

    Args:
        output_path: Destination file path.

    Returns:
        Path to the written image file.

    Raises:
        OSError: If the destination cannot be written.
    """
    # Lazy imports so Taichi is only loaded when rendering
    from raycaster.core.frame import render_frame, render_to_sink
    from raycaster.core.integrator import init_taichi
    from raycaster.preview.export import PPMWriter, is_png_path, save_png
    from raycaster.scene.presets import create_default_scene

    init_taichi()
    scene, camera, viewport = create_default_scene()

    output_file = Path(output_path)
    if is_png_path(output_file):
        save_png(render_frame(scene, camera, viewport, backend="taichi"), output_file)
    else:
        with PPMWriter(output_file, viewport.width, viewport.height) as sink:
            render_to_sink(scene, camera, viewport, sink, backend="taichi")
    return output_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    print(f"rendering into '{args.output}'")
    start_time = time.time()

    try:
        output_file = render_scene_to_file(args.output)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Saved to: {output_file.absolute()}")
    print(f"Total time: {time.time() - start_time:.2f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
