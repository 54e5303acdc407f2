"""Scene module for scene storage and nearest-hit queries.

Components:
    resolver: Scene container, nearest-hit search and color resolution
    presets: Built-in demo scene with camera and viewport

Scenes are immutable once built and are shared read-only by every pixel
of a render.
"""

from .presets import create_default_scene
from .resolver import (
    DEFAULT_BACKGROUND,
    Scene,
    SceneConfig,
    SceneHit,
    find_nearest,
    resolve,
)

__all__ = [
    "Scene",
    "SceneConfig",
    "SceneHit",
    "DEFAULT_BACKGROUND",
    "find_nearest",
    "resolve",
    "create_default_scene",
]
