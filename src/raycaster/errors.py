"""Configuration errors raised while building a render.

Every error here is raised before rendering starts, when a camera,
viewport, color or sphere is constructed. Rendering itself never raises.
All of them derive from ValueError so callers that already catch
ValueError for bad input keep working.
"""


class ConfigurationError(ValueError):
    """Base class for invalid render configuration."""


class DegenerateCameraError(ConfigurationError):
    """Camera forward/up are zero-length or parallel, or the FOV is not finite."""


class DegenerateSphereError(ConfigurationError):
    """Sphere radius is not a finite positive number."""


class InvalidViewportError(ConfigurationError):
    """Viewport width or height is not a positive integer."""


class InvalidColorError(ConfigurationError):
    """Color channel outside [0, 255]."""
