"""Unit tests for the pinhole camera module.

Tests cover:
- Ray generation for center and corner pixels
- Unit-length ray directions across the whole viewport
- Image orientation (row 0 at the top, column 0 at the left)
- Degenerate camera and viewport rejection
"""

import math

import pytest


class TestViewport:
    """Tests for Viewport validation."""

    def test_defaults(self):
        """Test the default 800x600 raster."""
        from raycaster.camera.pinhole import Viewport

        viewport = Viewport()
        assert (viewport.width, viewport.height) == (800, 600)
        assert abs(viewport.aspect_ratio - 4.0 / 3.0) < 1e-12

    @pytest.mark.parametrize("width, height", [(0, 10), (10, 0), (-5, 10), (10.5, 10)])
    def test_rejects_invalid_dimensions(self, width, height):
        """Test non-positive or non-integer dimensions are rejected."""
        from raycaster.camera.pinhole import Viewport
        from raycaster.errors import ConfigurationError, InvalidViewportError

        with pytest.raises(InvalidViewportError):
            Viewport(width=width, height=height)
        with pytest.raises(ConfigurationError):
            Viewport(width=width, height=height)


class TestCameraValidation:
    """Tests for degenerate camera detection."""

    def test_default_camera_is_valid(self):
        """Test the default camera looks along +Y with +Z up."""
        from raycaster.camera.pinhole import Camera
        from raycaster.core.vector import Vector3

        camera = Camera()
        assert camera.position == Vector3(0.0, 0.0, 0.0)
        assert camera.forward == Vector3(0.0, 1.0, 0.0)
        assert camera.up == Vector3(0.0, 0.0, 1.0)
        assert camera.field_of_view_degrees == 35.0

    def test_parallel_forward_and_up_rejected(self):
        """Test forward parallel to up fails before rendering."""
        from raycaster.camera.pinhole import Camera
        from raycaster.errors import DegenerateCameraError

        with pytest.raises(DegenerateCameraError, match="parallel"):
            Camera(forward=(0.0, 0.0, 1.0), up=(0.0, 0.0, 2.0))
        with pytest.raises(DegenerateCameraError, match="parallel"):
            Camera(forward=(0.0, 1.0, 0.0), up=(0.0, -1.0, 0.0))

    def test_zero_length_axes_rejected(self):
        """Test zero-length forward or up is rejected."""
        from raycaster.camera.pinhole import Camera
        from raycaster.errors import DegenerateCameraError

        with pytest.raises(DegenerateCameraError, match="non-zero"):
            Camera(forward=(0.0, 0.0, 0.0))
        with pytest.raises(DegenerateCameraError, match="non-zero"):
            Camera(up=(0.0, 0.0, 0.0))

    def test_non_finite_fov_rejected(self):
        """Test NaN or infinite field of view is rejected."""
        from raycaster.camera.pinhole import Camera
        from raycaster.errors import DegenerateCameraError

        with pytest.raises(DegenerateCameraError):
            Camera(field_of_view_degrees=math.nan)
        with pytest.raises(DegenerateCameraError):
            Camera(field_of_view_degrees=math.inf)

    def test_degenerate_camera_is_a_value_error(self):
        """Test configuration errors can be caught as ValueError."""
        from raycaster.camera.pinhole import Camera

        with pytest.raises(ValueError):
            Camera(forward=(1.0, 0.0, 0.0), up=(1.0, 0.0, 0.0))


class TestRayGeneration:
    """Tests for per-pixel ray generation."""

    @pytest.mark.parametrize("fov", [10.0, 35.0, 60.0, 89.0])
    def test_center_pixel_looks_forward(self, fov):
        """Test the center pixel ray equals the normalized forward vector."""
        from raycaster.camera.pinhole import Camera, Viewport, ray_for_pixel
        from raycaster.core.vector import normalize

        camera = Camera(
            position=(1.0, -2.0, 0.5),
            forward=(1.0, 2.0, 0.5),
            up=(0.0, 0.0, 1.0),
            field_of_view_degrees=fov,
        )
        viewport = Viewport(width=800, height=600)

        ray = ray_for_pixel(400, 299, camera, viewport)
        expected = normalize(camera.forward)

        assert ray.origin == camera.position
        for got, want in zip(ray.direction, expected):
            assert abs(got - want) < 1e-12

    @pytest.mark.parametrize(
        "forward, up, fov",
        [
            ((0.0, 1.0, 0.0), (0.0, 0.0, 1.0), 35.0),
            ((0.0, 5.0, 0.0), (0.0, 0.0, 0.2), 35.0),
            ((1.0, 1.0, 0.3), (0.0, 0.2, 1.0), 70.0),
            ((-3.0, 0.5, 2.0), (1.0, 1.0, 1.0), 15.0),
        ],
    )
    def test_all_directions_unit_length(self, forward, up, fov):
        """Test every in-bounds pixel gets a unit-length direction."""
        from raycaster.camera.pinhole import Camera, Viewport, camera_frame, frame_ray
        from raycaster.core.vector import length

        camera = Camera(forward=forward, up=up, field_of_view_degrees=fov)
        viewport = Viewport(width=32, height=24)
        frame = camera_frame(camera, viewport)

        for y in range(viewport.height):
            for x in range(viewport.width):
                direction = frame_ray(frame, x, y).direction
                assert abs(length(direction) - 1.0) < 1e-9, f"pixel ({x}, {y})"

    def test_row_zero_is_top(self):
        """Test increasing y moves the ray down (toward -up)."""
        from raycaster.camera.pinhole import Camera, Viewport, ray_for_pixel

        camera = Camera()
        viewport = Viewport(width=80, height=60)

        top = ray_for_pixel(40, 0, camera, viewport).direction
        bottom = ray_for_pixel(40, 59, camera, viewport).direction

        assert top.z > 0.0
        assert bottom.z < 0.0

    def test_column_zero_is_left(self):
        """Test increasing x moves the ray toward right = forward x up."""
        from raycaster.camera.pinhole import Camera, Viewport, ray_for_pixel

        camera = Camera()
        viewport = Viewport(width=80, height=60)

        left = ray_for_pixel(0, 30, camera, viewport).direction
        right = ray_for_pixel(79, 30, camera, viewport).direction

        # forward (0,1,0) x up (0,0,1) = +x
        assert left.x < 0.0
        assert right.x > 0.0

    def test_top_left_corner_offsets(self):
        """Test the corner ray matches the image-plane extents."""
        from raycaster.camera.pinhole import Camera, Viewport, ray_for_pixel
        from raycaster.core.vector import Vector3, normalize

        camera = Camera(field_of_view_degrees=35.0)
        viewport = Viewport(width=800, height=600)

        y_factor = math.tan(math.radians(35.0))
        x_factor = y_factor * 800 / 600
        expected = normalize(Vector3(-0.5 * x_factor, 1.0, (599 / 600 - 0.5) * y_factor))

        direction = ray_for_pixel(0, 0, camera, viewport).direction
        for got, want in zip(direction, expected):
            assert abs(got - want) < 1e-12

    @pytest.mark.parametrize("y, y_norm", [(0, 0.5 - 1 / 60), (29, 0.0), (59, -0.5)])
    def test_vertical_offsets_stay_in_half_open_range(self, y, y_norm):
        """Test rows map to (height - y - 1) / height - 0.5, inside [-0.5, 0.5)."""
        from raycaster.camera.pinhole import Camera, Viewport, ray_for_pixel
        from raycaster.core.vector import Vector3, normalize

        camera = Camera(field_of_view_degrees=35.0)
        viewport = Viewport(width=80, height=60)
        y_factor = math.tan(math.radians(35.0))

        assert -0.5 <= y_norm < 0.5
        expected = normalize(Vector3(0.0, 1.0, y_norm * y_factor))

        direction = ray_for_pixel(40, y, camera, viewport).direction
        for got, want in zip(direction, expected):
            assert abs(got - want) < 1e-12

    def test_wider_fov_spreads_rays(self):
        """Test a wider field of view gives a wider corner angle."""
        from raycaster.camera.pinhole import Camera, Viewport, ray_for_pixel

        viewport = Viewport(width=100, height=100)
        narrow = ray_for_pixel(0, 0, Camera(field_of_view_degrees=20.0), viewport)
        wide = ray_for_pixel(0, 0, Camera(field_of_view_degrees=60.0), viewport)

        # Smaller y component means further from the forward axis
        assert wide.direction.y < narrow.direction.y

    def test_frame_matches_ray_for_pixel(self):
        """Test the precomputed frame gives the same rays."""
        from raycaster.camera.pinhole import Camera, Viewport, camera_frame, frame_ray, ray_for_pixel

        camera = Camera(forward=(0.2, 1.0, -0.1), up=(0.0, 0.1, 1.0), field_of_view_degrees=40.0)
        viewport = Viewport(width=20, height=10)
        frame = camera_frame(camera, viewport)

        for x, y in [(0, 0), (19, 9), (7, 3)]:
            assert frame_ray(frame, x, y) == ray_for_pixel(x, y, camera, viewport)
