"""Tests for surface sizing and the curve painter."""

from unittest.mock import MagicMock, call

from geometry.grid import GridConfig
from geometry.layout import Point, Size
from renderer.adapter import apply_surface_size, resolve_device_pixel_ratio
from renderer.painter import paint
from surface.base import Surface


def _mock_surface() -> MagicMock:
    return MagicMock(spec=Surface)


class TestApplySurfaceSize:
    """Tests for apply_surface_size()."""

    def test_unit_scale(self):
        """At scale 1 logical and backing sizes agree."""
        surface = _mock_surface()
        apply_surface_size(surface, Size(152, 256), 1.0)
        assert surface.method_calls == [
            call.set_logical_size(152, 256),
            call.set_backing_size(152, 256),
            call.set_transform(1.0, 0, 0, 1.0, 0, 0),
        ]

    def test_fractional_scale_floors_backing_store(self):
        """Backing-store dimensions are floored."""
        surface = _mock_surface()
        apply_surface_size(surface, Size(159, 256), 1.5)
        surface.set_logical_size.assert_called_once_with(159, 256)
        surface.set_backing_size.assert_called_once_with(238, 384)
        surface.set_transform.assert_called_once_with(1.5, 0, 0, 1.5, 0, 0)


class TestResolveDevicePixelRatio:
    """Tests for resolve_device_pixel_ratio()."""

    def test_missing_signal(self):
        """No signal means scale 1."""
        assert resolve_device_pixel_ratio(None) == 1.0

    def test_signal_without_value(self):
        """A signal reporting nothing means scale 1."""
        assert resolve_device_pixel_ratio(lambda: None) == 1.0
        assert resolve_device_pixel_ratio(lambda: 0) == 1.0

    def test_clamped_to_one(self):
        """Scales below 1 are raised to 1."""
        assert resolve_device_pixel_ratio(lambda: 0.5) == 1.0

    def test_high_density(self):
        """High-density scales pass through."""
        assert resolve_device_pixel_ratio(lambda: 2.0) == 2.0


class TestPaint:
    """Tests for paint()."""

    def setup_method(self):
        self.config = GridConfig()
        self.size = Size(159, 256)

    def test_background_only_when_empty(self):
        """No points: clear, then fill with the backdrop."""
        surface = _mock_surface()
        paint(surface, [], self.size, self.config, background="#0b0f1a")
        assert surface.method_calls == [
            call.clear_rect(0, 0, 159, 256),
            call.set_fill_style("#0b0f1a"),
            call.fill_rect(0, 0, 159, 256),
        ]

    def test_single_point_draws_no_path(self):
        """One point is not enough for a path."""
        surface = _mock_surface()
        paint(surface, [Point(76, 89)], self.size, self.config)
        surface.begin_path.assert_not_called()
        surface.stroke.assert_not_called()
        surface.fill_rect.assert_called_once()

    def test_default_background(self):
        """The backdrop colour comes from settings."""
        surface = _mock_surface()
        paint(surface, [], self.size, self.config)
        surface.set_fill_style.assert_called_once_with("#0b0f1a")

    def test_two_points(self):
        """Two points stroke one quadratic segment inside save/restore."""
        surface = _mock_surface()
        a, b = Point(76.0, 89.0), Point(82.5, 89.0)
        paint(surface, [a, b], self.size, self.config)
        assert surface.method_calls[3:] == [
            call.save(),
            call.set_stroke_style("#00e5ff", 2, join="round", cap="round"),
            call.begin_path(),
            call.move_to(76.0, 89.0),
            call.quadratic_curve_to(76.0, 89.0, 82.5, 89.0),
            call.stroke(),
            call.restore(),
        ]

    def test_curve_through_midpoints(self):
        """Stroke style follows the config and curves pass through midpoints."""
        surface = _mock_surface()
        pts = [Point(0, 0), Point(10, 10), Point(20, 0), Point(30, 10)]
        paint(surface, pts, self.size, self.config.merged(line_width=4, line_color="#ffffff"))
        surface.set_stroke_style.assert_called_once_with("#ffffff", 4, join="round", cap="round")
        assert surface.quadratic_curve_to.call_args_list == [
            call(10, 10, 15, 5),
            call(20, 0, 30, 10),
        ]
