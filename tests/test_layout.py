"""Tests for span, size and pixel mapping."""

import math

import pytest

from geometry.grid import GridConfig
from geometry.layout import (
    DEFAULT_SPAN,
    Point,
    Size,
    Span,
    compute_size,
    compute_span,
    map_sequence,
    map_to_pixel,
)


class TestComputeSpan:
    """Tests for compute_span()."""

    def setup_method(self):
        self.config = GridConfig()

    def test_empty_sequence(self):
        """Empty or missing sequences fall back to a single-cell span."""
        assert compute_span([], self.config) == Span(0.5, 0.5)
        assert compute_span(None, self.config) == DEFAULT_SPAN

    def test_single_symbol(self):
        """A lone symbol still gets the first position's shift."""
        assert compute_span([1], self.config) == Span(0.75, 0.75)

    def test_shift_accumulates(self):
        """Repeating a symbol moves it right by a quarter shift per step."""
        assert compute_span([1, 1], self.config) == Span(0.75, 1.0)

    def test_columns_and_shift(self):
        """Columns 0..3 combine with shifts 0.25..1.0."""
        assert compute_span([1, 6, 11, 16], self.config) == Span(0.75, 4.5)

    def test_shift_scale(self):
        """The shift setting scales the per-position offset."""
        config = self.config.merged(shift=2.0)
        assert compute_span([1, 1], config) == Span(1.0, 1.5)

    def test_negative_shift(self):
        """A negative shift walks the trajectory left."""
        config = self.config.merged(shift=-1.0)
        span = compute_span([4, 4, 4, 4], config)
        assert span == Span(2.5, 3.25)

    def test_zero_symbol_extends_left(self):
        """Symbol 0 decodes to column -1 and widens the span leftward."""
        assert compute_span([0, 1], self.config) == Span(-0.25, 1.0)

    def test_accepts_generators(self):
        """One-shot iterables are consumed like lists."""
        assert compute_span((s for s in [1, 1]), self.config) == Span(0.75, 1.0)


class TestComputeSize:
    """Tests for compute_size()."""

    def setup_method(self):
        self.config = GridConfig()

    def test_single_point(self):
        """Zero extent plus padding on both sides: 48 + 26 * 4."""
        assert compute_size(Span(0.75, 0.75), self.config) == Size(152, 256)

    def test_empty_matches_single_point(self):
        """An empty sequence sizes like a single symbol."""
        empty = compute_size(compute_span([], self.config), self.config)
        single = compute_size(compute_span([1], self.config), self.config)
        assert empty == single == Size(152, 256)

    def test_width_rounds_up(self):
        """48 + 26 * (0.25 + 4) = 158.5 rounds up to 159."""
        assert compute_size(Span(0.75, 1.0), self.config).width == 159

    def test_zero_symbol_width(self):
        """48 + 26 * (1.25 + 4) = 184.5 rounds up to 185."""
        span = compute_span([0, 1], self.config)
        assert compute_size(span, self.config) == Size(185, 256)

    def test_height_is_fixed(self):
        """Height never depends on the sequence."""
        for seq in ([], [1], [1, 16, 3, 9, 12] * 10):
            span = compute_span(seq, self.config)
            assert compute_size(span, self.config).height == 256

        tall = self.config.merged(fixed_height=400)
        assert compute_size(Span(0.0, 10.0), tall).height == 400

    def test_zero_padding_collapsed_span(self):
        """A collapsed span with no padding uses the epsilon floor."""
        config = self.config.merged(pad=0)
        size = compute_size(Span(1.0, 1.0), config)
        assert size.width == math.ceil(48 + config.step * 1e-6)

    def test_width_grows_with_padding(self):
        """For a span narrower than N, more padding never narrows the image."""
        seq = [1, 6, 11, 16]
        widths = []
        for pad in (0, 0.5, 1, 2, 3, 5):
            config = self.config.merged(pad=pad)
            widths.append(compute_size(compute_span(seq, config), config).width)
        assert widths == sorted(widths)


class TestMapToPixel:
    """Tests for map_to_pixel() and map_sequence()."""

    def setup_method(self):
        self.config = GridConfig()

    def test_single_point(self):
        """The leftmost point sits one padding width inside the margin."""
        span = Span(0.75, 0.75)
        assert map_to_pixel(1, 1, span, self.config) == Point(76.0, 89.0)

    def test_row_sets_y(self):
        """Row 3 lands 3 steps below row 0."""
        span = Span(0.75, 4.0)
        point = map_to_pixel(2, 16, span, self.config)
        assert point == Point(160.5, 167.0)

    def test_pure(self):
        """Repeated calls with the same inputs give the same point."""
        span = Span(0.75, 4.5)
        first = map_to_pixel(3, 11, span, self.config)
        for _ in range(5):
            assert map_to_pixel(3, 11, span, self.config) == first

    def test_map_sequence(self):
        """Positions are numbered from 1."""
        span = compute_span([1, 1], self.config)
        assert map_sequence([1, 1], span, self.config) == [
            Point(76.0, 89.0),
            Point(82.5, 89.0),
        ]

    def test_map_empty(self):
        """Nothing to map yields no points."""
        assert map_sequence([], DEFAULT_SPAN, self.config) == []
        assert map_sequence(None, DEFAULT_SPAN, self.config) == []

    @pytest.mark.parametrize("seq", [[1], [1, 16], [3, 7, 2, 14, 9, 16, 1]])
    def test_points_inside_surface(self, seq):
        """In-range symbols always land inside the margins."""
        span = compute_span(seq, self.config)
        size = compute_size(span, self.config)
        for point in map_sequence(seq, span, self.config):
            assert self.config.pixel_margin <= point.x <= size.width - self.config.pixel_margin
            assert self.config.pixel_margin <= point.y <= size.height - self.config.pixel_margin
