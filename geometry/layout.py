"""
Trajectory layout — span, surface size and pixel mapping.

Every function here is pure: the same sequence and ``GridConfig`` always
produce the same span, size and points, with no drawing surface involved.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional

from geometry.grid import GridConfig, decode_symbol

# Shift normalisation: position i moves right by (i / SHIFT_DIVISOR) * shift
SHIFT_DIVISOR = 4
# Floor for the horizontal unit span when the extent collapses to a point
MIN_SYMBOL_SPAN = 1e-6


@dataclass(frozen=True)
class Span:
    """Horizontal extent of a trajectory in grid units."""
    min: float
    max: float

    @property
    def width(self) -> float:
        return self.max - self.min


DEFAULT_SPAN = Span(0.5, 0.5)


@dataclass(frozen=True)
class Size:
    """Logical surface size in pixels."""
    width: int
    height: int


@dataclass(frozen=True)
class Point:
    x: float
    y: float


def horizontal_position(index: int, col: int, shift: float) -> float:
    """Grid-unit x of the cell centre at 1-based ``index``, shift included."""
    return (col + 0.5) + (index / SHIFT_DIVISOR) * shift


def compute_span(sequence: Optional[Iterable[int]], config: GridConfig) -> Span:
    """Min/max horizontal position over the sequence; ``DEFAULT_SPAN`` if empty."""
    xs = [
        horizontal_position(i, decode_symbol(symbol, config.n)[1], config.shift)
        for i, symbol in enumerate(() if sequence is None else sequence, start=1)
    ]
    if not xs:
        return DEFAULT_SPAN
    return Span(min(xs), max(xs))


def compute_size(span: Span, config: GridConfig) -> Size:
    """
    Smallest integer width that fits the span plus padding and margins.

    The height is always ``config.fixed_height``. The vertical scale
    (``config.step``) is reused horizontally so grid cells stay square.
    """
    sym_span_x = max(MIN_SYMBOL_SPAN, span.width + 2 * config.pad)
    width = math.ceil(2 * config.pixel_margin + config.step * sym_span_x)
    return Size(width=width, height=config.fixed_height)


def map_to_pixel(index: int, symbol: int, span: Span, config: GridConfig) -> Point:
    """Pixel coordinate of ``symbol`` at 1-based position ``index``."""
    row, col = decode_symbol(symbol, config.n)
    step = config.step
    x_sym = horizontal_position(index, col, config.shift)
    x = config.pixel_margin + step * ((x_sym - span.min) + config.pad)
    y = config.pixel_margin + step * (config.pad + row + 0.5)
    return Point(x, y)


def map_sequence(
    sequence: Optional[Iterable[int]],
    span: Span,
    config: GridConfig,
) -> list[Point]:
    return [
        map_to_pixel(i, symbol, span, config)
        for i, symbol in enumerate(() if sequence is None else sequence, start=1)
    ]
