"""Trajectory geometry — grid decoding, layout and curve smoothing."""

from geometry.grid import GridConfig, decode_symbol, check_symbols
from geometry.layout import (
    Point,
    Size,
    Span,
    compute_size,
    compute_span,
    map_sequence,
    map_to_pixel,
)
from geometry.smoothing import MoveTo, QuadTo, flatten_path, smooth_path

__all__ = [
    "GridConfig",
    "decode_symbol",
    "check_symbols",
    "Point",
    "Size",
    "Span",
    "compute_size",
    "compute_span",
    "map_sequence",
    "map_to_pixel",
    "MoveTo",
    "QuadTo",
    "flatten_path",
    "smooth_path",
]
