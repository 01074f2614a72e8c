"""
Constellation grid configuration and symbol decoding.

A ``GridConfig`` is an immutable snapshot of everything the geometry
pipeline reads. Merging a partial update produces a new snapshot, so a
render always sees one consistent set of values.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, replace
from typing import Any, Mapping, Optional

from errors import SymbolRangeError

# Option names accepted for backwards compatibility with the canvas API
LEGACY_OPTION_NAMES: dict[str, str] = {
    "N": "n",
    "PAD": "pad",
    "lineWidth": "line_width",
    "lineColor": "line_color",
    "H_FIXED": "fixed_height",
    "PIXEL_MARGIN": "pixel_margin",
}


@dataclass(frozen=True)
class GridConfig:
    """
    Rendering parameters for one trajectory image.

    ``pad`` is in grid units and applies to both horizontal sides and to
    the vertical axis. ``shift`` is added progressively per sequence
    position: position ``i`` (1-based) moves right by ``(i / 4) * shift``.
    """
    n: int = 4
    pad: float = 2
    shift: float = 1.0
    line_width: float = 2
    line_color: str = "#00e5ff"
    fixed_height: int = 256
    pixel_margin: float = 24

    def __post_init__(self) -> None:
        if isinstance(self.n, bool) or not isinstance(self.n, int) or self.n < 1:
            raise ValueError(f"n must be a positive integer, got {self.n!r}")
        if self.pad < 0:
            raise ValueError(f"pad must be non-negative, got {self.pad!r}")
        if self.fixed_height <= 0:
            raise ValueError(f"fixed_height must be positive, got {self.fixed_height!r}")
        if self.pixel_margin < 0:
            raise ValueError(f"pixel_margin must be non-negative, got {self.pixel_margin!r}")
        if self.interior_height <= 0:
            raise ValueError(
                f"fixed_height {self.fixed_height} leaves no room inside "
                f"a {self.pixel_margin}px margin"
            )
        if self.line_width <= 0:
            raise ValueError(f"line_width must be positive, got {self.line_width!r}")

    @property
    def interior_height(self) -> float:
        return self.fixed_height - 2 * self.pixel_margin

    @property
    def step(self) -> float:
        """Pixels per grid unit, fitted to the fixed height."""
        return self.interior_height / (self.n + 2 * self.pad)

    @property
    def symbol_count(self) -> int:
        return self.n * self.n

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> GridConfig:
        return cls().merged(d)

    def merged(self, updates: Optional[Mapping[str, Any]] = None, **overrides: Any) -> GridConfig:
        """
        Overlay a partial update onto this snapshot.

        Unspecified fields keep their current value. Keys may be field
        names or the legacy canvas option names (``N``, ``PAD``,
        ``H_FIXED`` ...). Unknown keys raise ``ValueError``.
        """
        changes: dict[str, Any] = {}
        for key, value in {**(updates or {}), **overrides}.items():
            name = LEGACY_OPTION_NAMES.get(key, key)
            if name not in self.__dataclass_fields__:
                raise ValueError(f"Unknown option: {key}")
            changes[name] = value
        if not changes:
            return self
        return replace(self, **changes)


def decode_symbol(symbol: int, n: int) -> tuple[int, int]:
    """
    Map a symbol number (1..n²) to ``(row, col)`` in row-major order.

    Values outside the range are not rejected. ``symbol - 1`` is truncated
    toward zero, the row is floored and the column keeps the sign of the
    offset, so ``0`` decodes to ``(-1, -1)`` and ``n² + 1`` to ``(n, 0)``.
    """
    z = int(symbol - 1)
    row = math.floor(z / n)
    col = int(math.fmod(z, n))
    return row, col


def check_symbols(sequence, config: GridConfig) -> None:
    """Raise ``SymbolRangeError`` for the first symbol outside 1..n²."""
    limit = config.symbol_count
    for position, symbol in enumerate(() if sequence is None else sequence, start=1):
        if not 1 <= int(symbol) <= limit:
            raise SymbolRangeError(position, symbol, limit)
