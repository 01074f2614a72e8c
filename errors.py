"""Exception types raised by the trajectory renderer."""

from __future__ import annotations

from typing import Any


class RenderError(Exception):
    """Base class for renderer failures."""


class SurfaceRequiredError(RenderError, ValueError):
    """A generator was constructed without a drawing surface."""

    def __init__(self, message: str = "surface is required"):
        super().__init__(message)


class SymbolRangeError(RenderError, ValueError):
    """A symbol index fell outside 1..N² while strict checking was on."""

    def __init__(self, position: int, symbol: Any, limit: int):
        self.position = position
        self.symbol = symbol
        self.limit = limit
        super().__init__(
            f"Symbol {symbol!r} at position {position} is outside 1..{limit}"
        )
