"""Surface sizing — logical size, backing store and device scale."""

from __future__ import annotations

import math
from typing import Callable, Optional

from geometry.layout import Size
from surface.base import Surface


def resolve_device_pixel_ratio(signal: Optional[Callable[[], Optional[float]]]) -> float:
    """Read the device scale signal, falling back to 1 and never going below it."""
    value = signal() if signal is not None else None
    return max(1.0, float(value or 1.0))


def apply_surface_size(surface: Surface, size: Size, dpr: float) -> None:
    """
    Size ``surface`` for ``size`` at device scale ``dpr``.

    After this, drawing commands are issued in logical pixels.
    """
    surface.set_logical_size(size.width, size.height)
    surface.set_backing_size(math.floor(size.width * dpr), math.floor(size.height * dpr))
    surface.set_transform(dpr, 0, 0, dpr, 0, 0)
