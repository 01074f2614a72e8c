"""Background fill and smoothed trajectory stroke."""

from __future__ import annotations

from typing import Optional, Sequence

from config import settings
from geometry.grid import GridConfig
from geometry.layout import Point, Size
from geometry.smoothing import MoveTo, smooth_path
from surface.base import Surface


def paint(
    surface: Surface,
    points: Sequence[Point],
    size: Size,
    config: GridConfig,
    background: Optional[str] = None,
) -> None:
    """
    Paint the background, then stroke the smoothed path through ``points``.

    Fewer than two points leave just the background.
    """
    surface.clear_rect(0, 0, size.width, size.height)
    surface.set_fill_style(background or settings.BACKGROUND_COLOR)
    surface.fill_rect(0, 0, size.width, size.height)

    commands = smooth_path(points)
    if not commands:
        return

    surface.save()
    surface.set_stroke_style(config.line_color, config.line_width, join="round", cap="round")
    surface.begin_path()
    for command in commands:
        if isinstance(command, MoveTo):
            surface.move_to(command.point.x, command.point.y)
        else:
            surface.quadratic_curve_to(
                command.control.x, command.control.y, command.end.x, command.end.y
            )
    surface.stroke()
    surface.restore()
