"""
Quadratic-through-midpoints smoothing.

The path starts on the first point, bends through midpoints of interior
pairs using each interior point as a control, and ends exactly on the
last point.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from geometry.layout import Point


@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class QuadTo:
    control: Point
    end: Point


PathCommand = MoveTo | QuadTo


def midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def smooth_path(points: Sequence[Point]) -> list[PathCommand]:
    """
    Build the smoothed path for ``points``.

    Returns an empty list for fewer than two points. Otherwise the first
    command is a ``MoveTo`` and the rest are ``QuadTo`` segments, the last
    of which uses the second-to-last point as control and ends on the
    last point.
    """
    if len(points) < 2:
        return []

    commands: list[PathCommand] = [MoveTo(points[0])]
    for i in range(1, len(points) - 2):
        commands.append(QuadTo(points[i], midpoint(points[i], points[i + 1])))
    commands.append(QuadTo(points[-2], points[-1]))
    return commands


def flatten_quadratic(
    start: tuple[float, float],
    control: tuple[float, float],
    end: tuple[float, float],
    samples: int = 24,
) -> np.ndarray:
    """Sample a quadratic Bezier into a ``(samples + 1, 2)`` array, ends included."""
    t = np.linspace(0.0, 1.0, samples + 1)[:, None]
    p0 = np.asarray(start, dtype=np.float64)
    p1 = np.asarray(control, dtype=np.float64)
    p2 = np.asarray(end, dtype=np.float64)
    return (1 - t) ** 2 * p0 + 2 * (1 - t) * t * p1 + t ** 2 * p2


def flatten_path(commands: Sequence[PathCommand], samples: int = 24) -> np.ndarray:
    """Polyline through a whole smoothed path as an ``(k, 2)`` array."""
    if not commands:
        return np.empty((0, 2), dtype=np.float64)

    first = commands[0]
    if not isinstance(first, MoveTo):
        raise ValueError("path must start with MoveTo")

    current = (first.point.x, first.point.y)
    chunks = [np.asarray([current], dtype=np.float64)]
    for command in commands[1:]:
        if isinstance(command, MoveTo):
            raise ValueError("smoothed paths have a single subpath")
        end = (command.end.x, command.end.y)
        curve = flatten_quadratic(current, (command.control.x, command.control.y), end, samples)
        chunks.append(curve[1:])
        current = end
    return np.concatenate(chunks)
