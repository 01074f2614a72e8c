"""
Pillow-backed raster surface.

Draws straight into an RGBA ``PIL.Image``. Quadratic segments are
flattened into polylines when they are added to the path, and thick
strokes get round caps by stamping discs at the subpath ends.
"""

from __future__ import annotations

import io
import math
from typing import Optional

import numpy as np
from PIL import Image, ImageDraw

from config import settings
from geometry.smoothing import flatten_quadratic
from surface.base import Surface
from surface.encoding import PIL_FORMATS, check_mime

_TRANSPARENT = (0, 0, 0, 0)


def _initial_state() -> dict:
    return {
        "transform": (1.0, 0.0, 0.0, 1.0, 0.0, 0.0),
        "fill_style": "#000000",
        "stroke_style": "#000000",
        "line_width": 1.0,
        "line_join": "miter",
        "line_cap": "butt",
    }


class RasterSurface(Surface):
    """
    In-memory canvas rendered with Pillow.

    Supports axis-aligned transforms (scale + translate), which is all the
    renderer installs.
    """

    def __init__(self, width: int = 300, height: int = 150, curve_samples: Optional[int] = None):
        self.curve_samples = curve_samples or settings.CURVE_SAMPLES
        self._css_size = (width, height)
        self._stack: list[dict] = []
        self._subpaths: list[list[tuple[float, float]]] = []
        self.set_backing_size(width, height)

    # ── Size & state ─────────────────────────────────────────────────

    @property
    def image(self) -> Image.Image:
        return self._image

    @property
    def css_size(self) -> tuple[int, int]:
        return self._css_size

    @property
    def backing_size(self) -> tuple[int, int]:
        return self._image.size

    def set_logical_size(self, width: int, height: int) -> None:
        self._css_size = (width, height)

    def set_backing_size(self, width: int, height: int) -> None:
        self._image = Image.new("RGBA", (max(0, int(width)), max(0, int(height))), _TRANSPARENT)
        self._draw = ImageDraw.Draw(self._image)
        self._state = _initial_state()
        self._stack.clear()
        self._subpaths = []

    def set_transform(self, a: float, b: float, c: float, d: float, e: float, f: float) -> None:
        if b or c:
            raise ValueError("RasterSurface only supports axis-aligned transforms")
        self._state["transform"] = (a, b, c, d, e, f)

    def save(self) -> None:
        self._stack.append(dict(self._state))

    def restore(self) -> None:
        if self._stack:
            self._state = self._stack.pop()

    # ── Rectangles ───────────────────────────────────────────────────

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        box = self._device_box(x, y, width, height)
        if box is not None:
            self._image.paste(_TRANSPARENT, box)

    def set_fill_style(self, color: str) -> None:
        self._state["fill_style"] = color

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        box = self._device_box(x, y, width, height)
        if box is not None:
            x0, y0, x1, y1 = box
            self._draw.rectangle((x0, y0, x1 - 1, y1 - 1), fill=self._state["fill_style"])

    # ── Paths ────────────────────────────────────────────────────────

    def set_stroke_style(self, color: str, width: float, join: str = "miter", cap: str = "butt") -> None:
        self._state.update(stroke_style=color, line_width=width, line_join=join, line_cap=cap)

    def begin_path(self) -> None:
        self._subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append([self._to_device(x, y)])

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        control = self._to_device(cpx, cpy)
        if not self._subpaths:
            self._subpaths.append([control])
        current = self._subpaths[-1]
        curve = flatten_quadratic(current[-1], control, self._to_device(x, y), self.curve_samples)
        current.extend((float(px), float(py)) for px, py in curve[1:])

    def stroke(self) -> None:
        width = self._device_line_width()
        color = self._state["stroke_style"]
        joint = "curve" if self._state["line_join"] == "round" else None
        for points in self._subpaths:
            if len(points) < 2:
                continue
            self._draw.line(points, fill=color, width=width, joint=joint)
            if self._state["line_cap"] == "round" and width > 1:
                for cx, cy in (points[0], points[-1]):
                    r = width / 2
                    self._draw.ellipse((cx - r, cy - r, cx + r, cy + r), fill=color)

    # ── Encoding ─────────────────────────────────────────────────────

    def encode(self, mime: str = "image/png", quality: float = 0.92) -> bytes:
        fmt = PIL_FORMATS[check_mime(mime)]
        image = self._image
        kwargs = {}
        if fmt == "JPEG":
            image = image.convert("RGB")
        if fmt in ("JPEG", "WEBP"):
            kwargs["quality"] = int(round(min(max(quality, 0.0), 1.0) * 100))
        buf = io.BytesIO()
        image.save(buf, format=fmt, **kwargs)
        return buf.getvalue()

    def to_array(self) -> np.ndarray:
        """Pixels as an ``(height, width, 4)`` uint8 array."""
        return np.asarray(self._image, dtype=np.uint8)

    # ── Helpers ──────────────────────────────────────────────────────

    def _to_device(self, x: float, y: float) -> tuple[float, float]:
        a, _, _, d, e, f = self._state["transform"]
        return (a * x + e, d * y + f)

    def _device_line_width(self) -> int:
        a, _, _, d, _, _ = self._state["transform"]
        scale = (abs(a) + abs(d)) / 2
        return max(1, int(round(self._state["line_width"] * scale)))

    def _device_box(self, x: float, y: float, width: float, height: float) -> Optional[tuple[int, int, int, int]]:
        """Transformed rectangle clipped to the image, or None when empty."""
        xa, ya = self._to_device(x, y)
        xb, yb = self._to_device(x + width, y + height)
        img_w, img_h = self._image.size
        x0 = max(0, math.floor(min(xa, xb)))
        y0 = max(0, math.floor(min(ya, yb)))
        x1 = min(img_w, math.ceil(max(xa, xb)))
        y1 = min(img_h, math.ceil(max(ya, yb)))
        if x0 >= x1 or y0 >= y1:
            return None
        return (x0, y0, x1, y1)
