"""
HTML canvas surface — command stream → Jinja2 page → headless Chromium.

Drawing calls are recorded rather than executed. Encoding renders the
recorded stream into an HTML page whose script replays it on a real
``<canvas>``, then asks Chromium (via Playwright) for
``canvas.toDataURL(type, quality)``.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

from config import settings
from surface.base import Surface
from surface.encoding import check_mime, decode_data_url

logger = logging.getLogger(__name__)

# Jinja2 environment pointing at our templates directory
_TEMPLATE_DIR = Path(__file__).parent / "templates"
_jinja_env = Environment(loader=FileSystemLoader(str(_TEMPLATE_DIR)))

_TO_DATA_URL = (
    "([type, quality]) => "
    "document.getElementById('surface').toDataURL(type, quality)"
)


class CanvasSurface(Surface):
    """Records 2D-context calls for replay in a browser canvas."""

    def __init__(self, width: int = 300, height: int = 150):
        self.css_width = width
        self.css_height = height
        self.set_backing_size(width, height)

    @property
    def commands(self) -> list[dict[str, Any]]:
        return list(self._commands)

    def set_logical_size(self, width: int, height: int) -> None:
        self.css_width = width
        self.css_height = height

    def set_backing_size(self, width: int, height: int) -> None:
        # Resizing a canvas wipes it, so earlier commands no longer matter
        self.backing_width = int(width)
        self.backing_height = int(height)
        self._commands: list[dict[str, Any]] = []

    def set_transform(self, a: float, b: float, c: float, d: float, e: float, f: float) -> None:
        self._call("setTransform", a, b, c, d, e, f)

    def save(self) -> None:
        self._call("save")

    def restore(self) -> None:
        self._call("restore")

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._call("clearRect", x, y, width, height)

    def set_fill_style(self, color: str) -> None:
        self._set("fillStyle", color)

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._call("fillRect", x, y, width, height)

    def set_stroke_style(self, color: str, width: float, join: str = "miter", cap: str = "butt") -> None:
        self._set("strokeStyle", color)
        self._set("lineWidth", width)
        self._set("lineJoin", join)
        self._set("lineCap", cap)

    def begin_path(self) -> None:
        self._call("beginPath")

    def move_to(self, x: float, y: float) -> None:
        self._call("moveTo", x, y)

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        self._call("quadraticCurveTo", cpx, cpy, x, y)

    def stroke(self) -> None:
        self._call("stroke")

    # ── HTML & encoding ──────────────────────────────────────────────

    def to_html(self) -> str:
        """Render the Jinja2 page that replays the recorded commands."""
        template = _jinja_env.get_template("trajectory_canvas.html")
        return template.render(
            css_width=self.css_width,
            css_height=self.css_height,
            backing_width=self.backing_width,
            backing_height=self.backing_height,
            commands=self._commands,
        )

    async def encode_async(self, mime: str = "image/png", quality: float = 0.92) -> bytes:
        """Replay the page in headless Chromium and return the encoded image."""
        check_mime(mime)
        from playwright.async_api import async_playwright

        html = self.to_html()
        logger.info(
            "[CanvasSurface] Encoding %dx%d canvas as %s in Chromium",
            self.backing_width, self.backing_height, mime,
        )
        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=settings.HEADLESS)
            page = await browser.new_page(viewport={
                "width": max(1, int(self.css_width)),
                "height": max(1, int(self.css_height)),
            })
            await page.set_content(html, wait_until="load")
            data_url = await page.evaluate(_TO_DATA_URL, [mime, quality])
            await browser.close()

        _, data = decode_data_url(data_url)
        return data

    def encode(self, mime: str = "image/png", quality: float = 0.92) -> bytes:
        """
        Sync wrapper around ``encode_async``.

        Handles the asyncio event loop for callers that aren't async.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop and loop.is_running():
            # Already inside an event loop; run on a worker thread instead
            import concurrent.futures
            with concurrent.futures.ThreadPoolExecutor() as pool:
                future = pool.submit(asyncio.run, self.encode_async(mime, quality))
                return future.result()
        else:
            return asyncio.run(self.encode_async(mime, quality))

    # ── Helpers ──────────────────────────────────────────────────────

    def _call(self, op: str, *args: Any) -> None:
        self._commands.append({"op": op, "args": list(args)})

    def _set(self, name: str, value: Any) -> None:
        self._commands.append({"op": "set", "name": name, "value": value})
