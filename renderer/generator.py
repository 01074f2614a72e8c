"""
QAM trajectory image generator.

Binds a drawing surface and runs the render pipeline:

    sequence → span → size → surface resize → pixel points → paint

The geometry steps are pure functions in ``geometry``; this class only
holds the configuration snapshot, the last render state and the surface.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping, Optional

from config import settings
from errors import SurfaceRequiredError
from geometry.grid import GridConfig, check_symbols
from geometry.layout import compute_size, compute_span, map_sequence
from renderer.adapter import apply_surface_size, resolve_device_pixel_ratio
from renderer.painter import paint
from surface.base import Surface
from surface.encoding import encode_data_url, mime_for_path

logger = logging.getLogger(__name__)

INITIAL_WIDTH = 256


@dataclass(frozen=True)
class RenderState:
    """Size of the most recent render, in logical pixels."""
    width: int
    height: int
    dpr: float = 1.0


class QAMImageGenerator:
    """
    Draws symbol trajectories onto an injected surface.

    Args:
        surface: The host drawing surface. Required.
        options: Partial ``GridConfig`` values (field or legacy names).
        device_pixel_ratio: Zero-argument callable returning the current
            device scale factor. Read once per render.
        strict: Reject symbols outside 1..N² instead of wrapping them.
            Defaults to ``settings.STRICT_SYMBOLS``.
        background: Backdrop colour, defaults to ``settings.BACKGROUND_COLOR``.
    """

    def __init__(
        self,
        surface: Optional[Surface],
        options: Optional[Mapping[str, Any]] = None,
        *,
        device_pixel_ratio: Optional[Callable[[], Optional[float]]] = None,
        strict: Optional[bool] = None,
        background: Optional[str] = None,
    ):
        if surface is None:
            raise SurfaceRequiredError()

        self.surface = surface
        self.config = GridConfig().merged(options)
        self.strict = settings.STRICT_SYMBOLS if strict is None else strict
        self.background = background or settings.BACKGROUND_COLOR
        self._dpr_signal = device_pixel_ratio or (lambda: settings.DEFAULT_DEVICE_PIXEL_RATIO)
        self.dpr = 1.0
        self._sync_dpr()
        self.state = RenderState(INITIAL_WIDTH, self.config.fixed_height, self.dpr)

    def _sync_dpr(self) -> float:
        """Re-read the device scale (it changes when a window moves between screens)."""
        self.dpr = resolve_device_pixel_ratio(self._dpr_signal)
        return self.dpr

    def set_options(self, options: Optional[Mapping[str, Any]] = None, **overrides: Any) -> GridConfig:
        """
        Merge a partial configuration; takes effect on the next render.

        Returns the new configuration snapshot.
        """
        self.config = self.config.merged(options, **overrides)
        logger.debug("[QAMImageGenerator] Options updated: %s", self.config.to_dict())
        return self.config

    def render(self, sequence: Optional[Iterable[int]]) -> RenderState:
        """Resize the surface to fit ``sequence`` and draw its trajectory."""
        config = self.config
        symbols = [] if sequence is None else list(sequence)
        if self.strict:
            check_symbols(symbols, config)

        span = compute_span(symbols, config)
        size = compute_size(span, config)

        dpr = self._sync_dpr()
        apply_surface_size(self.surface, size, dpr)
        self.state = RenderState(size.width, size.height, dpr)

        points = map_sequence(symbols, span, config)
        paint(self.surface, points, size, config, background=self.background)

        logger.debug(
            "[QAMImageGenerator] Rendered %d symbols at %dx%d (dpr=%s)",
            len(symbols), size.width, size.height, dpr,
        )
        return self.state

    # ── Export ───────────────────────────────────────────────────────

    def export_image(self, mime: Optional[str] = None, quality: Optional[float] = None) -> bytes:
        """Encode the current surface contents."""
        return self.surface.encode(
            mime or settings.EXPORT_MIME_TYPE,
            settings.EXPORT_QUALITY if quality is None else quality,
        )

    def to_data_url(self, mime: Optional[str] = None, quality: Optional[float] = None) -> str:
        mime = mime or settings.EXPORT_MIME_TYPE
        return encode_data_url(self.export_image(mime, quality), mime)

    async def to_blob(self, mime: Optional[str] = None, quality: Optional[float] = None) -> bytes:
        return await self.surface.encode_async(
            mime or settings.EXPORT_MIME_TYPE,
            settings.EXPORT_QUALITY if quality is None else quality,
        )


def render_to_file(
    generator: QAMImageGenerator,
    sequence: Optional[Iterable[int]],
    path: str | Path,
    quality: Optional[float] = None,
) -> Path:
    """
    Render and save to disk, picking the format from the suffix.

    Relative paths are resolved against ``settings.OUTPUTS_DIR``. Returns
    the output path.
    """
    path = Path(path)
    if not path.is_absolute():
        path = settings.OUTPUTS_DIR / path
    mime = mime_for_path(path)
    generator.render(sequence)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(generator.export_image(mime, quality))
    return path
