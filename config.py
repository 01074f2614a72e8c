"""
Central configuration for the QAM trajectory renderer.
Environment-level constants live here; per-render geometry lives in
``geometry.grid.GridConfig``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment / .env file."""

    # ── Surface ─────────────────────────────────────────────────────
    BACKGROUND_COLOR: str = "#0b0f1a"
    DEFAULT_DEVICE_PIXEL_RATIO: float = Field(default=1.0, ge=1.0)
    CURVE_SAMPLES: int = Field(default=24, ge=2)  # per quadratic segment (Pillow)

    # ── Symbols ─────────────────────────────────────────────────────
    STRICT_SYMBOLS: bool = False  # reject indices outside 1..N² instead of wrapping

    # ── Export ──────────────────────────────────────────────────────
    EXPORT_MIME_TYPE: str = "image/png"
    EXPORT_QUALITY: float = Field(default=0.92, ge=0.0, le=1.0)

    # ── Headless Chromium (CanvasSurface) ───────────────────────────
    HEADLESS: bool = True

    # ── Paths ───────────────────────────────────────────────────────
    PROJECT_ROOT: Path = Path(__file__).parent
    OUTPUTS_DIR: Optional[Path] = None

    @model_validator(mode="after")
    def _set_default_paths(self) -> Settings:
        if self.OUTPUTS_DIR is None:
            self.OUTPUTS_DIR = self.PROJECT_ROOT / "outputs"
        return self

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton instance
settings = Settings()
