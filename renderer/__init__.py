"""Trajectory renderer — surface sizing, painting and the generator facade."""

from renderer.adapter import apply_surface_size, resolve_device_pixel_ratio
from renderer.generator import QAMImageGenerator, RenderState, render_to_file
from renderer.painter import paint

__all__ = [
    "QAMImageGenerator",
    "RenderState",
    "render_to_file",
    "apply_surface_size",
    "resolve_device_pixel_ratio",
    "paint",
]
