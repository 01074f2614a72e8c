"""
Drawing surface contract.

The renderer never acquires a surface itself; a host hands one to the
generator. The interface mirrors the subset of a 2D canvas context the
renderer needs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Surface(ABC):
    @abstractmethod
    def set_logical_size(self, width: int, height: int) -> None:
        """Layout size in logical (CSS) pixels."""
        raise NotImplementedError

    @abstractmethod
    def set_backing_size(self, width: int, height: int) -> None:
        """
        Backing-store size in device pixels.

        Like assigning ``canvas.width``, this discards the contents and
        resets the transform and drawing state.
        """
        raise NotImplementedError

    @abstractmethod
    def set_transform(self, a: float, b: float, c: float, d: float, e: float, f: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def save(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def restore(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_fill_style(self, color: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_stroke_style(self, color: str, width: float, join: str = "miter", cap: str = "butt") -> None:
        raise NotImplementedError

    @abstractmethod
    def begin_path(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def move_to(self, x: float, y: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def stroke(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode(self, mime: str = "image/png", quality: float = 0.92) -> bytes:
        """Encode the current contents in the requested image format."""
        raise NotImplementedError

    async def encode_async(self, mime: str = "image/png", quality: float = 0.92) -> bytes:
        """Coroutine variant of ``encode``; surfaces with async encoders override it."""
        return self.encode(mime, quality)
