"""Drawing surfaces — the host side of the renderer."""

from surface.base import Surface
from surface.canvas import CanvasSurface
from surface.encoding import decode_data_url, encode_data_url, mime_for_path
from surface.raster import RasterSurface

__all__ = [
    "Surface",
    "CanvasSurface",
    "RasterSurface",
    "decode_data_url",
    "encode_data_url",
    "mime_for_path",
]
