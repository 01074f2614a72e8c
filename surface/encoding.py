"""Image MIME types and data URL helpers shared by the surfaces."""

from __future__ import annotations

import base64
from pathlib import Path

# MIME type → Pillow format name
PIL_FORMATS: dict[str, str] = {
    "image/png": "PNG",
    "image/jpeg": "JPEG",
    "image/webp": "WEBP",
}

_SUFFIX_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".webp": "image/webp",
}


def check_mime(mime: str) -> str:
    if mime not in PIL_FORMATS:
        raise ValueError(f"Unsupported image type: {mime!r}")
    return mime


def mime_for_path(path: str | Path) -> str:
    suffix = Path(path).suffix.lower()
    try:
        return _SUFFIX_TYPES[suffix]
    except KeyError:
        raise ValueError(f"Unsupported image file extension: {suffix!r}") from None


def encode_data_url(data: bytes, mime: str = "image/png") -> str:
    return f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"


def decode_data_url(url: str) -> tuple[str, bytes]:
    """Split a base64 ``data:`` URL into ``(mime, bytes)``."""
    header, sep, payload = url.partition(",")
    if not sep or not header.startswith("data:") or not header.endswith(";base64"):
        raise ValueError("Not a base64 data URL")
    mime = header[len("data:"):-len(";base64")]
    return mime, base64.b64decode(payload)
