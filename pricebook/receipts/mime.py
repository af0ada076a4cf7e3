"""Image MIME type detection from base64 payload prefixes."""

from __future__ import annotations

DEFAULT_MIME_TYPE = "image/jpeg"

# Base64 encodings of the leading signature bytes of each format.
_SIGNATURES: tuple[tuple[str, str], ...] = (
    ("iVBORw0KGgo", "image/png"),  # \x89PNG\r\n\x1a\n
    ("R0lGOD", "image/gif"),  # GIF87a / GIF89a
    ("UklGR", "image/webp"),  # RIFF....WEBP
    ("AAAAIGZ0eXBqd2lj", "image/jxl"),  # ftypjwic
    ("AAAAIGZ0eXBoZWlj", "image/heic"),  # ftypheic
)


def sniff_mime_type(image_base64: str) -> str:
    """Return the image MIME type for a base64 payload.

    Falls back to JPEG when no known signature matches.
    """
    for prefix, mime_type in _SIGNATURES:
        if image_base64.startswith(prefix):
            return mime_type
    return DEFAULT_MIME_TYPE
