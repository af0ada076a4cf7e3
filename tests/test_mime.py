"""Tests for base64 image MIME sniffing."""

import base64

import pytest

from pricebook.receipts.mime import DEFAULT_MIME_TYPE, sniff_mime_type


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode()


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        (b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR", "image/png"),
        (b"GIF89a\x01\x00\x01\x00", "image/gif"),
        (b"GIF87a\x01\x00\x01\x00", "image/gif"),
        (b"RIFF\x24\x00\x00\x00WEBPVP8 ", "image/webp"),
        (b"\x00\x00\x00\x20ftypheic\x00\x00\x00\x00", "image/heic"),
        (b"\x00\x00\x00\x20ftypjwic\x00\x00\x00\x00", "image/jxl"),
        (b"\xff\xd8\xff\xe0\x00\x10JFIF", "image/jpeg"),
    ],
)
def test_sniff_known_signatures(header, expected):
    assert sniff_mime_type(_b64(header)) == expected


def test_sniff_unknown_defaults_to_jpeg():
    assert sniff_mime_type(_b64(b"not an image at all")) == DEFAULT_MIME_TYPE
    assert DEFAULT_MIME_TYPE == "image/jpeg"


def test_sniff_empty_defaults_to_jpeg():
    assert sniff_mime_type("") == "image/jpeg"


def test_sniff_png_with_ihdr_chunk():
    """A PNG signature followed by its IHDR chunk header resolves to PNG."""
    header = (
        b"\x89PNG\r\n\x1a\n"
        b"\x00\x00\x00\rIHDR"
        b"\x00\x00\x02\x80\x00\x00\x01\xe0\x08\x06\x00\x00\x00"
    )
    encoded = _b64(header)
    assert encoded.startswith("iVBORw0KGgo")
    assert sniff_mime_type(encoded) == "image/png"
