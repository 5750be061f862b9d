"""Shared pytest fixtures for PhotoFix tests."""

from __future__ import annotations

import pytest
from PIL import Image

from backend.photofix.codec import from_pil
from backend.photofix.models import DecodedImage
from backend.tests.helpers import encode, framed_image, noisy_border_image


@pytest.fixture
def white_framed_jpeg() -> bytes:
    """2000x2000 opaque JPEG with a solid white border."""
    return encode(framed_image((2000, 2000)), "JPEG", quality=95)


@pytest.fixture
def small_framed_png() -> bytes:
    """Opaque 200x300 PNG on a white background."""
    return encode(framed_image((200, 300)))


@pytest.fixture
def noisy_png() -> bytes:
    return encode(noisy_border_image((120, 160)))


@pytest.fixture
def transparent_png() -> bytes:
    """400x400 PNG that already has a transparent background."""
    img = Image.new("RGBA", (400, 400), (0, 0, 0, 0))
    img.paste((10, 120, 200, 255), (100, 100, 300, 400))
    return encode(img)


@pytest.fixture
def opaque_image() -> DecodedImage:
    return from_pil(Image.new("RGBA", (100, 80), (40, 90, 160, 255)))
