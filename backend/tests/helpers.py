"""Image builders shared by the PhotoFix tests."""

from __future__ import annotations

from io import BytesIO

import numpy as np
from PIL import Image


def encode(img: Image.Image, fmt: str = "PNG", **params) -> bytes:
    """Encode a PIL image to bytes in the given format."""
    buffer = BytesIO()
    img.save(buffer, format=fmt, **params)
    return buffer.getvalue()


def framed_image(
    size: tuple[int, int],
    background: tuple[int, int, int] = (255, 255, 255),
    subject: tuple[int, int, int] = (200, 30, 30),
    margin: float = 0.25,
) -> Image.Image:
    """Solid background with a centered rectangular subject."""
    w, h = size
    img = Image.new("RGB", size, background)
    mx, my = int(w * margin), int(h * margin)
    img.paste(subject, (mx, my, w - mx, h - my))
    return img


def noisy_border_image(size: tuple[int, int], seed: int = 7) -> Image.Image:
    """Opaque image whose border ring is random noise."""
    w, h = size
    rng = np.random.default_rng(seed)
    arr = rng.integers(0, 256, size=(h, w, 3), dtype=np.uint8)
    return Image.fromarray(arr)
