"""Global configuration for PhotoFix."""

from __future__ import annotations

import os

from PIL import Image


class Config:
    """Global configuration."""

    # Background detection
    BACKGROUND_TOLERANCE = 15  # Inclusive per-channel distance
    BACKGROUND_MAJORITY = 0.5  # Share of the border ring the top cluster needs

    # Transparency
    TRANSPARENCY_THRESHOLD = 0.001  # Fully transparent pixel ratio must exceed this

    # Quality
    RESIZE_QUALITY = Image.Resampling.BILINEAR
    OUTPUT_FORMAT = "PNG"
    PNG_COMPRESS_LEVEL = 6

    # Decoding limits
    MAX_DECODE_MEGAPIXELS = max(
        1.0, float(os.environ.get("PHOTOFIX_MAX_DECODE_MEGAPIXELS", "36"))
    )
    MAX_DECODE_PIXELS = int(MAX_DECODE_MEGAPIXELS * 1_000_000)

    # Expected-size sanity bounds
    MAX_IMAGE_SIZE = 8192
    MIN_IMAGE_SIZE = 1

    # Web interface
    SERVER_NAME = os.environ.get("PHOTOFIX_HOST", "0.0.0.0")
    SERVER_PORT = int(os.environ.get("PHOTOFIX_PORT", "7860"))
