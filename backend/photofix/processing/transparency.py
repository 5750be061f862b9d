"""Chroma-key background removal and transparency checks."""

from __future__ import annotations

import logging

import numpy as np

from ..config import Config
from ..models import Color, DecodedImage, TransparencyReport
from ..validators import validate_tolerance

logger = logging.getLogger("photofix.processing.transparency")


def remove_background(
    image: DecodedImage, color: Color, tolerance: int | None = None
) -> DecodedImage:
    """Make every pixel close to ``color`` fully transparent.

    A pixel matches when each of its RGB channels is within ``tolerance``
    of ``color``. Matching pixels keep their RGB values and get alpha 0;
    all other pixels are copied unchanged. The input is not modified.

    Args:
        image: Source image.
        color: Background RGB color.
        tolerance: Inclusive per-channel distance, defaults to
            ``Config.BACKGROUND_TOLERANCE``.

    Returns:
        A new image with the same dimensions.
    """
    if tolerance is None:
        tolerance = Config.BACKGROUND_TOLERANCE
    validate_tolerance(tolerance)

    pixels = image.pixels.copy()
    rgb = pixels[:, :, :3].astype(np.int16)
    target = np.asarray(color, dtype=np.int16)

    mask = np.all(np.abs(rgb - target) <= tolerance, axis=2)
    pixels[:, :, 3][mask] = 0

    logger.debug(
        "Cleared %d/%d pixels matching %s (tolerance %d)",
        int(mask.sum()),
        mask.size,
        tuple(color),
        tolerance,
    )

    return DecodedImage(image.width, image.height, pixels, image.format)


def check_transparency(image: DecodedImage) -> TransparencyReport:
    """Report whether enough pixels are fully transparent.

    The image counts as transparent when the share of alpha == 0 pixels
    exceeds ``Config.TRANSPARENCY_THRESHOLD``.
    """
    total = image.width * image.height
    count = int(np.count_nonzero(image.alpha == 0))
    ratio = count / total if total else 0.0
    return TransparencyReport(
        is_transparent=ratio > Config.TRANSPARENCY_THRESHOLD,
        transparent_count=count,
        ratio=ratio,
    )
