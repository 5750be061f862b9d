"""Aspect-preserving resize onto a transparent, exactly-sized canvas."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from PIL import Image

from ..codec import from_pil, to_pil
from ..config import Config
from ..enums import Alignment
from ..models import DecodedImage
from ..validators import coerce_alignment, validate_dimensions

logger = logging.getLogger("photofix.processing.resize")

# Absorbs float error so e.g. 2000 * (900 / 2000) never floors to 899
_FLOOR_EPSILON = 1e-9


@dataclass
class FitGeometry:
    """Where and how large the scaled source lands on the target canvas."""
    scale: float
    width: int
    height: int
    x: int
    y: int


def compute_fit(
    source_size: tuple[int, int],
    target_size: tuple[int, int],
    alignment: Alignment | str = Alignment.BOTTOM,
) -> FitGeometry:
    """Compute the uniform scale and paste offset for a contain-fit.

    The scaled source always fits inside the target box, is centered
    horizontally and is placed vertically according to ``alignment``.

    Args:
        source_size: Source (width, height).
        target_size: Target (width, height).
        alignment: Vertical placement of the scaled source.

    Returns:
        FitGeometry for the placement.
    """
    src_w, src_h = source_size
    target_w, target_h = target_size
    validate_dimensions(target_w, target_h)
    alignment = coerce_alignment(alignment)

    scale = min(target_w / src_w, target_h / src_h)
    new_w = min(target_w, max(1, math.floor(src_w * scale + _FLOOR_EPSILON)))
    new_h = min(target_h, max(1, math.floor(src_h * scale + _FLOOR_EPSILON)))

    x = (target_w - new_w) // 2
    if alignment == Alignment.TOP:
        y = 0
    elif alignment == Alignment.CENTER:
        y = (target_h - new_h) // 2
    else:
        y = target_h - new_h

    return FitGeometry(scale=scale, width=new_w, height=new_h, x=x, y=y)


def resize_with_padding(
    image: DecodedImage,
    target_size: tuple[int, int],
    alignment: Alignment | str = Alignment.BOTTOM,
) -> DecodedImage:
    """Scale an image to fit ``target_size`` and pad it with transparency.

    Args:
        image: Source image.
        target_size: Exact output (width, height).
        alignment: Vertical placement of the scaled content.

    Returns:
        A new image of exactly ``target_size``.
    """
    fit = compute_fit(image.size, target_size, alignment)

    if image.size == tuple(target_size):
        return image.copy()

    scaled = to_pil(image).resize((fit.width, fit.height), Config.RESIZE_QUALITY)

    canvas = Image.new("RGBA", tuple(target_size), (0, 0, 0, 0))
    canvas.paste(scaled, (fit.x, fit.y))

    logger.debug(
        "Resized %dx%d -> %dx%d at (%d, %d) on %dx%d canvas",
        image.width,
        image.height,
        fit.width,
        fit.height,
        fit.x,
        fit.y,
        target_size[0],
        target_size[1],
    )

    return from_pil(canvas, image.format)
