"""Argument validation for PhotoFix."""

from __future__ import annotations

from .config import Config
from .enums import Alignment
from .exceptions import ValidationError


def validate_dimensions(width: int, height: int) -> None:
    """Validate an expected output size.

    Args:
        width: Expected width in pixels.
        height: Expected height in pixels.

    Raises:
        ValidationError: If dimensions are invalid.
    """
    if isinstance(width, bool) or isinstance(height, bool):
        raise ValidationError("Dimensions must be numbers, got bool")
    if not isinstance(width, int | float) or not isinstance(height, int | float):
        raise ValidationError(
            f"Dimensions must be numbers, got {type(width).__name__} and {type(height).__name__}"
        )

    width = int(width)
    height = int(height)

    if width <= 0 or height <= 0:
        raise ValidationError(f"Dimensions must be positive, got {width}x{height}")
    if width > Config.MAX_IMAGE_SIZE or height > Config.MAX_IMAGE_SIZE:
        raise ValidationError(
            f"Dimensions exceed maximum {Config.MAX_IMAGE_SIZE}, got {width}x{height}"
        )
    if width < Config.MIN_IMAGE_SIZE or height < Config.MIN_IMAGE_SIZE:
        raise ValidationError(
            f"Dimensions below minimum {Config.MIN_IMAGE_SIZE}, got {width}x{height}"
        )


def validate_tolerance(tolerance: int) -> None:
    """Validate a per-channel color tolerance.

    Raises:
        ValidationError: If tolerance is outside 0..255.
    """
    if isinstance(tolerance, bool) or not isinstance(tolerance, int):
        raise ValidationError(
            f"Tolerance must be an integer, got {type(tolerance).__name__}"
        )
    if not 0 <= tolerance <= 255:
        raise ValidationError(f"Tolerance must be within 0..255, got {tolerance}")


def coerce_alignment(alignment: Alignment | str) -> Alignment:
    """Accept an Alignment or its string value.

    Raises:
        ValidationError: If the value names no alignment.
    """
    if isinstance(alignment, Alignment):
        return alignment
    try:
        return Alignment(str(alignment).lower())
    except ValueError as e:
        allowed = ", ".join(a.value for a in Alignment)
        raise ValidationError(
            f"Unsupported alignment '{alignment}'. Allowed: {allowed}"
        ) from e
