"""Read-only validation of uploaded photos."""

from __future__ import annotations

import logging

from .codec import decode_image
from .constants import (
    FORMAT_UNKNOWN,
    MSG_CORRUPT,
    MSG_NOT_TRANSPARENT,
    MSG_WRONG_FORMAT,
    MSG_WRONG_SIZE,
    format_from_mime,
)
from .exceptions import DecodeError
from .models import ValidationVerdict
from .processing import check_transparency
from .validators import validate_dimensions

logger = logging.getLogger("photofix.validator")


def validate(
    file_bytes: bytes,
    mime_type: str | None,
    expected_format: str,
    expected_size: tuple[int, int],
    need_transparent: bool,
) -> ValidationVerdict:
    """Check an uploaded image against format, size and transparency rules.

    Every applicable check runs so the verdict lists all problems at once.
    Only an undecodable file short-circuits; it is never auto-fixable.

    Args:
        file_bytes: Encoded upload.
        mime_type: Declared MIME type, e.g. ``image/jpeg``. When missing the
            decoder-reported format is used.
        expected_format: Required format name, e.g. ``PNG``.
        expected_size: Required (width, height).
        need_transparent: Whether a transparent background is required.

    Returns:
        The validation verdict.

    Raises:
        ValidationError: If ``expected_size`` is malformed. This is the only
            path that raises; every image failure is reported in the verdict.
    """
    expected_w, expected_h = expected_size
    validate_dimensions(expected_w, expected_h)
    expected_size = (int(expected_w), int(expected_h))

    try:
        image = decode_image(file_bytes)
    except DecodeError as e:
        logger.debug("Upload is corrupt: %s", e)
        return ValidationVerdict(
            valid=False,
            errors=[MSG_CORRUPT],
            can_auto_fix=False,
            current_format=None,
            current_size=None,
            expected_format=expected_format,
            expected_size=expected_size,
        )

    errors: list[str] = []

    current_format = format_from_mime(mime_type) or image.format or FORMAT_UNKNOWN
    if current_format != expected_format.upper():
        errors.append(MSG_WRONG_FORMAT.format(actual=current_format))

    if image.size != expected_size:
        errors.append(
            MSG_WRONG_SIZE.format(
                width=image.width,
                height=image.height,
                expected_width=expected_size[0],
                expected_height=expected_size[1],
            )
        )

    if need_transparent and not check_transparency(image).is_transparent:
        errors.append(MSG_NOT_TRANSPARENT)

    logger.debug("Validated %s %dx%d: %d error(s)", current_format, image.width, image.height, len(errors))

    return ValidationVerdict(
        valid=not errors,
        errors=errors,
        can_auto_fix=bool(errors),
        current_format=current_format,
        current_size=image.size,
        expected_format=expected_format,
        expected_size=expected_size,
    )
