"""Auto-fix pipeline: detect background, remove it, resize and re-encode."""

from __future__ import annotations

import logging

from .codec import decode_image, encode_png, reload
from .config import Config
from .constants import (
    MSG_BACKGROUND_TOO_COMPLEX,
    MSG_ENCODE_FAILED,
    MSG_FIX_FAILED,
    MSG_LOAD_FAILED,
)
from .enums import Alignment
from .exceptions import BackgroundTooComplexError, DecodeError, EncodeError
from .models import DecodedImage, FixOutcome
from .processing import (
    check_transparency,
    detect_background_color,
    remove_background,
    resize_with_padding,
)
from .validators import coerce_alignment, validate_dimensions, validate_tolerance

logger = logging.getLogger("photofix.fixer")


class ImageFixer:
    """Correct an upload so it passes validation.

    Stages run strictly in order, each consuming the previous output:

    1. decode
    2. if transparency is required and missing, detect the border color
       and clear it (aborts when the border has no dominant color)
    3. if the size is wrong, scale to fit and pad with transparency
    4. encode as PNG

    The instance holds only configuration; every call allocates its own
    buffers, so one fixer can serve concurrent calls.
    """

    def __init__(
        self,
        tolerance: int | None = None,
        alignment: Alignment | str = Alignment.BOTTOM,
    ) -> None:
        self.tolerance = Config.BACKGROUND_TOLERANCE if tolerance is None else tolerance
        validate_tolerance(self.tolerance)
        self.alignment = coerce_alignment(alignment)

    def fix(
        self,
        file_bytes: bytes,
        expected_format: str,
        expected_size: tuple[int, int],
        need_transparent: bool,
    ) -> FixOutcome:
        """Run the pipeline and return its outcome.

        Failures never raise; they are reported through ``FixOutcome.error``
        and no partial output is returned.

        Args:
            file_bytes: Encoded upload.
            expected_format: Required format name. Output is always PNG.
            expected_size: Required (width, height).
            need_transparent: Whether a transparent background is required.

        Returns:
            FixOutcome with PNG bytes on success.
        """
        try:
            output = self._run(file_bytes, expected_size, need_transparent)
        except BackgroundTooComplexError as e:
            logger.info("Auto-fix declined: %s", e)
            return FixOutcome.failed(MSG_BACKGROUND_TOO_COMPLEX)
        except DecodeError as e:
            logger.info("Auto-fix could not decode input: %s", e)
            return FixOutcome.failed(MSG_FIX_FAILED.format(reason=MSG_LOAD_FAILED))
        except EncodeError as e:
            logger.warning("Auto-fix could not encode output: %s", e)
            return FixOutcome.failed(MSG_ENCODE_FAILED)
        except Exception as e:
            logger.warning("Auto-fix failed: %s", e, exc_info=True)
            return FixOutcome.failed(MSG_FIX_FAILED.format(reason=e))

        if expected_format.upper() != Config.OUTPUT_FORMAT:
            logger.debug(
                "Expected format %s requested, output is %s",
                expected_format,
                Config.OUTPUT_FORMAT,
            )
        return FixOutcome.ok(output)

    def _run(
        self,
        file_bytes: bytes,
        expected_size: tuple[int, int],
        need_transparent: bool,
    ) -> bytes:
        expected_w, expected_h = expected_size
        validate_dimensions(expected_w, expected_h)
        target_size = (int(expected_w), int(expected_h))

        image = decode_image(file_bytes)
        source_size = image.size

        removed = False
        if need_transparent and not check_transparency(image).is_transparent:
            image = self._clear_background(image)
            removed = True

        if source_size != target_size:
            if removed:
                image = reload(image)
            image = resize_with_padding(image, target_size, self.alignment)

        return encode_png(image)

    def _clear_background(self, image: DecodedImage) -> DecodedImage:
        detection = detect_background_color(image, self.tolerance)
        if not detection.success:
            raise BackgroundTooComplexError(
                f"Top border color {detection.color} covers only "
                f"{detection.ratio:.1%} of the border"
            )
        logger.debug("Clearing background %s (%.1f%% of border)", detection.color, detection.ratio * 100)
        return remove_background(image, detection.color, self.tolerance)


def fix(
    file_bytes: bytes,
    expected_format: str,
    expected_size: tuple[int, int],
    need_transparent: bool,
) -> FixOutcome:
    """Fix an upload with the default tolerance and bottom alignment."""
    return ImageFixer().fix(file_bytes, expected_format, expected_size, need_transparent)
