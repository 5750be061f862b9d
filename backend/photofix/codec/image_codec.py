"""Decode encoded image bytes into RGBA pixel grids and back."""

from __future__ import annotations

import contextlib
import logging
from io import BytesIO

import cv2
import numpy as np
from PIL import Image, ImageOps

from ..config import Config
from ..constants import MSG_LOAD_FAILED
from ..exceptions import DecodeError, EncodeError
from ..models import DecodedImage

logger = logging.getLogger("photofix.codec")


def _enforce_pixel_limit(width: int, height: int) -> None:
    if width * height > Config.MAX_DECODE_PIXELS:
        raise DecodeError(
            f"{MSG_LOAD_FAILED}: {width}x{height} exceeds the "
            f"{Config.MAX_DECODE_MEGAPIXELS:.0f} megapixel decode limit"
        )


def from_pil(image: Image.Image, fmt: str | None = None) -> DecodedImage:
    """Convert a PIL image (any mode) into a DecodedImage."""
    rgba = image.convert("RGBA")
    pixels = np.array(rgba, dtype=np.uint8)
    height, width = pixels.shape[:2]
    return DecodedImage(width=width, height=height, pixels=pixels, format=fmt)


def to_pil(image: DecodedImage) -> Image.Image:
    """Wrap a DecodedImage's pixels in a new RGBA PIL image."""
    return Image.fromarray(image.pixels)


def _decode_with_pillow(data: bytes) -> DecodedImage:
    with Image.open(BytesIO(data)) as img:
        _enforce_pixel_limit(*img.size)
        fmt = img.format
        img.load()
        # Browsers display photos upright, so honor EXIF orientation
        upright = ImageOps.exif_transpose(img)
        return from_pil(upright, fmt)


@contextlib.contextmanager
def _quiet_opencv():
    """Silence OpenCV codec diagnostics, restoring the previous level."""
    previous = cv2.utils.logging.getLogLevel()
    cv2.utils.logging.setLogLevel(cv2.utils.logging.LOG_LEVEL_SILENT)
    try:
        yield
    finally:
        cv2.utils.logging.setLogLevel(previous)


def _decode_with_opencv(data: bytes) -> DecodedImage | None:
    array = np.frombuffer(data, dtype=np.uint8)
    with _quiet_opencv():
        decoded = cv2.imdecode(array, cv2.IMREAD_UNCHANGED)
    if decoded is None:
        return None

    if decoded.dtype == np.uint16:
        decoded = (decoded >> 8).astype(np.uint8)
    elif decoded.dtype != np.uint8:
        return None

    if decoded.ndim == 2:
        rgba = cv2.cvtColor(decoded, cv2.COLOR_GRAY2RGBA)
    elif decoded.shape[2] == 3:
        rgba = cv2.cvtColor(decoded, cv2.COLOR_BGR2RGBA)
    elif decoded.shape[2] == 4:
        rgba = cv2.cvtColor(decoded, cv2.COLOR_BGRA2RGBA)
    else:
        return None

    height, width = rgba.shape[:2]
    _enforce_pixel_limit(width, height)
    return DecodedImage(width=width, height=height, pixels=np.ascontiguousarray(rgba))


def decode_image(data: bytes) -> DecodedImage:
    """Decode encoded image bytes into an RGBA pixel grid.

    Pillow is tried first; bytes it cannot read are handed to OpenCV.

    Args:
        data: Encoded image file contents.

    Returns:
        The decoded image.

    Raises:
        DecodeError: If the bytes are empty, unreadable or too large.
    """
    if not data:
        raise DecodeError(f"{MSG_LOAD_FAILED}: empty input")

    try:
        image = _decode_with_pillow(data)
    except DecodeError:
        raise
    except Image.DecompressionBombError as e:
        raise DecodeError(f"{MSG_LOAD_FAILED}: {e}") from e
    except Exception as pillow_error:
        logger.debug("Pillow could not decode input: %s", pillow_error)
        image = _decode_with_opencv(data)
        if image is None:
            raise DecodeError(MSG_LOAD_FAILED) from pillow_error

    logger.debug("Decoded %s image %dx%d", image.format or "raw", image.width, image.height)
    return image


def encode_png(image: DecodedImage) -> bytes:
    """Encode an image as lossless PNG with its alpha channel.

    Raises:
        EncodeError: If the encoder fails.
    """
    buffer = BytesIO()
    try:
        to_pil(image).save(
            buffer, format=Config.OUTPUT_FORMAT, compress_level=Config.PNG_COMPRESS_LEVEL
        )
    except Exception as e:
        raise EncodeError(f"Failed to encode {image.width}x{image.height} PNG: {e}") from e
    return buffer.getvalue()


def reload(image: DecodedImage) -> DecodedImage:
    """Round-trip an image through PNG so later stages read settled pixels."""
    return decode_image(encode_png(image))
