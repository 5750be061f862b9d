"""Tests for pixel buffer decoding and encoding."""

from io import BytesIO

import cv2
import numpy as np
import pytest
from PIL import Image

from backend.photofix.codec import decode_image, encode_png, from_pil, reload, to_pil
from backend.photofix.config import Config
from backend.photofix.exceptions import DecodeError
from backend.photofix.models import DecodedImage
from backend.tests.helpers import encode


class TestDecodeImage:
    def test_decode_png(self):
        img = Image.new("RGB", (200, 150), (255, 0, 0))
        decoded = decode_image(encode(img))
        assert decoded.size == (200, 150)
        assert decoded.format == "PNG"
        assert decoded.pixels.shape == (150, 200, 4)
        assert tuple(decoded.pixels[0, 0]) == (255, 0, 0, 255)

    def test_decode_jpeg(self):
        img = Image.new("RGB", (300, 200), (0, 255, 0))
        decoded = decode_image(encode(img, "JPEG"))
        assert decoded.size == (300, 200)
        assert decoded.format == "JPEG"
        assert (decoded.alpha == 255).all()

    def test_decode_keeps_alpha(self):
        img = Image.new("RGBA", (10, 10), (1, 2, 3, 0))
        decoded = decode_image(encode(img))
        assert (decoded.alpha == 0).all()

    def test_decode_grayscale_converts_to_rgba(self):
        img = Image.new("L", (20, 30), 128)
        decoded = decode_image(encode(img))
        assert decoded.pixels.shape == (30, 20, 4)
        assert tuple(decoded.pixels[5, 5]) == (128, 128, 128, 255)

    def test_decode_applies_exif_orientation(self):
        img = Image.new("RGB", (40, 20), (0, 0, 255))
        exif = Image.Exif()
        exif[0x0112] = 6  # Rotate 90 CW on display
        data = encode(img, "JPEG", exif=exif.tobytes())
        decoded = decode_image(data)
        assert decoded.size == (20, 40)

    def test_empty_bytes_raise(self):
        with pytest.raises(DecodeError):
            decode_image(b"")

    def test_garbage_bytes_raise(self):
        with pytest.raises(DecodeError):
            decode_image(b"definitely not an image")

    def test_truncated_png_raises(self):
        data = encode(Image.new("RGB", (64, 64), (9, 9, 9)))
        with pytest.raises(DecodeError):
            decode_image(data[:40])

    def test_opencv_log_level_restored(self):
        before = cv2.utils.logging.getLogLevel()
        with pytest.raises(DecodeError):
            decode_image(b"\x89PNG\r\n\x1a\n" + b"\x00" * 32)
        assert cv2.utils.logging.getLogLevel() == before

    def test_pixel_limit(self, monkeypatch):
        monkeypatch.setattr(Config, "MAX_DECODE_PIXELS", 100)
        data = encode(Image.new("RGB", (20, 20)))
        with pytest.raises(DecodeError, match="decode limit"):
            decode_image(data)


class TestEncodePng:
    def test_encode_is_lossless_with_alpha(self):
        pixels = np.random.default_rng(1).integers(0, 256, (30, 40, 4), dtype=np.uint8)
        image = DecodedImage(40, 30, pixels)
        data = encode_png(image)
        assert data.startswith(b"\x89PNG")
        with Image.open(BytesIO(data)) as img:
            assert img.mode == "RGBA"
            assert np.array_equal(np.array(img), pixels)

    def test_reload_matches_pixels(self, opaque_image):
        reloaded = reload(opaque_image)
        assert reloaded.size == opaque_image.size
        assert reloaded.format == "PNG"
        assert np.array_equal(reloaded.pixels, opaque_image.pixels)


class TestDecodedImage:
    def test_buffer_length_invariant(self, opaque_image):
        assert len(opaque_image.tobytes()) == opaque_image.width * opaque_image.height * 4

    def test_shape_mismatch_rejected(self):
        with pytest.raises(ValueError, match="does not match"):
            DecodedImage(10, 10, np.zeros((10, 11, 4), dtype=np.uint8))

    def test_dtype_rejected(self):
        with pytest.raises(ValueError, match="uint8"):
            DecodedImage(2, 2, np.zeros((2, 2, 4), dtype=np.float32))

    def test_pil_round_trip(self):
        img = Image.new("RGBA", (7, 5), (1, 2, 3, 4))
        assert to_pil(from_pil(img)).tobytes() == img.tobytes()

    def test_copy_is_independent(self, opaque_image):
        clone = opaque_image.copy()
        clone.pixels[0, 0] = (0, 0, 0, 0)
        assert tuple(opaque_image.pixels[0, 0]) == (40, 90, 160, 255)
