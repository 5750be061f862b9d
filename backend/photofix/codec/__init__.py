"""Pixel buffer access for PhotoFix."""

from .image_codec import decode_image, encode_png, from_pil, reload, to_pil

__all__ = ["decode_image", "encode_png", "from_pil", "reload", "to_pil"]
