"""Custom exception hierarchy for PhotoFix."""

from __future__ import annotations


class PhotoFixError(Exception):
    """Base exception for all PhotoFix errors."""


class DecodeError(PhotoFixError):
    """Raised when input bytes cannot be decoded into an image."""


class EncodeError(PhotoFixError):
    """Raised when an image cannot be encoded to the output format."""


class BackgroundTooComplexError(PhotoFixError):
    """Raised when no dominant border color can be found."""


class ValidationError(PhotoFixError):
    """Raised when caller-supplied arguments are invalid."""
