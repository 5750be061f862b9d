"""Data structures for PhotoFix."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

Color = tuple[int, int, int]


@dataclass
class DecodedImage:
    """Decoded RGBA pixel grid, row-major with a top-left origin."""
    width: int
    height: int
    pixels: np.ndarray  # (height, width, 4) uint8
    format: str | None = None

    def __post_init__(self) -> None:
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"Pixel buffer must be uint8, got {self.pixels.dtype}")
        if self.pixels.shape != (self.height, self.width, 4):
            raise ValueError(
                f"Pixel buffer shape {self.pixels.shape} does not match "
                f"{self.width}x{self.height} RGBA"
            )

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def alpha(self) -> np.ndarray:
        return self.pixels[:, :, 3]

    def tobytes(self) -> bytes:
        return self.pixels.tobytes()

    def copy(self) -> DecodedImage:
        return DecodedImage(self.width, self.height, self.pixels.copy(), self.format)


@dataclass
class ColorCluster:
    """A representative color and how many border samples joined it."""
    color: Color
    count: int = 1


@dataclass
class BackgroundDetection:
    """Outcome of border-ring background detection."""
    color: Color
    success: bool
    count: int
    total: int

    @property
    def ratio(self) -> float:
        return self.count / self.total if self.total else 0.0


@dataclass
class TransparencyReport:
    """Fully transparent pixel statistics."""
    is_transparent: bool
    transparent_count: int
    ratio: float


@dataclass
class ValidationVerdict:
    """Structured result of validating one uploaded image."""
    valid: bool
    errors: list[str]
    can_auto_fix: bool
    current_format: str | None
    current_size: tuple[int, int] | None
    expected_format: str
    expected_size: tuple[int, int]

    def to_dict(self) -> dict[str, Any]:
        """Render with the camelCase keys UI layers expect."""
        def _size(size: tuple[int, int] | None) -> dict[str, int] | None:
            if size is None:
                return None
            return {"width": size[0], "height": size[1]}

        return {
            "valid": self.valid,
            "errors": list(self.errors),
            "canAutoFix": self.can_auto_fix,
            "currentFormat": self.current_format,
            "currentSize": _size(self.current_size),
            "expectedFormat": self.expected_format,
            "expectedSize": _size(self.expected_size),
        }


@dataclass
class FixOutcome:
    """Result of a fix attempt. Exactly one of output and error is set."""
    success: bool
    output: bytes | None = None
    error: str | None = None

    @classmethod
    def ok(cls, output: bytes) -> FixOutcome:
        return cls(success=True, output=output, error=None)

    @classmethod
    def failed(cls, error: str) -> FixOutcome:
        return cls(success=False, output=None, error=error)


@dataclass
class TextVerdict:
    """Result of checking a caption against its weighted length limit."""
    valid: bool
    char_count: float
    max_chars: float
    errors: list[str] = field(default_factory=list)
