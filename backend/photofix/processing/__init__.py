"""Image correction stages for PhotoFix."""

from .background import detect_background_color, sample_border
from .resize import FitGeometry, compute_fit, resize_with_padding
from .transparency import check_transparency, remove_background

__all__ = [
    "FitGeometry",
    "check_transparency",
    "compute_fit",
    "detect_background_color",
    "remove_background",
    "resize_with_padding",
    "sample_border",
]
