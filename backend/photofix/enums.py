"""Enumerations for PhotoFix."""

from __future__ import annotations

from enum import Enum


class Alignment(Enum):
    """Vertical placement of scaled content inside the padded canvas."""
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"
