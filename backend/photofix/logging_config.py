"""Structured logging configuration for PhotoFix."""

from __future__ import annotations

import logging
import sys
import warnings

from PIL import Image


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure structured logging for the application.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR).

    Returns:
        The root photofix logger.
    """
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)-30s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger("photofix")
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Avoid duplicate handlers on repeated calls
    if not root_logger.handlers:
        root_logger.addHandler(handler)

    # Pillow warns on oversized images before the decode limit kicks in
    warnings.filterwarnings("ignore", category=Image.DecompressionBombWarning)

    return root_logger
