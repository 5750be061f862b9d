"""Border-ring background color detection."""

from __future__ import annotations

import logging

import numpy as np

from ..config import Config
from ..models import BackgroundDetection, ColorCluster, DecodedImage
from ..validators import validate_tolerance

logger = logging.getLogger("photofix.processing.background")


def sample_border(image: DecodedImage) -> np.ndarray:
    """Collect the RGB values of the one-pixel border ring.

    Order is top row, bottom row, then the left and right columns without
    their corner pixels. Each pixel is sampled once, including on images
    that are a single pixel tall or wide.

    Returns:
        ``(N, 3)`` uint8 array of samples.
    """
    rgb = image.pixels[:, :, :3]
    h, w = image.height, image.width

    parts = [rgb[0, :]]
    if h > 1:
        parts.append(rgb[h - 1, :])
    if h > 2:
        parts.append(rgb[1 : h - 1, 0])
        if w > 1:
            parts.append(rgb[1 : h - 1, w - 1])

    return np.concatenate(parts, axis=0)


def cluster_colors(samples: np.ndarray, tolerance: int) -> list[ColorCluster]:
    """Greedy first-fit clustering of border samples.

    Each sample joins the earliest-created cluster whose representative is
    within ``tolerance`` on every channel, otherwise it opens a new cluster.
    Representatives never move, so the result depends on sample order.
    """
    if len(samples) == 0:
        return []

    reps = np.empty((len(samples), 3), dtype=np.int16)
    counts = np.zeros(len(samples), dtype=np.int64)
    n_clusters = 0

    for sample in samples.astype(np.int16):
        if n_clusters:
            close = np.all(np.abs(reps[:n_clusters] - sample) <= tolerance, axis=1)
            idx = int(np.argmax(close))
            if close[idx]:
                counts[idx] += 1
                continue
        reps[n_clusters] = sample
        counts[n_clusters] = 1
        n_clusters += 1

    return [
        ColorCluster(color=tuple(int(c) for c in reps[i]), count=int(counts[i]))
        for i in range(n_clusters)
    ]


def detect_background_color(
    image: DecodedImage, tolerance: int | None = None
) -> BackgroundDetection:
    """Find the dominant border color of an image.

    Detection succeeds only when the largest cluster holds at least
    ``Config.BACKGROUND_MAJORITY`` of the border samples; ambiguous borders
    are reported as failures so they are never auto-edited.

    Args:
        image: Decoded source image.
        tolerance: Inclusive per-channel distance, defaults to
            ``Config.BACKGROUND_TOLERANCE``.

    Returns:
        BackgroundDetection with the candidate color and the vote counts.
    """
    if tolerance is None:
        tolerance = Config.BACKGROUND_TOLERANCE
    validate_tolerance(tolerance)

    samples = sample_border(image)
    clusters = cluster_colors(samples, tolerance)
    total = len(samples)

    if not clusters:
        return BackgroundDetection(color=(255, 255, 255), success=False, count=0, total=0)

    # max() keeps the first of equal counts, i.e. the earliest cluster
    best = max(clusters, key=lambda c: c.count)
    success = best.count / total >= Config.BACKGROUND_MAJORITY

    logger.debug(
        "Border of %dx%d: %d clusters, top %s holds %d/%d (%s)",
        image.width,
        image.height,
        len(clusters),
        best.color,
        best.count,
        total,
        "dominant" if success else "ambiguous",
    )

    return BackgroundDetection(color=best.color, success=success, count=best.count, total=total)
