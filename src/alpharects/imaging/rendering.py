"""
Overlay rendering for detected regions.

Paints rectangles back into an RGBA image for visual inspection.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Tuple

import numpy as np
from PIL import Image

from ..logging import get_logger
from ..regions.rect import Rect

logger = get_logger(__name__)

OVERLAY_ALPHA = 205


class OverlaySaveError(Exception):
    """Raised when an overlay image cannot be written."""


def render_overlay(
    size: Tuple[int, int],
    rects: Iterable[Rect],
    alpha: int = OVERLAY_ALPHA,
    base: Optional[Image.Image] = None,
) -> Image.Image:
    """
    Set the alpha of every pixel covered by a rectangle.

    Args:
        size: (width, height) of the output
        rects: Rectangles to paint; edges are inclusive and clipped to the image
        alpha: Alpha value written inside rectangles
        base: Image to paint over (default: transparent black canvas)

    Returns:
        RGBA image with color channels untouched
    """
    width, height = size
    if base is None:
        canvas = np.zeros((height, width, 4), dtype=np.uint8)
    else:
        if base.size != (width, height):
            raise ValueError(f"Base image is {base.size[0]}x{base.size[1]}, expected {width}x{height}")
        canvas = np.array(base.convert("RGBA"), dtype=np.uint8)

    count = 0
    for rect in rects:
        # +1 on the far edge: both edges are inclusive
        canvas[rect.y:rect.y + rect.h + 1, rect.x:rect.x + rect.w + 1, 3] = alpha
        count += 1

    logger.debug(f"Rendered {count} rectangles onto {width}x{height} overlay")
    return Image.fromarray(canvas)


def save_overlay(image: Image.Image, path: Path | str) -> Path:
    """
    Save an overlay image; the format follows the file extension.

    Raises:
        OverlaySaveError: If the image cannot be written
    """
    path = Path(path)
    try:
        image.save(path)
    except (OSError, ValueError) as exc:
        raise OverlaySaveError(f"Could not save output file {path}: {exc}") from exc

    logger.debug(f"Saved overlay to {path}")
    return path
