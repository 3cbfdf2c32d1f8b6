"""
Region detection for opaque blobs.

Raster-scans a binary mask, traces each newly found region with the
marching-squares tracer, and skips over the area of regions already found.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..config import Settings
from ..logging import get_logger
from .mask import BinaryMask
from .rect import Rect
from .tracer import trace_boundary

logger = get_logger(__name__)


@dataclass
class RegionDetectionConfig:
    """Configuration for region detection."""

    # Initial scan cursor; the tracer looks one pixel up and left of a seed
    start_x: int = 1
    start_y: int = 1

    # Tracer step limit (None = bound derived from the mask size)
    max_trace_steps: Optional[int] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "RegionDetectionConfig":
        return cls(
            start_x=settings.start_x,
            start_y=settings.start_y,
            max_trace_steps=settings.max_trace_steps,
        )


def skip_seen_regions(regions: Sequence[Rect], x: int, y: int) -> Tuple[int, int]:
    """
    Move the scan cursor past any region that contains it.

    Every region is checked in discovery order against the cursor as updated
    so far, so when several regions match the last one decides the jump.
    """
    for region in regions:
        if region.contains(x, y):
            x, y = region.skip_past(y)
    return x, y


def detect_regions(
    mask: BinaryMask,
    config: Optional[RegionDetectionConfig] = None
) -> List[Rect]:
    """
    Find a bounding rectangle for each opaque region of a mask.

    Args:
        mask: Binary mask to scan
        config: Detection configuration (uses defaults if None)

    Returns:
        Rectangles in the order their seed pixels were reached
        (top-to-bottom, left-to-right)

    Raises:
        TraceDidNotConvergeError: If a boundary trace exceeds its step limit
    """
    if config is None:
        config = RegionDetectionConfig()

    width, height = mask.dimensions()
    logger.debug(f"Scanning {width}x{height} mask with {mask.count()} opaque pixels")

    regions: List[Rect] = []
    x, y = config.start_x, config.start_y

    while y < height:
        while x < width:
            if mask.at(x, y):
                region = trace_boundary(mask, (x, y), max_steps=config.max_trace_steps)
                logger.debug(f"Region {len(regions) + 1} from seed ({x}, {y}): {region}")
                regions.append(region)
            x += 1
            x, y = skip_seen_regions(regions, x, y)

        x = config.start_x
        y += 1
        x, y = skip_seen_regions(regions, x, y)

    logger.debug(f"Found {len(regions)} regions")
    return regions
