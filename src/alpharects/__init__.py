"""
alpharects: bounding rectangles for opaque regions of an image.

Regions are found by raster-scanning the thresholded alpha channel and
tracing each region's boundary with marching squares.
"""

from .regions import (
    BinaryMask,
    MaskIndexError,
    Rect,
    RegionDetectionConfig,
    TraceDidNotConvergeError,
    detect_regions,
    trace_boundary,
)
from .imaging import (
    ImageLoadError,
    OverlaySaveError,
    load_mask,
    render_overlay,
    save_overlay,
)

__version__ = "0.1.0"

__all__ = [
    "BinaryMask",
    "MaskIndexError",
    "Rect",
    "RegionDetectionConfig",
    "TraceDidNotConvergeError",
    "detect_regions",
    "trace_boundary",
    "ImageLoadError",
    "OverlaySaveError",
    "load_mask",
    "render_overlay",
    "save_overlay",
]
