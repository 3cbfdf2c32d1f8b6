"""
Region detection over binary alpha masks.

This module provides the mask and rectangle types, the marching-squares
boundary tracer, and the raster scanner that ties them together.
"""

from .mask import BinaryMask, MaskIndexError
from .rect import Rect
from .tracer import trace_boundary, TraceDidNotConvergeError, default_step_limit
from .detection import detect_regions, RegionDetectionConfig

__all__ = [
    'BinaryMask',
    'MaskIndexError',
    'Rect',
    'trace_boundary',
    'TraceDidNotConvergeError',
    'default_step_limit',
    'detect_regions',
    'RegionDetectionConfig',
]
