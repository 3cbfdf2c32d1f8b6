"""Image file I/O around the region detector."""

from .loading import ImageLoadError, load_mask
from .rendering import OverlaySaveError, render_overlay, save_overlay

__all__ = [
    "ImageLoadError",
    "load_mask",
    "OverlaySaveError",
    "render_overlay",
    "save_overlay",
]
