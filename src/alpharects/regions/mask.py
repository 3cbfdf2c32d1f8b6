"""
Binary mask over an image's thresholded alpha channel.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
from PIL import Image


class MaskIndexError(IndexError):
    """Raised when a mask is read outside its bounds."""


class BinaryMask:
    """Immutable boolean grid, True where a pixel is opaque."""

    def __init__(self, pixels) -> None:
        grid = np.array(pixels, dtype=bool)
        if grid.ndim != 2:
            raise ValueError(f"Mask must be two-dimensional, got shape {grid.shape}")
        grid.setflags(write=False)
        self._pixels = grid

    @classmethod
    def from_image(cls, image: Image.Image) -> BinaryMask:
        """
        Threshold the alpha channel of a PIL image at zero.

        The image is converted to luminance+alpha first; palette images go
        through RGBA so their transparency entry survives the conversion.
        """
        if image.mode in ("P", "PA"):
            image = image.convert("RGBA")
        alpha = np.asarray(image.convert("LA"))[:, :, 1]
        return cls(alpha > 0)

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def pixels(self) -> np.ndarray:
        """Read-only (height, width) view of the grid."""
        return self._pixels

    def dimensions(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def at(self, x: int, y: int) -> bool:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise MaskIndexError(
                f"Pixel ({x}, {y}) outside {self.width}x{self.height} mask"
            )
        return bool(self._pixels[y, x])

    def count(self) -> int:
        """Number of opaque pixels."""
        return int(np.count_nonzero(self._pixels))

    def __repr__(self) -> str:
        return f"BinaryMask({self.width}x{self.height}, opaque={self.count()})"
