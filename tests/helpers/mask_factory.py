"""Helper functions for building test masks and images."""

from pathlib import Path
from typing import Iterable, List, Tuple

import numpy as np
from PIL import Image

from alpharects.regions.mask import BinaryMask


def mask_from_art(art: str) -> BinaryMask:
    """
    Build a mask from ASCII art: '#' is opaque, anything else transparent.

    Leading/trailing blank lines are dropped and rows are stripped of
    surrounding whitespace, so triple-quoted strings can be indented.
    """
    rows = [line.strip() for line in art.strip().splitlines()]
    return BinaryMask([[c == "#" for c in row] for row in rows])


def blocks_array(
    width: int,
    height: int,
    blocks: Iterable[Tuple[int, int, int, int]],
) -> np.ndarray:
    """
    Boolean (height, width) array with opaque blocks.

    Each block is (x0, y0, x1, y1) with inclusive corners.
    """
    grid = np.zeros((height, width), dtype=bool)
    for x0, y0, x1, y1 in blocks:
        grid[y0:y1 + 1, x0:x1 + 1] = True
    return grid


def mask_with_blocks(
    width: int,
    height: int,
    blocks: Iterable[Tuple[int, int, int, int]],
) -> BinaryMask:
    return BinaryMask(blocks_array(width, height, blocks))


def opaque_pixels(mask: BinaryMask) -> List[Tuple[int, int]]:
    ys, xs = np.nonzero(mask.pixels)
    return [(int(x), int(y)) for x, y in zip(xs, ys)]


def write_rgba_png(
    tmp_path: Path,
    grid: np.ndarray,
    name: str = "input.png",
    alpha: int = 255,
) -> Path:
    """Write a PNG whose alpha is `alpha` where grid is True and 0 elsewhere."""
    height, width = grid.shape
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[..., 0] = 200
    pixels[..., 3] = np.where(grid, alpha, 0)
    path = tmp_path / name
    Image.fromarray(pixels).save(path)
    return path
