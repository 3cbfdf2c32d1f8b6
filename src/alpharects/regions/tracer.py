"""
Marching-squares boundary tracer.

Walks the contour of the opaque region around a seed pixel and returns the
rectangle spanned by the corners where the walk turns.
"""

from typing import Optional, Tuple

from ..logging import get_logger
from .mask import BinaryMask
from .rect import Rect

logger = get_logger(__name__)

# Step direction per cell configuration. Bits, high to low:
# current (x, y), left (x-1, y), above (x, y-1), up-left (x-1, y-1).
LOOKUP_DX = (
     1, 0, 1, 1,
    -1, 0, -1, 1,
     0, 0, 0, 0,
    -1, 0, -1, 2,
)
LOOKUP_DY = (
     0, -1, 0, 0,
     0, -1, 0, 0,
     1, -1, 1, 1,
     0, -1, 0, 2,
)

# Marks a cell with no usable direction (fully opaque neighbourhood)
SENTINEL = 2

# Left and above opaque, current and up-left clear
PINCH_HORIZONTAL = 6
# Current and up-left opaque, left and above clear
PINCH_VERTICAL = 9

# Distinct (pdx, pdy) values: unset, or one of the 3x3 direction pairs
_TURN_STATES = 10


class TraceDidNotConvergeError(RuntimeError):
    """Raised when a trace runs past its step limit without closing."""

    def __init__(self, seed: Tuple[int, int], max_steps: int) -> None:
        super().__init__(
            f"Boundary trace from seed {seed} did not converge within {max_steps} steps"
        )
        self.seed = seed
        self.max_steps = max_steps


def default_step_limit(width: int, height: int) -> int:
    """
    Upper bound on the length of any trace that terminates.

    The next move depends only on the position and the last recorded turn,
    so a walk longer than the number of such states has repeated one and
    will loop forever.
    """
    return _TURN_STATES * width * height


def cell_index(mask: BinaryMask, x: int, y: int) -> int:
    """4-bit configuration of the 2x2 cell whose lower-right pixel is (x, y)."""
    i = int(mask.at(x, y))

    i <<= 1
    if x > 0:
        i |= mask.at(x - 1, y)

    i <<= 1
    if y > 0:
        i |= mask.at(x, y - 1)

    i <<= 1
    if x > 0 and y > 0:
        i |= mask.at(x - 1, y - 1)

    return i


def resolve_direction(
    i: int,
    pdx: Optional[int],
    pdy: Optional[int],
) -> Optional[Tuple[int, int]]:
    """
    Step direction for cell configuration i, given the last recorded turn.

    The two diagonal pinch cells keep the walk on the side it arrived from.
    Returns None for the ambiguous fully opaque cell.
    """
    if i == PINCH_HORIZONTAL:
        return (-1 if pdy == -1 else 1, 0)
    if i == PINCH_VERTICAL:
        return (0, -1 if pdx == 1 else 1)

    dx = LOOKUP_DX[i]
    dy = LOOKUP_DY[i]
    if dx == SENTINEL or dy == SENTINEL:
        return None
    return (dx, dy)


def trace_boundary(
    mask: BinaryMask,
    seed: Tuple[int, int],
    max_steps: Optional[int] = None,
) -> Rect:
    """
    Trace the contour around an opaque seed pixel.

    Args:
        mask: Binary mask to read
        seed: (x, y) of an opaque pixel
        max_steps: Maximum number of moves; defaults to default_step_limit() for the mask

    Returns:
        Bounding rectangle of the corners recorded along the walk, or the
        whole image when an ambiguous cell is reached

    Raises:
        TraceDidNotConvergeError: If the walk takes max_steps moves without finishing
    """
    width, height = mask.dimensions()
    if max_steps is None:
        max_steps = default_step_limit(width, height)

    start_x, start_y = seed
    x, y = seed

    pdx: Optional[int] = None
    pdy: Optional[int] = None
    r_x, r_y = x, y
    r_w, r_h = 0, 0

    steps = 0
    while True:
        i = cell_index(mask, x, y)

        direction = resolve_direction(i, pdx, pdy)
        if direction is None:
            logger.debug(f"Ambiguous cell at ({x}, {y}) tracing from {seed}; using whole image")
            return Rect(0, 0, width, height)
        dx, dy = direction

        # Corners are only recorded where both components change
        if pdx != dx and pdy != dy:
            if x <= r_x:
                corner_x = r_x + r_w
                r_x = x
                r_w = corner_x - r_x
            if x >= r_x + r_w:
                r_w = x - r_x

            if y <= r_y:
                corner_y = r_y + r_h
                r_y = y
                r_h = corner_y - r_y
            if y >= r_y + r_h:
                r_h = y - r_y

            pdx, pdy = dx, dy

        x += dx
        y += dy
        steps += 1

        if not (0 <= x < width and 0 <= y < height):
            break
        if x == start_x and y == start_y:
            break

        if steps >= max_steps:
            raise TraceDidNotConvergeError(seed, max_steps)

    return Rect(r_x, r_y, r_w, r_h)
