from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, order=True)
class Rect:
    """
    Axis-aligned rectangle (x, y, w, h).

    Both edges are inclusive: the rectangle spans columns x..=x+w and rows
    y..=y+h, so it covers (w+1) x (h+1) pixels.
    """

    x: int
    y: int
    w: int
    h: int

    def __post_init__(self) -> None:
        if min(self.x, self.y, self.w, self.h) < 0:
            raise ValueError(f"Rect fields must be non-negative, got {self.astuple()}")

    def contains(self, x: int, y: int) -> bool:
        return (self.x <= x <= self.x + self.w and
                self.y <= y <= self.y + self.h)

    def skip_past(self, y: int) -> Tuple[int, int]:
        """Scan cursor one column beyond the right edge, on row y."""
        return (self.x + self.w + 1, y)

    def astuple(self) -> Tuple[int, int, int, int]:
        return (self.x, self.y, self.w, self.h)

    def __str__(self) -> str:
        return str(self.astuple())
