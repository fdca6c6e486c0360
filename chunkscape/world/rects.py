from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from chunkscape.config import DEFAULT_FOOTPRINT_LONG, DEFAULT_FOOTPRINT_SHORT


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def x_max(self) -> int:
        return self.x + self.width

    @property
    def y_max(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def cells(self) -> list[tuple[int, int]]:
        return [(x, y) for x in range(self.x, self.x_max) for y in range(self.y, self.y_max)]


EMPTY_RECT = Rect(0, 0, 0, 0)


@dataclass(frozen=True)
class FootprintRule:
    """Minimum building footprint, accepted in either orientation (long x short or short x long)."""

    min_long: int = DEFAULT_FOOTPRINT_LONG
    min_short: int = DEFAULT_FOOTPRINT_SHORT

    def accepts(self, rect: Rect) -> bool:
        fits_horizontal = rect.width >= self.min_long and rect.height >= self.min_short
        fits_vertical = rect.width >= self.min_short and rect.height >= self.min_long
        return fits_horizontal or fits_vertical


def is_rect_valid(occupancy: np.ndarray, x: int, y: int, width: int, height: int) -> bool:
    """True when every cell of the rectangle is set in the occupancy grid."""
    size_x, size_y = occupancy.shape
    # Out of bounds here is a fitter bug, never a data condition
    assert 0 <= x and 0 <= y and x + width <= size_x and y + height <= size_y, (
        f"rect ({x},{y},{width},{height}) outside {size_x}x{size_y} grid"
    )
    return bool(occupancy[x:x + width, y:y + height].all())


def fit_rectangle(blob: Iterable[tuple[int, int]], occupancy: np.ndarray) -> Rect:
    """Largest all-true axis-aligned rectangle anchored (top-left) on a blob cell.

    Brute force: every blob cell as the corner, widths growing from 1, heights
    growing from 1. The rectangle is checked against the whole occupancy grid,
    so it may spill into cells of other blobs. Ties keep the first found.
    """
    occ = np.asarray(occupancy, dtype=bool)
    size_x, size_y = occ.shape
    best = EMPTY_RECT
    best_area = 0

    for x0, y0 in blob:
        limit_w = size_x - x0
        limit_h = size_y - y0
        for w in range(1, limit_w + 1):
            # A gap on the first row kills this width and every wider one
            if not occ[x0 + w - 1, y0]:
                break
            for h in range(1, limit_h + 1):
                if w * h <= best_area:
                    continue
                if not is_rect_valid(occ, x0, y0, w, h):
                    # taller rectangles at this width keep the same gap
                    break
                best_area = w * h
                best = Rect(x0, y0, w, h)
    return best
