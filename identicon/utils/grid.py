"""Grid geometry helpers.

Pure functions shared by the grid and pixel stages. ``grid_side`` derives the
side length from the cell count so the square relationship stays explicit.
"""

import math
from typing import List, Sequence, TypeVar

from identicon.components import PixelRegion, Point
from identicon.config import CELL_MARGIN, CELL_SIZE, GRID_CELLS, SQUARE_SIZE

T = TypeVar("T")


def chunk(items: Sequence[T], size: int) -> List[List[T]]:
    """Split ``items`` into consecutive groups of ``size``, discarding a partial tail."""
    if size <= 0:
        raise ValueError(f"Chunk size must be positive, got {size}")
    full = len(items) - len(items) % size
    return [list(items[i : i + size]) for i in range(0, full, size)]


def mirror_row(row: Sequence[T]) -> List[T]:
    """Mirror a row around its last element: ``[1, 2, 3] -> [1, 2, 3, 2, 1]``."""
    return list(row) + list(reversed(row))[1:]


def grid_side(cell_count: int = GRID_CELLS) -> int:
    """Return the side length of a square grid holding ``cell_count`` cells."""
    return round(math.sqrt(cell_count))


def cell_region(index: int, side: int = grid_side()) -> PixelRegion:
    """Return the inset square painted for the cell at ``index``.

    Args:
        index: Row-major cell position.
        side: Grid side length.

    Returns:
        PixelRegion: ``SQUARE_SIZE`` square inset ``CELL_MARGIN`` pixels inside
            the ``CELL_SIZE`` cell.
    """
    column = index % side
    row = index // side
    top_left = Point(column * CELL_SIZE + CELL_MARGIN, row * CELL_SIZE + CELL_MARGIN)
    bottom_right = Point(top_left.x + SQUARE_SIZE, top_left.y + SQUARE_SIZE)
    return PixelRegion(top_left=top_left, bottom_right=bottom_right)
