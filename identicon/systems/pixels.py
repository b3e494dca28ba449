"""Pixel mapping system.

Converts each painted cell index into the canvas square it occupies. With a
side of ``n`` cells, index ``i`` lands at column ``i % n`` and row ``i // n``;
see :func:`identicon.utils.grid.cell_region` for the geometry.
"""

from dataclasses import replace

from pyrsistent import pvector

from identicon.config import GRID_CELLS
from identicon.image import Image
from identicon.utils.grid import cell_region, grid_side


def build_pixel_map(image: Image) -> Image:
    """Populate ``pixel_map`` with one region per cell in ``grid``.

    Args:
        image (Image): Record whose ``grid`` holds the painted cells.

    Returns:
        Image: New record with ``pixel_map`` in the same order as ``grid``.
    """
    side = grid_side(GRID_CELLS)
    pixel_map = pvector(cell_region(cell.index, side) for cell in image.grid)
    return replace(image, pixel_map=pixel_map)
