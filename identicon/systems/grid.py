"""Grid building system.

Expands the digest into a horizontally symmetric 5×5 grid. The first byte is
skipped (it already seeded the red channel), the remaining 15 are cut into
five triplets and each triplet ``[a, b, c]`` becomes the row
``[a, b, c, b, a]``. Cells are numbered in row-major order.
"""

from dataclasses import replace
from typing import List

from pyrsistent import pvector

from identicon.components import GridCell
from identicon.config import ROW_SEED_LENGTH
from identicon.image import Image
from identicon.utils.grid import chunk, mirror_row


def build_grid(image: Image) -> Image:
    """Populate ``grid`` with 25 mirrored, indexed cells.

    Args:
        image (Image): Record with ``hex`` populated.

    Returns:
        Image: New record whose ``grid`` is row-major ``GridCell`` entries.
    """
    values: List[int] = []
    for row in chunk(image.hex[1:], ROW_SEED_LENGTH):
        values.extend(mirror_row(row))
    grid = pvector(GridCell(value=value, index=index) for index, value in enumerate(values))
    return replace(image, grid=grid)
