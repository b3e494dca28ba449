"""Cell filter system: only even-valued cells are painted."""

from dataclasses import replace

from pyrsistent import pvector

from identicon.image import Image


def filter_odd_squares(image: Image) -> Image:
    """Drop odd-valued cells from ``grid``, preserving order.

    An all-odd grid yields an empty ``grid``; the canvas is then left blank.
    """
    painted = pvector(cell for cell in image.grid if cell.painted)
    return replace(image, grid=painted)
