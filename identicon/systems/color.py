"""Color picking system.

Derives the fill color from the first three digest bytes, in order, as red,
green and blue.
"""

from dataclasses import replace

from identicon.components import Color
from identicon.image import Image


def pick_color(image: Image) -> Image:
    """Set ``color`` from ``hex[0]``, ``hex[1]`` and ``hex[2]``.

    Args:
        image (Image): Record with ``hex`` populated.

    Returns:
        Image: New record with ``color`` replaced.

    Raises:
        ValueError: If the digest holds fewer than three bytes.
    """
    if len(image.hex) < 3:
        raise ValueError(f"Digest too short to pick a color: {list(image.hex)}")
    color = Color(red=image.hex[0], green=image.hex[1], blue=image.hex[2])
    return replace(image, color=color)
