"""Pipeline orchestration.

Composes the stages in order; each consumes the previous record and returns
a new one:

1. :func:`identicon.hashing.hash_string` computes the digest.
2. :func:`identicon.systems.color.pick_color` takes the fill color.
3. :func:`identicon.systems.grid.build_grid` builds the mirrored grid.
4. :func:`identicon.systems.filter.filter_odd_squares` keeps painted cells.
5. :func:`identicon.systems.pixels.build_pixel_map` maps cells to regions.
6. :func:`identicon.renderer.raster.draw_image` rasterizes the regions.

``identicon`` is a pure function of its input; no state is shared between
calls, so callers may run it from several threads at once.
"""

import logging

from PIL.Image import Image as PILImage

from identicon.config import DEFAULT_FORMAT
from identicon.hashing import hash_string, md5_digest
from identicon.image import Image
from identicon.renderer.raster import draw_image, encode_image
from identicon.systems.color import pick_color
from identicon.systems.filter import filter_odd_squares
from identicon.systems.grid import build_grid
from identicon.systems.pixels import build_pixel_map
from identicon.types import EncodeFn, HashFn

logger = logging.getLogger(__name__)


def build_image(input: str, hash_fn: HashFn = md5_digest) -> Image:
    """Run stages 1 to 5 and return the fully mapped ``Image`` record."""
    image = hash_string(input, hash_fn)
    image = pick_color(image)
    image = build_grid(image)
    image = filter_odd_squares(image)
    image = build_pixel_map(image)
    logger.debug(
        "Mapped %r: color=%s painted=%d",
        input,
        image.color.as_rgb(),
        len(image.pixel_map),
    )
    return image


def identicon(input: str, hash_fn: HashFn = md5_digest) -> PILImage:
    """Return the 250×250 identicon canvas for ``input``.

    Args:
        input (str): Any string, including the empty string.
        hash_fn (HashFn): Digest primitive, MD5 unless overridden.

    Returns:
        PIL.Image.Image: Freshly drawn RGB canvas.
    """
    return draw_image(build_image(input, hash_fn))


def identicon_bytes(
    input: str,
    format: str = DEFAULT_FORMAT,
    hash_fn: HashFn = md5_digest,
    encode_fn: EncodeFn = encode_image,
) -> bytes:
    """Return ``identicon(input)`` encoded with ``encode_fn`` (PNG by default)."""
    data = encode_fn(identicon(input, hash_fn), format)
    logger.debug("Encoded %r as %s (%d bytes)", input, format, len(data))
    return data
