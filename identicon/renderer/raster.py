"""Rasterization and encoding.

``draw_image`` paints every region of an ``Image`` onto a fresh canvas with
Pillow's ``ImageDraw``. Regions never overlap, so drawing order does not
affect the result. Encoding to a container format is kept separate in
``encode_image`` so callers can swap encoders.
"""

from io import BytesIO

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImageModule, ImageDraw
from PIL.Image import Image as PILImage

from identicon.config import BACKGROUND, CANVAS_SIZE, DEFAULT_FORMAT
from identicon.image import Image

UInt8Array = npt.NDArray[np.uint8]


def new_canvas() -> PILImage:
    """Return a blank ``CANVAS_SIZE`` square RGB canvas."""
    return PILImageModule.new("RGB", (CANVAS_SIZE, CANVAS_SIZE), BACKGROUND)


def draw_image(image: Image) -> PILImage:
    """Fill each region of ``image.pixel_map`` with ``image.color``.

    Both rectangle corners are inclusive. A new canvas is created per call
    and never shared.
    """
    canvas = new_canvas()
    draw = ImageDraw.Draw(canvas)
    fill = image.color.as_rgb()
    for region in image.pixel_map:
        draw.rectangle(region.as_box(), fill=fill)
    return canvas


def encode_image(canvas: PILImage, format: str = DEFAULT_FORMAT) -> bytes:
    """Encode ``canvas`` into an in-memory image container (PNG by default)."""
    buffer = BytesIO()
    canvas.save(buffer, format=format)
    return buffer.getvalue()


def image_to_array(canvas: PILImage) -> UInt8Array:
    """Return the canvas pixels as an ``(H, W, 3)`` uint8 array."""
    return np.array(canvas.convert("RGB"), dtype=np.uint8)
