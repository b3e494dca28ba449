"""Rendering subpackage.

Turns a fully mapped :class:`identicon.image.Image` into a Pillow raster and
encodes it for callers. See :mod:`identicon.renderer.raster`.
"""

from .raster import draw_image, encode_image, image_to_array, new_canvas

__all__ = ["draw_image", "encode_image", "image_to_array", "new_canvas"]
