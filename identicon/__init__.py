"""identicon
=============

Deterministic 250×250 avatar images derived from arbitrary strings.

Typical use::

    from identicon import identicon, identicon_bytes

    canvas = identicon("alice")          # PIL.Image.Image
    png = identicon_bytes("alice")       # encoded PNG bytes

The pipeline stages are exposed individually in :mod:`identicon.hashing`,
:mod:`identicon.systems` and :mod:`identicon.renderer` for callers that need
the intermediate :class:`identicon.image.Image` record.
"""

from .image import Image
from .pipeline import build_image, identicon, identicon_bytes
from .writer import WriteResult, save_image

__all__ = [
    "Image",
    "WriteResult",
    "build_image",
    "identicon",
    "identicon_bytes",
    "save_image",
]
