"""Common type aliases.

``HashFn`` and ``EncodeFn`` are the pluggable primitives the pipeline depends
on but does not own: swapping the digest algorithm or the raster encoder
never touches stage logic.
"""

from typing import Callable, Tuple

from PIL.Image import Image as PILImage

Byte = int

RGB = Tuple[int, int, int]

HashFn = Callable[[bytes], bytes]
EncodeFn = Callable[[PILImage, str], bytes]
