"""Immutable ``Image`` record threaded through the pipeline.

Each stage in :mod:`identicon.systems` is a pure function that takes an
``Image`` and returns a *new* one with a single field filled in; nothing is
mutated in place, so every call to :func:`identicon.pipeline.identicon` owns
its own record and no state crosses call boundaries.

Field lifecycle:

* ``hex`` is set once by :func:`identicon.hashing.hash_string`.
* ``color`` is set by :func:`identicon.systems.color.pick_color`.
* ``grid`` holds all 25 cells after
  :func:`identicon.systems.grid.build_grid` and only painted cells after
  :func:`identicon.systems.filter.filter_odd_squares`.
* ``pixel_map`` is set by :func:`identicon.systems.pixels.build_pixel_map`.
"""

from dataclasses import dataclass
from typing import Any

from pyrsistent import PMap, pmap, pvector
from pyrsistent.typing import PVector

from identicon.components import Color, GridCell, PixelRegion
from identicon.types import Byte


@dataclass(frozen=True)
class Image:
    """Intermediate identicon description.

    Attributes:
        hex (PVector[Byte]): Digest bytes of the input string.
        color (Color): Fill color for painted squares.
        grid (PVector[GridCell]): Grid cells, all or painted only depending on stage.
        pixel_map (PVector[PixelRegion]): One canvas region per painted cell.
    """

    hex: PVector[Byte] = pvector()
    color: Color = Color()
    grid: PVector[GridCell] = pvector()
    pixel_map: PVector[PixelRegion] = pvector()

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse view of the populated fields, for debugging and logs."""
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if isinstance(value, type(pvector())) and len(value) == 0:
                continue
            description = description.set(field, value)
        return description
