"""identicon.components
=======================

Value objects carried through the pipeline. All classes are frozen
``@dataclass`` records with no behavior beyond small accessors, e.g.::

    from identicon.components import Color, GridCell, PixelRegion, Point
"""

from .color import Color
from .grid_cell import GridCell
from .pixel_region import PixelRegion, Point

__all__ = ["Color", "GridCell", "PixelRegion", "Point"]
