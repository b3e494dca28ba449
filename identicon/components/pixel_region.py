"""Pixel region component.

Integer canvas coordinates of the square painted for one grid cell. Both
corners are inclusive, matching Pillow's ``ImageDraw.rectangle``.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Canvas coordinate.

    Attributes:
        x: Column in pixels (0 at left).
        y: Row in pixels (0 at top).
    """

    x: int
    y: int


@dataclass(frozen=True)
class PixelRegion:
    """Axis-aligned square on the canvas.

    Attributes:
        top_left: Upper left corner.
        bottom_right: Lower right corner.
    """

    top_left: Point
    bottom_right: Point

    def as_box(self) -> tuple[int, int, int, int]:
        """Return ``(x0, y0, x1, y1)`` for ``ImageDraw.rectangle``."""
        return (
            self.top_left.x,
            self.top_left.y,
            self.bottom_right.x,
            self.bottom_right.y,
        )

    def contains(self, point: Point) -> bool:
        return (
            self.top_left.x <= point.x <= self.bottom_right.x
            and self.top_left.y <= point.y <= self.bottom_right.y
        )
