"""Color component.

RGB triple taken from the leading digest bytes. A fresh ``Image`` carries
black until :func:`identicon.systems.color.pick_color` runs.
"""

from dataclasses import dataclass

from identicon.types import RGB


@dataclass(frozen=True)
class Color:
    """Fill color of painted squares.

    Attributes:
        red: Red channel in [0, 255].
        green: Green channel in [0, 255].
        blue: Blue channel in [0, 255].
    """

    red: int = 0
    green: int = 0
    blue: int = 0

    def as_rgb(self) -> RGB:
        return (self.red, self.green, self.blue)
