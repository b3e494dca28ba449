"""Grid cell component."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GridCell:
    """One position of the mirrored 5×5 grid.

    Attributes:
        value: Digest byte driving the paint decision.
        index: Zero-based row-major position within the grid.
    """

    value: int
    index: int

    @property
    def painted(self) -> bool:
        return self.value % 2 == 0
