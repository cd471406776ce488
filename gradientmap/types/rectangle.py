from __future__ import annotations
from typing import NamedTuple


class Rectangle(NamedTuple):
    """Axis-aligned pixel rectangle. ``right`` and ``bottom`` are exclusive."""
    left: int
    top: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, x: int, y: int) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom

    def fits_within(self, width: int, height: int) -> bool:
        """True if the rectangle lies fully inside a ``width`` x ``height`` image."""
        return (
            self.left >= 0
            and self.top >= 0
            and self.width >= 0
            and self.height >= 0
            and self.right <= width
            and self.bottom <= height
        )

    @classmethod
    def full(cls, width: int, height: int) -> Rectangle:
        return cls(0, 0, width, height)
