"""Axis-aligned integer rectangles used for sprites, pipes and buttons."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """A rectangle with its top-left corner at (x, y) and size w by h."""

    x: int
    y: int
    w: int
    h: int

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    @property
    def is_empty(self) -> bool:
        return self.w <= 0 or self.h <= 0

    def intersects(self, other: Rect) -> bool:
        """Return True if the two rectangles share a region of positive area.

        Rectangles that only touch along an edge do not intersect, and an
        empty rectangle intersects nothing.
        """
        if self.is_empty or other.is_empty:
            return False
        overlap_w = min(self.right, other.right) - max(self.x, other.x)
        overlap_h = min(self.bottom, other.bottom) - max(self.y, other.y)
        return overlap_w > 0 and overlap_h > 0

    def contains_point(self, x: int, y: int) -> bool:
        """Return True if (x, y) lies inside the rectangle, edges included."""
        return self.x <= x <= self.right and self.y <= y <= self.bottom

    def moved(self, dx: int, dy: int) -> Rect:
        """Return a copy of the rectangle shifted by (dx, dy)."""
        return Rect(self.x + dx, self.y + dy, self.w, self.h)