"""A pair of pipes, one hanging from the top and one rising from below."""

from __future__ import annotations

from .geometry import Rect


class Pipe:
    """Two pipe segments that scroll left together."""

    def __init__(self, x1: int, y1: int, x2: int, y2: int, w: int, h: int) -> None:
        self.top = Rect(x1, y1, w, h)
        self.bottom = Rect(x2, y2, w, h)
        self.passed = False

    def update(self, speed: int) -> None:
        """Scroll both segments ``speed`` pixels to the left."""
        self.top = self.top.moved(-speed, 0)
        self.bottom = self.bottom.moved(-speed, 0)

    def collides_with(self, rect: Rect) -> bool:
        """Return True if ``rect`` overlaps either segment."""
        return rect.intersects(self.top) or rect.intersects(self.bottom)

    @property
    def x(self) -> int:
        """Horizontal position of the pipe's left edge."""
        return self.top.x

    def __repr__(self) -> str:
        return f"Pipe(top={self.top!r}, bottom={self.bottom!r}, passed={self.passed!r})"