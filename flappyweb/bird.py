"""The player's bird: position, vertical velocity and tilt."""

from __future__ import annotations

from .geometry import Rect

MAX_TILT = 30.0
RISING_TILT = -30.0
TILT_STEP = 2.0


class Bird:
    """A bird falling under gravity that can jump upwards."""

    def __init__(self, x: int, y: int, w: int, h: int) -> None:
        self.rect = Rect(x, y, w, h)
        self.velocity = 0.0
        self.angle = 0.0

    def update(self, gravity: float) -> None:
        """Advance one frame: accelerate, move and tilt the bird."""
        self.velocity += gravity
        self.rect = self.rect.moved(0, int(self.velocity))
        if self.velocity < 0:
            self.angle = RISING_TILT
        else:
            self.angle = min(MAX_TILT, self.angle + TILT_STEP)

    def jump(self, strength: float) -> None:
        """Set the vertical velocity to ``strength`` (negative is upwards)."""
        self.velocity = strength

    def __repr__(self) -> str:
        return f"Bird(rect={self.rect!r}, velocity={self.velocity!r}, angle={self.angle!r})"