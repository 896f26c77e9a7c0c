"""A clickable on-screen button."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .geometry import Rect


@dataclass
class Button:
    """A rectangle that reacts to clicks, drawn with an optional image."""

    rect: Rect = Rect(0, 0, 0, 0)
    image: Any = None

    def is_clicked(self, x: int, y: int) -> bool:
        """Return True if a click at (x, y) lands on the button, edges included."""
        return self.rect.contains_point(x, y)