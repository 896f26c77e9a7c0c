"""Reading and writing the best score to a small text file."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Union

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

PathLike = Union[str, "os.PathLike[str]"]


def load_high_score(path: PathLike) -> int:
    """Return the integer at the start of the file, or 0 if there is none.

    A missing or unreadable file also gives 0. Values beyond the 32-bit
    signed range are clamped to it.
    """
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError:
        return 0
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    return max(_INT_MIN, min(_INT_MAX, int(match.group(1))))


def save_high_score(path: PathLike, score: int) -> None:
    """Write ``score`` to the file, replacing its contents.

    A file that cannot be opened for writing is silently left alone.
    """
    try:
        Path(path).write_text(str(score), encoding="utf-8")
    except OSError:
        pass