"""Bounding origin of the visible cells."""

from __future__ import annotations

from typing import Iterable

from tdsvg.core.canvas import CanvasPoint


def bounding_origin(points: Iterable[CanvasPoint]) -> tuple[int, int]:
    """Return `(min_x, min_y)` over `points`.

    Both minima are computed independently: the result is the axis-aligned
    corner of the whole set, not necessarily a point of it.
    Empty input yields `(0, 0)`.
    """
    min_x: int | None = None
    min_y: int | None = None
    for p in points:
        if min_x is None or p.x < min_x:
            min_x = p.x
        if min_y is None or p.y < min_y:
            min_y = p.y
    if min_x is None or min_y is None:
        return (0, 0)
    return (min_x, min_y)
