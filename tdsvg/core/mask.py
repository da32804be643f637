# File: tdsvg/core/mask.py
# Project: TriangleDrawSvg (TDS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Máscara de visibilidad (silueta hexagonal del lienzo físico).
# Notes: Solo lectura. La instancia global se construye una vez (bajo lock).
from __future__ import annotations

import logging
import threading
from typing import Iterable, Iterator

from tdsvg.core.canvas import CanvasPoint, TriangleCanvas, check_canvas_size
from tdsvg.core.version import CANVAS_HEIGHT, CANVAS_WIDTH, MASK_HEX_SIDE, MASK_ORIGIN
from tdsvg.geom.tiling import cell_in_polygon, hexagon_vertices

log = logging.getLogger(__name__)


class VisibilityMask:
    """Celdas elegibles para export (valor de máscara > 0).

    Se construye a partir de un TriangleCanvas del tamaño del formato; se
    guarda un snapshot congelado, así que modificar el canvas original
    después no cambia la máscara.
    """

    __slots__ = ("_canvas",)

    def __init__(self, canvas: TriangleCanvas) -> None:
        check_canvas_size(canvas.width, canvas.height, what="mask")
        self._canvas = canvas.snapshot()

    @classmethod
    def from_points(cls, points: Iterable[CanvasPoint]) -> "VisibilityMask":
        c = TriangleCanvas()
        for p in points:
            c.set_pixel(p, 1)
        return cls(c)

    @classmethod
    def empty(cls) -> "VisibilityMask":
        return cls(TriangleCanvas())

    @property
    def width(self) -> int:
        return self._canvas.width

    @property
    def height(self) -> int:
        return self._canvas.height

    @property
    def canvas(self) -> TriangleCanvas:
        """Canvas congelado de la máscara."""
        return self._canvas

    def is_in_scope(self, point: CanvasPoint) -> bool:
        return self._canvas.get_pixel(point) > 0

    def points_in_scope(self) -> Iterator[CanvasPoint]:
        """Puntos visibles en orden row-major (y afuera, x adentro, ascendentes)."""
        for p in self._canvas.points():
            if self.is_in_scope(p):
                yield p

    def count(self) -> int:
        return self._canvas.count_set()

    def __repr__(self) -> str:
        return f"VisibilityMask({self.width}x{self.height}, in_scope={self.count()})"


def build_hexagon_mask(
    side: int = MASK_HEX_SIDE,
    origin: tuple[int, int] = MASK_ORIGIN,
) -> VisibilityMask:
    """Máscara hexagonal: una celda entra si sus tres vértices están en el hexágono."""
    hexagon = hexagon_vertices(side)
    c = TriangleCanvas(CANVAS_WIDTH, CANVAS_HEIGHT)
    for p in c.points():
        if cell_in_polygon(p, hexagon, origin):
            c.set_pixel(p, 1)
    return VisibilityMask(c)


_BIG_MASK: VisibilityMask | None = None
_BIG_MASK_LOCK = threading.Lock()


def big_canvas_mask() -> VisibilityMask:
    """Máscara global compartida por todos los exports.

    Se construye una sola vez, bajo lock, la primera vez que se pide.
    """
    global _BIG_MASK
    mask = _BIG_MASK
    if mask is not None:
        return mask
    with _BIG_MASK_LOCK:
        if _BIG_MASK is None:
            _BIG_MASK = build_hexagon_mask()
            log.debug("Máscara hexagonal construida: %d celdas visibles", _BIG_MASK.count())
        return _BIG_MASK
