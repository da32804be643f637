# File: tdsvg/core/canvas.py
# Project: TriangleDrawSvg (TDS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Modelo de datos del canvas triangular (un byte por celda).
# Notes: La orientación de cada celda se deriva de (x + y); nunca se guarda.
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from tdsvg.core.version import CANVAS_HEIGHT, CANVAS_WIDTH
from tdsvg.utils.errors import TdsCanvasSizeError, TdsValidationError


class Orientation(str, Enum):
    """Orientación de una celda triangular.

    - upward: vértice arriba, base abajo.
    - downward: base arriba, vértice abajo.
    """

    UPWARD = "upward"
    DOWNWARD = "downward"


@dataclass(frozen=True)
class CanvasPoint:
    x: int
    y: int

    @property
    def orientation(self) -> Orientation:
        # Celdas vecinas en una fila alternan; (x + y) par = downward.
        if (self.x + self.y) & 1:
            return Orientation.UPWARD
        return Orientation.DOWNWARD


def check_canvas_size(width: int, height: int, *, what: str = "canvas") -> None:
    """Lanza TdsCanvasSizeError si (width, height) no es el tamaño del formato."""
    if width != CANVAS_WIDTH or height != CANVAS_HEIGHT:
        raise TdsCanvasSizeError(
            f"{what} inválido: {width}x{height} (se espera {CANVAS_WIDTH}x{CANVAS_HEIGHT})"
        )


class TriangleCanvas:
    """Bitmap sobre la teselación triangular.

    Valor 0 = sin pintar ("black"), > 0 = pintado ("white").
    Lecturas fuera de rango devuelven 0 y escrituras fuera de rango se ignoran
    (un trazo puede salir parcialmente del lienzo).
    """

    __slots__ = ("_width", "_height", "_pixels", "_frozen")

    def __init__(self, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT) -> None:
        check_canvas_size(width, height)
        self._width = int(width)
        self._height = int(height)
        self._pixels = bytearray(self._width * self._height)
        self._frozen = False

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _index(self, point: CanvasPoint) -> int | None:
        x, y = point.x, point.y
        if x < 0 or x >= self._width or y < 0 or y >= self._height:
            return None
        return y * self._width + x

    def get_pixel(self, point: CanvasPoint) -> int:
        i = self._index(point)
        if i is None:
            return 0
        return self._pixels[i]

    def set_pixel(self, point: CanvasPoint, value: int) -> None:
        if self._frozen:
            raise TdsValidationError("Canvas congelado: set_pixel no permitido sobre un snapshot")
        v = int(value)
        if v < 0 or v > 255:
            raise TdsValidationError(f"Valor de pixel inválido: {value!r} (rango 0..255)")
        i = self._index(point)
        if i is None:
            return
        self._pixels[i] = v

    def fill(self, value: int) -> None:
        """Pinta todas las celdas con `value`."""
        if self._frozen:
            raise TdsValidationError("Canvas congelado: fill no permitido sobre un snapshot")
        v = int(value)
        if v < 0 or v > 255:
            raise TdsValidationError(f"Valor de pixel inválido: {value!r} (rango 0..255)")
        self._pixels[:] = bytes([v]) * len(self._pixels)

    def points(self) -> Iterator[CanvasPoint]:
        """Todas las coordenadas en orden row-major (y afuera, x adentro)."""
        for y in range(self._height):
            for x in range(self._width):
                yield CanvasPoint(x, y)

    def count_set(self) -> int:
        return sum(1 for v in self._pixels if v > 0)

    def snapshot(self) -> "TriangleCanvas":
        """Copia congelada (inmutable). Un snapshot de un snapshot es él mismo."""
        if self._frozen:
            return self
        out = TriangleCanvas(self._width, self._height)
        out._pixels[:] = self._pixels
        out._frozen = True
        return out

    def copy(self) -> "TriangleCanvas":
        """Copia editable."""
        out = TriangleCanvas(self._width, self._height)
        out._pixels[:] = self._pixels
        return out

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TriangleCanvas):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._pixels == other._pixels
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "mutable"
        return f"TriangleCanvas({self._width}x{self._height}, set={self.count_set()}, {state})"
