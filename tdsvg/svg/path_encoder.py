# File: tdsvg/svg/path_encoder.py
# Project: TriangleDrawSvg (TDS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Fragmentos de path SVG por celda + buckets black/white.
# Notes: El orden de los fragmentos es el row-major de entrada (salida estable).
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Protocol

from tdsvg.core.canvas import CanvasPoint, Orientation


class PixelSource(Protocol):
    width: int
    height: int

    def get_pixel(self, point: CanvasPoint) -> int: ...


def encode_segment(point: CanvasPoint, origin: tuple[int, int]) -> str:
    """Fragmento de path de una celda, en coordenadas locales (relativas a origin).

    - upward: `M{x+1} {y}l-1 1h2z` (vértice arriba, base abajo)
    - downward: `M{x} {y}h2l-1 1z` (base arriba, vértice abajo)
    """
    x = point.x - origin[0]
    y = point.y - origin[1]
    if point.orientation is Orientation.UPWARD:
        return f"M{x + 1} {y}l-1 1h2z"
    return f"M{x} {y}h2l-1 1z"


@dataclass
class PathBuckets:
    """Fragmentos acumulados por color (valor del canvas exportado, no de la máscara)."""

    black: list[str] = field(default_factory=list)
    white: list[str] = field(default_factory=list)

    def add(self, segment: str, value: int) -> None:
        if value > 0:
            self.white.append(segment)
        else:
            self.black.append(segment)

    @property
    def black_path(self) -> str:
        return "".join(self.black)

    @property
    def white_path(self) -> str:
        return "".join(self.white)

    def __len__(self) -> int:
        return len(self.black) + len(self.white)


def encode_paths(
    canvas: PixelSource,
    points: Iterable[CanvasPoint],
    origin: tuple[int, int],
) -> PathBuckets:
    out = PathBuckets()
    for p in points:
        out.add(encode_segment(p, origin), canvas.get_pixel(p))
    return out
