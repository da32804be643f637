# File: tdsvg/core/pbm.py
# Project: TriangleDrawSvg (TDS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Codec PBM plano (P1) <-> TriangleCanvas, para fixtures de canvas.
# Notes: Solo texto en memoria; la lectura/escritura de archivos queda afuera.
from __future__ import annotations

from tdsvg.core.canvas import CanvasPoint, TriangleCanvas
from tdsvg.utils.errors import TdsCanvasSizeError, TdsFormatError

PBM_MAGIC = "P1"


def _tokens(text: str) -> list[str]:
    out: list[str] = []
    for line in text.splitlines():
        # Comentarios: desde '#' hasta fin de línea.
        line = line.split("#", 1)[0]
        out.extend(line.split())
    return out


def canvas_from_pbm(text: str) -> TriangleCanvas:
    """Parsea PBM plano (P1).

    En PBM `1` es tinta (negro) -> valor 0 del canvas; `0` -> valor 1 (blanco).
    Los bits pueden venir separados por espacios o pegados ("0110...").
    """
    tokens = _tokens(text)
    if len(tokens) < 3 or tokens[0] != PBM_MAGIC:
        raise TdsFormatError("PBM inválido: se espera cabecera 'P1 <w> <h>'")
    try:
        width = int(tokens[1])
        height = int(tokens[2])
    except ValueError as e:
        raise TdsFormatError(f"PBM inválido: tamaño no numérico {tokens[1]!r} {tokens[2]!r}") from e

    bits = "".join(tokens[3:])
    if any(ch not in "01" for ch in bits):
        raise TdsFormatError("PBM inválido: los datos solo pueden contener 0/1")
    if len(bits) != width * height:
        raise TdsFormatError(
            f"PBM inválido: {len(bits)} bits (se esperan {width}x{height}={width * height})"
        )

    try:
        canvas = TriangleCanvas(width, height)
    except TdsCanvasSizeError as e:
        raise TdsFormatError(f"PBM con tamaño no soportado: {e}") from e

    for i, ch in enumerate(bits):
        if ch == "0":
            canvas.set_pixel(CanvasPoint(i % width, i // width), 1)
    return canvas


def canvas_to_pbm(canvas: TriangleCanvas) -> str:
    """Serializa a PBM plano: una fila por línea, bits separados por espacio."""
    lines = [PBM_MAGIC, f"{canvas.width} {canvas.height}"]
    for y in range(canvas.height):
        row = ("0" if canvas.get_pixel(CanvasPoint(x, y)) > 0 else "1" for x in range(canvas.width))
        lines.append(" ".join(row))
    return "\n".join(lines) + "\n"
