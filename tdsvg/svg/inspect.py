# File: tdsvg/svg/inspect.py
# Project: TriangleDrawSvg (TDS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Inspección liviana de un SVG exportado (viewBox, rotación, paths).
# Notes: Se usa para verificar exports (tests / CLI --verbose).
from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from tdsvg.utils.errors import TdsFormatError

_ROTATE_RE = re.compile(r"rotate\(\s*([+-]?\d+(?:\.\d*)?)\s*\)")


@dataclass(frozen=True)
class SvgInspection:
    viewbox: str | None
    inner_viewbox: str | None
    transform: str | None
    rotation_deg: float | None
    comment: str | None
    black_path: str | None
    white_path: str | None


def _strip_ns(tag: str) -> str:
    return tag.split("}", 1)[1] if "}" in tag else tag


def _is_svg_root(tag: object) -> bool:
    return isinstance(tag, str) and _strip_ns(tag).lower() == "svg"


def inspect_svg(data: str | bytes) -> SvgInspection:
    """Parsea el documento y extrae las piezas del template de export.

    Lanza TdsFormatError si no es XML válido o la raíz no es <svg>.
    """
    parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
    try:
        parser.feed(data)
        root = parser.close()
    except ET.ParseError as e:
        raise TdsFormatError(f"SVG inválido (XML malformado): {e}") from e

    if not _is_svg_root(root.tag):
        raise TdsFormatError(f"El documento no parece SVG (root={root.tag!r})")

    comment = None
    inner = None
    for el in root:
        if el.tag is ET.Comment and comment is None:
            comment = (el.text or "").strip()
        elif _is_svg_root(el.tag) and inner is None:
            inner = el

    transform = None
    paths: dict[str, str] = {}
    for el in root.iter():
        if not isinstance(el.tag, str):
            continue
        name = _strip_ns(el.tag)
        if name == "g" and transform is None:
            transform = el.get("transform")
        elif name == "path":
            fill = el.get("fill") or ""
            paths.setdefault(fill, el.get("d") or "")

    rotation = None
    if transform:
        m = _ROTATE_RE.search(transform)
        if m:
            rotation = float(m.group(1))

    return SvgInspection(
        viewbox=root.get("viewBox"),
        inner_viewbox=inner.get("viewBox") if inner is not None else None,
        transform=transform,
        rotation_deg=rotation,
        comment=comment,
        black_path=paths.get("black"),
        white_path=paths.get("white"),
    )
