# File: tdsvg/svg/exporter.py
# Project: TriangleDrawSvg (TDS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Export del canvas triangular a SVG (texto y bytes UTF-8).
# Notes: Transformación pura: no escribe archivos ni modifica el canvas.
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from xml.etree.ElementTree import Comment, Element, SubElement, indent, tostring

from tdsvg.core.canvas import check_canvas_size
from tdsvg.core.mask import VisibilityMask, big_canvas_mask
from tdsvg.core.settings import ExportSettings
from tdsvg.core.version import APP_NAME, DEFAULT_EXPORT_VERSION
from tdsvg.geom.bbox import bounding_origin
from tdsvg.svg.path_encoder import PixelSource, encode_paths

log = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"

OUTER_VIEWBOX = "0 0 720 720"
INNER_VIEWBOX = "-88 -44 176 88"
# Escala y al alto de un triángulo equilátero (sqrt(3)/2) y centra el hexágono.
GROUP_TRANSFORM = "rotate({rotation}) scale(2) scale(0.5 0.866025) translate(-88 -44)"

# Controles C0 (salvo tab, LF, CR), surrogates sueltos y U+FFFE/U+FFFF.
_XML_INVALID_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


@dataclass(frozen=True)
class ExportPaths:
    black: str
    white: str
    origin: tuple[int, int]
    cell_count: int
    white_count: int


def escape_comment_text(text: str) -> str:
    """Sanea texto libre para un comentario XML.

    Los comentarios no decodifican entidades: `&`, `<` y `>` quedan igual.
    `--` (prohibido dentro de comentarios) se parte como `- -` y los
    caracteres que XML 1.0 no admite se reemplazan por `?`.
    """
    s = _XML_INVALID_RE.sub("?", str(text))
    while "--" in s:
        s = s.replace("--", "- -")
    return s


class SvgExporter:
    """Convierte un TriangleCanvas en un documento SVG.

    La máscara se inyecta; sin máscara se usa la global (`big_canvas_mask`).
    Las dimensiones se validan en el constructor: si no coinciden con el
    formato de archivo no se hace ningún trabajo.
    """

    def __init__(
        self,
        canvas: PixelSource,
        *,
        mask: VisibilityMask | None = None,
        rotated: bool = False,
        app_version: str = DEFAULT_EXPORT_VERSION,
    ) -> None:
        check_canvas_size(canvas.width, canvas.height)
        mask = mask if mask is not None else big_canvas_mask()
        check_canvas_size(mask.width, mask.height, what="mask")

        snapshot = getattr(canvas, "snapshot", None)
        self.canvas: PixelSource = snapshot() if callable(snapshot) else canvas
        self.mask = mask
        self.rotated = bool(rotated)
        self.app_version = str(app_version)

    @classmethod
    def from_settings(
        cls,
        canvas: PixelSource,
        settings: ExportSettings,
        *,
        mask: VisibilityMask | None = None,
    ) -> "SvgExporter":
        return cls(canvas, mask=mask, rotated=settings.rotated, app_version=settings.app_version)

    def build_paths(self) -> ExportPaths:
        points = list(self.mask.points_in_scope())
        origin = bounding_origin(points)
        buckets = encode_paths(self.canvas, points, origin)
        log.debug(
            "SVG export: %d celdas (%d blancas), origen=%s, rotado=%s",
            len(buckets),
            len(buckets.white),
            origin,
            self.rotated,
        )
        return ExportPaths(
            black=buckets.black_path,
            white=buckets.white_path,
            origin=origin,
            cell_count=len(buckets),
            white_count=len(buckets.white),
        )

    def build_element(self) -> Element:
        paths = self.build_paths()
        rotation = "90" if self.rotated else "0"

        svg = Element("svg", {"xmlns": SVG_NS, "viewBox": OUTER_VIEWBOX})
        svg.append(
            Comment(f" This SVG file was generated by {APP_NAME} {escape_comment_text(self.app_version)} ")
        )
        inner = SubElement(
            svg,
            "svg",
            {
                "preserveAspectRatio": "xMidYMid meet",
                "viewBox": INNER_VIEWBOX,
                "x": "10",
                "y": "10",
                "width": "700",
                "height": "700",
            },
        )
        g = SubElement(inner, "g", {"transform": GROUP_TRANSFORM.format(rotation=rotation)})
        # White después de black: se dibuja encima.
        SubElement(g, "path", {"fill": "black", "d": paths.black})
        SubElement(g, "path", {"fill": "white", "d": paths.white})

        # Un elemento por línea, sin sangría.
        indent(svg, space="")
        return svg

    def generate_string(self) -> str:
        return tostring(self.build_element(), encoding="unicode")

    def generate_data(self) -> bytes:
        """UTF-8 permisivo: nunca lanza; ante un fallo total devuelve b""."""
        text = self.generate_string()
        try:
            return text.encode("utf-8", errors="replace")
        except UnicodeError as e:
            log.warning("No se pudo codificar SVG a UTF-8: %s", e)
            return b""


def export_canvas_svg(
    canvas: PixelSource,
    *,
    mask: VisibilityMask | None = None,
    settings: ExportSettings | None = None,
) -> str:
    settings = settings or ExportSettings()
    return SvgExporter.from_settings(canvas, settings, mask=mask).generate_string()


def export_canvas_svg_bytes(
    canvas: PixelSource,
    *,
    mask: VisibilityMask | None = None,
    settings: ExportSettings | None = None,
) -> bytes:
    settings = settings or ExportSettings()
    return SvgExporter.from_settings(canvas, settings, mask=mask).generate_data()
