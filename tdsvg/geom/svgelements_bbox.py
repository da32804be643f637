"""svgelements adapter for exported geometry (verification tooling).

`svgelements` parses path data independently of our encoder, which makes it
a useful cross-check: the bbox of the black+white paths must match the
hexagon extents, and a single fragment must be exactly one triangle.

Extra metadata we expose
- document size (`doc_size`) in user units/px as returned by svgelements
- viewbox (`viewbox`) in user units
"""

from __future__ import annotations

import io
from typing import Any, Dict, Optional, Tuple

from svgelements import SVG, Path

BBox = Tuple[float, float, float, float]


def _safe_float(v: Any) -> Optional[float]:
    if v is None:
        return None
    try:
        return float(v)
    except (TypeError, ValueError):
        # Length-like objects might store a numeric `.value`
        try:
            return float(getattr(v, "value"))
        except (AttributeError, TypeError, ValueError):
            return None


def _extract_viewbox(svg: Any) -> Optional[list[float]]:
    vb = getattr(svg, "viewbox", None)
    if vb is None:
        return None
    x = _safe_float(getattr(vb, "x", None))
    y = _safe_float(getattr(vb, "y", None))
    w = _safe_float(getattr(vb, "width", None))
    h = _safe_float(getattr(vb, "height", None))
    if None in (x, y, w, h):
        return None
    return [float(x), float(y), float(w), float(h)]  # type: ignore[arg-type]


def path_bbox(d: str) -> Optional[BBox]:
    """Bbox of path data in its own (untransformed) coordinates; None if empty."""
    if not d:
        return None
    b = Path(d).bbox()
    if b is None:
        return None
    return (float(b[0]), float(b[1]), float(b[2]), float(b[3]))


def path_subpaths(d: str) -> int:
    """Number of closed subpaths (one per emitted cell)."""
    if not d:
        return 0
    return sum(1 for _ in Path(d).as_subpaths())


def compute_document_bbox(svg_data: str | bytes, *, ppi: float = 96.0) -> Dict[str, Any]:
    """Compute the exported document bbox using `svgelements`.

    Returns a dict like:
    - bbox: (x0, y0, x1, y1) in outer document units, or None when there is no geometry
    - doc_size: [w, h] (optional)
    - viewbox: [x, y, w, h] (optional)
    """
    raw = svg_data.encode("utf-8") if isinstance(svg_data, str) else svg_data
    svg = SVG.parse(io.BytesIO(raw), ppi=float(ppi), reify=True)

    bbox = None
    b = svg.bbox(with_stroke=False)
    if b is not None:
        bbox = (float(b[0]), float(b[1]), float(b[2]), float(b[3]))

    doc_w = _safe_float(getattr(svg, "width", None))
    doc_h = _safe_float(getattr(svg, "height", None))
    doc_size = None
    if doc_w is not None and doc_h is not None:
        doc_size = [float(doc_w), float(doc_h)]

    return {
        "bbox": bbox,
        "doc_size": doc_size,
        "viewbox": _extract_viewbox(svg),
    }
