"""Triangle geometry of canvas cells and a tiling consistency report.

Coordinates are lattice units: x advances one unit per cell along a row
(each triangle spans two units), y advances one unit per row. The exported
SVG squashes y by 0.866025 to get equilateral triangles; that affine map
does not change containment or adjacency, so everything here stays integer.

Used by the visibility mask (hexagon membership) and by tests that verify
the emitted fragments tile without seams or overlaps.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Sequence

from tdsvg.core.canvas import CanvasPoint, Orientation

Vertex = tuple[int, int]
Triangle = tuple[Vertex, Vertex, Vertex]


def cell_vertices(point: CanvasPoint, origin: tuple[int, int] = (0, 0)) -> Triangle:
    """Vertices of the cell at `point`, relative to `origin`.

    Same shapes the path encoder emits:
    - downward: (x, y), (x+2, y), (x+1, y+1)
    - upward:   (x+1, y), (x, y+1), (x+2, y+1)
    """
    x = point.x - origin[0]
    y = point.y - origin[1]
    if point.orientation is Orientation.UPWARD:
        return ((x + 1, y), (x, y + 1), (x + 2, y + 1))
    return ((x, y), (x + 2, y), (x + 1, y + 1))


def _cross(a: Vertex, b: Vertex, p: Vertex) -> int:
    return (b[0] - a[0]) * (p[1] - a[1]) - (b[1] - a[1]) * (p[0] - a[0])


def point_in_convex_polygon(p: Vertex, polygon: Sequence[Vertex]) -> bool:
    """True if `p` is inside or on the boundary of a convex polygon (any winding)."""
    pos = neg = False
    n = len(polygon)
    for i in range(n):
        c = _cross(polygon[i], polygon[(i + 1) % n], p)
        if c > 0:
            pos = True
        elif c < 0:
            neg = True
        if pos and neg:
            return False
    return True


def hexagon_vertices(side: int) -> tuple[Vertex, ...]:
    """Regular hexagon of `side` triangle edges, top-left bounding corner at (0, 0).

    Spans 4*side units wide and 2*side rows tall. All vertices are lattice
    points, so the hexagon is an exact union of 6*side*side cells.
    """
    s = int(side)
    return ((s, 0), (3 * s, 0), (4 * s, s), (3 * s, 2 * s), (s, 2 * s), (0, s))


def cell_in_polygon(point: CanvasPoint, polygon: Sequence[Vertex], origin: tuple[int, int]) -> bool:
    return all(point_in_convex_polygon(v, polygon) for v in cell_vertices(point, origin))


def _edges(tri: Triangle) -> list[tuple[Vertex, Vertex]]:
    a, b, c = tri
    return [tuple(sorted(e)) for e in ((a, b), (b, c), (c, a))]  # type: ignore[misc]


@dataclass(frozen=True)
class TilingReport:
    """Result of `tiling_report`.

    - cells: triangles checked.
    - duplicated_cells: triangles emitted more than once.
    - overlapping_edges: edges shared by more than two triangles.
    - boundary_edges: edges used by exactly one triangle (outline length).
    - interior_edges: edges shared by exactly two triangles.
    """

    cells: int
    duplicated_cells: int
    overlapping_edges: int
    boundary_edges: int
    interior_edges: int

    @property
    def ok(self) -> bool:
        return self.duplicated_cells == 0 and self.overlapping_edges == 0


def tiling_report(points: Iterable[CanvasPoint], origin: tuple[int, int] = (0, 0)) -> TilingReport:
    tris = Counter(tuple(sorted(cell_vertices(p, origin))) for p in points)
    edges: Counter = Counter()
    for tri in tris:
        edges.update(_edges(tri))  # type: ignore[arg-type]
    return TilingReport(
        cells=sum(tris.values()),
        duplicated_cells=sum(1 for n in tris.values() if n > 1),
        overlapping_edges=sum(1 for n in edges.values() if n > 2),
        boundary_edges=sum(1 for n in edges.values() if n == 1),
        interior_edges=sum(1 for n in edges.values() if n == 2),
    )
