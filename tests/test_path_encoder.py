from __future__ import annotations

from tdsvg.core.canvas import CanvasPoint, TriangleCanvas
from tdsvg.geom.svgelements_bbox import path_bbox, path_subpaths
from tdsvg.svg.path_encoder import PathBuckets, encode_paths, encode_segment


def test_downward_fragment():
    assert encode_segment(CanvasPoint(5, 5), (5, 5)) == "M0 0h2l-1 1z"
    assert encode_segment(CanvasPoint(12, 8), (2, 8)) == "M10 0h2l-1 1z"


def test_upward_fragment_is_shifted_one_unit():
    assert encode_segment(CanvasPoint(6, 5), (5, 5)) == "M2 0l-1 1h2z"
    assert encode_segment(CanvasPoint(5, 6), (5, 5)) == "M1 1l-1 1h2z"


def test_fragment_geometry_matches_svgelements():
    assert path_bbox("M0 0h2l-1 1z") == (0.0, 0.0, 2.0, 1.0)
    assert path_bbox("M2 0l-1 1h2z") == (1.0, 0.0, 3.0, 1.0)
    assert path_bbox("") is None


def test_buckets_follow_canvas_value():
    b = PathBuckets()
    b.add("A", 0)
    b.add("B", 3)
    b.add("C", 0)
    assert b.black_path == "AC"
    assert b.white_path == "B"
    assert len(b) == 3


def test_encode_paths_row_major_and_bucketed():
    canvas = TriangleCanvas()
    pts = [CanvasPoint(4, 2), CanvasPoint(5, 2), CanvasPoint(4, 3)]
    canvas.set_pixel(CanvasPoint(5, 2), 1)
    out = encode_paths(canvas, pts, (4, 2))
    assert out.black == ["M0 0h2l-1 1z", "M1 1l-1 1h2z"]
    assert out.white == ["M2 0l-1 1h2z"]
    assert path_subpaths(out.black_path) == 2
