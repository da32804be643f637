from __future__ import annotations

import io

from tdsvg.app import main
from tdsvg.core.canvas import CanvasPoint, TriangleCanvas
from tdsvg.core.pbm import canvas_to_pbm
from tdsvg.svg.inspect import inspect_svg


def _run(argv, text):
    out = io.BytesIO()
    code = main(argv, stdin=io.StringIO(text), stdout=out)
    return code, out.getvalue()


def test_cli_exports_pbm(clean_env):
    canvas = TriangleCanvas()
    canvas.set_pixel(CanvasPoint(90, 50), 1)
    code, data = _run(["--rotated", "--app-version", "2019.2.1"], canvas_to_pbm(canvas))
    assert code == 0
    info = inspect_svg(data)
    assert info.rotation_deg == 90.0
    assert info.comment.endswith("2019.2.1")
    assert info.white_path == "M88 42h2l-1 1z"


def test_cli_uses_settings_defaults(clean_env, monkeypatch):
    monkeypatch.setenv("TDSVG_APP_VERSION", "7.0")
    code, data = _run([], canvas_to_pbm(TriangleCanvas()))
    assert code == 0
    info = inspect_svg(data)
    assert info.rotation_deg == 0.0
    assert info.comment.endswith("7.0")


def test_cli_rejects_bad_input(clean_env):
    code, data = _run([], "P1\n2 2\n0 1\n1 0\n")
    assert code == 2
    assert data == b""


def test_cli_no_rotated_overrides_settings(clean_env, monkeypatch):
    monkeypatch.setenv("TDSVG_EXPORT_ROTATED", "1")
    pbm = canvas_to_pbm(TriangleCanvas())

    code, data = _run([], pbm)
    assert code == 0
    assert inspect_svg(data).rotation_deg == 90.0

    code, data = _run(["--no-rotated"], pbm)
    assert code == 0
    assert inspect_svg(data).rotation_deg == 0.0
