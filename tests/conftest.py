from __future__ import annotations

import pytest

from tdsvg.core.canvas import CanvasPoint, TriangleCanvas
from tdsvg.core.mask import VisibilityMask, big_canvas_mask


@pytest.fixture
def blank_canvas() -> TriangleCanvas:
    return TriangleCanvas()


@pytest.fixture
def hex_mask() -> VisibilityMask:
    return big_canvas_mask()


@pytest.fixture
def single_point_mask() -> VisibilityMask:
    return VisibilityMask.from_points([CanvasPoint(5, 5)])


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """CWD sin tdsvg_settings.json y sin env vars de export."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TDSVG_EXPORT_ROTATED", raising=False)
    monkeypatch.delenv("TDSVG_APP_VERSION", raising=False)
    return tmp_path
