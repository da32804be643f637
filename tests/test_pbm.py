from __future__ import annotations

import pytest

from tdsvg.core.canvas import CanvasPoint, TriangleCanvas
from tdsvg.core.pbm import canvas_from_pbm, canvas_to_pbm
from tdsvg.core.version import CANVAS_HEIGHT, CANVAS_WIDTH
from tdsvg.utils.errors import TdsFormatError


def _packed(bits: str) -> str:
    return f"P1\n# fixture\n{CANVAS_WIDTH} {CANVAS_HEIGHT}\n{bits}\n"


def test_ink_is_black_and_paper_is_white():
    bits = ["1"] * (CANVAS_WIDTH * CANVAS_HEIGHT)
    bits[5 * CANVAS_WIDTH + 5] = "0"
    canvas = canvas_from_pbm(_packed("".join(bits)))
    assert canvas.count_set() == 1
    assert canvas.get_pixel(CanvasPoint(5, 5)) == 1


def test_roundtrip_keeps_set_cells():
    canvas = TriangleCanvas()
    for p in (CanvasPoint(0, 0), CanvasPoint(179, 103), CanvasPoint(90, 50)):
        canvas.set_pixel(p, 1)
    text = canvas_to_pbm(canvas)
    assert text.startswith(f"P1\n{CANVAS_WIDTH} {CANVAS_HEIGHT}\n")
    assert canvas_from_pbm(text) == canvas


@pytest.mark.parametrize(
    "text",
    [
        "",
        "P4\n180 104\n",
        "P1\nabc 104\n",
        "P1\n180 104\n0120",
        "P1\n180 104\n0101",
    ],
)
def test_malformed(text):
    with pytest.raises(TdsFormatError):
        canvas_from_pbm(text)


def test_unsupported_size_is_format_error():
    with pytest.raises(TdsFormatError):
        canvas_from_pbm("P1\n2 2\n0 1\n1 0\n")
