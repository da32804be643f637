from __future__ import annotations

import pytest

from tdsvg.svg.inspect import inspect_svg
from tdsvg.utils.errors import TdsFormatError


def test_not_xml():
    with pytest.raises(TdsFormatError):
        inspect_svg("<svg")


def test_not_svg_root():
    with pytest.raises(TdsFormatError):
        inspect_svg("<html/>")


def test_minimal_document():
    info = inspect_svg('<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 1 1"><g transform="rotate(-45)"/></svg>')
    assert info.viewbox == "0 0 1 1"
    assert info.rotation_deg == -45.0
    assert info.comment is None
    assert info.black_path is None
