"""Geometry helpers.

This package is intentionally small and dependency-light.

`bbox` and `tiling` are pure integer helpers used by the exporter and the
mask; `svgelements_bbox` is an adapter used to cross-check emitted paths.
"""

from __future__ import annotations
