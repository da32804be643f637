"""TDS - version and file-format constants.

Keep this module tiny and dependency-free. It is imported by many places
(canvas, mask, exporter, settings) and must not have side effects.
"""

APP_NAME = "TriangleDraw"
APP_SHORT = "TDS"

# Package semantic version.
APP_VERSION = "0.1.0"

# Version string written into exported SVG comments when the caller gives none.
DEFAULT_EXPORT_VERSION = "APP_VERSION"

# Canvas file format (cells). Every canvas and mask must match these exactly.
# NOTE: keep these stable; the visibility mask and the SVG viewBox depend on them.
CANVAS_WIDTH = 180
CANVAS_HEIGHT = 104

# Visible silhouette: regular hexagon, side measured in triangle edges.
MASK_HEX_SIDE = 44
# Global cell coordinate of the hexagon's top-left bounding corner.
MASK_ORIGIN = (2, 8)
