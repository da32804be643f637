# File: tdsvg/app.py
# Project: TriangleDrawSvg (TDS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Entry-point CLI: PBM por stdin -> SVG por stdout.
# Notes: Sin rutas de archivo; el shell hace la redirección.
from __future__ import annotations

import argparse
import logging
import sys

from tdsvg.core.pbm import canvas_from_pbm
from tdsvg.core.settings import ExportSettings
from tdsvg.core.version import APP_VERSION
from tdsvg.svg.exporter import SvgExporter
from tdsvg.utils.errors import TdsError
from tdsvg.utils.log import get_logger, setup_logging

log = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tdsvg",
        description="Exporta un canvas TriangleDraw (PBM plano por stdin) a SVG (stdout).",
    )
    ap.add_argument(
        "--rotated",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Rotar 90 grados (--no-rotated lo desactiva aunque lo pidan los settings).",
    )
    ap.add_argument("--app-version", default=None, help="Versión escrita en el comentario del SVG.")
    ap.add_argument("--verbose", action="store_true", help="Logging DEBUG en stderr.")
    return ap


def main(argv: list[str] | None = None, *, stdin=None, stdout=None) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout.buffer

    setup_logging(log_dir=None, level=logging.DEBUG if args.verbose else logging.WARNING)

    settings = ExportSettings.load()
    rotated = settings.rotated if args.rotated is None else args.rotated
    app_version = args.app_version if args.app_version else settings.app_version

    try:
        canvas = canvas_from_pbm(stdin.read())
        data = SvgExporter(canvas, rotated=rotated, app_version=app_version).generate_data()
    except TdsError as e:
        log.error("Export fallido: %s", e)
        return 2

    stdout.write(data)
    log.info("tdsvg v%s: %d bytes exportados", APP_VERSION, len(data))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
