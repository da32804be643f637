# File: tdsvg/utils/errors.py
# Project: TriangleDrawSvg (TDS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Errores tipados del proyecto.
# Notes: Cambios incrementales, no romper funcionalidades probadas.
from __future__ import annotations


class TdsError(Exception):
    """Error base del proyecto."""


class TdsValidationError(TdsError):
    """Error de validación (valor de pixel, canvas congelado, input)."""


class TdsCanvasSizeError(TdsValidationError):
    """Dimensiones del canvas distintas a las del formato de archivo."""


class TdsFormatError(TdsValidationError):
    """Texto PBM o SVG exportado malformado."""
