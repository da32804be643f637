# File: tdsvg/utils/log.py
# Project: TriangleDrawSvg (TDS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Logging centralizado (con archivo) y helpers.
# Notes: Cambios incrementales, no romper funcionalidades probadas.
from __future__ import annotations

import logging
import os
from pathlib import Path

_LOGGER_CONFIGURED = False

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_dir: str | os.PathLike | None = "logs",
    level: int = logging.INFO,
) -> None:
    """Configura logging en consola + archivo.

    Nota:
        - No lanza excepción si no puede escribir el archivo; cae a consola.
        - Con `log_dir=None` solo se configura la consola (CLI sobre stdout).
        - Llamadas repetidas no duplican handlers.
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    logger = logging.getLogger()
    logger.setLevel(level)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    # Consola (stderr: stdout puede llevar el SVG)
    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    # Archivo
    if log_dir is not None:
        try:
            d = Path(log_dir)
            d.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(d / "tdsvg.log", encoding="utf-8")
            fh.setLevel(level)
            fh.setFormatter(fmt)
            logger.addHandler(fh)
        except Exception as e:
            logging.getLogger(__name__).warning("No se pudo inicializar FileHandler: %s", e)

    _LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
