# File: tdsvg/core/settings.py
# Project: TriangleDrawSvg (TDS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Defaults de export (rotación, versión) desde JSON repo-local + env vars.
# Notes: Nunca lanza excepción al cargar; ante error se usan defaults.
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from tdsvg.core.version import DEFAULT_EXPORT_VERSION

log = logging.getLogger(__name__)


# ------------------------------
# Project settings (repo-local)
# ------------------------------
# Archivo esperado: tdsvg_settings.json en la raíz del proyecto (o en un padre del CWD).
PROJECT_SETTINGS_FILENAME = "tdsvg_settings.json"

ENV_ROTATED = "TDSVG_EXPORT_ROTATED"
ENV_APP_VERSION = "TDSVG_APP_VERSION"

_TRUE_STRINGS = ("1", "true", "yes", "on")
_FALSE_STRINGS = ("0", "false", "no", "off", "")


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca tdsvg_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_project_settings(start: Path | None = None, *, logger: logging.Logger | None = None) -> Dict[str, Any]:
    """Carga el JSON de project settings. Devuelve {} si no existe o es inválido."""
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}
    except Exception as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return {}


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def _coerce_bool(v: Any, default: bool) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, int):
        return v != 0
    if isinstance(v, str):
        s = v.strip().lower()
        if s in _TRUE_STRINGS:
            return True
        if s in _FALSE_STRINGS:
            return False
    return default


@dataclass(frozen=True)
class ExportSettings:
    """Opciones de export SVG."""

    rotated: bool = False
    app_version: str = DEFAULT_EXPORT_VERSION

    @classmethod
    def load(cls, start: Path | None = None, *, prefer_env: bool = True) -> "ExportSettings":
        """Lee tdsvg_settings.json (claves export.rotated / export.app_version).

        - Con `prefer_env=True` las env vars TDSVG_EXPORT_ROTATED / TDSVG_APP_VERSION
          ganan sobre el JSON.
        """
        out = cls()
        data = load_project_settings(start)

        rotated = _coerce_bool(_deep_get(data, "export.rotated"), out.rotated)
        version = _deep_get(data, "export.app_version")
        app_version = version.strip() if isinstance(version, str) and version.strip() else out.app_version

        if prefer_env:
            env_rot = os.environ.get(ENV_ROTATED)
            if env_rot is not None:
                rotated = _coerce_bool(env_rot, rotated)
            env_ver = (os.environ.get(ENV_APP_VERSION) or "").strip()
            if env_ver:
                app_version = env_ver

        settings = cls(rotated=rotated, app_version=app_version)
        log.debug("Export settings: %s", settings)
        return settings

    def to_dict(self) -> Dict[str, Any]:
        return {"export": {"rotated": bool(self.rotated), "app_version": str(self.app_version)}}
