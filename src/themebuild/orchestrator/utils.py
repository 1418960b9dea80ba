"""Small helpers for building theme asset paths from config params."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List


def _get(d: Dict, *keys, default=None):
    cur = d
    for k in keys:
        if not isinstance(cur, dict):
            return default
        cur = cur.get(k)
        if cur is None:
            return default
    return cur


def project_root(p: Dict) -> Path:
    return Path(_get(p, "project", "root", default="."))


def theme_name(p: Dict) -> str:
    return str(_get(p, "project", "theme", default="okta"))


def log_file(p: Dict) -> Path | None:
    path = _get(p, "project", "log_file")
    return Path(path) if path else None


def static_dir(p: Dict) -> Path:
    return project_root(p) / "themes" / theme_name(p) / "static"


def dist_dir(p: Dict) -> Path:
    return static_dir(p) / "dist"


def js_dist_dir(p: Dict) -> Path:
    return static_dir(p) / "js" / "dist"


def concat_separator(p: Dict) -> str:
    return str(_get(p, "concat", "separator", default="\n"))


def sass_output_style(p: Dict) -> str:
    return str(_get(p, "sass", "output_style", default="nested"))


def sass_include_paths(p: Dict) -> list[str]:
    return [str(x) for x in _get(p, "sass", "include_paths", default=[])]


def continue_on_error(p: Dict) -> bool:
    return bool(_get(p, "pipeline", "continue_on_error", default=False))


def pygments_option(p: Dict, key: str) -> bool:
    return bool(_get(p, "pygments", key, default=False))


def in_static(p: Dict, patterns: List[str]) -> List[str]:
    """Full paths of static-dir relative patterns, for task declarations."""
    return [str(static_dir(p) / pat) for pat in patterns]
