"""Stylesheet tasks: Sass compilation into okta.css and the animate.css copy.

Sass is compiled with libsass one stylesheet at a time so that a broken file
only drops itself from the bundle. Partials (names starting with `_`) are only
reachable through `@import` and are never compiled on their own.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict

import sass

from ..orchestrator import task
from ..orchestrator.files import concat_contents, copy_files, expand_globs
from ..orchestrator.logging import get_logger
from ..orchestrator.utils import (
    concat_separator,
    dist_dir,
    in_static,
    sass_include_paths,
    sass_output_style,
    static_dir,
)

logger = get_logger("tasks.styles")

CSS_BUNDLE = "okta.css"
SASS_SOURCES = ["css/*.scss", "css/font-awesome/font-awesome.scss"]
ANIMATE_CSS = ["css/animate.css"]


def compile_stylesheet(path: Path, params: Dict) -> str | None:
    """Compile one stylesheet, or log the compiler error and return None."""
    try:
        return sass.compile(
            filename=str(path),
            output_style=sass_output_style(params),
            include_paths=[str(path.parent)] + sass_include_paths(params),
        )
    except sass.CompileError as e:
        logger.error("Sass error in %s:\n%s", path, e)
        return None


@task(
    name="minify-sass",
    inputs=lambda p: in_static(p, SASS_SOURCES),
    outputs=lambda p: [str(dist_dir(p) / CSS_BUNDLE)],
)
def minify_sass(params: Dict):
    """Compile the theme stylesheets and concatenate them into okta.css."""
    selected = expand_globs(SASS_SOURCES, base=static_dir(params))
    sources = [s for s in selected if not s.name.startswith("_")]
    compiled = []
    for src in sources:
        css = compile_stylesheet(src, params)
        if css is not None:
            compiled.append(css.encode("utf-8"))
    dest = concat_contents(compiled, dist_dir(params) / CSS_BUNDLE, concat_separator(params))
    if dest is None:
        logger.warning("No stylesheets compiled; %s not written", CSS_BUNDLE)
        return
    logger.info("Wrote %s (%d/%d stylesheets)", dest, len(compiled), len(sources))


@task(
    name="animate.css",
    inputs=lambda p: in_static(p, ANIMATE_CSS),
    outputs=lambda p: [str(dist_dir(p) / "animate.css")],
)
def animate_css(params: Dict):
    files = expand_globs(ANIMATE_CSS, base=static_dir(params))
    copy_files(files, dist_dir(params))
