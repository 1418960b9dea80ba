"""JavaScript bundles.

Both bundles are plain concatenations of their sources in the listed order;
nothing is minified or transpiled.
"""

from typing import Dict, List

from ..orchestrator import task
from ..orchestrator.files import concat_files, expand_globs
from ..orchestrator.logging import get_logger
from ..orchestrator.utils import concat_separator, in_static, js_dist_dir, static_dir

logger = get_logger("tasks.scripts")

JQUERY = "js/vendor/jquery-2.2.4.min.js"

MASTER_SOURCES = [
    JQUERY,
    "js/vendor/jquery.ba-hashchange.min.js",
    "js/vendor/jquery.swiftype.autocomplete.js",
    "js/vendor/jquery.swiftype.search.js",
]

MY_OKTA_SOURCES = [JQUERY, "js/myOkta.js"]


def _bundle(params: Dict, sources: List[str], name: str) -> None:
    files = expand_globs(sources, base=static_dir(params))
    dest = concat_files(files, js_dist_dir(params) / name, concat_separator(params))
    if dest is None:
        logger.warning("No sources selected; %s not written", name)
        return
    logger.info("Wrote %s from %d files", dest, len(files))


@task(
    name="master.js",
    inputs=lambda p: in_static(p, MASTER_SOURCES),
    outputs=lambda p: [str(js_dist_dir(p) / "master.js")],
)
def master_js(params: Dict):
    """jQuery plus the hashchange and Swiftype plugins used on every page."""
    _bundle(params, MASTER_SOURCES, "master.js")


@task(
    name="myOkta.js",
    inputs=lambda p: in_static(p, MY_OKTA_SOURCES),
    outputs=lambda p: [str(js_dist_dir(p) / "myOkta.js")],
)
def my_okta_js(params: Dict):
    _bundle(params, MY_OKTA_SOURCES, "myOkta.js")
