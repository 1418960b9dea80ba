"""Remove stale minified JavaScript from the dist tree."""

from typing import Dict

from ..orchestrator import task
from ..orchestrator.files import delete_globs
from ..orchestrator.logging import get_logger
from ..orchestrator.utils import in_static, static_dir

logger = get_logger("tasks.clean")

MINIFIED_JS = ["dist/js/**/*.min.js"]


@task(name="clean", inputs=lambda p: in_static(p, MINIFIED_JS))
def clean(params: Dict):
    deleted = delete_globs(MINIFIED_JS, base=static_dir(params))
    for p in deleted:
        logger.debug("Deleted %s", p)
    logger.info("Deleted %d minified files", len(deleted))
