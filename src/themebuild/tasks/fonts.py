from typing import Dict

from ..orchestrator import task
from ..orchestrator.files import copy_files, expand_globs
from ..orchestrator.logging import get_logger
from ..orchestrator.utils import dist_dir, in_static, static_dir

logger = get_logger("tasks.fonts")

FONTS = ["fonts/*"]


@task(
    name="copy-fonts",
    inputs=lambda p: in_static(p, FONTS),
    outputs=lambda p: [str(dist_dir(p) / "fonts")],
)
def copy_fonts(params: Dict):
    """Copy every font file into dist/fonts, names unchanged."""
    files = expand_globs(FONTS, base=static_dir(params))
    copied = copy_files(files, dist_dir(params) / "fonts")
    logger.info("Copied %d font files", len(copied))
