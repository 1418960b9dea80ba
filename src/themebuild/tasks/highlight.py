"""Syntax highlighting task stub.

Only produces the options a shell-out step would run with; it is not part of
any build sequence.
"""

from dataclasses import dataclass
from typing import Dict

from ..orchestrator import task
from ..orchestrator.utils import pygments_option


@dataclass
class ExecOptions:
    continue_on_error: bool = False
    pipe_stdout: bool = False


@task(name="pygments")
def pygments(params: Dict) -> ExecOptions:
    return ExecOptions(
        continue_on_error=pygments_option(params, "continue_on_error"),
        pipe_stdout=pygments_option(params, "pipe_stdout"),
    )
