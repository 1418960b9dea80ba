"""Lightweight in-repo orchestrator for the theme asset build.

Provides Task and Pipeline primitives, fixed-order scheduling, file helpers, and a Typer CLI.
"""

from .core import TaskSpec, Pipeline, series, task  # re-export for convenience

__all__ = ["TaskSpec", "Pipeline", "series", "task"]
