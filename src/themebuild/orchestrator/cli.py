from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path
from typing import Dict

import typer
import yaml

from .core import Pipeline, TaskSpec, series
from .logging import get_logger
from .utils import continue_on_error as config_continue_on_error


app = typer.Typer(add_completion=False, help="Theme asset build")
log = get_logger("themebuild.cli")

DEFAULT_CONFIG = "configs/base.yaml"

# The `default` sequence
DEFAULT_STEPS = ["master.js", "myOkta.js", "minify-sass", "copy-fonts"]


def load_config(path: str | Path, required: bool = True) -> dict:
    p = Path(path)
    if not required and not p.exists():
        log.info("No config at %s, using defaults", p)
        return {}
    with open(p, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def discover_tasks() -> Dict[str, TaskSpec]:
    """Import all modules in the `tasks` package and collect decorated functions."""
    tasks_pkg = "themebuild.tasks"
    specs: Dict[str, TaskSpec] = {}
    pkg = importlib.import_module(tasks_pkg)
    for m in pkgutil.iter_modules(pkg.__path__, prefix=f"{tasks_pkg}."):
        mod = importlib.import_module(m.name)
        for attr_name in dir(mod):
            obj = getattr(mod, attr_name)
            spec = getattr(obj, "_task_spec", None)
            if isinstance(spec, TaskSpec):
                specs[spec.name] = spec
    return specs


def build_pipeline(steps: list[str], name: str) -> Pipeline:
    specs = discover_tasks()
    missing = [s for s in steps if s not in specs]
    if missing:
        raise KeyError(f"Missing tasks: {', '.join(missing)}")
    return Pipeline(tasks={k: specs[k] for k in steps}, edges=series(*steps), name=name)


@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context):
    """Run the default build when no command is given."""
    if ctx.invoked_subcommand is not None:
        return
    params = load_config(DEFAULT_CONFIG, required=False)
    build_pipeline(DEFAULT_STEPS, name="default").run(
        params=params, continue_on_error=config_continue_on_error(params)
    )


@app.command("list")
def list_tasks():
    """List discovered tasks."""
    specs = discover_tasks()
    typer.echo("Discovered tasks:")
    for name in sorted(specs.keys()):
        typer.echo(f"- {name}")


@app.command()
def run_task(
    name: str = typer.Argument(..., help="Task name to run"),
    config: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config"),
    continue_on_error: bool = typer.Option(False, help="Log task failures instead of exiting"),
):
    """Run a single task by name."""
    specs = discover_tasks()
    if name not in specs:
        typer.echo(f"Task not found: {name}")
        raise typer.Exit(code=1)
    params = load_config(config, required=config != DEFAULT_CONFIG)
    pipe = Pipeline(tasks={name: specs[name]}, edges=[], name=f"task.{name}")
    pipe.run(
        params=params,
        only_step=name,
        continue_on_error=continue_on_error or config_continue_on_error(params),
    )


@app.command()
def build(
    config: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config"),
    clean: bool = typer.Option(False, help="Delete stale minified JS first"),
    from_step: str = typer.Option("", help="Start from this step name"),
    until_step: str = typer.Option("", help="Stop after this step name"),
    continue_on_error: bool = typer.Option(False, help="Log task failures instead of exiting"),
):
    """Run the default build: master.js, myOkta.js, minify-sass, copy-fonts."""
    steps = (["clean"] if clean else []) + DEFAULT_STEPS
    params = load_config(config, required=config != DEFAULT_CONFIG)
    pipe = build_pipeline(steps, name="default")
    pipe.run(
        params=params,
        from_step=from_step or None,
        until_step=until_step or None,
        continue_on_error=continue_on_error or config_continue_on_error(params),
    )


def main():  # pragma: no cover
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
