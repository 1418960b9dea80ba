from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Union, List

from .files import is_glob
from .logging import get_logger
from .utils import log_file


# Allow static lists or callables that build paths from params
PathSpec = Union[List[str], Callable[[dict], List[str]]]


@dataclass
class TaskSpec:
    name: str
    inputs: PathSpec
    outputs: PathSpec
    fn: Callable[..., Any]


def task(name: str, inputs: PathSpec = (), outputs: PathSpec = ()):
    """Decorator to declare a task on a function.

    The wrapped function receives a single keyword argument `params` (parsed
    config). Whatever it returns is ignored by the pipeline.
    """

    def deco(fn: Callable[..., Any]):
        spec = TaskSpec(name=name, inputs=inputs, outputs=outputs, fn=fn)
        setattr(fn, "_task_spec", spec)
        return fn

    return deco


def series(*names: str) -> list[tuple[str, str]]:
    """Edges that force `names` to run one after another."""
    return list(zip(names, names[1:]))


def topo_sort(nodes: Iterable[str], edges: Iterable[tuple[str, str]]) -> list[str]:
    nodes = list(nodes)
    incoming = {n: set() for n in nodes}
    outgoing = {n: set() for n in nodes}
    for u, v in edges:
        if u not in incoming or v not in incoming:
            raise ValueError(f"Edge references unknown node: {(u, v)}")
        outgoing[u].add(v)
        incoming[v].add(u)
    ordered: list[str] = []
    # Seed in declaration order so unrelated tasks keep their listed order
    roots = [n for n in reversed(nodes) if not incoming[n]]
    while roots:
        n = roots.pop()
        ordered.append(n)
        for m in sorted(outgoing[n], key=nodes.index, reverse=True):
            incoming[m].discard(n)
            outgoing[n].discard(m)
            if not incoming[m]:
                roots.append(m)
    if any(incoming[n] for n in nodes):
        raise ValueError("Cycle detected in task graph")
    return ordered


class Pipeline:
    def __init__(
        self,
        tasks: dict[str, TaskSpec],
        edges: list[tuple[str, str]],
        name: str = "pipeline",
    ):
        self.name = name
        self.tasks = tasks
        self.edges = edges
        self.order = topo_sort(tasks.keys(), edges)
        self.logger = get_logger(f"themebuild.{self.name}")

    def _select_subset(
        self, from_step: str | None, until_step: str | None, only_step: str | None
    ) -> list[str]:
        if only_step:
            if only_step not in self.tasks:
                raise KeyError(f"Unknown step: {only_step}")
            return [only_step]
        ordered = self.order
        if from_step:
            if from_step not in self.tasks:
                raise KeyError(f"Unknown step: {from_step}")
            start_idx = ordered.index(from_step)
            ordered = ordered[start_idx:]
        if until_step:
            if until_step not in self.tasks:
                raise KeyError(f"Unknown step: {until_step}")
            if until_step not in ordered:
                raise KeyError(f"Step {until_step} runs before {from_step}")
            end_idx = ordered.index(until_step)
            ordered = ordered[: end_idx + 1]
        return ordered

    def run(
        self,
        params: dict,
        from_step: str | None = None,
        until_step: str | None = None,
        only_step: str | None = None,
        continue_on_error: bool = False,
    ) -> dict:
        run_id = time.strftime("%Y%m%d-%H%M%S")
        selected = self._select_subset(from_step, until_step, only_step)
        self.logger.info("Selected steps: %s", " → ".join(selected))

        state: dict = {"pipeline": self.name, "run_id": run_id, "steps": []}

        for step_name in selected:
            spec = self.tasks[step_name]
            step_logger = get_logger(
                f"themebuild.{self.name}.{step_name}", log_file=log_file(params)
            )
            try:
                step_logger.info("Run: %s", step_name)
                _ensure_output_dirs(_resolve_paths(spec.outputs, params))
                started = time.perf_counter()
                spec.fn(params=params)
            except Exception as e:  # noqa: BLE001
                step_logger.exception("Step failed: %s", step_name)
                state["steps"].append(
                    {"name": step_name, "status": "error", "error": str(e)}
                )
                if not continue_on_error:
                    raise
                continue
            step_logger.info(
                "Finished %s in %.2fs", step_name, time.perf_counter() - started
            )
            state["steps"].append({"name": step_name, "status": "ok"})

        failed = [s["name"] for s in state["steps"] if s["status"] == "error"]
        if failed:
            self.logger.warning("Finished with failed steps: %s", ", ".join(failed))
        return state


def _resolve_paths(paths_spec: PathSpec, params: dict) -> list[str]:
    """Resolve a static list of paths or a callable(params) into a list[str]."""
    if callable(paths_spec):
        paths = paths_spec(params)
    else:
        paths = paths_spec
    if paths is None:
        return []
    return [str(p) for p in paths]


def _ensure_output_dirs(patterns: list[str]) -> None:
    for pat in patterns:
        p = Path(pat)
        if p.name and not is_glob(p.name):
            p.parent.mkdir(parents=True, exist_ok=True)
