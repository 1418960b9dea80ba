import logging

import pytest

from themebuild.orchestrator import Pipeline, series, task
from themebuild.orchestrator.core import topo_sort


def _recorder(calls, name, fail=False):
    @task(name=name, outputs=lambda p: [str(p["out"] / name / "result.txt")])
    def fn(params):
        calls.append(name)
        if fail:
            raise OSError(f"{name} broke")
        return {"ignored": True}

    return fn._task_spec


def test_series_edges():
    assert series("a", "b", "c") == [("a", "b"), ("b", "c")]
    assert series("a") == []


def test_topo_sort_follows_series_and_rejects_cycles():
    nodes = ["d", "c", "b", "a"]
    assert topo_sort(nodes, series("a", "b", "c", "d")) == ["a", "b", "c", "d"]
    assert topo_sort(["x", "y"], []) == ["x", "y"]
    with pytest.raises(ValueError):
        topo_sort(["a", "b"], [("a", "b"), ("b", "a")])
    with pytest.raises(ValueError):
        topo_sort(["a"], [("a", "zzz")])


def test_run_in_declared_order_and_creates_output_dirs(tmp_path):
    calls = []
    specs = {n: _recorder(calls, n) for n in ["one", "two", "three"]}
    pipe = Pipeline(specs, series("one", "two", "three"), name="t")
    state = pipe.run(params={"out": tmp_path})
    assert calls == ["one", "two", "three"]
    assert [s["status"] for s in state["steps"]] == ["ok", "ok", "ok"]
    assert (tmp_path / "two").is_dir()


def test_run_stops_on_first_error(tmp_path):
    calls = []
    specs = {
        "one": _recorder(calls, "one"),
        "two": _recorder(calls, "two", fail=True),
        "three": _recorder(calls, "three"),
    }
    pipe = Pipeline(specs, series("one", "two", "three"))
    with pytest.raises(OSError):
        pipe.run(params={"out": tmp_path})
    assert calls == ["one", "two"]


def test_run_continue_on_error(tmp_path):
    calls = []
    specs = {
        "one": _recorder(calls, "one", fail=True),
        "two": _recorder(calls, "two"),
    }
    state = Pipeline(specs, series("one", "two")).run(
        params={"out": tmp_path}, continue_on_error=True
    )
    assert calls == ["one", "two"]
    assert state["steps"][0] == {"name": "one", "status": "error", "error": "one broke"}
    assert state["steps"][1]["status"] == "ok"


def test_step_selection(tmp_path):
    calls = []
    names = ["a", "b", "c", "d"]
    pipe = Pipeline({n: _recorder(calls, n) for n in names}, series(*names))
    pipe.run(params={"out": tmp_path}, from_step="b", until_step="c")
    assert calls == ["b", "c"]
    calls.clear()
    pipe.run(params={"out": tmp_path}, only_step="d")
    assert calls == ["d"]
    with pytest.raises(KeyError):
        pipe.run(params={"out": tmp_path}, only_step="nope")


def test_step_log_file(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    calls = []
    log_path = tmp_path / "logs" / "build.log"
    pipe = Pipeline({"logged": _recorder(calls, "logged")}, [], name="filelog")
    pipe.run(params={"out": tmp_path, "project": {"log_file": str(log_path)}})
    assert "Run: logged" in log_path.read_text()


def test_output_dir_failure_is_a_step_error(tmp_path, caplog):
    calls = []
    (tmp_path / "one").write_text("a file where a directory belongs")
    specs = {"one": _recorder(calls, "one"), "two": _recorder(calls, "two")}
    pipe = Pipeline(specs, series("one", "two"))

    with caplog.at_level(logging.ERROR):
        state = pipe.run(params={"out": tmp_path}, continue_on_error=True)
    assert calls == ["two"]
    assert [s["status"] for s in state["steps"]] == ["error", "ok"]
    assert any("Step failed: one" in r.getMessage() for r in caplog.records)

    with pytest.raises(FileExistsError):
        pipe.run(params={"out": tmp_path})


def test_step_log_file_follows_config(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    calls = []
    first = tmp_path / "logs" / "first.log"
    second = tmp_path / "logs" / "second.log"
    pipe = Pipeline({"moved": _recorder(calls, "moved")}, [], name="movelog")
    pipe.run(params={"out": tmp_path, "project": {"log_file": str(first)}})
    pipe.run(params={"out": tmp_path, "project": {"log_file": str(second)}})
    assert "Run: moved" in first.read_text()
    assert "Run: moved" in second.read_text()
    assert first.read_text().count("Run: moved") == 1
