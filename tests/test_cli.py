import math

import pytest

from rmpl.cli import main, metrics, run_benchmark, run_scenario
from rmpl.environment import Environment
from rmpl.planners import PlannerSolution
from rmpl.states import GeoState


def test_metrics_averages_runs():
    results = [
        PlannerSolution(success=True, time=0.5, path=[(0.0, 0.0), (3.0, 4.0)], tree_size=10),
        PlannerSolution(success=False, time=1.5, path=[], tree_size=20),
    ]
    summary = metrics(results)
    assert summary.success_rate == 0.5
    assert summary.average_time == pytest.approx(1.0)
    assert summary.average_path_length == pytest.approx(5.0)
    assert summary.average_tree_size == 15.0
    assert str(summary) == "0.5, 1s, 5.0, 15.0"


def test_metrics_without_success_has_nan_path_length():
    results = [PlannerSolution(success=False, time=0.0125, tree_size=4)]
    summary = metrics(results)
    assert summary.success_rate == 0.0
    assert math.isnan(summary.average_path_length)
    assert str(summary) == "0.0, 12.5ms, NaN, 4.0"


def test_metrics_rejects_empty_results():
    with pytest.raises(ValueError):
        metrics([])


def test_run_scenario_writes_path_and_tree(tmp_path):
    env = Environment(GeoState(0.0, 0.0), GeoState(0.3, 0.3), 0.5)
    solution = run_scenario(env, "near", tmp_path)
    assert solution.success
    path_lines = (tmp_path / "near_path.txt").read_text(encoding="utf-8").splitlines()
    data_lines = (tmp_path / "near_data.txt").read_text(encoding="utf-8").splitlines()
    assert path_lines[0] == "0,0"
    assert data_lines[0] == "0,0"
    assert len(path_lines) == len(solution.path)
    assert len(data_lines) == solution.tree_size


def test_run_benchmark_prints_summary(capsys):
    env = Environment(GeoState(0.0, 0.0), GeoState(-5.0, 0.0), 0.5)
    summary = run_benchmark(env, 2)
    out = capsys.readouterr().out.strip()
    assert out == str(summary)
    assert summary.success_rate == 0.0
    assert summary.average_tree_size >= 1.0


def test_main_rejects_zero_runs(tmp_path):
    with pytest.raises(SystemExit):
        main(["--output-dir", str(tmp_path), "--runs", "0"])