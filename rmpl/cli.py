"""Command line entry point: run example scenarios and benchmarks."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from rmpl.environment import Environment, ForestEnvironment
from rmpl.planners import PlannerSolution
from rmpl.rrt import RRT
from rmpl.states import AccState, GeoState, VelState

STEP_SIZE = 0.15
MAX_DIST = 1.0
GOAL_BIAS = 0.05
GOAL_RADIUS = 0.5
TIME_LIMIT = 1.0


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return repr(float(value))


def _format_duration(seconds: float) -> str:
    nanos = round(seconds * 1e9)
    for unit, scale in (("s", 10**9), ("ms", 10**6), ("µs", 10**3)):
        if nanos >= scale:
            whole, frac = divmod(nanos, scale)
            digits = str(frac).rjust(len(str(scale)) - 1, "0").rstrip("0")
            return f"{whole}.{digits}{unit}" if digits else f"{whole}{unit}"
    return f"{nanos}ns"


@dataclass(frozen=True)
class Metrics:
    """Aggregate figures over a batch of planning runs."""

    success_rate: float
    average_time: float
    average_path_length: float
    average_tree_size: float

    def __str__(self) -> str:
        return ", ".join(
            (
                _format_float(self.success_rate),
                _format_duration(self.average_time),
                _format_float(self.average_path_length),
                _format_float(self.average_tree_size),
            )
        )


def metrics(results: Sequence[PlannerSolution]) -> Metrics:
    """Summarise runs; the path length averages successful runs only (NaN if none)."""
    if not results:
        raise ValueError("cannot summarise an empty set of results")
    total = len(results)
    successful = [r for r in results if r.success]
    path_length = (
        sum(r.path_length() for r in successful) / len(successful)
        if successful
        else math.nan
    )
    return Metrics(
        success_rate=len(successful) / total,
        average_time=sum(r.time for r in results) / total,
        average_path_length=path_length,
        average_tree_size=sum(r.tree_size for r in results) / total,
    )


def run_scenario(env: Environment, scenario: str, output_dir: str | Path) -> PlannerSolution:
    """Plan once and write the path and the whole tree into ``output_dir``."""
    directory = Path(output_dir)
    planner = RRT(env, STEP_SIZE, MAX_DIST, GOAL_BIAS)
    solution = planner.solve(TIME_LIMIT)
    solution.export(directory / f"{scenario}_path.txt")
    planner.export(directory / f"{scenario}_data.txt")
    return solution


def run_benchmark(env: Environment, n: int) -> Metrics:
    """Plan ``n`` times with fresh planners, print and return the summary."""
    results = [
        RRT(env, STEP_SIZE, MAX_DIST, GOAL_BIAS).solve(TIME_LIMIT) for _ in range(n)
    ]
    summary = metrics(results)
    print(summary)
    return summary


def _environments() -> list[tuple[str, Environment]]:
    si_geo = GeoState(x=0.0, y=0.0)
    sg_geo = GeoState(x=9.5, y=9.5)
    si_vel = VelState(x=0.0, y=0.0, theta=math.pi / 4.0)
    sg_vel = VelState(x=9.5, y=9.5, theta=0.0)
    si_acc = AccState(x=0.0, y=0.0, v=0.0, theta=math.pi / 4.0)
    sg_acc = AccState(x=9.5, y=9.5, v=0.0, theta=0.0)
    return [
        ("simplegeo", Environment(si_geo, sg_geo, GOAL_RADIUS)),
        ("forestgeo", ForestEnvironment(si_geo, sg_geo, GOAL_RADIUS)),
        ("simplevel", Environment(si_vel, sg_vel, GOAL_RADIUS)),
        ("forestvel", ForestEnvironment(si_vel, sg_vel, GOAL_RADIUS)),
        ("simpleacc", Environment(si_acc, sg_acc, GOAL_RADIUS)),
        ("forestacc", ForestEnvironment(si_acc, sg_acc, GOAL_RADIUS)),
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Run every scenario once, then benchmark each environment."""
    parser = argparse.ArgumentParser(prog="rmpl", description=main.__doc__)
    parser.add_argument("--output-dir", default="results", help="where to write results")
    parser.add_argument("--runs", type=int, default=100, help="benchmark runs per environment")
    args = parser.parse_args(argv)
    if args.runs < 1:
        parser.error("--runs must be at least 1")

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    environments = _environments()
    for name, env in environments:
        run_scenario(env, name, output_dir)
    for _, env in environments:
        run_benchmark(env, args.runs)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())