# rmpl

A small motion-planning library built around a Rapidly-exploring Random
Tree (RRT) planner. It plans for point robots in a 10 × 10 workspace under
three motion models:

| State (`rmpl.states`) | Control (`rmpl.controls`) | Model                                         |
|-----------------------|---------------------------|-----------------------------------------------|
| `GeoState`            | `GeoControl`              | move straight along a heading                 |
| `VelState`            | `VelControl`              | unicycle, controls turn rate and speed        |
| `AccState`            | `AccControl`              | unicycle, controls turn rate and acceleration |

States and controls are frozen dataclasses bounded by a box. Every one of
them has `minimum()`, `maximum()`, `span()`, `sample(rng=None)`,
`clamped()` and `contains()`. States also have `distance_heuristic(other)`
and `position()`. Each state can `propagate(u, t)` itself under a control
and can `steer(desired)` towards another state. The kinodynamic models are
propagated by integrating their motion equations with the trapezoidal rule
on ten intervals.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Command line

```
rmpl [--output-dir DIR] [--runs N]
```

The command runs six scenarios. Each motion model is tried in an open
`Environment` and in a `ForestEnvironment`. The start is (0, 0) and the goal
is (9.5, 9.5), with a goal radius of 0.5. The planner uses a step size of
0.15, a maximum extension of 1.0 and a goal bias of 0.05.

The command works in two passes:

1. It plans each scenario once for up to one second. It writes the solution
   path to `<scenario>_path.txt` and every tree node to `<scenario>_data.txt`
   in the output directory (default `results`, created if missing). Both
   files hold one `x,y` line per point. After a failed run the path file is
   empty.
2. It benchmarks each environment with `N` planning runs of one second each
   (default 100). Every run uses a fresh planner. For each environment it
   prints one line with four values:
   * the success rate
   * the average planning time
   * the average path length over the successful runs (`NaN` if none succeeded)
   * the average tree size

The scenario names are `simplegeo`, `forestgeo`, `simplevel`, `forestvel`,
`simpleacc` and `forestacc`.

## Library use

```python
from rmpl.environment import ForestEnvironment
from rmpl.rrt import RRT
from rmpl.states import GeoState

env = ForestEnvironment(GeoState(0.0, 0.0), GeoState(9.5, 9.5), goal_radius=0.5)
planner = RRT(env, step_size=0.15, max_dist=1.0, bias=0.05)
solution = planner.solve(1.0)
print(solution.success, solution.path_length())
```

### Environments

`rmpl.environment.Environment(initial_state, goal_state, goal_radius)` is
an open workspace.

* A state is valid when it lies within the bounds of its space.
* A state is a goal when its position is strictly closer than `goal_radius`
  to the goal position.
* `sample_goal()` returns the goal state.
* `sample_state(rng=None)` draws a state uniformly from the space.

`ForestEnvironment` also rejects any state closer than 1.0 to one of the
ten obstacle centres in `FOREST_OBSTACLES`.

### The planner

`rmpl.rrt.RRT(environment, step_size, max_dist, bias, rng=None)` grows a
tree from the initial state. On each iteration it does the following:

1. It samples the goal with probability `bias`, and otherwise a random state.
2. It steers from the nearest node towards that sample.
3. It extends the tree in steps of `step_size` while each new state is valid
   and the distance covered is below `max_dist`.

`solve(time_limit)` runs for up to `time_limit` seconds. It stops early as
soon as a node reaches the goal.

`solve` returns an `rmpl.planners.PlannerSolution` with these fields:

* `success`
* `time`, in seconds
* `path`, a list of `(x, y)` points
* `tree_size`

`path_length()` gives the Euclidean length of the path, and
`export(filename)` writes the path as `x,y` lines.

The planner also has `nearest(target)`, `path()` and `export(filename)`.
`export(filename)` writes every node of the tree.

`rmpl.cli` exposes the pieces of the command:

* `metrics(results)` returns a `Metrics` summary.
* `run_scenario(env, scenario, output_dir)` runs one scenario.
* `run_benchmark(env, n)` runs a benchmark.

### Helpers

`rmpl.mathutil` provides these helpers:

* `wrap`, which normalises an angle to [-π, π]
* `signed_angle_diff`
* `euclidean`
* `angular`
* `trapezoidal`

## What it does not do

The package only writes plain-text point files and printed summaries. It
does not plot or visualise paths or trees. The goal test looks at position
only, not heading or speed.