"""Kinodynamic rapidly-exploring random tree planner."""

from __future__ import annotations

import random
import time
from os import PathLike
from typing import Generic, TypeVar

from rmpl.environment import Environment
from rmpl.planners import Planner, PlannerSolution, _format_coordinate
from rmpl.spaces import StateSpace

S = TypeVar("S", bound=StateSpace)


class RRT(Planner, Generic[S]):
    """Grows a tree of states from the initial state until it reaches the goal region.

    ``nodes`` holds each state together with the index of its parent node,
    or ``None`` for the root.
    """

    def __init__(
        self,
        environment: Environment[S],
        step_size: float,
        max_dist: float,
        bias: float,
        rng: random.Random | None = None,
    ) -> None:
        self.environment = environment
        self.step_size = step_size
        self.max_dist = max_dist
        self.bias = bias
        self.nodes: list[tuple[S, int | None]] = [(environment.initial_state, None)]
        self._rng = rng if rng is not None else random.Random()

    def nearest(self, target: S) -> int:
        """Index of the node closest to ``target`` by the state's distance heuristic."""
        index, _ = min(
            enumerate(self.nodes),
            key=lambda item: item[1][0].distance_heuristic(target),
        )
        return index

    def path(self) -> list[tuple[float, float]]:
        """Positions from the root to the most recently added node."""
        positions: list[tuple[float, float]] = []
        current: int | None = len(self.nodes) - 1
        while current is not None:
            state, parent = self.nodes[current]
            positions.append(state.position())
            current = parent
        positions.reverse()
        return positions

    def export(self, filename: str | PathLike[str]) -> None:
        """Write the position of every node in the tree as ``x,y`` lines."""
        with open(filename, "w", encoding="utf-8") as handle:
            for state, _ in self.nodes:
                x, y = state.position()
                handle.write(f"{_format_coordinate(x)},{_format_coordinate(y)}\n")

    def _sample(self) -> S:
        if self._rng.random() < self.bias:
            return self.environment.sample_goal()
        return self.environment.sample_state(self._rng)

    def solve(self, time_limit: float) -> PlannerSolution:
        """Extend the tree for up to ``time_limit`` seconds or until the goal is reached."""
        start = time.monotonic()
        while time.monotonic() - start < time_limit:
            target = self._sample()
            i_near = self.nearest(target)
            s_near = self.nodes[i_near][0]
            control = s_near.steer(target)  # type: ignore[attr-defined]

            s_new = s_near.propagate(control, self.step_size)  # type: ignore[attr-defined]
            travelled = self.step_size
            while self.environment.is_valid(s_new) and travelled < self.max_dist:
                self.nodes.append((s_new, i_near))
                if self.environment.is_goal(s_new):
                    return PlannerSolution(
                        success=True,
                        time=time.monotonic() - start,
                        path=self.path(),
                        tree_size=len(self.nodes),
                    )
                s_near = s_new
                i_near = len(self.nodes) - 1
                s_new = s_near.propagate(control, self.step_size)  # type: ignore[attr-defined]
                travelled += self.step_size

        return PlannerSolution(
            success=False,
            time=time.monotonic() - start,
            tree_size=len(self.nodes),
        )