"""Planning environments: start, goal region and validity checks."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Generic, TypeVar

from rmpl.mathutil import euclidean
from rmpl.spaces import StateSpace

S = TypeVar("S", bound=StateSpace)

FOREST_OBSTACLES: tuple[tuple[float, float], ...] = (
    (2.0, 2.0),
    (5.0, 2.0),
    (8.0, 2.0),
    (0.5, 5.0),
    (3.5, 5.0),
    (6.5, 5.0),
    (9.5, 5.0),
    (2.0, 8.0),
    (5.0, 8.0),
    (8.0, 8.0),
)

OBSTACLE_RADIUS = 1.0


@dataclass(frozen=True)
class Environment(Generic[S]):
    """An open, bounded world with a circular goal region around ``goal_state``."""

    initial_state: S
    goal_state: S
    goal_radius: float

    @property
    def state_type(self) -> type[S]:
        """Class of the states this environment plans over."""
        return type(self.initial_state)

    def is_goal(self, state: S) -> bool:
        """Whether ``state`` lies strictly inside the goal region."""
        return (
            euclidean(self.goal_state.x - state.x, self.goal_state.y - state.y)  # type: ignore[attr-defined]
            < self.goal_radius
        )

    def sample_goal(self) -> S:
        """The goal state itself."""
        return self.goal_state

    def is_valid(self, state: S) -> bool:
        """Whether ``state`` lies within the bounds of its space."""
        return state.contains()

    def sample_state(self, rng: random.Random | None = None) -> S:
        """Draw a state uniformly from the state space."""
        return self.state_type.sample(rng)


@dataclass(frozen=True)
class ForestEnvironment(Environment[S]):
    """A bounded world scattered with circular obstacles."""

    def is_valid(self, state: S) -> bool:
        """Whether ``state`` is in bounds and at least one unit from every obstacle."""
        if not super().is_valid(state):
            return False
        x, y = state.position()
        return all(
            euclidean(x - ox, y - oy) >= OBSTACLE_RADIUS for ox, oy in FOREST_OBSTACLES
        )