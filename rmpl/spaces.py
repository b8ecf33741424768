"""Bounded state and control spaces built on frozen dataclasses."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import astuple
from typing import TypeVar

T = TypeVar("T", bound="Space")


class Space(ABC):
    """A box-bounded point whose coordinates are the dataclass fields."""

    @classmethod
    @abstractmethod
    def minimum(cls: type[T]) -> T:
        """Lower corner of the space."""

    @classmethod
    @abstractmethod
    def maximum(cls: type[T]) -> T:
        """Upper corner of the space."""

    @classmethod
    def _bounds(cls) -> list[tuple[float, float]]:
        return list(zip(astuple(cls.minimum()), astuple(cls.maximum())))

    @classmethod
    def sample(cls: type[T], rng: random.Random | None = None) -> T:
        """Draw a point uniformly from the space."""
        source = rng if rng is not None else random
        return cls(*(source.uniform(lo, hi) for lo, hi in cls._bounds()))

    def clamped(self: T) -> T:
        """Return a copy with every coordinate clamped into the bounds."""
        return type(self)(
            *(
                min(max(value, lo), hi)
                for value, (lo, hi) in zip(astuple(self), self._bounds())
            )
        )

    def contains(self) -> bool:
        """Whether every coordinate lies within the bounds."""
        return all(
            lo <= value <= hi for value, (lo, hi) in zip(astuple(self), self._bounds())
        )

    @classmethod
    def span(cls: type[T]) -> T:
        """Extent of the space along each coordinate."""
        return cls(*(hi - lo for lo, hi in cls._bounds()))


class StateSpace(Space):
    """A state with a planar position and a distance heuristic."""

    @abstractmethod
    def distance_heuristic(self, other: StateSpace) -> float:
        """Normalised distance between two states."""

    def position(self) -> tuple[float, float]:
        """Planar position of the state."""
        return (self.x, self.y)  # type: ignore[attr-defined]


class ControlSpace(Space):
    """A control input applied to a state."""