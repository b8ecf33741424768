"""Planner interface and the result a planning run produces."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from itertools import pairwise
from os import PathLike


def _format_coordinate(value: float) -> str:
    """Shortest plain decimal form of a float, without exponent or trailing '.0'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        text = str(int(value))
        return "-" + text if math.copysign(1.0, value) < 0 and text == "0" else text
    return format(Decimal(repr(value)), "f")


@dataclass
class PlannerSolution:
    """Outcome of a planning run; ``time`` is in seconds."""

    success: bool = False
    time: float = 0.0
    path: list[tuple[float, float]] = field(default_factory=list)
    tree_size: int = 0

    def export(self, filename: str | PathLike[str]) -> None:
        """Write the path as ``x,y`` lines."""
        with open(filename, "w", encoding="utf-8") as handle:
            for x, y in self.path:
                handle.write(f"{_format_coordinate(x)},{_format_coordinate(y)}\n")

    def path_length(self) -> float:
        """Total Euclidean length of the path."""
        return sum(math.dist(a, b) for a, b in pairwise(self.path))


class Planner(ABC):
    """A motion planner that searches for a path within a time budget."""

    @abstractmethod
    def solve(self, time_limit: float) -> PlannerSolution:
        """Search for up to ``time_limit`` seconds and report the result."""