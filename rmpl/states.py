"""Vehicle states with their motion models and steering rules."""

from __future__ import annotations

import math
from dataclasses import dataclass

from rmpl.controls import AccControl, GeoControl, VelControl
from rmpl.mathutil import angular, euclidean, signed_angle_diff, trapezoidal, wrap
from rmpl.spaces import StateSpace

_STEPS = 10


@dataclass(frozen=True)
class GeoState(StateSpace):
    """A point moving in straight lines."""

    x: float
    y: float

    @classmethod
    def minimum(cls) -> GeoState:
        return cls(x=0.0, y=0.0)

    @classmethod
    def maximum(cls) -> GeoState:
        return cls(x=10.0, y=10.0)

    def distance_heuristic(self, other: GeoState) -> float:
        s = self.span()
        return euclidean(self.x - other.x, self.y - other.y) / euclidean(s.x, s.y)

    def propagate(self, u: GeoControl, t: float) -> GeoState:
        """Move a distance ``t`` in direction ``u.theta``."""
        return GeoState(x=self.x + math.cos(u.theta) * t, y=self.y + math.sin(u.theta) * t)

    def steer(self, desired: GeoState) -> GeoControl:
        """Control pointing straight at ``desired``."""
        return GeoControl(theta=math.atan2(desired.y - self.y, desired.x - self.x)).clamped()


@dataclass(frozen=True)
class VelState(StateSpace):
    """A unicycle driven by turn rate and speed."""

    x: float
    y: float
    theta: float

    @classmethod
    def minimum(cls) -> VelState:
        return cls(x=0.0, y=0.0, theta=-math.pi)

    @classmethod
    def maximum(cls) -> VelState:
        return cls(x=10.0, y=10.0, theta=math.pi)

    def distance_heuristic(self, other: VelState) -> float:
        s = self.span()
        w_d = euclidean(self.x - other.x, self.y - other.y) / euclidean(s.x, s.y)
        w_a = angular(self.theta, other.theta) / (s.theta / 2.0)
        return w_d + w_a

    def propagate(self, u: VelControl, t: float) -> VelState:
        """Integrate the unicycle model for time ``t``."""

        def heading(s: float) -> float:
            return self.theta + trapezoidal(lambda _s: u.omega, 0.0, s, _STEPS)

        x = self.x + trapezoidal(lambda s: u.v * math.cos(heading(s)), 0.0, t, _STEPS)
        y = self.y + trapezoidal(lambda s: u.v * math.sin(heading(s)), 0.0, t, _STEPS)
        return VelState(x=x, y=y, theta=wrap(heading(t)))

    def steer(self, desired: VelState) -> VelControl:
        """Turn towards ``desired`` at a speed equal to the distance to it."""
        dx = desired.x - self.x
        dy = desired.y - self.y
        return VelControl(
            omega=signed_angle_diff(self.theta, math.atan2(dy, dx)),
            v=math.hypot(dx, dy),
        ).clamped()


@dataclass(frozen=True)
class AccState(StateSpace):
    """A unicycle driven by turn rate and acceleration."""

    x: float
    y: float
    v: float
    theta: float

    @classmethod
    def minimum(cls) -> AccState:
        return cls(x=0.0, y=0.0, v=0.0, theta=-math.pi)

    @classmethod
    def maximum(cls) -> AccState:
        return cls(x=10.0, y=10.0, v=2.0, theta=math.pi)

    def distance_heuristic(self, other: AccState) -> float:
        s = self.span()
        w_d = euclidean(self.x - other.x, self.y - other.y) / euclidean(s.x, s.y)
        w_v = abs(self.v - other.v) / s.v
        w_a = angular(self.theta, other.theta) / (s.theta / 2.0)
        return w_d + w_v + w_a

    def propagate(self, u: AccControl, t: float) -> AccState:
        """Integrate the second-order unicycle model for time ``t``."""

        def heading(s: float) -> float:
            return self.theta + trapezoidal(lambda _s: u.omega, 0.0, s, _STEPS)

        def speed(s: float) -> float:
            return self.v + trapezoidal(lambda _s: u.a, 0.0, s, _STEPS)

        x = self.x + trapezoidal(
            lambda s: speed(s) * math.cos(heading(s)), 0.0, t, _STEPS
        )
        y = self.y + trapezoidal(
            lambda s: speed(s) * math.sin(heading(s)), 0.0, t, _STEPS
        )
        return AccState(x=x, y=y, v=speed(t), theta=wrap(heading(t)))

    def steer(self, desired: AccState) -> AccControl:
        """Turn towards ``desired`` and accelerate towards a speed equal to the distance."""
        dx = desired.x - self.x
        dy = desired.y - self.y
        return AccControl(
            omega=signed_angle_diff(self.theta, math.atan2(dy, dx)),
            a=math.hypot(dx, dy) - self.v,
        ).clamped()