"""Control inputs for the geometric, velocity and acceleration models."""

from __future__ import annotations

import math
from dataclasses import dataclass

from rmpl.spaces import ControlSpace


@dataclass(frozen=True)
class GeoControl(ControlSpace):
    """Direction of a straight-line step."""

    theta: float

    @classmethod
    def minimum(cls) -> GeoControl:
        return cls(theta=-math.pi)

    @classmethod
    def maximum(cls) -> GeoControl:
        return cls(theta=math.pi)


@dataclass(frozen=True)
class VelControl(ControlSpace):
    """Turn rate and forward speed."""

    omega: float
    v: float

    @classmethod
    def minimum(cls) -> VelControl:
        return cls(omega=-1.0, v=0.0)

    @classmethod
    def maximum(cls) -> VelControl:
        return cls(omega=1.0, v=1.0)


@dataclass(frozen=True)
class AccControl(ControlSpace):
    """Turn rate and forward acceleration."""

    omega: float
    a: float

    @classmethod
    def minimum(cls) -> AccControl:
        return cls(omega=-1.0, a=-0.5)

    @classmethod
    def maximum(cls) -> AccControl:
        return cls(omega=1.0, a=0.5)