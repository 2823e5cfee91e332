from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

import numpy as np

from buoysim.core.units import G_CGS, WATER_DENSITY
from buoysim.core.validation import ensure_finite


@dataclass(frozen=True)
class FluidProperties:
    density: float = WATER_DENSITY      # g/cm^3
    gravity: float = G_CGS              # cm/s^2
    name: str = "water"
    # 0.0 => строгое равенство для "suspended"; >0 => полоса |ρ - ρ_f| <= tol
    neutral_tolerance: float = 0.0

    def __post_init__(self) -> None:
        ensure_finite(self.density, "density")
        ensure_finite(self.gravity, "gravity")
        ensure_finite(self.neutral_tolerance, "neutral_tolerance")
        if self.density <= 0.0:
            raise ValueError("density must be > 0")
        if self.gravity <= 0.0:
            raise ValueError("gravity must be > 0")
        if self.neutral_tolerance < 0.0:
            raise ValueError("neutral_tolerance must be >= 0")


WATER = FluidProperties()


@dataclass(frozen=True)
class ParameterRange:
    lo: float
    hi: float
    step: float

    def __post_init__(self) -> None:
        if self.step <= 0.0:
            raise ValueError("step must be > 0")
        if self.hi < self.lo:
            raise ValueError("hi must be >= lo")

    def grid(self) -> np.ndarray:
        n = int(round((self.hi - self.lo) / self.step)) + 1
        # узлы на десятичной сетке шага: 0.1 + 9 * 0.1 должно дать ровно 1.0
        decimals = max(0, -Decimal(repr(float(self.step))).as_tuple().exponent)
        return np.round(self.lo + self.step * np.arange(n, dtype=np.float64), decimals)


@dataclass(frozen=True)
class ControlRanges:
    # диапазоны слайдеров учебного интерфейса; для подсказок и сеток sweep, не для clamp
    density_g_cm3: ParameterRange = ParameterRange(0.1, 2.0, 0.1)
    volume_cm3: ParameterRange = ParameterRange(50.0, 500.0, 10.0)
    depth_cm: ParameterRange = ParameterRange(5.0, 30.0, 1.0)


@dataclass(frozen=True)
class SimulatorConfig:
    fluid: FluidProperties = WATER
    ranges: ControlRanges = field(default_factory=ControlRanges)
