"""Развёртка модели по сетке параметров (numpy -> pandas.DataFrame).

Те же формулы, что и в buoyancy.py, в векторном виде. Порядок операций
совпадает, поэтому каждая строка совпадает с evaluate() для той же точки.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np
import pandas as pd

from buoysim.config.models import WATER, FluidProperties
from buoysim.core.validation import InvalidInput, ensure_non_negative, ensure_positive

SWEEP_COLUMNS = (
    "density_g_cm3",
    "volume_cm3",
    "depth_cm",
    "displacement_volume",
    "buoyant_force",
    "weight",
    "net_force",
    "pressure",
    "float_state",
)


def _as_array(values: Iterable[float], name: str) -> np.ndarray:
    arr = np.asarray(list(values), dtype=np.float64)
    if arr.ndim != 1 or arr.size == 0:
        raise ValueError(f"{name} must be a non-empty 1D sequence")
    bad = ~np.isfinite(arr)
    if bad.any():
        raise InvalidInput(name, float(arr[bad][0]), "finite")
    return arr


def classify_densities(densities: np.ndarray, *, fluid: FluidProperties = WATER) -> np.ndarray:
    rho_f = float(fluid.density)
    states = np.where(densities < rho_f, "floating", np.where(densities > rho_f, "sinking", "suspended"))
    if fluid.neutral_tolerance > 0.0:
        states = np.where(np.abs(densities - rho_f) <= fluid.neutral_tolerance, "suspended", states)
    return states.astype(object)


def density_sweep(
    densities: Iterable[float],
    volume_cm3: float,
    depth_cm: float,
    *,
    fluid: FluidProperties = WATER,
) -> pd.DataFrame:
    """Одна строка на каждую плотность при фиксированных объёме и глубине."""

    ensure_positive(volume_cm3, "volume_cm3")
    ensure_non_negative(depth_cm, "depth_cm")

    rho = _as_array(densities, "density_g_cm3")
    if (rho <= 0.0).any():
        raise InvalidInput("density_g_cm3", float(rho[rho <= 0.0][0]), "> 0")

    V = float(volume_cm3)
    rho_f = float(fluid.density)
    g = float(fluid.gravity)

    states = classify_densities(rho, fluid=fluid)
    v_disp = np.where(states == "floating", (rho / rho_f) * V, V)
    f_b = rho_f * v_disp * g
    w = rho * V * g
    p = rho_f * g * float(depth_cm)

    df = pd.DataFrame(
        {
            "density_g_cm3": rho,
            "volume_cm3": np.full_like(rho, V),
            "depth_cm": np.full_like(rho, float(depth_cm)),
            "displacement_volume": v_disp,
            "buoyant_force": f_b,
            "weight": w,
            "net_force": f_b - w,
            "pressure": np.full_like(rho, p),
            "float_state": states,
        },
        columns=list(SWEEP_COLUMNS),
    )
    return df


def pressure_profile(depths: Iterable[float], *, fluid: FluidProperties = WATER) -> pd.DataFrame:
    """P(h) = ρ_f · g · h для набора глубин."""

    h = _as_array(depths, "depth_cm")
    if (h < 0.0).any():
        raise InvalidInput("depth_cm", float(h[h < 0.0][0]), ">= 0")

    return pd.DataFrame(
        {
            "depth_cm": h,
            "pressure": float(fluid.density) * float(fluid.gravity) * h,
        }
    )
