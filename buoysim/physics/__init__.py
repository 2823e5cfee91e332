"""Пакет физики (плавучесть, давление, развёртки по параметрам)."""

from __future__ import annotations

from .buoyancy import (
    SimulationResult,
    classify_float_state,
    compute_buoyant_force,
    compute_displaced_volume,
    compute_pressure,
    compute_weight,
    evaluate,
    explain,
    format_result,
)

__all__ = [
    "SimulationResult",
    "classify_float_state",
    "compute_buoyant_force",
    "compute_displaced_volume",
    "compute_pressure",
    "compute_weight",
    "evaluate",
    "explain",
    "format_result",
]
