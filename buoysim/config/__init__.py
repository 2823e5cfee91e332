"""Конфиги модели плавучести.

Свойства жидкости фиксируются при создании и дальше только читаются.
"""

from __future__ import annotations

from .models import (  # noqa: F401
    WATER,
    ControlRanges,
    FluidProperties,
    ParameterRange,
    SimulatorConfig,
)

__all__ = [
    "FluidProperties",
    "WATER",
    "ParameterRange",
    "ControlRanges",
    "SimulatorConfig",
]
