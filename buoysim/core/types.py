"""buoysim.core.types

Типы данных модели: объект в жидкости и состояние плавания.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from buoysim.core.validation import ensure_non_negative, ensure_positive


FloatState = Literal["floating", "sinking", "suspended"]

FLOAT_STATES: tuple[FloatState, ...] = ("floating", "sinking", "suspended")


@dataclass(frozen=True, slots=True)
class SubmergedObject:
    """Объект, погружённый в жидкость.

    volume_cm3:
        Объём тела (см³), > 0.
    density_g_cm3:
        Плотность тела (г/см³), > 0.
    depth_cm:
        Глубина (см), >= 0. Влияет только на давление.
    """

    volume_cm3: float
    density_g_cm3: float
    depth_cm: float = 0.0

    def __post_init__(self) -> None:
        ensure_positive(self.volume_cm3, "volume_cm3")
        ensure_positive(self.density_g_cm3, "density_g_cm3")
        ensure_non_negative(self.depth_cm, "depth_cm")

    @property
    def mass_g(self) -> float:
        return float(self.density_g_cm3 * self.volume_cm3)

    def __repr__(self) -> str:
        return (
            f"SubmergedObject(V={self.volume_cm3} cm³, "
            f"ρ={self.density_g_cm3} g/cm³, h={self.depth_cm} cm)"
        )
