"""Модель плавучести и гидростатического давления (закон Архимеда).

Чистые функции без внутреннего состояния: свойства жидкости передаются
явно (по умолчанию WATER) и только читаются.

Единицы (СГС):
- Объём: см³
- Плотность: г/см³
- Сила: дин
- Давление: дин/см²
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

from buoysim.config.models import WATER, FluidProperties
from buoysim.core.types import FloatState, SubmergedObject
from buoysim.core.validation import ensure_non_negative, ensure_positive

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SimulationResult:
    buoyant_force: float        # dyn
    weight: float               # dyn
    net_force: float            # dyn, > 0 вверх
    pressure: float             # dyn/cm^2
    displacement_volume: float  # cm^3
    float_state: FloatState

    # входные данные, из которых получен результат (для explain)
    obj: SubmergedObject
    fluid: FluidProperties = WATER

    @property
    def submerged_fraction(self) -> float:
        return float(self.displacement_volume / self.obj.volume_cm3)


def classify_float_state(obj: SubmergedObject, *, fluid: FluidProperties = WATER) -> FloatState:
    """Сравнение плотностей: < плавает, > тонет, == взвешено.

    По умолчанию равенство строгое. Если задан fluid.neutral_tolerance,
    полоса |ρ - ρ_f| <= tol тоже считается взвешенным состоянием.
    """

    rho = float(obj.density_g_cm3)
    rho_f = float(fluid.density)

    if fluid.neutral_tolerance > 0.0 and abs(rho - rho_f) <= fluid.neutral_tolerance:
        return "suspended"
    if rho < rho_f:
        return "floating"
    if rho > rho_f:
        return "sinking"
    return "suspended"


def compute_displaced_volume(obj: SubmergedObject, *, fluid: FluidProperties = WATER) -> float:
    """Объём вытесненной жидкости (см³).

    Плавающее тело погружено на долю ρ/ρ_f, иначе погружено целиком.
    """

    ensure_positive(obj.volume_cm3, "volume_cm3")

    if classify_float_state(obj, fluid=fluid) == "floating":
        return (float(obj.density_g_cm3) / float(fluid.density)) * float(obj.volume_cm3)
    return float(obj.volume_cm3)


def compute_buoyant_force(displaced_volume_cm3: float, *, fluid: FluidProperties = WATER) -> float:
    """F_b = ρ_f · V_disp · g (дин)."""

    return float(fluid.density) * float(displaced_volume_cm3) * float(fluid.gravity)


def compute_weight(obj: SubmergedObject, *, fluid: FluidProperties = WATER) -> float:
    """W = ρ · V · g (дин)."""

    return float(obj.density_g_cm3) * float(obj.volume_cm3) * float(fluid.gravity)


def compute_pressure(depth_cm: float, *, fluid: FluidProperties = WATER) -> float:
    """P = ρ_f · g · h (дин/см²). От объекта не зависит."""

    ensure_non_negative(depth_cm, "depth_cm")
    return float(fluid.density) * float(fluid.gravity) * float(depth_cm)


def evaluate(obj: SubmergedObject, *, fluid: FluidProperties = WATER) -> SimulationResult:
    """Полный расчёт для одного объекта.

    net_force считается как buoyant_force - weight, а не отдельной формулой.
    """

    ensure_positive(obj.density_g_cm3, "density_g_cm3")

    displacement_volume = compute_displaced_volume(obj, fluid=fluid)
    buoyant_force = compute_buoyant_force(displacement_volume, fluid=fluid)
    weight = compute_weight(obj, fluid=fluid)
    pressure = compute_pressure(obj.depth_cm, fluid=fluid)
    float_state = classify_float_state(obj, fluid=fluid)

    result = SimulationResult(
        buoyant_force=buoyant_force,
        weight=weight,
        net_force=buoyant_force - weight,
        pressure=pressure,
        displacement_volume=displacement_volume,
        float_state=float_state,
        obj=obj,
        fluid=fluid,
    )
    logger.debug("evaluate %r -> %s, F_net=%.3f dyn", obj, float_state, result.net_force)
    return result


def explain(result: SimulationResult) -> str:
    """Текст для учебного интерфейса: почему тело плавает/тонет/взвешено."""

    rho = result.obj.density_g_cm3
    rho_f = result.fluid.density
    fluid_name = result.fluid.name

    if result.float_state == "floating":
        return (
            f"The object floats because its density ({rho:.2f} g/cm³) is less than "
            f"{fluid_name}'s density ({rho_f:.1f} g/cm³). Only part of the object is "
            f"submerged ({result.displacement_volume:.2f} of {result.obj.volume_cm3:.2f} cm³)."
        )
    if result.float_state == "sinking":
        return (
            f"The object sinks because its density ({rho:.2f} g/cm³) is greater than "
            f"{fluid_name}'s density ({rho_f:.1f} g/cm³). The buoyant force "
            f"({result.buoyant_force:.2f} dynes) is not strong enough to support the "
            f"object's weight ({result.weight:.2f} dynes)."
        )
    if rho != rho_f:
        return (
            f"The object remains suspended because its density ({rho:.4f} g/cm³) matches "
            f"{fluid_name}'s density ({rho_f:.4f} g/cm³) within the neutral tolerance "
            f"(±{result.fluid.neutral_tolerance:g} g/cm³). The buoyant force balances the "
            f"object's weight."
        )
    return (
        f"The object remains suspended because its density ({rho:.2f} g/cm³) equals "
        f"{fluid_name}'s density ({rho_f:.1f} g/cm³). The buoyant force exactly "
        f"balances the object's weight."
    )


def format_result(result: SimulationResult) -> dict[str, str]:
    """Строки для отображения: два знака после запятой и единицы."""

    return {
        "buoyant_force": f"{result.buoyant_force:.2f} dynes",
        "weight": f"{result.weight:.2f} dynes",
        "net_force": f"{result.net_force:.2f} dynes",
        "pressure": f"{result.pressure:.2f} dynes/cm²",
        "float_state": result.float_state,
        "displacement_volume": f"{result.displacement_volume:.2f} cm³",
    }
