from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Set

from .config import WATER, FluidProperties
from .core.types import SubmergedObject
from .physics import SimulationResult, evaluate


@dataclass(frozen=True)
class ExperimentScenario:
    id: str
    title: str
    description: str
    obj: SubmergedObject
    expected_outcome: str
    learning_goal: str


# настройки "сброса" учебного интерфейса
DEFAULT_OBJECT = SubmergedObject(volume_cm3=100.0, density_g_cm3=0.8, depth_cm=10.0)


SCENARIOS: tuple[ExperimentScenario, ...] = (
    ExperimentScenario(
        "cork",
        "Cork in Water",
        "Test a cork (very light material) in water",
        SubmergedObject(volume_cm3=80.0, density_g_cm3=0.24, depth_cm=15.0),
        "Floats high on surface",
        "Understand how very low density materials behave",
    ),
    ExperimentScenario(
        "ice",
        "Ice Cube",
        "See how ice floats in water",
        SubmergedObject(volume_cm3=125.0, density_g_cm3=0.92, depth_cm=10.0),
        "Floats with most submerged",
        "Learn why ice floats despite being solid water",
    ),
    ExperimentScenario(
        "steel",
        "Steel Ball",
        "Drop a steel ball into water",
        SubmergedObject(volume_cm3=65.0, density_g_cm3=7.8, depth_cm=25.0),
        "Sinks rapidly",
        "Observe high-density materials in water",
    ),
    ExperimentScenario(
        "neutral",
        "Neutrally Buoyant Object",
        "An object with the same density as water",
        SubmergedObject(volume_cm3=100.0, density_g_cm3=1.0, depth_cm=20.0),
        "Suspended in water",
        "Understand neutral buoyancy",
    ),
    ExperimentScenario(
        "oil",
        "Oil Drop",
        "See how oil behaves in water",
        SubmergedObject(volume_cm3=150.0, density_g_cm3=0.85, depth_cm=8.0),
        "Floats on surface",
        "Compare different liquid densities",
    ),
)

_BY_ID: Dict[str, ExperimentScenario] = {s.id: s for s in SCENARIOS}


def scenario_ids() -> List[str]:
    return [s.id for s in SCENARIOS]


def get_scenario(scenario_id: str) -> ExperimentScenario:
    key = scenario_id.strip().lower()
    if key not in _BY_ID:
        raise KeyError(f"Unknown scenario: {scenario_id!r}; known: {', '.join(_BY_ID)}")
    return _BY_ID[key]


def run_scenario(scenario_id: str, *, fluid: FluidProperties = WATER) -> SimulationResult:
    # пресеты идут через тот же evaluate(), что и ручной ввод
    return evaluate(get_scenario(scenario_id).obj, fluid=fluid)


@dataclass
class ExperimentSession:
    """Какие пресеты уже запускались и какой объект сейчас выбран."""

    fluid: FluidProperties = WATER
    current: SubmergedObject = DEFAULT_OBJECT
    selected: str | None = None
    completed: Set[str] = field(default_factory=set)

    def run(self, scenario_id: str) -> SimulationResult:
        scenario = get_scenario(scenario_id)
        result = evaluate(scenario.obj, fluid=self.fluid)
        self.current = scenario.obj
        self.selected = scenario.id
        self.completed.add(scenario.id)
        return result

    def apply(self, obj: SubmergedObject) -> SimulationResult:
        result = evaluate(obj, fluid=self.fluid)
        self.current = obj
        return result

    def reset(self) -> SimulationResult:
        self.selected = None
        self.completed.clear()
        return self.apply(DEFAULT_OBJECT)
