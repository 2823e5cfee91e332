import pytest

from buoysim.physics import evaluate
from buoysim.scenarios import (
    DEFAULT_OBJECT,
    SCENARIOS,
    ExperimentSession,
    get_scenario,
    run_scenario,
    scenario_ids,
)


def test_ids_unique():
    ids = scenario_ids()
    assert len(ids) == len(set(ids)) == 5


@pytest.mark.parametrize(
    "scenario_id,state",
    [
        ("cork", "floating"),
        ("ice", "floating"),
        ("steel", "sinking"),
        ("neutral", "suspended"),
        ("oil", "floating"),
    ],
)
def test_preset_states(scenario_id: str, state: str):
    assert run_scenario(scenario_id).float_state == state


def test_preset_goes_through_evaluate():
    for s in SCENARIOS:
        assert run_scenario(s.id) == evaluate(s.obj)


def test_steel_values():
    s = get_scenario("Steel")
    assert (s.obj.density_g_cm3, s.obj.volume_cm3, s.obj.depth_cm) == (7.8, 65.0, 25.0)


def test_unknown_scenario():
    with pytest.raises(KeyError):
        get_scenario("lead")


class TestExperimentSession:
    def test_run_marks_completed(self) -> None:
        session = ExperimentSession()
        session.run("cork")
        session.run("steel")
        assert session.completed == {"cork", "steel"}
        assert session.selected == "steel"
        assert session.current == get_scenario("steel").obj

    def test_reset(self) -> None:
        session = ExperimentSession()
        session.run("ice")
        r = session.reset()
        assert session.completed == set()
        assert session.selected is None
        assert session.current == DEFAULT_OBJECT
        assert r.float_state == "floating"
