import numpy as np
import pytest

from buoysim.config import ControlRanges, FluidProperties
from buoysim.core.types import SubmergedObject
from buoysim.core.validation import InvalidInput
from buoysim.physics import evaluate
from buoysim.physics.sweep import SWEEP_COLUMNS, density_sweep, pressure_profile


@pytest.fixture()
def densities() -> np.ndarray:
    return ControlRanges().density_g_cm3.grid()


class TestDensitySweep:
    def test_grid_matches_ui_range(self, densities: np.ndarray) -> None:
        assert densities.size == 20
        assert densities[0] == pytest.approx(0.1)
        assert densities[-1] == pytest.approx(2.0)

    def test_grid_hits_step_nodes(self, densities: np.ndarray) -> None:
        assert 1.0 in densities
        assert densities[9] == 1.0
        assert densities[-1] == 2.0

    def test_ui_grid_has_suspended_row(self, densities: np.ndarray) -> None:
        df = density_sweep(densities, 100.0, 10.0)
        neutral = df[df["density_g_cm3"] == 1.0]
        assert list(neutral["float_state"]) == ["suspended"]
        assert neutral["net_force"].iloc[0] == 0.0
        assert set(df["float_state"]) == {"floating", "suspended", "sinking"}

    def test_volume_grid(self) -> None:
        grid = ControlRanges().volume_cm3.grid()
        assert grid[0] == 50.0
        assert grid[-1] == 500.0
        assert grid.size == 46

    def test_columns(self, densities: np.ndarray) -> None:
        df = density_sweep(densities, 100.0, 10.0)
        assert list(df.columns) == list(SWEEP_COLUMNS)
        assert len(df) == densities.size

    def test_rows_match_evaluate(self) -> None:
        rhos = [0.24, 0.92, 1.0, 7.8]
        df = density_sweep(rhos, 80.0, 15.0)
        for row in df.itertuples(index=False):
            r = evaluate(SubmergedObject(volume_cm3=80.0, density_g_cm3=row.density_g_cm3, depth_cm=15.0))
            assert row.float_state == r.float_state
            assert row.displacement_volume == pytest.approx(r.displacement_volume)
            assert row.buoyant_force == pytest.approx(r.buoyant_force)
            assert row.weight == pytest.approx(r.weight)
            assert row.net_force == pytest.approx(r.net_force)
            assert row.pressure == pytest.approx(r.pressure)

    def test_net_force_sign_follows_state(self, densities: np.ndarray) -> None:
        df = density_sweep(densities, 100.0, 10.0)
        assert (df.loc[df["float_state"] == "sinking", "net_force"] < 0).all()
        # плавающее тело в равновесии: F_b == W
        floating = df[df["float_state"] == "floating"]
        assert np.allclose(floating["net_force"], 0.0, atol=1e-6)

    def test_tolerance(self) -> None:
        df = density_sweep([0.9995, 1.5], 10.0, 0.0, fluid=FluidProperties(neutral_tolerance=1e-3))
        assert list(df["float_state"]) == ["suspended", "sinking"]
        assert df["displacement_volume"].iloc[0] == 10.0

    @pytest.mark.parametrize(
        "densities,volume,depth",
        [
            ([0.5, 0.0], 10.0, 1.0),
            ([0.5], 0.0, 1.0),
            ([0.5], 10.0, -1.0),
            ([float("nan")], 10.0, 1.0),
        ],
    )
    def test_invalid(self, densities, volume: float, depth: float) -> None:
        with pytest.raises(InvalidInput):
            density_sweep(densities, volume, depth)

    def test_empty(self) -> None:
        with pytest.raises(ValueError):
            density_sweep([], 10.0, 1.0)


class TestPressureProfile:
    def test_linear_in_depth(self) -> None:
        df = pressure_profile([0.0, 10.0, 20.0])
        assert list(df["pressure"]) == pytest.approx([0.0, 9810.0, 19620.0])

    def test_rejects_negative(self) -> None:
        with pytest.raises(InvalidInput):
            pressure_profile([5.0, -1.0])
