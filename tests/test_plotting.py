import importlib
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

import buoysim.plotting  # noqa: E402
from buoysim.config import ControlRanges  # noqa: E402
from buoysim.physics.sweep import density_sweep  # noqa: E402


def test_import_keeps_backend(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []
    monkeypatch.setattr(matplotlib, "use", lambda *a, **kw: calls.append(a))
    importlib.reload(buoysim.plotting)
    assert calls == []


def test_plot_density_sweep(tmp_path: Path) -> None:
    df = density_sweep(ControlRanges().density_g_cm3.grid(), 100.0, 10.0)
    out = buoysim.plotting.plot_density_sweep(df, tmp_path / "nested" / "sweep.png")
    assert out.exists()
    assert out.stat().st_size > 0
