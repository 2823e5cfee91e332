from pathlib import Path

import pytest

from buoysim.cli import main


def test_evaluate(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["evaluate", "--density", "1.0", "--volume", "100", "--depth", "20"]) == 0
    out = capsys.readouterr().out
    assert "19620.00 dynes/cm²" in out
    assert "suspended" in out


def test_evaluate_invalid(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["evaluate", "--density", "1.0", "--volume", "0", "--depth", "10"]) == 2
    err = capsys.readouterr().err
    assert "volume_cm3" in err


def test_preset(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["preset", "steel"]) == 0
    assert "The object sinks" in capsys.readouterr().out


def test_unknown_preset(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["preset", "lead"]) == 1
    assert "Unknown scenario" in capsys.readouterr().err


def test_presets(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["presets"]) == 0
    out = capsys.readouterr().out
    assert "cork" in out and "neutral" in out


def test_sweep_with_plot(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    png = tmp_path / "sweep.png"
    assert main(["sweep", "--volume", "100", "--depth", "10", "--plot", str(png)]) == 0
    assert png.exists()
    assert "float_state" in capsys.readouterr().out


def test_quiz(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["quiz", "--answers", "1", "2", "2", "1"]) == 0
    assert "Your Score: 4/4" in capsys.readouterr().out
