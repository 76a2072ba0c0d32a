from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from config import SimulationConfig, load_config, read_turns_from_config


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "sim.cfg"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults() -> None:
    config = load_config()
    assert config.max_rounds == 25
    assert config.seed == 42
    assert config.turn_delay == 0.0


def test_reads_turns_line(tmp_path: Path) -> None:
    path = _write(tmp_path, "# comment\n  Turns: 100\nturns: 5\n")
    assert read_turns_from_config(path) == 100
    assert load_config(path).max_rounds == 100


@pytest.mark.parametrize("text", ["turns: 0\n", "turns: 8193\n", "turns: many\n", "rounds: 3\n", ""])
def test_unusable_turns_fall_back(tmp_path: Path, text: str) -> None:
    path = _write(tmp_path, text)
    assert read_turns_from_config(path) is None
    assert load_config(path).max_rounds == 25


def test_missing_file_falls_back(tmp_path: Path) -> None:
    assert read_turns_from_config(tmp_path / "nope.cfg") is None
    assert load_config(tmp_path / "nope.cfg").max_rounds == 25


def test_bounds_accepted(tmp_path: Path) -> None:
    assert load_config(_write(tmp_path, "turns: 1")).max_rounds == 1
    assert load_config(_write(tmp_path, "turns: 8192")).max_rounds == 8192


def test_model_rejects_out_of_range() -> None:
    with pytest.raises(ValidationError):
        SimulationConfig(max_rounds=0)
    with pytest.raises(ValidationError):
        SimulationConfig(max_rounds=9000)
    with pytest.raises(ValidationError):
        SimulationConfig(turn_delay=-1)
    with pytest.raises(ValidationError):
        SimulationConfig(colour="red")


def test_invalid_override_keeps_valid_ones() -> None:
    config = load_config(seed=7, turn_delay=99.0)
    assert config.seed == 7
    assert config.turn_delay == 0.0


def test_none_overrides_are_ignored() -> None:
    assert load_config(seed=None, turn_delay=None).seed == 42
