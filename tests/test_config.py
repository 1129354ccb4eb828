"""Tests for GameConfig environment loading."""

import pytest

from quantum_cube.config import GameConfig
from quantum_cube.errors import ConfigurationError


def test_defaults():
    config = GameConfig()
    assert config.grid_size == 3
    assert config.moves_per_turn == 1
    assert config.rng_seed is None
    assert config.log_level == "INFO"
    assert config.cell_pitch == pytest.approx(3.0)


def test_from_env_reads_prefixed_variables():
    config = GameConfig.from_env({
        "QCUBE_MOVES_PER_TURN": "2",
        "QCUBE_RNG_SEED": "99",
        "QCUBE_LOG_LEVEL": "debug",
        "QCUBE_CELL_SIZE": "1.5",
        "QCUBE_GAP": "0.5",
        "UNRELATED": "x",
    })
    assert config.moves_per_turn == 2
    assert config.rng_seed == 99
    assert config.log_level == "DEBUG"
    assert config.cell_pitch == pytest.approx(2.0)


def test_from_env_uses_process_environment(monkeypatch):
    monkeypatch.setenv("QCUBE_RNG_SEED", "5")
    assert GameConfig.from_env().rng_seed == 5


def test_overrides_beat_environment():
    config = GameConfig.from_env({"QCUBE_MOVES_PER_TURN": "2"}, moves_per_turn=1, rng_seed=None)
    assert config.moves_per_turn == 1
    assert config.rng_seed is None


def test_blank_variables_ignored():
    assert GameConfig.from_env({"QCUBE_RNG_SEED": "  "}).rng_seed is None


@pytest.mark.parametrize(
    "env,setting",
    [
        ({"QCUBE_GRID_SIZE": "4"}, "grid_size"),
        ({"QCUBE_MOVES_PER_TURN": "0"}, "moves_per_turn"),
        ({"QCUBE_MOVES_PER_TURN": "two"}, "moves_per_turn"),
        ({"QCUBE_LOG_LEVEL": "chatty"}, "log_level"),
        ({"QCUBE_CELL_SIZE": "-1"}, "cell_size"),
    ],
)
def test_invalid_values_raise_configuration_error(env, setting):
    with pytest.raises(ConfigurationError) as excinfo:
        GameConfig.from_env(env)
    assert excinfo.value.context["setting"] == setting
