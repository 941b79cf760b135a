import pytest

from rally_pong.config import SPEED_PRESETS, MatchConfig, config_for
from rally_pong.errors import InvalidConfigError


def test_default_config_matches_classic_preset() -> None:
    assert MatchConfig() == SPEED_PRESETS["classic"]
    assert MatchConfig().base_speed == 30.0
    assert MatchConfig().speed_step == 10.0


def test_config_for_is_case_insensitive() -> None:
    assert config_for("FAST") is SPEED_PRESETS["fast"]


def test_config_for_unknown_preset_falls_back_to_classic() -> None:
    assert config_for("nightmare") is SPEED_PRESETS["classic"]


@pytest.mark.parametrize(
    "kwargs",
    [{"base_speed": 0.0}, {"base_speed": -5.0}, {"speed_step": -1.0}],
)
def test_config_rejects_out_of_range_values(kwargs) -> None:
    with pytest.raises(InvalidConfigError):
        MatchConfig(**kwargs)


def test_zero_speed_step_is_allowed() -> None:
    assert MatchConfig(speed_step=0.0).speed_step == 0.0
