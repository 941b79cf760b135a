"""
Match configuration and speed presets.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.utils import logger

from rally_pong.constants import BASE_SPEED, SPEED_STEP
from rally_pong.errors import InvalidConfigError


@dataclass(frozen=True)
class MatchConfig:
    """
    Ball speed settings.

    - base_speed: speed of every serve (units/sec)
    - speed_step: speed added on each paddle hit
    """

    base_speed: float = BASE_SPEED
    speed_step: float = SPEED_STEP  # 0 keeps the rally at serve speed

    def __post_init__(self):
        if self.base_speed <= 0:
            raise InvalidConfigError(
                f"base_speed must be positive, got {self.base_speed}"
            )
        if self.speed_step < 0:
            raise InvalidConfigError(
                f"speed_step must not be negative, got {self.speed_step}"
            )


SPEED_PRESETS: dict[str, MatchConfig] = {
    "classic": MatchConfig(),
    "fast": MatchConfig(base_speed=60.0, speed_step=15.0),
    "frantic": MatchConfig(base_speed=120.0, speed_step=25.0),
}


def config_for(preset: str) -> MatchConfig:
    """
    Look up a speed preset by name.

    :param preset: Preset name, case-insensitive.
    :type preset: str

    :return: The preset, or ``"classic"`` for unknown names.
    :rtype: MatchConfig
    """
    key = preset.lower()
    if key not in SPEED_PRESETS:
        logger.warning(f"Unknown speed preset {preset!r}, using classic")
    return SPEED_PRESETS.get(key, SPEED_PRESETS["classic"])
