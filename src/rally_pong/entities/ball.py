"""
Ball entity for Rally Pong.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D
from mini_arcade_core.spaces.d2.physics2d import Velocity2D

from rally_pong.constants import BALL_SIZE, BASE_SPEED


@dataclass
class Ball:
    """
    Ball entity for the match.

    :ivar position (Position2D): Centre of the ball in field units.
    :ivar direction (Velocity2D): Unit heading of the ball.
    :ivar speed (float): Speed along ``direction`` in units/sec.
    :ivar size (Size2D): Drawn size of the ball.
    """

    position: Position2D
    direction: Velocity2D
    speed: float = BASE_SPEED
    size: Size2D = field(default_factory=lambda: Size2D(*BALL_SIZE))
