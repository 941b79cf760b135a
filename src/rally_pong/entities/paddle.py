"""
Paddle entity for Rally Pong.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D

from rally_pong.constants import PADDLE_HALF_HEIGHT, PADDLE_SIZE


@dataclass
class Paddle:
    """
    Paddle entity for the match.

    :ivar position (Position2D): Centre of the paddle in field units.
    :ivar size (Size2D): Drawn size of the paddle.
    """

    position: Position2D
    size: Size2D = field(default_factory=lambda: Size2D(*PADDLE_SIZE))

    def spans(self, y: float) -> bool:
        """Whether ``y`` lies strictly inside the paddle's vertical extent."""
        return (
            self.position.y - PADDLE_HALF_HEIGHT
            < y
            < self.position.y + PADDLE_HALF_HEIGHT
        )
