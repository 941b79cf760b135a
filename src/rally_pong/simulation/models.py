"""
Match simulation models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple

from rally_pong.entities.ball import Ball
from rally_pong.entities.paddle import Paddle
from rally_pong.input import PointerState

Side = Literal["LEFT", "RIGHT"]


@dataclass
class ScoreState:
    """
    Score state for the match.

    :ivar left (int): Score for the left player.
    :ivar right (int): Score for the right player.
    """

    left: int = 0
    right: int = 0

    @property
    def text(self) -> str:
        """Score line as shown on screen."""
        return f"{self.left} : {self.right}"


@dataclass
class MatchWorld:
    """
    Everything the simulator mutates.

    :ivar left_paddle (Paddle): Left paddle entity.
    :ivar right_paddle (Paddle): Right paddle entity.
    :ivar ball (Ball): Ball entity.
    :ivar score (ScoreState): Current score state.
    """

    left_paddle: Paddle
    right_paddle: Paddle
    ball: Ball
    score: ScoreState = field(default_factory=ScoreState)


@dataclass
class TickEvents:
    """
    What happened during one update.

    :ivar scored (Optional[Side]): Player who scored this frame.
    :ivar wall_bounce (bool): Whether the ball bounced off top or bottom.
    :ivar paddle_hit (Optional[Side]): Paddle the ball bounced off.
    """

    scored: Optional[Side] = None
    wall_bounce: bool = False
    paddle_hit: Optional[Side] = None


@dataclass
class MatchTickContext:
    """
    Context for a single simulator tick.

    :ivar dt (float): Delta time since last tick, in seconds.
    :ivar pointer (Optional[PointerState]): Active pointer, if any.
    :ivar world (MatchWorld): Current world state.
    :ivar events (TickEvents): Events collected during this tick.
    """

    dt: float
    pointer: Optional[PointerState]
    world: MatchWorld
    events: TickEvents = field(default_factory=TickEvents)


@dataclass(frozen=True)
class RenderSnapshot:
    """
    Read-only view handed to the renderer after a tick.

    Positions are centres in field units.
    """

    left_paddle: Tuple[float, float]
    right_paddle: Tuple[float, float]
    ball: Tuple[float, float]
    paddle_size: Tuple[float, float]
    ball_size: Tuple[float, float]
    score_text: str
