"""
Match simulator: owns the world and advances it one frame at a time.
"""

from __future__ import annotations

from typing import Optional

from mini_arcade_core.spaces.d2.geometry2d import Position2D
from mini_arcade_core.spaces.d2.physics2d import Velocity2D
from mini_arcade_core.utils import logger

from rally_pong.config import MatchConfig
from rally_pong.constants import (
    BALL_START,
    BALL_START_DIRECTION,
    LEFT_PADDLE_START,
    RIGHT_PADDLE_START,
)
from rally_pong.entities.ball import Ball
from rally_pong.entities.paddle import Paddle
from rally_pong.input import PointerState
from rally_pong.serve import DirectionSource, RandomDirectionSource
from rally_pong.simulation.models import (
    MatchTickContext,
    MatchWorld,
    RenderSnapshot,
    ScoreState,
    TickEvents,
)
from rally_pong.simulation.systems import (
    BallMovementSystem,
    PaddleCollisionSystem,
    PointerSystem,
    ScoringSystem,
    WallBounceSystem,
)


class MatchSimulator:
    """
    Two-paddle match simulation.

    The host calls :meth:`update` once per frame with the elapsed time and
    the pointer, then reads the accessors (or :meth:`snapshot`) to draw.
    Randomness is only consumed when a point is scored.
    """

    def __init__(
        self,
        config: MatchConfig | None = None,
        *,
        source: DirectionSource | None = None,
    ):
        """
        :param config: Ball speed settings.
        :type config: MatchConfig, optional

        :param source: Random numbers for serves after a point.
        :type source: DirectionSource, optional
        """
        self.config = config or MatchConfig()
        self.source = source or RandomDirectionSource()
        self.systems = sorted(
            [
                BallMovementSystem(),
                ScoringSystem(config=self.config, source=self.source),
                WallBounceSystem(),
                PaddleCollisionSystem(config=self.config),
                PointerSystem(),
            ],
            key=lambda system: system.order,
        )
        self.world: MatchWorld
        self.initialize()

    def initialize(self):
        """Put paddles, ball and score in their match-start state."""
        self.world = MatchWorld(
            left_paddle=Paddle(position=Position2D(*LEFT_PADDLE_START)),
            right_paddle=Paddle(position=Position2D(*RIGHT_PADDLE_START)),
            ball=Ball(
                position=Position2D(*BALL_START),
                direction=Velocity2D(*BALL_START_DIRECTION),
                speed=self.config.base_speed,
            ),
            score=ScoreState(),
        )
        logger.info(
            f"Match started (base speed {self.config.base_speed}, "
            f"speed step {self.config.speed_step})"
        )

    def update(
        self, dt: float, pointer: Optional[PointerState] = None
    ) -> TickEvents:
        """
        Advance the match by one frame.

        :param dt: Seconds since the previous frame. ``dt <= 0`` moves
            nothing but still runs the rules. Negative values are treated
            like zero.
        :type dt: float

        :param pointer: Active pointer, ``None`` when nothing is pressed.
            A pointer on an empty screen is rejected when the
            ``PointerState`` is built (``InvalidPointerError``), so this
            method itself never raises.
        :type pointer: PointerState, optional

        :return: What happened during this frame.
        :rtype: TickEvents
        """
        ctx = MatchTickContext(dt=dt, pointer=pointer, world=self.world)
        for system in self.systems:
            system.step(ctx)
        return ctx.events

    @property
    def left_paddle(self) -> Position2D:
        """Centre of the left paddle, as a copy."""
        position = self.world.left_paddle.position
        return Position2D(position.x, position.y)

    @property
    def right_paddle(self) -> Position2D:
        """Centre of the right paddle, as a copy."""
        position = self.world.right_paddle.position
        return Position2D(position.x, position.y)

    @property
    def ball_position(self) -> Position2D:
        """Centre of the ball, as a copy."""
        position = self.world.ball.position
        return Position2D(position.x, position.y)

    @property
    def ball_direction(self) -> Velocity2D:
        """Unit heading of the ball, as a copy."""
        direction = self.world.ball.direction
        return Velocity2D(direction.vx, direction.vy)

    @property
    def ball_speed(self) -> float:
        """Current ball speed in units/sec."""
        return self.world.ball.speed

    @property
    def score(self) -> ScoreState:
        """Current score."""
        return self.world.score

    @property
    def score_text(self) -> str:
        """Score formatted as ``"{left} : {right}"``."""
        return self.world.score.text

    def snapshot(self) -> RenderSnapshot:
        """Copy of everything the renderer needs for this frame."""
        world = self.world
        return RenderSnapshot(
            left_paddle=world.left_paddle.position.to_tuple(),
            right_paddle=world.right_paddle.position.to_tuple(),
            ball=world.ball.position.to_tuple(),
            paddle_size=world.left_paddle.size.to_tuple(),
            ball_size=world.ball.size.to_tuple(),
            score_text=world.score.text,
        )
