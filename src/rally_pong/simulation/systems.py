"""
Per-tick systems for the match simulator.

Each system has a ``name``, an ``order`` and a ``step(ctx)``. The simulator
runs them by ascending ``order``; later systems rely on the ball position
already reflecting this frame's motion.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.spaces.d2.geometry2d import Position2D
from mini_arcade_core.utils import logger

from rally_pong.config import MatchConfig
from rally_pong.constants import (
    BALL_START,
    FIELD_HALF_HEIGHT,
    FIELD_HALF_WIDTH,
    PADDLE_HALF_HEIGHT,
    PADDLE_HIT_OFFSET,
    PADDLE_SNAP_OFFSET,
)
from rally_pong.entities.paddle import Paddle
from rally_pong.input import to_field
from rally_pong.serve import DirectionSource, serve_direction
from rally_pong.simulation.models import MatchTickContext, Side
from rally_pong.vectors import normalize, sign


@dataclass
class BallMovementSystem:
    """
    Move the ball along its heading.
    """

    name: str = "ball_move"
    order: int = 10

    def step(self, ctx: MatchTickContext):
        """Move the ball based on its direction and speed."""
        if ctx.dt <= 0:
            return

        ball = ctx.world.ball
        x, y = ball.position.to_tuple()
        x, y = ball.direction.advance(x, y, ball.speed * ctx.dt)
        ball.position = Position2D(x, y)


@dataclass
class ScoringSystem:
    """
    Award a point when the ball leaves the field left or right, then serve
    again from the centre.
    """

    config: MatchConfig
    source: DirectionSource
    name: str = "scoring"
    order: int = 20

    def _serve(self, ctx: MatchTickContext):
        ball = ctx.world.ball
        ball.position = Position2D(*BALL_START)
        ball.speed = self.config.base_speed
        ball.direction = serve_direction(self.source)

    def _award(self, ctx: MatchTickContext, side: Side):
        score = ctx.world.score
        if side == "LEFT":
            score.left += 1
        else:
            score.right += 1
        ctx.events.scored = side
        logger.info(f"{side.title()} player scored, score is {score.text}")

    def step(self, ctx: MatchTickContext):
        """Apply scoring rules."""
        if ctx.world.ball.position.x < -FIELD_HALF_WIDTH:
            self._serve(ctx)
            self._award(ctx, "RIGHT")

        if ctx.world.ball.position.x > FIELD_HALF_WIDTH:
            self._serve(ctx)
            self._award(ctx, "LEFT")


@dataclass
class WallBounceSystem:
    """
    Reflect the ball off the top and bottom of the field.
    """

    name: str = "wall_bounce"
    order: int = 30

    def step(self, ctx: MatchTickContext):
        """Flip the vertical heading when the ball is past top or bottom."""
        ball = ctx.world.ball
        if abs(ball.position.y) > FIELD_HALF_HEIGHT:
            # no clamping: the ball may sit outside for a frame
            ball.direction.vy = -ball.direction.vy
            ctx.events.wall_bounce = True


@dataclass
class PaddleCollisionSystem:
    """
    Bounce the ball off the paddles.

    The outgoing angle grows linearly with the distance between the hit and
    the paddle centre, and every hit speeds the ball up.
    """

    config: MatchConfig
    name: str = "paddle_collision"
    order: int = 40

    def _reflect(self, ctx: MatchTickContext, paddle: Paddle, side: Side):
        ball = ctx.world.ball
        if side == "RIGHT":
            ball.position.x = paddle.position.x - PADDLE_SNAP_OFFSET
        else:
            ball.position.x = paddle.position.x + PADDLE_SNAP_OFFSET

        offset = ball.position.y - paddle.position.y
        ball.direction.vx = -ball.direction.vx
        ball.direction.vy = sign(offset) * abs(offset) / PADDLE_HALF_HEIGHT
        normalize(ball.direction)
        ball.speed += self.config.speed_step

        ctx.events.paddle_hit = side
        logger.debug(f"{side.title()} paddle hit, ball speed {ball.speed}")

    def step(self, ctx: MatchTickContext):
        """Handle ball collisions with both paddles."""
        ball = ctx.world.ball
        left = ctx.world.left_paddle
        right = ctx.world.right_paddle

        if (
            ball.direction.vx > 0
            and ball.position.x > right.position.x - PADDLE_HIT_OFFSET
            and right.spans(ball.position.y)
        ):
            self._reflect(ctx, right, "RIGHT")

        if (
            ball.direction.vx < 0
            and ball.position.x < left.position.x + PADDLE_HIT_OFFSET
            and left.spans(ball.position.y)
        ):
            self._reflect(ctx, left, "LEFT")


@dataclass
class PointerSystem:
    """
    Apply the pointer to the field.

    A pointer right of the left paddle sets the ball's height directly; the
    paddles themselves are never moved.
    """

    name: str = "pointer"
    order: int = 50

    def step(self, ctx: MatchTickContext):
        """Move the ball vertically to the pointer."""
        if ctx.pointer is None:
            return

        touch_x, touch_y = to_field(ctx.pointer)
        if touch_x > ctx.world.left_paddle.position.x:
            ctx.world.ball.position.y = touch_y
