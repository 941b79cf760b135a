"""
Constants for Rally Pong.

The playfield is a fixed 480x320 logical space centred on (0, 0).
"""

from __future__ import annotations

FIELD_WIDTH = 480.0
FIELD_HEIGHT = 320.0
FIELD_HALF_WIDTH = FIELD_WIDTH / 2
FIELD_HALF_HEIGHT = FIELD_HEIGHT / 2

# paddle geometry, relative to the paddle centre
PADDLE_SIZE = (10, 60)
PADDLE_HALF_HEIGHT = 30.0
PADDLE_HIT_OFFSET = 5.0
PADDLE_SNAP_OFFSET = 6.0  # one unit past the hit line so the hit can't repeat

BALL_SIZE = (10, 10)

BASE_SPEED = 30.0
SPEED_STEP = 10.0

LEFT_PADDLE_START = (-200.0, 20.0)
RIGHT_PADDLE_START = (200.0, 0.0)
BALL_START = (0.0, 0.0)
BALL_START_DIRECTION = (-1.0, 0.0)

# serve direction x bias, always pushes the serve towards +x
SERVE_X_BIAS = 0.1
