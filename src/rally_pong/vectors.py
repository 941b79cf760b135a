"""
Small helpers for unit-direction vectors.

Ball headings are stored as ``Velocity2D`` instances of length 1, the speed
is kept separately on the ball.
"""

from __future__ import annotations

import math

from mini_arcade_core.spaces.d2.physics2d import Velocity2D


def length(v: Velocity2D) -> float:
    """Euclidean length of ``v``."""
    return math.hypot(v.vx, v.vy)


def normalize(v: Velocity2D) -> Velocity2D:
    """
    Scale ``v`` in place to unit length.

    A zero vector has no heading, it is returned unchanged.

    :param v: Vector to normalize.
    :type v: Velocity2D

    :return: The same vector, for chaining.
    :rtype: Velocity2D
    """
    n = length(v)
    if n != 0.0:
        v.vx /= n
        v.vy /= n
    return v


def sign(value: float) -> float:
    """-1.0, 0.0 or 1.0 depending on the sign of ``value``."""
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0
