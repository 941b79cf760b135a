"""
Entities package for Rally Pong.
Holds the ball and paddle state owned by the match simulator.
"""

from __future__ import annotations

from .ball import Ball
from .paddle import Paddle

__all__ = [
    "Ball",
    "Paddle",
]
