"""
Rally Pong: the simulation core of a two-paddle ball game.
"""

from __future__ import annotations

from .config import MatchConfig
from .input import PointerState
from .simulation import MatchSimulator, RenderSnapshot, TickEvents

__all__ = [
    "MatchConfig",
    "MatchSimulator",
    "PointerState",
    "RenderSnapshot",
    "TickEvents",
]
