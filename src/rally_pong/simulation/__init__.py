"""
Match simulation: world state, per-tick systems and the simulator driving them.
"""

from __future__ import annotations

from .models import MatchWorld, RenderSnapshot, ScoreState, TickEvents
from .simulator import MatchSimulator

__all__ = [
    "MatchSimulator",
    "MatchWorld",
    "RenderSnapshot",
    "ScoreState",
    "TickEvents",
]
