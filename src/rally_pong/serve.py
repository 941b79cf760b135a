"""
Serve direction after a point is scored.
"""

from __future__ import annotations

import random
from typing import Optional, Protocol, Tuple

from mini_arcade_core.spaces.d2.physics2d import Velocity2D

from rally_pong.constants import SERVE_X_BIAS
from rally_pong.vectors import normalize


class DirectionSource(Protocol):
    """Supplies the two random numbers a serve is built from."""

    def draw(self) -> Tuple[float, float]:
        """Return ``(r1, r2)``, both in ``[0, 1)``."""


class RandomDirectionSource:
    """
    ``DirectionSource`` backed by a private ``random.Random``.

    Two sources built with the same seed yield the same draws.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        :param seed: Seed for the generator, ``None`` seeds from the OS.
        :type seed: int, optional
        """
        self.seed = seed
        self._rng = random.Random(seed)

    def draw(self) -> Tuple[float, float]:
        """Two independent draws from ``[0, 1)``."""
        return self._rng.random(), self._rng.random()


def serve_direction(source: DirectionSource) -> Velocity2D:
    """
    Build the unit heading for a fresh serve.

    Both goals use the same formula, so every serve travels towards +x.

    :param source: Where the random numbers come from.
    :type source: DirectionSource

    :return: Normalized serve direction.
    :rtype: Velocity2D
    """
    r1, r2 = source.draw()
    return normalize(Velocity2D(r1 + SERVE_X_BIAS, r2))
