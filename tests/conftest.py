from __future__ import annotations

import itertools
from typing import Iterable, Tuple

import pytest

from rally_pong.simulation import MatchSimulator


class ScriptedDirectionSource:
    """Replays a fixed list of draws, cycling when it runs out."""

    def __init__(self, draws: Iterable[Tuple[float, float]] = ((0.4, 0.3),)):
        self.calls = 0
        self._draws = itertools.cycle(list(draws))

    def draw(self) -> Tuple[float, float]:
        self.calls += 1
        return next(self._draws)


@pytest.fixture
def source() -> ScriptedDirectionSource:
    return ScriptedDirectionSource()


@pytest.fixture
def simulator(source: ScriptedDirectionSource) -> MatchSimulator:
    return MatchSimulator(source=source)


@pytest.fixture
def make_source():
    return ScriptedDirectionSource
