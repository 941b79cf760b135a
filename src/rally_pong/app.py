"""
Headless driver for Rally Pong.
"""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from mini_arcade_core.utils import logger

from rally_pong.config import SPEED_PRESETS, config_for
from rally_pong.serve import RandomDirectionSource
from rally_pong.simulation import MatchSimulator

FPS = 60


def run(
    frames: int = FPS * 60,
    dt: float = 1.0 / FPS,
    seed: Optional[int] = None,
    preset: str = "classic",
) -> MatchSimulator:
    """
    Run a match without a window or input.

    - Builds a simulator from the named speed preset.
    - Steps it ``frames`` times with a fixed ``dt`` and no pointer.
    - Logs the final score.

    :param frames: Number of frames to simulate.
    :type frames: int

    :param dt: Seconds per frame.
    :type dt: float

    :param seed: Seed for serve directions.
    :type seed: int, optional

    :param preset: Name of a speed preset.
    :type preset: str

    :return: The simulator after the last frame.
    :rtype: MatchSimulator
    """
    simulator = MatchSimulator(
        config_for(preset), source=RandomDirectionSource(seed)
    )
    logger.info("Starting Rally Pong...")
    for _ in range(frames):
        simulator.update(dt)
    logger.info(f"Final score after {frames} frames: {simulator.score_text}")
    return simulator


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line entry point."""
    parser = argparse.ArgumentParser(
        prog="rally-pong", description="Run a headless Rally Pong match."
    )
    parser.add_argument("--frames", type=int, default=FPS * 60)
    parser.add_argument("--dt", type=float, default=1.0 / FPS)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--preset", choices=sorted(SPEED_PRESETS), default="classic"
    )
    args = parser.parse_args(argv)

    simulator = run(
        frames=args.frames, dt=args.dt, seed=args.seed, preset=args.preset
    )
    print(simulator.score_text)
    return 0
