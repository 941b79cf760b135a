import math

import pytest
from mini_arcade_core.spaces.d2.physics2d import Velocity2D

from rally_pong.vectors import length, normalize, sign


def test_normalize_scales_to_unit_length() -> None:
    v = normalize(Velocity2D(3.0, 4.0))
    assert v.vx == pytest.approx(0.6)
    assert v.vy == pytest.approx(0.8)
    assert length(v) == pytest.approx(1.0)


def test_normalize_works_in_place() -> None:
    v = Velocity2D(0.0, -2.0)
    assert normalize(v) is v
    assert (v.vx, v.vy) == (0.0, -1.0)


def test_normalize_leaves_zero_vector_unchanged() -> None:
    v = normalize(Velocity2D(0.0, 0.0))
    assert (v.vx, v.vy) == (0.0, 0.0)
    assert not math.isnan(v.vx) and not math.isnan(v.vy)


@pytest.mark.parametrize("value, expected", [(12.5, 1.0), (-0.001, -1.0), (0.0, 0.0)])
def test_sign(value: float, expected: float) -> None:
    assert sign(value) == expected
