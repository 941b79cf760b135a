import pytest

from rally_pong.serve import RandomDirectionSource, serve_direction
from rally_pong.vectors import length


def test_serve_direction_is_biased_towards_positive_x(make_source) -> None:
    v = serve_direction(make_source([(0.0, 0.0)]))
    assert (v.vx, v.vy) == pytest.approx((1.0, 0.0))


def test_serve_direction_is_unit_length(make_source) -> None:
    v = serve_direction(make_source([(0.5, 0.9)]))
    assert length(v) == pytest.approx(1.0, abs=1e-9)
    assert v.vx == pytest.approx(0.6 / (0.6**2 + 0.9**2) ** 0.5)


def test_random_source_is_repeatable_with_seed() -> None:
    a = RandomDirectionSource(seed=42)
    b = RandomDirectionSource(seed=42)
    assert [a.draw() for _ in range(20)] == [b.draw() for _ in range(20)]


def test_random_source_draws_in_unit_interval() -> None:
    source = RandomDirectionSource(seed=1)
    for _ in range(200):
        r1, r2 = source.draw()
        assert 0.0 <= r1 < 1.0
        assert 0.0 <= r2 < 1.0
        assert serve_direction(source).vx > 0
