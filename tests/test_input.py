import pytest

from rally_pong.errors import InvalidPointerError, RallyPongError
from rally_pong.input import PointerState, to_field


@pytest.mark.parametrize(
    "x, y, width, height, expected",
    [
        (240, 160, 480, 320, (0.0, 0.0)),
        (0, 0, 480, 320, (-240.0, 160.0)),
        (480, 320, 480, 320, (240.0, -160.0)),
        (400, 80, 480, 320, (160.0, 80.0)),
        (800, 160, 960, 640, (160.0, 80.0)),
    ],
)
def test_to_field_maps_screen_to_field(x, y, width, height, expected) -> None:
    touch_x, touch_y = to_field(PointerState(x, y, width, height))
    assert touch_x == pytest.approx(expected[0])
    assert touch_y == pytest.approx(expected[1])


def test_screen_down_is_field_up() -> None:
    _, top = to_field(PointerState(100, 10, 480, 320))
    _, bottom = to_field(PointerState(100, 300, 480, 320))
    assert top > bottom


@pytest.mark.parametrize("width, height", [(0, 320), (480, 0), (-1, 320)])
def test_pointer_rejects_empty_screen(width, height) -> None:
    with pytest.raises(InvalidPointerError):
        PointerState(10, 10, width, height)


def test_pointer_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        PointerState(10, 10, 0, 0)
    assert issubclass(InvalidPointerError, RallyPongError)
