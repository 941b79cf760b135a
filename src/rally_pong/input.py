"""
Pointer input for Rally Pong.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from rally_pong.constants import FIELD_HEIGHT, FIELD_WIDTH
from rally_pong.errors import InvalidPointerError


@dataclass(frozen=True)
class PointerState:
    """
    An active pointer (touch or pressed mouse) in screen space.

    :ivar x (float): Pointer x in screen pixels, 0 at the left edge.
    :ivar y (float): Pointer y in screen pixels, 0 at the top edge.
    :ivar screen_width (float): Logical screen width.
    :ivar screen_height (float): Logical screen height.
    """

    x: float
    y: float
    screen_width: float
    screen_height: float

    def __post_init__(self):
        if self.screen_width <= 0 or self.screen_height <= 0:
            raise InvalidPointerError(
                f"screen size must be positive, got "
                f"{self.screen_width}x{self.screen_height}"
            )


def to_field(pointer: PointerState) -> Tuple[float, float]:
    """
    Map a screen-space pointer onto logical field coordinates.

    Screen y grows downwards, field y grows upwards.

    :param pointer: Active pointer.
    :type pointer: PointerState

    :return: ``(touch_x, touch_y)`` in field units.
    :rtype: tuple[float, float]
    """
    touch_x = FIELD_WIDTH * (pointer.x / pointer.screen_width - 0.5)
    touch_y = FIELD_HEIGHT * (0.5 - pointer.y / pointer.screen_height)
    return touch_x, touch_y
