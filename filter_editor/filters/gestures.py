"""
Pixel math for the editor's drag gestures.

Dragging a row's handle vertically reorders filters; dragging a numeric
filter's label horizontally changes its value, Photoshop style. These are
plain functions of their inputs so the widget only has to feed them mouse
positions and modifier state.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .coercion import clamp


LIST_ITEM_HEIGHT = 32

FAST_VALUE_MULTIPLIER = 10
SLOW_VALUE_MULTIPLIER = 0.1
DEFAULT_VALUE_MULTIPLIER = 1

Bounds = Tuple[Optional[float], Optional[float]]


def value_multiplier(
    alt: bool,
    shift: bool,
    slow: float = SLOW_VALUE_MULTIPLIER,
    fast: float = FAST_VALUE_MULTIPLIER,
) -> float:
    """Multiplier for held modifier keys. Alt wins over Shift."""
    if alt:
        return slow
    if shift:
        return fast
    return DEFAULT_VALUE_MULTIPLIER


def drag_to_value(start_value: float, pixel_delta: float, multiplier: float, bounds: Bounds) -> float:
    """Value after dragging pixel_delta pixels from start_value, clamped to bounds."""
    min_value, max_value = bounds
    return clamp(start_value + pixel_delta * multiplier, min_value, max_value)


def drag_steps(pixel_delta: float, row_height: float = LIST_ITEM_HEIGHT) -> int:
    """Number of rows passed by a vertical drag (negative when moving up)."""
    change = pixel_delta / row_height
    if change > 0:
        return math.floor(change)
    # Moving up snaps once more than half a row is crossed
    return math.floor(change + 0.5)


def drag_destination(
    index: int,
    pixel_delta: float,
    count: int,
    row_height: float = LIST_ITEM_HEIGHT,
) -> int:
    """Destination index for a row dragged from index, kept within the list."""
    if count <= 0:
        return 0
    destination = index + drag_steps(pixel_delta, row_height)
    return max(0, min(destination, count - 1))


@dataclass
class LabelDrag:
    """State of one in-progress label drag."""
    start_x: float
    start_value: float
    multiplier: float = DEFAULT_VALUE_MULTIPLIER
    last_x: Optional[float] = None

    def value_at(self, x: float, bounds: Bounds) -> float:
        """Value for the pointer at x."""
        self.last_x = x
        return drag_to_value(self.start_value, x - self.start_x, self.multiplier, bounds)

    def rebase(self, multiplier: float, current_value: float) -> None:
        """Restart from the current pointer position with a new multiplier."""
        self.multiplier = multiplier
        self.start_value = current_value
        if self.last_x is not None:
            self.start_x = self.last_x
