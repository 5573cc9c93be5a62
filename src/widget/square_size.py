"""
Square size of the rendered board, in pixels.

Sprites only exist for a fixed set of sizes (24, 28, ..., 64), so every value coming from
the outside goes through `validate_square_size` before it is used.
"""

import math
from typing import Any

MINIMUM_SQUARE_SIZE = 24
MAXIMUM_SQUARE_SIZE = 64
STEP_SQUARE_SIZE = 4
DEFAULT_SQUARE_SIZE = 32

VALID_SQUARE_SIZES: tuple[int, ...] = tuple(
    range(MINIMUM_SQUARE_SIZE, MAXIMUM_SQUARE_SIZE + 1, STEP_SQUARE_SIZE)
)


def _clamp(value: float) -> float:
    return min(max(value, MINIMUM_SQUARE_SIZE), MAXIMUM_SQUARE_SIZE)


def validate_square_size(raw: Any) -> int:
    """
    Sanitize a square size. Never raises.

    * None, or anything that does not convert to a number -> default size
    * otherwise clamp into [24, 64] and round half-up to the nearest multiple of 4
    """
    if raw is None:
        return DEFAULT_SQUARE_SIZE

    # clamp integers first: huge ones do not fit in a float
    if isinstance(raw, int):
        raw = _clamp(raw)
    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_SQUARE_SIZE
    if math.isnan(value):
        return DEFAULT_SQUARE_SIZE

    value = _clamp(value)
    value = STEP_SQUARE_SIZE * math.floor(value / STEP_SQUARE_SIZE + 0.5)
    # no-op while both bounds are multiples of the step
    return int(_clamp(value))


def fit_square_size(
    current: int, table_width: float, table_height: float, width: float, height: float
) -> int:
    """
    Square size that lets a board currently drawn as `table_width` x `table_height` fit in a `width` x `height` box.

    The width slack is shared by 9 columns (8 files + the turn marker column), the height slack by the 8 ranks.
    Size changes by whole steps, taking the smaller of both changes.
    """
    delta_per_square_w = math.floor((width - table_width) / 9 / STEP_SQUARE_SIZE) * STEP_SQUARE_SIZE
    delta_per_square_h = math.floor((height - table_height) / 8 / STEP_SQUARE_SIZE) * STEP_SQUARE_SIZE
    return int(_clamp(current + min(delta_per_square_w, delta_per_square_h)))
