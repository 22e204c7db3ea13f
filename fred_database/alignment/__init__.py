"""Calendar grids, weekly realignment and frequency reduction."""

from .calendar import (
    build_calendar_grid,
    normalize_start,
    observation_end,
    shift_to_anchor,
)
from .reducer import prepare_series, reduce_frequency
from .weekly import FRIDAY_SHIFT, realign_weekly

__all__ = [
    "FRIDAY_SHIFT",
    "build_calendar_grid",
    "normalize_start",
    "observation_end",
    "prepare_series",
    "realign_weekly",
    "reduce_frequency",
    "shift_to_anchor",
]
