"""Time units and the (granularity, scope) pair."""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple


class TimeUnit(IntEnum):
    """Calendar/clock units ordered from coarsest to finest.

    The integer value doubles as the row/column index of the format matrix,
    so a larger value always means a finer unit.
    """

    YEAR = 0
    MONTH = 1
    WEEK = 2
    DAY = 3
    HOUR = 4
    MINUTE = 5
    SECOND = 6
    MILLISECOND = 7


class GranularityScope(NamedTuple):
    """Finest detail present in a set of instants, and the coarsest unit they vary over."""

    granularity: TimeUnit
    scope: TimeUnit

    def __str__(self) -> str:
        return f"granularity={self.granularity.name.lower()}, scope={self.scope.name.lower()}"
