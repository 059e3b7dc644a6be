"""Granularity and scope inference for a set of instants.

Granularity is the finest unit at which any instant carries detail: a set
holding ``08:30`` and ``09:00`` has minute granularity. Scope is the coarsest
unit at which the earliest and latest instants differ: the same set has hour
scope.

Edge cases follow a fixed policy rather than anything derived:
  - an empty set is (millisecond, year), i.e. the most detailed pattern;
  - a set with no variance (one instant, or only equal instants) takes its
    scope from its granularity.

Sub-millisecond detail is dropped before analysis.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

from timescope.time_utils import (
    DEFAULT_WEEK_START,
    CalendarUtils,
    TimestampLike,
    coerce_timestamp,
)
from timescope.units import GranularityScope, TimeUnit

logger = logging.getLogger(__name__)

EMPTY_RESULT = GranularityScope(TimeUnit.MILLISECOND, TimeUnit.YEAR)


def _truncate_to_millisecond(value: datetime) -> datetime:
    return value.replace(microsecond=value.microsecond - value.microsecond % 1000)


def classify_granularity(value: datetime, utils: CalendarUtils) -> TimeUnit:
    """Return the finest unit at which a single instant carries detail.

    ``value`` must already be on the basis of ``utils``.
    """
    if utils.has_millisecond(value):
        return TimeUnit.MILLISECOND
    if utils.has_second(value):
        return TimeUnit.SECOND
    if utils.has_minute(value):
        return TimeUnit.MINUTE
    if utils.has_hour(value):
        return TimeUnit.HOUR
    if utils.is_not_first_day_of_month(value):
        return TimeUnit.DAY if utils.is_not_first_day_of_week(value) else TimeUnit.WEEK
    if utils.is_not_first_month(value):
        return TimeUnit.MONTH
    return TimeUnit.YEAR


def compute_scope(earliest: datetime, latest: datetime, utils: CalendarUtils) -> TimeUnit:
    """Return the coarsest unit whose floors of ``earliest`` and ``latest`` differ.

    Millisecond when they agree all the way down to the second.
    """
    for unit, floor in utils.scope_floors():
        if floor(earliest) != floor(latest):
            return unit
    return TimeUnit.MILLISECOND


def analyze(
    instants: Iterable[TimestampLike],
    use_local_time: bool = False,
    week_start: int = DEFAULT_WEEK_START,
) -> GranularityScope:
    """Infer the (granularity, scope) pair of a set of instants.

    Args:
        instants: Timestamps to inspect: datetimes, dates, epoch milliseconds
            or ISO strings. Order and duplicates do not matter.
        use_local_time: Classify and floor in local time instead of UTC.
        week_start: First weekday of a calendar week (0 = Monday ... 6 = Sunday).

    Returns:
        A pair that always maps to a defined cell of the format matrix.

    Raises:
        InputCoercionError: An instant cannot be read as a timestamp.
    """
    utils = CalendarUtils(use_local_time=use_local_time, week_start=week_start)
    dates = [
        _truncate_to_millisecond(utils.to_basis(coerce_timestamp(value))) for value in instants
    ]

    if not dates:
        logger.debug("No dates given, using %s", EMPTY_RESULT)
        return EMPTY_RESULT

    granularity = max(classify_granularity(value, utils) for value in dates)

    if len(dates) == 1:
        scope = granularity
    else:
        scope = compute_scope(min(dates), max(dates), utils)
        # All instants equal: no variance, same as a single instant
        if scope > granularity:
            scope = granularity

    result = GranularityScope(granularity, scope)
    logger.debug("Analyzed %d dates: %s", len(dates), result)
    return result
