"""Formatter factories.

``create_formatter_for_date_range`` picks a pattern that suits a whole set
of dates (e.g. the ticks of a chart axis) and binds it into a reusable
formatter. The dates only steer the choice of pattern; the formatter accepts
any value afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from timescope.analysis import analyze
from timescope.config import get_settings
from timescope.formatter import TimeFormatter
from timescope.matrix import select_pattern
from timescope.patterns import TimeFormatFunc, time_format, utc_format
from timescope.time_utils import TimestampLike

logger = logging.getLogger(__name__)


def _resolve_week_start(week_start: int | None) -> int:
    return get_settings().week_start if week_start is None else week_start


def pattern_for_date_range(
    dates: Iterable[TimestampLike],
    use_local_time: bool = False,
    week_start: int | None = None,
) -> str:
    """Return the matrix pattern that best fits ``dates``."""
    pair = analyze(dates, use_local_time=use_local_time, week_start=_resolve_week_start(week_start))
    pattern = select_pattern(pair)
    logger.debug("Selected pattern %r for %s", pattern, pair)
    return pattern


def get_format_func(
    use_local_time: bool,
    dates: Iterable[TimestampLike],
    week_start: int | None = None,
) -> TimeFormatFunc:
    """Return a bare render function for ``dates``, without the formatter wrapper."""
    pattern = pattern_for_date_range(dates, use_local_time=use_local_time, week_start=week_start)
    return time_format(pattern) if use_local_time else utc_format(pattern)


def create_formatter_for_date_range(
    id: str,  # noqa: A002
    dates: Iterable[TimestampLike],
    label: str | None = None,
    description: str = "",
    use_local_time: bool = False,
    week_start: int | None = None,
) -> TimeFormatter:
    """
    Build a formatter whose pattern matches the granularity and scope of ``dates``.

    Args:
        id: Formatter identifier.
        dates: Sample of the values that will be displayed together, in any
            form ``TimeFormatter.format`` accepts.
        label: Display name, defaults to ``id``.
        description: Free-form description.
        use_local_time: Analyze and format in local time instead of UTC.
        week_start: First weekday for week boundaries; defaults to the
            ``week_start`` setting.

    Example::

        formatter = create_formatter_for_date_range(
            id="x_axis",
            dates=[datetime(2019, 11, 1), datetime(2019, 12, 1)],
            use_local_time=True,
        )
        formatter(datetime(2019, 11, 1))  # "November"
    """
    pattern = pattern_for_date_range(dates, use_local_time=use_local_time, week_start=week_start)
    return TimeFormatter.from_pattern(
        id=id,
        pattern=pattern,
        label=label,
        description=description,
        use_local_time=use_local_time,
    )
