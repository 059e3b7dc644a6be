"""Calendar flooring and detail predicates for local and universal time.

Every instant is first moved onto a *basis*:

  - local: naive wall-clock time in the system zone. Naive inputs are taken
    as already local; aware inputs are converted with ``astimezone()`` and
    stripped of their tzinfo so floors compare by wall clock.
  - universal: aware UTC. Naive inputs are interpreted as local time first,
    matching ``datetime.astimezone``.

The ``has_*`` and ``is_not_first_*`` predicates are defined through the
floors (``floor_x(d) < d``), so a floor that changes a value always implies
the matching predicate reports detail at that unit.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Any

from timescope.errors import ConfigurationError, InputCoercionError
from timescope.units import TimeUnit

MONDAY = 0
SUNDAY = 6

# Sunday-based weeks match d3's timeWeek/utcWeek
DEFAULT_WEEK_START = SUNDAY

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

FloorFunc = Callable[[datetime], datetime]

# Anything coerce_timestamp accepts
TimestampLike = datetime | date | float | str


def coerce_timestamp(value: Any) -> datetime:
    """Turn a datetime, date, epoch-milliseconds number or ISO string into a datetime.

    Raises:
        InputCoercionError: ``value`` is none of those, or is out of range.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return EPOCH + timedelta(milliseconds=value)
        except (OverflowError, ValueError) as exc:
            msg = f"Cannot interpret {value!r} as epoch milliseconds"
            raise InputCoercionError(msg) from exc
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError as exc:
            msg = f"Cannot parse {value!r} as an ISO 8601 timestamp"
            raise InputCoercionError(msg) from exc
    msg = f"Cannot interpret {type(value).__name__} value {value!r} as a timestamp"
    raise InputCoercionError(msg)


def to_basis(value: datetime, use_local_time: bool) -> datetime:
    """Move ``value`` onto the local (naive wall clock) or UTC (aware) basis."""
    if use_local_time:
        if value.tzinfo is None:
            return value
        return value.astimezone().replace(tzinfo=None)
    return value.astimezone(UTC)


@dataclass(frozen=True)
class CalendarUtils:
    """Floors and predicates for one basis and week convention.

    Args:
        use_local_time: Floor in local wall-clock time instead of UTC.
        week_start: First day of the week, as ``datetime.weekday()``
            numbers it (0 = Monday ... 6 = Sunday).
    """

    use_local_time: bool = False
    week_start: int = DEFAULT_WEEK_START

    def __post_init__(self) -> None:
        if not 0 <= self.week_start <= 6:
            msg = f"week_start must be a weekday number 0-6, got {self.week_start!r}"
            raise ConfigurationError(msg)

    def to_basis(self, value: datetime) -> datetime:
        return to_basis(value, self.use_local_time)

    # -- floors -------------------------------------------------------------

    def floor_year(self, value: datetime) -> datetime:
        return self.floor_day(value).replace(month=1, day=1)

    def floor_month(self, value: datetime) -> datetime:
        return self.floor_day(value).replace(day=1)

    def floor_week(self, value: datetime) -> datetime:
        offset = (value.weekday() - self.week_start) % 7
        day = self.floor_day(value)
        try:
            return day - timedelta(days=offset)
        except OverflowError:
            # Weeks that began before year 1 start at the first representable day
            return day.replace(year=1, month=1, day=1)

    def floor_day(self, value: datetime) -> datetime:
        return value.replace(hour=0, minute=0, second=0, microsecond=0)

    def floor_hour(self, value: datetime) -> datetime:
        return value.replace(minute=0, second=0, microsecond=0)

    def floor_minute(self, value: datetime) -> datetime:
        return value.replace(second=0, microsecond=0)

    def floor_second(self, value: datetime) -> datetime:
        return value.replace(microsecond=0)

    def scope_floors(self) -> tuple[tuple[TimeUnit, FloorFunc], ...]:
        """Floors in the order scope detection walks them, coarsest first."""
        return (
            (TimeUnit.YEAR, self.floor_year),
            (TimeUnit.MONTH, self.floor_month),
            (TimeUnit.WEEK, self.floor_week),
            (TimeUnit.DAY, self.floor_day),
            (TimeUnit.HOUR, self.floor_hour),
            (TimeUnit.MINUTE, self.floor_minute),
            (TimeUnit.SECOND, self.floor_second),
        )

    # -- predicates ---------------------------------------------------------

    def has_millisecond(self, value: datetime) -> bool:
        return self.floor_second(value) < value

    def has_second(self, value: datetime) -> bool:
        return self.floor_minute(value) < self.floor_second(value)

    def has_minute(self, value: datetime) -> bool:
        return self.floor_hour(value) < self.floor_minute(value)

    def has_hour(self, value: datetime) -> bool:
        return self.floor_day(value) < self.floor_hour(value)

    def is_not_first_day_of_month(self, value: datetime) -> bool:
        return self.floor_month(value) < self.floor_day(value)

    def is_not_first_day_of_week(self, value: datetime) -> bool:
        return self.floor_week(value) < self.floor_day(value)

    def is_not_first_month(self, value: datetime) -> bool:
        return self.floor_year(value) < self.floor_month(value)


def local_time_utils(week_start: int = DEFAULT_WEEK_START) -> CalendarUtils:
    return CalendarUtils(use_local_time=True, week_start=week_start)


def utc_utils(week_start: int = DEFAULT_WEEK_START) -> CalendarUtils:
    return CalendarUtils(use_local_time=False, week_start=week_start)
