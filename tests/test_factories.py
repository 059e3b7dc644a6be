"""Tests for create_formatter_for_date_range."""

from __future__ import annotations

from datetime import UTC, date, datetime

import pytest

from timescope.factories import (
    create_formatter_for_date_range,
    get_format_func,
    pattern_for_date_range,
)
from timescope.time_utils import MONDAY


class TestCreateFormatterForDateRange:
    """Creates a formatter for a specified date range (local time)."""

    def test_month_granularity_and_scope(self) -> None:
        formatter = create_formatter_for_date_range(
            id="my_format",
            use_local_time=True,
            dates=[datetime(2019, 11, 1), datetime(2019, 12, 1)],
        )
        assert formatter(datetime(2019, 11, 1)) == "November"

    def test_hour_granularity_and_month_scope(self) -> None:
        formatter = create_formatter_for_date_range(
            id="my_format",
            use_local_time=True,
            dates=[datetime(2019, 11, 12, 8), datetime(2019, 12, 19, 10)],
        )
        assert formatter(datetime(2019, 11, 9, 8)) == "Nov 09, 08 AM"

    def test_hour_granularity_and_day_scope(self) -> None:
        formatter = create_formatter_for_date_range(
            id="my_format",
            use_local_time=True,
            dates=[
                datetime(2019, 11, 18, 8),
                datetime(2019, 11, 17, 10),
                datetime(2019, 11, 19, 10),
            ],
        )
        assert formatter(datetime(2019, 11, 18, 8)) == "Monday 08 AM"

    def test_year_granularity_and_scope(self) -> None:
        formatter = create_formatter_for_date_range(
            id="my_format",
            use_local_time=True,
            dates=[datetime(2019, 1, 1), datetime(2018, 1, 1), datetime(2017, 1, 1)],
        )
        assert formatter(datetime(2020, 11, 18, 8)) == "2020"

    def test_millisecond_granularity_and_year_scope(self) -> None:
        formatter = create_formatter_for_date_range(
            id="my_format",
            use_local_time=True,
            dates=[
                datetime(2019, 10, 18, 8, 11, 50, 875000),
                datetime(2019, 11, 8),
                datetime(2020, 11, 19, 10, 20, 0, 10000),
            ],
        )
        assert formatter(datetime(2020, 11, 18, 18, 30, 42, 200000)) == "2020/11/18 06:30:42.200 PM"

    def test_millisecond_granularity_and_minute_scope(self) -> None:
        formatter = create_formatter_for_date_range(
            id="my_format",
            use_local_time=True,
            dates=[
                datetime(2019, 10, 18, 8, 2),
                datetime(2019, 10, 18, 8, 11, 50, 875000),
                datetime(2019, 10, 18, 8, 20, 24, 250000),
            ],
        )
        assert formatter(datetime(2019, 10, 18, 18, 30, 42, 200000)) == ":30:42.200"

    def test_tolerates_a_list_of_one(self) -> None:
        formatter = create_formatter_for_date_range(
            id="my_format",
            use_local_time=True,
            dates=[datetime(2019, 10, 18, 8, 2)],
        )
        assert formatter(datetime(2019, 10, 18, 18, 30, 42, 200000)) == ":30"

    def test_tolerates_an_empty_list(self) -> None:
        formatter = create_formatter_for_date_range(id="my_format", use_local_time=True, dates=[])
        assert formatter(datetime(2019, 10, 18, 18, 30, 42, 200000)) == "2019/10/18 06:30:42.200 PM"


class TestFormatterMetadata:
    """Test what the factory carries onto the formatter."""

    def test_label_and_description(self) -> None:
        formatter = create_formatter_for_date_range(
            id="x_axis", dates=[], label="X axis", description="Tick labels"
        )
        assert formatter.id == "x_axis"
        assert formatter.label == "X axis"
        assert formatter.description == "Tick labels"

    def test_label_defaults_to_id(self) -> None:
        assert create_formatter_for_date_range(id="x_axis", dates=[]).label == "x_axis"

    def test_pattern_is_recorded(self) -> None:
        formatter = create_formatter_for_date_range(
            id="x_axis", dates=[datetime(2019, 11, 1), datetime(2019, 12, 1)], use_local_time=True
        )
        assert formatter.pattern == "%B"
        assert formatter.use_local_time is True

    def test_formats_values_outside_the_range(self) -> None:
        formatter = create_formatter_for_date_range(
            id="x_axis", dates=[datetime(2019, 11, 1), datetime(2019, 12, 1)], use_local_time=True
        )
        assert formatter(datetime(2031, 3, 1)) == "March"


class TestInputForms:
    """Range dates may be dates, ISO strings or epoch milliseconds."""

    def test_dates(self) -> None:
        formatter = create_formatter_for_date_range(
            id="my_format",
            use_local_time=True,
            dates=[date(2019, 11, 1), date(2019, 12, 1)],
        )
        assert formatter(date(2019, 11, 1)) == "November"

    def test_iso_strings(self) -> None:
        formatter = create_formatter_for_date_range(
            id="my_format",
            use_local_time=True,
            dates=["2019-11-12T08:00", "2019-12-19T10:00"],
        )
        assert formatter("2019-11-09T08:00") == "Nov 09, 08 AM"


class TestUniversalTime:
    """Test the default UTC basis."""

    def test_defaults_to_utc(self) -> None:
        formatter = create_formatter_for_date_range(
            id="utc",
            dates=[datetime(2019, 11, 1, tzinfo=UTC), datetime(2019, 12, 1, tzinfo=UTC)],
        )
        assert formatter.use_local_time is False
        assert formatter(datetime(2019, 11, 1, tzinfo=UTC)) == "November"

    def test_numeric_values(self) -> None:
        formatter = create_formatter_for_date_range(
            id="utc",
            dates=[datetime(2019, 1, 1, tzinfo=UTC), datetime(2020, 1, 1, tzinfo=UTC)],
        )
        assert formatter(0) == "1970"


class TestWeekStart:
    """Test week_start handling."""

    dates = [datetime(2019, 11, 17, 10), datetime(2019, 11, 19, 10)]

    def test_explicit_week_start(self) -> None:
        pattern = pattern_for_date_range(self.dates, use_local_time=True, week_start=MONDAY)
        assert pattern == "%b %d, %I %p"

    def test_week_start_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TIMESCOPE_WEEK_START", "0")
        formatter = create_formatter_for_date_range(
            id="weekly", dates=self.dates, use_local_time=True
        )
        assert formatter(datetime(2019, 11, 18, 8)) == "Nov 18, 08 AM"

    def test_default_sunday_week(self) -> None:
        assert pattern_for_date_range(self.dates, use_local_time=True) == "%A %I %p"


class TestGetFormatFunc:
    """Test the bare render function."""

    def test_returns_callable(self) -> None:
        func = get_format_func(True, [datetime(2019, 11, 1), datetime(2019, 12, 1)])
        assert func(datetime(2019, 12, 1)) == "December"
