"""Named, immutable time formatter values."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime
from email.utils import format_datetime
from typing import TYPE_CHECKING

from timescope.errors import ConfigurationError
from timescope.patterns import time_format, utc_format
from timescope.time_utils import coerce_timestamp

if TYPE_CHECKING:
    from timescope.patterns import TimeFormatFunc

PREVIEW_TIME = datetime(2017, 2, 14, 11, 22, 33, tzinfo=UTC)


@dataclass(frozen=True)
class TimeFormatter:
    """A named formatting function bound to a time basis.

    ``id`` and ``format_func`` are required; ``label`` falls back to ``id``.
    Calling the formatter is the same as calling :meth:`format`.
    """

    id: str = ""
    format_func: TimeFormatFunc | None = None
    label: str | None = None
    description: str = ""
    use_local_time: bool = False
    pattern: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            msg = "TimeFormatter requires an id"
            raise ConfigurationError(msg)
        if not callable(self.format_func):
            msg = f"TimeFormatter {self.id!r} requires a callable format_func"
            raise ConfigurationError(msg)
        if self.label is None:
            object.__setattr__(self, "label", self.id)

    @classmethod
    def from_pattern(
        cls,
        id: str,  # noqa: A002
        pattern: str,
        label: str | None = None,
        description: str = "",
        use_local_time: bool = False,
    ) -> TimeFormatter:
        """Build a formatter that renders ``pattern`` in local time or UTC."""
        make_format = time_format if use_local_time else utc_format
        return cls(
            id=id,
            format_func=make_format(pattern),
            label=label,
            description=description,
            use_local_time=use_local_time,
            pattern=pattern,
        )

    def format(self, value: datetime | date | float | str | None) -> str:
        """Format a single value. ``None`` renders as ``"None"``."""
        if value is None:
            return str(value)
        return self.format_func(coerce_timestamp(value))  # type: ignore[misc]

    def __call__(self, value: datetime | date | float | str | None) -> str:
        return self.format(value)

    def preview(self, value: datetime | date | float | str = PREVIEW_TIME) -> str:
        """Show ``value`` in UTC next to its formatted form, for diagnostics.

        e.g. ``Tue, 14 Feb 2017 11:22:33 GMT => Feb 14``
        """
        timestamp = coerce_timestamp(value)
        source = format_datetime(timestamp.astimezone(UTC), usegmt=True)
        return f"{source} => {self.format(timestamp)}"
