"""Pattern rendering: d3-time-format style patterns on top of ``strftime``.

Patterns use the same ``%`` directives as d3-time-format. Most map straight
onto ``datetime.strftime``; the rest are expanded here:

    %L  milliseconds, zero-padded to 3 digits
    %f  microseconds, zero-padded to 6 digits
    %e  day of month, space-padded
    %%  a literal percent sign

Month and weekday names (``%b``, ``%B``, ``%a``, ``%A``) and ``%p`` come from
the process locale, like any other ``strftime`` call.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import datetime

from timescope.errors import ConfigurationError
from timescope.time_utils import to_basis

TimeFormatFunc = Callable[[datetime], str]

_DIRECTIVE = re.compile(r"%(.)")

# Directives delegated to strftime unchanged
_STRFTIME_CODES = frozenset("aAbBdHIjmMpSwyYZ")
_SUPPORTED_CODES = _STRFTIME_CODES | frozenset("Lfe%")


def _expand(code: str, value: datetime) -> str:
    if code == "L":
        return f"{value.microsecond // 1000:03d}"
    if code == "f":
        return f"{value.microsecond:06d}"
    if code == "e":
        return f"{value.day:>2}"
    if code == "%":
        return "%"
    if code in _STRFTIME_CODES:
        return value.strftime(f"%{code}")
    msg = f"Unsupported pattern directive: %{code}"
    raise ConfigurationError(msg)


def render(pattern: str, value: datetime) -> str:
    """Render ``value`` using ``pattern`` without any basis conversion."""
    return _DIRECTIVE.sub(lambda match: _expand(match.group(1), value), pattern)


def validate_pattern(pattern: str) -> None:
    """Raise ConfigurationError if ``pattern`` uses an unsupported directive."""
    for code in _DIRECTIVE.findall(pattern):
        if code not in _SUPPORTED_CODES:
            msg = f"Unsupported pattern directive: %{code} in {pattern!r}"
            raise ConfigurationError(msg)


def _make_format(pattern: str, use_local_time: bool) -> TimeFormatFunc:
    validate_pattern(pattern)

    def format_func(value: datetime) -> str:
        return render(pattern, to_basis(value, use_local_time))

    format_func.__name__ = "time_format" if use_local_time else "utc_format"
    format_func.__doc__ = f"Render with {pattern!r}."
    return format_func


def time_format(pattern: str) -> TimeFormatFunc:
    """Build a render function that formats in local time."""
    return _make_format(pattern, use_local_time=True)


def utc_format(pattern: str) -> TimeFormatFunc:
    """Build a render function that formats in UTC."""
    return _make_format(pattern, use_local_time=False)
