"""Date format matrix and pattern selection.

A set of dates has a *granularity* (how precise its members are) and a
*scope* (the largest unit over which its members differ). The matrix holds
one pattern for every combination: scope runs left to right from year to
millisecond, granularity runs top to bottom from year to millisecond.

Some combinations cannot occur. A set of dates cannot have day granularity
with hour scope, for instance. Those cells hold an empty string.
"""

from __future__ import annotations

from collections.abc import Iterator

from timescope.errors import ConfigurationError
from timescope.units import GranularityScope, TimeUnit

IMPOSSIBLE = ""

# fmt: off
DATE_FORMAT_MATRIX: tuple[tuple[str, ...], ...] = (
    ("%Y",                      "",                     "",                     "",                  "",               "",          "",       ""),
    ("%b %Y",                   "%B",                   "",                     "",                  "",               "",          "",       ""),
    ("%Y/%m/%d",                "%b %d",                "%b %d",                "",                  "",               "",          "",       ""),
    ("%Y/%m/%d",                "%b %d",                "%b %d",                "%A",                "",               "",          "",       ""),
    ("%Y/%m/%d %I %p",          "%b %d, %I %p",         "%b %d, %I %p",         "%A %I %p",          "%I %p",          "",          "",       ""),
    ("%Y/%m/%d %I:%M %p",       "%b %d %I:%M %p",       "%b %d %I:%M %p",       "%A %I:%M %p",       "%I:%M %p",       ":%M",       "",       ""),
    ("%Y/%m/%d %I:%M:%S %p",    "%b %d %I:%M:%S %p",    "%b %d %I:%M:%S %p",    "%A %I:%M:%S %p",    "%I:%M:%S %p",    ":%M:%S",    ":%S",    ""),
    ("%Y/%m/%d %I:%M:%S.%L %p", "%b %d %I:%M:%S.%L %p", "%b %d %I:%M:%S.%L %p", "%A %I:%M:%S.%L %p", "%I:%M:%S.%L %p", ":%M:%S.%L", ":%S.%L", ".%L"),
)
# fmt: on


def select_pattern(pair: GranularityScope) -> str:
    """Look up the display pattern for a (granularity, scope) pair.

    Raises:
        ConfigurationError: The pair falls on an impossible cell. Analysis
            never produces such a pair, so this signals a bug upstream.
    """
    granularity, scope = pair
    pattern = DATE_FORMAT_MATRIX[granularity][scope]
    if pattern == IMPOSSIBLE:
        msg = (
            f"No date format for {TimeUnit(granularity).name.lower()} granularity "
            f"with {TimeUnit(scope).name.lower()} scope"
        )
        raise ConfigurationError(msg)
    return pattern


def possible_pairs() -> Iterator[GranularityScope]:
    """Yield every (granularity, scope) pair that has a pattern."""
    for granularity in TimeUnit:
        for scope in TimeUnit:
            if DATE_FORMAT_MATRIX[granularity][scope] != IMPOSSIBLE:
                yield GranularityScope(granularity, scope)
