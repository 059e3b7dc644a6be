"""Axis label renderer.

Lays out one label per tick for a chart axis, using a single formatter
chosen from the ticks themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from timescope.analysis import analyze
from timescope.config import get_settings
from timescope.formatter import TimeFormatter
from timescope.matrix import select_pattern
from timescope.renderers import render_template
from timescope.time_utils import TimestampLike, coerce_timestamp

if TYPE_CHECKING:
    from collections.abc import Sequence


def axis_label_rows(
    dates: Sequence[TimestampLike],
    formatter: TimeFormatter,
) -> list[dict[str, str]]:
    """Pair each tick's ISO timestamp with its label, in the order given."""
    timestamps = [coerce_timestamp(value) for value in dates]
    return [{"iso": value.isoformat(), "label": formatter(value)} for value in timestamps]


def build_axis_labels_html(
    dates: Sequence[TimestampLike],
    use_local_time: bool = False,
    week_start: int | None = None,
    title: str = "Axis labels",
) -> str:
    """Build an HTML list of axis labels for ``dates``."""
    if not dates:
        return "<p>No dates to label.</p>"

    if week_start is None:
        week_start = get_settings().week_start

    pair = analyze(dates, use_local_time=use_local_time, week_start=week_start)
    formatter = TimeFormatter.from_pattern(
        id="axis_labels",
        pattern=select_pattern(pair),
        use_local_time=use_local_time,
    )

    context: dict[str, Any] = {
        "title": title,
        "granularity": pair.granularity.name.lower(),
        "scope": pair.scope.name.lower(),
        "pattern": formatter.pattern,
        "basis": "local" if use_local_time else "UTC",
        "ticks": axis_label_rows(dates, formatter),
    }
    return render_template("axis_labels.html.j2", **context)
