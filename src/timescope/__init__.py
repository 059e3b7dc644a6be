"""timescope - date formats that fit the range they display.

Architecture::

    units.py        TimeUnit ordinals (year ... millisecond), GranularityScope pair
    time_utils.py   Local/UTC basis conversion, calendar floors and predicates
    analysis.py     Granularity and scope inference over a set of instants
    matrix.py       8x8 (granularity x scope) pattern matrix and lookup
    patterns.py     d3-time-format style pattern rendering
    formatter.py    TimeFormatter value (format / preview)
    factories.py    create_formatter_for_date_range
    renderers/      Pure dates -> HTML fragments (axis labels)
    cli.py          Command-line entry point

Data flow: dates -> analysis -> matrix -> formatter -> formatted text
"""

__version__ = "0.1.0"

from timescope.analysis import analyze
from timescope.errors import ConfigurationError, InputCoercionError, TimescopeError
from timescope.factories import create_formatter_for_date_range
from timescope.formatter import PREVIEW_TIME, TimeFormatter
from timescope.matrix import DATE_FORMAT_MATRIX, select_pattern
from timescope.units import GranularityScope, TimeUnit

__all__ = [
    "DATE_FORMAT_MATRIX",
    "PREVIEW_TIME",
    "ConfigurationError",
    "GranularityScope",
    "InputCoercionError",
    "TimeFormatter",
    "TimeUnit",
    "TimescopeError",
    "__version__",
    "analyze",
    "create_formatter_for_date_range",
    "select_pattern",
]
