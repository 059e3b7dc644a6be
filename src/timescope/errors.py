"""Error taxonomy for timescope.

Two kinds of failure exist, both raised synchronously at the call site:

  - ConfigurationError: a caller or library bug (missing formatter id,
    impossible matrix cell, unknown pattern directive). Not recoverable.
  - InputCoercionError: a value handed to ``TimeFormatter.format`` that
    cannot be read as a timestamp. Surfaced to the caller.
"""

from __future__ import annotations


class TimescopeError(Exception):
    """Base class for all timescope errors."""


class ConfigurationError(TimescopeError, ValueError):
    """Raised when a formatter or pattern is configured incorrectly."""


class InputCoercionError(TimescopeError, TypeError):
    """Raised when a value cannot be interpreted as a timestamp."""
