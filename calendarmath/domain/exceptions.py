"""
Domain-specific exception hierarchy for calendarmath.

Malformed date strings are not errors here: they propagate as ``None``.
These exceptions cover misuse of numeric fields that can never describe
a calendar value.
"""


class CalendarMathError(Exception):
    """Base class for all library-level errors."""


class InvalidFieldError(CalendarMathError, ValueError):
    """Raised when a numeric calendar field (month, day count) is out of range."""
