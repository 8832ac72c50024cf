"""
Date normalization shared by every calendar operation.

All inputs are turned into timezone-aware ``pendulum.DateTime`` values.
Anything that cannot be read as a point in time becomes ``None``, the
invalid-instant marker that the operations propagate instead of raising.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, tzinfo
from typing import Any, Optional, Union

import pendulum
from dateutil import parser as dateutil_parser
from pendulum import Date, DateTime

logger = logging.getLogger(__name__)

TimezoneLike = Union[str, tzinfo, None]

DAY_MONTH_YEAR_FORMAT = "DD-MM-YYYY"

_FREE_FORM_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def resolve_timezone(tz: TimezoneLike = None) -> tzinfo:
    """
    Resolve a timezone argument.

    ``None`` stands for the host's local timezone, strings are IANA names.
    """
    if tz is None:
        return pendulum.local_timezone()
    if isinstance(tz, str):
        return pendulum.timezone(tz)
    return tz


def to_instant(value: Any, tz: TimezoneLike = None) -> Optional[DateTime]:
    """
    Normalize a date value to a pendulum DateTime.

    Naive date-time strings are wall time in ``tz``. Date-only ISO strings
    such as ``2024-01-30`` are UTC midnight, converted to ``tz``. Strings
    must name a full date: weekday or month names alone are invalid.

    Args:
        value: ISO 8601 or other common date string, datetime, date,
            or a millisecond timestamp
        tz: Zone for naive input and for the result; ``None`` means the
            host local zone (aware datetimes then keep their own zone)

    Returns:
        The instant, or None if the value does not describe one
    """
    if value is None:
        return None

    zone = resolve_timezone(tz)

    if isinstance(value, datetime):
        if value.tzinfo is None:
            return pendulum.instance(value, tz=zone)
        instant = pendulum.instance(value)
        return instant if tz is None else instant.in_timezone(zone)

    if isinstance(value, date):
        return pendulum.datetime(value.year, value.month, value.day, tz=zone)

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return pendulum.from_timestamp(value / 1000, tz=zone)
        except (ValueError, OverflowError, OSError) as exc:
            logger.debug("Timestamp %r is out of range: %s", value, exc)
            return None

    if isinstance(value, str):
        return _parse_string(value, zone)

    logger.debug("Unsupported date value of type %s", type(value).__name__)
    return None


def to_utc_instant(value: Any) -> Optional[DateTime]:
    """Normalize a value as an absolute instant, reading naive input as UTC."""
    return to_instant(value, tz="UTC")


def parse_day_month_year(text: Any) -> Optional[Date]:
    """Parse a ``DD-MM-YYYY`` string into a calendar date, or None."""
    if not isinstance(text, str):
        return None
    try:
        return pendulum.from_format(text.strip(), DAY_MONTH_YEAR_FORMAT).date()
    except ValueError as exc:
        logger.debug("Could not parse %r as %s: %s", text, DAY_MONTH_YEAR_FORMAT, exc)
        return None


def format_day_month_year(day: date) -> str:
    """Format a calendar date as zero-padded ``DD-MM-YYYY``."""
    return pendulum.date(day.year, day.month, day.day).format(DAY_MONTH_YEAR_FORMAT)


def _parse_string(text: str, zone: tzinfo) -> Optional[DateTime]:
    text = text.strip()
    if text.lower() == "now":
        logger.debug("Relative date string %r is not an instant", text)
        return None

    try:
        parsed = pendulum.parse(text, tz=zone, exact=True)
    except (ValueError, OverflowError):
        return _parse_free_form(text, zone)

    # DateTime subclasses Date, so it has to be checked first
    if isinstance(parsed, DateTime):
        return parsed.in_timezone(zone)
    if isinstance(parsed, Date):
        # Date-only ISO strings are UTC midnight
        utc_midnight = pendulum.datetime(parsed.year, parsed.month, parsed.day, tz="UTC")
        return utc_midnight.in_timezone(zone)

    logger.debug("Date string %r does not describe an instant", text)
    return None


def _parse_free_form(text: str, zone: tzinfo) -> Optional[DateTime]:
    """
    Parse strings such as ``04 Dec 1995 00:12:00 UTC`` with dateutil.

    dateutil fills any field the string leaves out from its default, so
    the string is read against two defaults that differ in year, month
    and day. Strings that do not name all three ("Monday", "Dec", "5")
    give two different readings and are rejected.
    """
    readings = []
    for default in _FREE_FORM_DEFAULTS:
        try:
            readings.append(dateutil_parser.parse(text, default=default))
        except (ValueError, OverflowError) as exc:
            logger.debug("Could not parse date string %r: %s", text, exc)
            return None

    first, second = readings
    if first != second:
        logger.debug("Date string %r does not name a year, month and day", text)
        return None

    return pendulum.instance(first, tz=zone).in_timezone(zone)
