"""Calendar date helpers.

All values are ``datetime.date`` objects, so there is no time of day to
normalize: two dates are always a whole number of days apart.
"""

import re
from datetime import date, datetime, timedelta

from .exceptions import InvalidDateFormat

DATE_INPUT_FORMAT = "%Y-%m-%d"

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# strftime("%b") follows the process locale
_MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def parse_date(text: str) -> date:
    """
    Parse a strict ``YYYY-MM-DD`` string into a date.

    Args:
        text: Date string, nothing else around it

    Returns:
        The parsed calendar date

    Raises:
        InvalidDateFormat: If the text is not a well-formed, existing calendar date
    """
    if not isinstance(text, str):
        raise InvalidDateFormat(repr(text), "expected a string")

    if not _DATE_PATTERN.fullmatch(text):
        raise InvalidDateFormat(text)

    try:
        return datetime.strptime(text, DATE_INPUT_FORMAT).date()
    except ValueError as e:
        raise InvalidDateFormat(text, str(e)) from e


def days_between(start: date, end: date) -> int:
    """Whole days from ``start`` to ``end``; negative if ``end`` is earlier."""
    return (end - start).days


def add_days(value: date, days: int) -> date:
    """
    Return the date ``days`` days after ``value`` (``days`` may be negative).

    Raises:
        InvalidDateFormat: If the result falls outside the supported date range
    """
    try:
        return value + timedelta(days=days)
    except OverflowError as e:
        raise InvalidDateFormat(
            value.isoformat(), f"{days:+d} days is out of the supported date range"
        ) from e


def format_date(value: date) -> str:
    """Render a date for display, e.g. 'Sep 22'."""
    return f"{_MONTH_ABBREVIATIONS[value.month - 1]} {value.day:02d}"
