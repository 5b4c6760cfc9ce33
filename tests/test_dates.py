"""Tests for calendar date helpers."""

import pytest
from datetime import date
from crop_tracker.domain.dates import add_days, days_between, format_date, parse_date
from crop_tracker.domain.exceptions import InvalidDateFormat


def test_parse_date():
    """Test parsing a well-formed date."""
    assert parse_date("2025-09-22") == date(2025, 9, 22)
    assert parse_date("2024-02-29") == date(2024, 2, 29)


@pytest.mark.parametrize(
    "text",
    [
        "2025-02-30",  # no such day
        "2023-02-29",  # not a leap year
        "2025-13-01",
        "2025-00-10",
        "2025-04-31",
        "2025/09/22",
        "22-09-2025",
        "2025-9-22",
        "2025-09-22T00:00",
        " 2025-01-01",
        "2025-01-01\n",
        "abcd-ef-gh",
        "",
    ],
)
def test_parse_date_invalid(text):
    """Malformed or out-of-range dates raise InvalidDateFormat."""
    with pytest.raises(InvalidDateFormat):
        parse_date(text)


def test_parse_date_error_is_value_error():
    """InvalidDateFormat can be caught as a ValueError."""
    with pytest.raises(ValueError, match="YYYY-MM-DD"):
        parse_date("2025-02-30")


def test_parse_date_non_string():
    """Non-string input is rejected."""
    with pytest.raises(InvalidDateFormat):
        parse_date(20250922)


def test_days_between():
    """Test whole-day differences."""
    assert days_between(date(2025, 1, 10), date(2025, 2, 4)) == 25
    assert days_between(date(2025, 2, 4), date(2025, 1, 10)) == -25
    assert days_between(date(2024, 2, 28), date(2024, 3, 1)) == 2
    assert days_between(date(2025, 5, 5), date(2025, 5, 5)) == 0


def test_add_days():
    """Test offsetting a date by whole days."""
    assert add_days(date(2025, 1, 10), 54) == date(2025, 3, 5)
    assert add_days(date(2025, 3, 1), -1) == date(2025, 2, 28)
    assert add_days(date(2025, 12, 31), 1) == date(2026, 1, 1)


@pytest.mark.parametrize("n", [-400, -1, 0, 1, 29, 365, 1000])
def test_add_days_then_days_between(n):
    """Offsetting by n days is undone by days_between."""
    start = parse_date("2024-02-29")
    assert days_between(start, add_days(start, n)) == n


def test_format_date():
    """Test display format."""
    assert format_date(date(2025, 9, 22)) == "Sep 22"
    assert format_date(date(2025, 1, 5)) == "Jan 05"
    assert format_date(date(2025, 12, 31)) == "Dec 31"


@pytest.mark.parametrize(
    "value,days",
    [
        (date(9999, 12, 1), 54),
        (date(9999, 12, 31), 1),
        (date(1, 1, 1), -1),
        (date(2025, 1, 1), 10**10),
    ],
)
def test_add_days_out_of_range(value, days):
    """Offsets past the supported calendar raise InvalidDateFormat."""
    with pytest.raises(InvalidDateFormat, match="out of the supported date range"):
        add_days(value, days)
