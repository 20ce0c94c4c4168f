"""Pure functions for proleptic Gregorian calendar arithmetic.

This module is the date primitive the period calculator is built on:
- No I/O operations
- No side effects
- Dates are immutable datetime.date values, never mutated in place

Month and year steps clamp the day-of-month to the target month's last day
instead of rolling over into the following month.
"""

from datetime import date, timedelta

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Check whether a year is a leap year under proleptic Gregorian rules.

    Args:
        year: Calendar year.

    Returns:
        True if February has 29 days in that year.
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Get the number of days in a month.

    Args:
        year: Calendar year.
        month: Month number (1-12).

    Returns:
        Length of the month in days (28-31).

    Raises:
        ValueError: If month is outside 1-12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be 1-12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def is_before(first: date, second: date) -> bool:
    """Check whether first falls strictly before second."""
    return first < second


def plus_days(value: date, days: int) -> date:
    """Add a (possibly negative) number of days to a date."""
    return value + timedelta(days=days)


def plus_months(value: date, months: int) -> date:
    """Add a (possibly negative) number of months to a date.

    Args:
        value: Starting date.
        months: Months to add.

    Returns:
        Date in the target month with the day clamped to that month's length
        (e.g., 2001-01-31 plus one month is 2001-02-28).
    """
    if months == 0:
        return value
    year, month_index = divmod(value.year * 12 + (value.month - 1) + months, 12)
    month = month_index + 1
    day = min(value.day, days_in_month(year, month))
    return date(year, month, day)


def plus_years(value: date, years: int) -> date:
    """Add a (possibly negative) number of years to a date.

    Feb 29 lands on Feb 28 when the target year is not a leap year.
    """
    return plus_months(value, years * 12)


def month_difference(start: date, end: date) -> int:
    """Count calendar month boundaries between two dates, ignoring the day.

    Args:
        start: Earlier date.
        end: Later date.

    Returns:
        Proleptic month number of end minus that of start.
    """
    return (end.year - start.year) * 12 + (end.month - start.month)
