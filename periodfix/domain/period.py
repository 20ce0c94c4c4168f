"""Pure functions for computing the period between two calendar dates.

This module contains the functional core for period arithmetic:
- No I/O operations (no console, no files)
- No side effects
- Pure data transformations
- Easy to test

A period is a signed (years, months, days) decomposition. Applying it to the
start date (years and months move the calendar month with one day-of-month
clamp, then days are added) reproduces the end date exactly.
"""

import re
from dataclasses import dataclass
from datetime import date

from periodfix.domain.gregorian import is_before, month_difference, plus_days, plus_months
from periodfix.domain.models import IsoPeriod, PeriodConvention

_PERIOD_PATTERN = re.compile(r"^(-)?P(?:(\d+)Y)?(?:(\d+)M)?(?:(\d+)D)?$")


@dataclass(frozen=True)
class Period:
    """Immutable signed period of years, months and days."""

    years: int = 0
    months: int = 0
    days: int = 0

    def __post_init__(self) -> None:
        components = (self.years, self.months, self.days)
        if any(c < 0 for c in components) and any(c > 0 for c in components):
            raise ValueError(f"Period components must share one sign, got {components}")

    @property
    def is_negative(self) -> bool:
        """True when the end date precedes the start date."""
        return self.years < 0 or self.months < 0 or self.days < 0

    @property
    def is_zero(self) -> bool:
        return self.years == 0 and self.months == 0 and self.days == 0

    @property
    def total_months(self) -> int:
        """Years and months folded into a single month count."""
        return self.years * 12 + self.months

    def negated(self) -> "Period":
        """Return the period with every component negated together."""
        return Period(years=-self.years, months=-self.months, days=-self.days)

    def isoformat(self) -> IsoPeriod:
        """Render as ISO-8601 text.

        Zero components are omitted, the zero period is "P0D" and a negative
        period carries a single leading "-" (e.g., "-P1Y2M3D").
        """
        if self.is_zero:
            return IsoPeriod("P0D")

        magnitude = self.negated() if self.is_negative else self
        text = "P"
        if magnitude.years:
            text += f"{magnitude.years}Y"
        if magnitude.months:
            text += f"{magnitude.months}M"
        if magnitude.days:
            text += f"{magnitude.days}D"

        return IsoPeriod(f"-{text}" if self.is_negative else text)

    def __str__(self) -> str:
        return self.isoformat()


def parse_period(text: str) -> Period:
    """Parse ISO-8601 period text produced by Period.isoformat.

    Args:
        text: Period text such as "P1Y2M3D", "-P1M" or "P0D".

    Returns:
        Parsed Period.

    Raises:
        ValueError: If the text is not a years/months/days period, or is not
            in the form Period.isoformat renders (e.g., "P0Y1M", "-P0D", "P01M").
    """
    match = _PERIOD_PATTERN.match(text)
    if match is None or not any(match.group(i) for i in (2, 3, 4)):
        raise ValueError(f"Invalid period: {text!r}")

    sign = -1 if match.group(1) else 1
    years, months, days = (int(match.group(i) or 0) for i in (2, 3, 4))
    period = Period(years=sign * years, months=sign * months, days=sign * days)

    # Zero components, signed zeros and leading zeros have one canonical spelling
    if period.isoformat() != text:
        raise ValueError(f"Invalid period: {text!r} (expected {period.isoformat()!r})")
    return period


def apply_period(start: date, period: Period) -> date:
    """Apply a period to a date.

    Years and months are added as one month step (day-of-month clamped once),
    then days are added.

    Args:
        start: Date to move from.
        period: Signed period to apply.

    Returns:
        The resulting date.
    """
    return plus_days(plus_months(start, period.total_months), period.days)


def round_trips(start: date, end: date, period: Period) -> bool:
    """Check the round-trip law for a computed period.

    A non-negative period applied to start must land on end. A negative period
    was computed from the swapped pair, so its negation applied to end must
    land on start.
    """
    if period.is_negative:
        return apply_period(end, period.negated()) == start
    return apply_period(start, period) == end


def _elapsed_months(start: date, end: date, convention: PeriodConvention) -> int:
    months = month_difference(start, end)
    if months <= 0:
        return 0

    if convention is PeriodConvention.CALENDAR_DAY:
        if end.day < start.day:
            months -= 1
    elif is_before(end, plus_months(start, months)):
        # Overshot within end's month; the month before always fits
        months -= 1

    return months


def _forward_period(start: date, end: date, convention: PeriodConvention) -> Period:
    months = _elapsed_months(start, end, convention)
    days = (end - plus_months(start, months)).days
    years, months = divmod(months, 12)
    return Period(years=years, months=months, days=days)


def between(start: date, end: date, convention: PeriodConvention = PeriodConvention.CLAMPED) -> Period:
    """Calculate the period between two dates.

    When end precedes start, the period is computed for the swapped pair and
    every component is negated together, so the decomposition never mixes a
    sign-flipped day count with a separately computed month count.

    Args:
        start: Start date.
        end: End date (may be before, equal to, or after start).
        convention: Rule deciding when a month counts as elapsed.

    Returns:
        Period with months in 0-11 (in magnitude) and minimal remaining days.

    Examples:
        >>> str(between(date(2000, 1, 31), date(2000, 3, 1)))
        'P1M1D'
        >>> str(between(date(2001, 3, 1), date(2000, 1, 31)))
        '-P1Y1M1D'
    """
    if is_before(end, start):
        period = _forward_period(end, start, convention).negated()
    else:
        period = _forward_period(start, end, convention)

    assert round_trips(start, end, period), f"{period} does not lead from {start} to {end}"
    return period
