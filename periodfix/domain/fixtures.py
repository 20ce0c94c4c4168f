"""Pure functions for exhaustive period fixture generation.

This module contains the functional core for golden fixture files:
- No I/O operations (the caller decides where lines go)
- No side effects
- Lazy, restartable enumeration of date pairs
- Easy to test

Each fixture line is "<start> <end> <period>", e.g. "2000-01-31 2000-03-01 P1M1D".
"""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date

from periodfix.dates import iter_days, parse_date
from periodfix.domain.models import PeriodConvention
from periodfix.domain.period import Period, between, parse_period

# Three full years crossing a leap year (2000) and two non-leap years
DEFAULT_RANGE_START = date(1999, 1, 1)
DEFAULT_RANGE_END = date(2002, 1, 1)


@dataclass(frozen=True)
class FixtureRecord:
    """Immutable observation of the period between two dates."""

    start: date
    end: date
    period: Period


def count_fixture_pairs(range_start: date, range_end: date) -> int:
    """Calculate how many records a range produces.

    Args:
        range_start: First date of the range (inclusive).
        range_end: Date after the last date of the range (exclusive).

    Returns:
        Number of (d1, d2) pairs with d1 <= d2 inside the range.
    """
    days = max((range_end - range_start).days, 0)
    return days * (days + 1) // 2


def generate_fixtures(
    range_start: date = DEFAULT_RANGE_START,
    range_end: date = DEFAULT_RANGE_END,
    convention: PeriodConvention = PeriodConvention.CLAMPED,
) -> Iterator[FixtureRecord]:
    """Enumerate fixture records for every ordered pair of dates in a range.

    Records come out ordered by start date, then end date, both ascending one
    day at a time. Calling again with the same arguments yields the same
    sequence.

    Args:
        range_start: First date of the range (inclusive).
        range_end: Date after the last date of the range (exclusive).
        convention: Rule deciding when a month counts as elapsed.

    Yields:
        FixtureRecord for each pair (d1, d2) with d1 <= d2.
    """
    for start in iter_days(range_start, range_end):
        for end in iter_days(start, range_end):
            yield FixtureRecord(start=start, end=end, period=between(start, end, convention))


def format_record(record: FixtureRecord) -> str:
    """Render a fixture record as a single line (without newline)."""
    return f"{record.start.isoformat()} {record.end.isoformat()} {record.period.isoformat()}"


def parse_record(line: str) -> FixtureRecord:
    """Parse a fixture line back into a record.

    Args:
        line: Fixture line, optionally ending with a newline.

    Returns:
        Parsed FixtureRecord.

    Raises:
        ValueError: If the line does not have exactly three valid fields.
    """
    fields = line.rstrip("\r\n").split(" ")
    if len(fields) != 3:
        raise ValueError(f"Expected '<start> <end> <period>', got {line.rstrip()!r}")

    start_text, end_text, period_text = fields
    return FixtureRecord(
        start=parse_date(start_text),
        end=parse_date(end_text),
        period=parse_period(period_text),
    )


def find_mismatch(record: FixtureRecord, convention: PeriodConvention = PeriodConvention.CLAMPED) -> Period | None:
    """Recompute a record's period and compare it with the recorded one.

    Args:
        record: Fixture record, possibly written by another implementation.
        convention: Rule deciding when a month counts as elapsed.

    Returns:
        The computed period if it differs from the recorded one, else None.
    """
    computed = between(record.start, record.end, convention)
    if computed == record.period:
        return None
    return computed
