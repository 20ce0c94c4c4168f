"""Date utilities for periodfix.

Pure functions for ISO date parsing and day-by-day ranges.
"""

from collections.abc import Iterator
from datetime import date, datetime, timedelta


def parse_date(text: str) -> date:
    """Parse a strict ISO-8601 calendar date.

    Args:
        text: Date in YYYY-MM-DD format (zero-padded).

    Returns:
        Parsed date.

    Raises:
        ValueError: If the text is not a valid zero-padded YYYY-MM-DD date.
    """
    try:
        parsed = datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError as e:
        raise ValueError(f"Invalid date '{text}': expected YYYY-MM-DD") from e

    # strptime accepts unpadded fields like 1999-1-1
    if parsed.isoformat() != text:
        raise ValueError(f"Invalid date '{text}': expected YYYY-MM-DD")
    return parsed


def iter_days(start: date, end: date) -> Iterator[date]:
    """Iterate over every date from start (inclusive) to end (exclusive).

    Args:
        start: First date yielded.
        end: Date at which iteration stops.

    Yields:
        Consecutive dates one day apart. Nothing if end is not after start.
    """
    current = start
    one_day = timedelta(days=1)
    while current < end:
        yield current
        current += one_day
