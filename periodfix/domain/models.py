"""Domain type definitions for periodfix.

These NewTypes and enums provide semantic clarity and help with type checking:
- IsoPeriod: Period text in ISO-8601 P<y>Y<m>M<d>D format
- PeriodConvention: Rule deciding when a month counts as elapsed
"""

from enum import Enum
from typing import NewType

# Periods are always rendered as P1Y2M3D, -P1Y2M3D or P0D
IsoPeriod = NewType("IsoPeriod", str)


class PeriodConvention(str, Enum):
    """How a month is counted as elapsed between two dates."""

    # A month has elapsed once the clamped month step lands on or before the end date
    CLAMPED = "clamped"
    # A month has elapsed only once the end day-of-month reaches the start day-of-month
    CALENDAR_DAY = "calendar-day"
