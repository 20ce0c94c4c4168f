"""Domain models and types for periodfix.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Calendar arithmetic separated from the command line and files
"""

from periodfix.domain.fixtures import FixtureRecord
from periodfix.domain.models import IsoPeriod, PeriodConvention
from periodfix.domain.period import Period, between

__all__ = ["FixtureRecord", "IsoPeriod", "Period", "PeriodConvention", "between"]
