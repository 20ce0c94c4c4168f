"""Between command for computing a single period."""

import sys

from rich.console import Console

from periodfix.config import parse_convention
from periodfix.dates import parse_date
from periodfix.domain.period import between

console = Console()


def between_command(start: str, end: str, convention: str) -> None:
    """Print the period between two dates."""
    try:
        start_date = parse_date(start)
        end_date = parse_date(end)
        period_convention = parse_convention(convention)
    except ValueError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)

    period = between(start_date, end_date, period_convention)

    console.print(period.isoformat(), markup=False, highlight=False)
    if period.is_zero:
        return

    label = "-" if period.is_negative else "+"
    magnitude = period.negated() if period.is_negative else period
    console.print(
        f"[dim]{label}{magnitude.years} years, {magnitude.months} months, {magnitude.days} days "
        f"({period_convention.value})[/dim]"
    )
