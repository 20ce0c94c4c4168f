"""Generate and verify commands for golden fixture files."""

import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import IO

from rich.console import Console
from rich.table import Table

from periodfix.config import load_fixture_settings, parse_convention
from periodfix.dates import parse_date
from periodfix.domain.fixtures import (
    FixtureRecord,
    count_fixture_pairs,
    find_mismatch,
    format_record,
    generate_fixtures,
    parse_record,
)
from periodfix.domain.models import PeriodConvention
from periodfix.domain.period import Period

# Fixture lines own stdout, everything else goes to stderr
console = Console(stderr=True)


@dataclass
class VerifyStats:
    """Statistics from verifying a fixture file."""

    checked: int = 0
    mismatches: list[tuple[int, FixtureRecord, Period]] = field(default_factory=list)
    malformed: list[tuple[int, str]] = field(default_factory=list)


def write_fixtures(records: Iterable[FixtureRecord], stream: IO[str]) -> int:
    """Write fixture records as lines to a text stream.

    Args:
        records: Records in emission order.
        stream: Open text stream.

    Returns:
        Number of lines written.
    """
    written = 0
    for record in records:
        stream.write(format_record(record))
        stream.write("\n")
        written += 1
    return written


def resolve_generate_range(
    start: str | None,
    end: str | None,
    convention: str | None,
) -> tuple[date, date, PeriodConvention]:
    """Resolve the fixture range from CLI options and config defaults.

    Args:
        start: Optional range start (YYYY-MM-DD) overriding config.
        end: Optional range end (YYYY-MM-DD, exclusive) overriding config.
        convention: Optional convention name overriding config.

    Returns:
        Tuple of (range_start, range_end, convention).

    Raises:
        ValueError: If a value is invalid or the range is inverted.
    """
    settings = load_fixture_settings()

    range_start = parse_date(start) if start else settings.start
    range_end = parse_date(end) if end else settings.end
    period_convention = parse_convention(convention) if convention else settings.convention

    if range_end < range_start:
        raise ValueError(f"Range end {range_end} is before range start {range_start}")

    return range_start, range_end, period_convention


def generate_command(
    start: str | None = None,
    end: str | None = None,
    convention: str | None = None,
    output: str | None = None,
) -> None:
    """Generate the exhaustive fixture stream."""
    try:
        range_start, range_end, period_convention = resolve_generate_range(start, end, convention)
    except ValueError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)

    expected = count_fixture_pairs(range_start, range_end)
    records = generate_fixtures(range_start, range_end, period_convention)

    if output is None:
        written = write_fixtures(records, sys.stdout)
        sys.stdout.flush()
    else:
        output_path = Path(output).expanduser()
        console.print(f"[cyan]Generating {expected:,} fixtures from {range_start} to {range_end}...[/cyan]")
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="ascii", newline="\n") as f:
                written = write_fixtures(records, f)
        except OSError as e:
            console.print(f"[red]Could not write fixtures: {e}[/red]", style="bold")
            sys.exit(1)

        console.print(f"[green]✓[/green] Wrote {written:,} fixtures to: {output_path}")

    console.print(
        f"[dim]{written:,} fixtures, range: {range_start} to {range_end} (exclusive), "
        f"convention: {period_convention.value}[/dim]"
    )


def verify_lines(lines: Iterable[str], convention: PeriodConvention) -> VerifyStats:
    """Recompute every fixture line and collect disagreements.

    Args:
        lines: Fixture lines (blank lines are skipped).
        convention: Rule deciding when a month counts as elapsed.

    Returns:
        VerifyStats with mismatching and malformed lines by line number.
    """
    stats = VerifyStats()

    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue

        try:
            record = parse_record(line)
        except ValueError:
            stats.malformed.append((line_number, line.rstrip("\r\n")))
            continue

        stats.checked += 1
        computed = find_mismatch(record, convention)
        if computed is not None:
            stats.mismatches.append((line_number, record, computed))

    return stats


def display_verify_results(stats: VerifyStats, limit: int) -> None:
    """Display mismatches and malformed lines in a table.

    Args:
        stats: Verification statistics.
        limit: Maximum rows to show per table.
    """
    if stats.mismatches:
        table = Table(title=f"Mismatches (showing {min(limit, len(stats.mismatches))} of {len(stats.mismatches)})")
        table.add_column("Line", justify="right", style="dim")
        table.add_column("Start", style="cyan")
        table.add_column("End", style="cyan")
        table.add_column("Recorded", style="red")
        table.add_column("Computed", style="green")

        for line_number, record, computed in stats.mismatches[:limit]:
            table.add_row(
                str(line_number),
                record.start.isoformat(),
                record.end.isoformat(),
                record.period.isoformat(),
                computed.isoformat(),
            )

        console.print(table)

    if stats.malformed:
        table = Table(title=f"Malformed lines (showing {min(limit, len(stats.malformed))} of {len(stats.malformed)})")
        table.add_column("Line", justify="right", style="dim")
        table.add_column("Content", style="yellow")

        for line_number, content in stats.malformed[:limit]:
            table.add_row(str(line_number), content)

        console.print(table)


def verify_command(fixture_file: str, convention: str | None = None, limit: int = 20) -> None:
    """Verify a fixture file against the period calculator."""
    fixture_path = Path(fixture_file).expanduser()

    try:
        period_convention = parse_convention(convention) if convention else load_fixture_settings().convention
    except ValueError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)

    if not fixture_path.exists():
        console.print(f"[red]Fixture file not found: {fixture_path}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[cyan]Verifying {fixture_path} ({period_convention.value})...[/cyan]")

    try:
        with open(fixture_path, encoding="utf-8") as f:
            stats = verify_lines(f, period_convention)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Could not read fixtures: {e}[/red]", style="bold")
        sys.exit(1)

    display_verify_results(stats, limit)

    if stats.mismatches or stats.malformed:
        console.print(
            f"\n[red]✗ {len(stats.mismatches):,} mismatches, {len(stats.malformed):,} malformed lines "
            f"in {stats.checked:,} fixtures[/red]",
            style="bold",
        )
        sys.exit(1)

    console.print(f"[green]✓[/green] All {stats.checked:,} fixtures match")
