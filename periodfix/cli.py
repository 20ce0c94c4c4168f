"""CLI entry point for periodfix."""

import typer

from periodfix.commands.admin import init_command
from periodfix.commands.fixtures import generate_command, verify_command
from periodfix.commands.period import between_command

app = typer.Typer(
    name="periodfix",
    help="ISO-8601 date periods and exhaustive golden fixtures",
    add_completion=False,
)


@app.callback()
def main() -> None:
    """ISO-8601 date periods and exhaustive golden fixtures."""
    pass


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Initialize periodfix configuration."""
    init_command(force)


@app.command(name="between")
def between(
    start: str,
    end: str,
    convention: str = typer.Option("clamped", "--convention", "-c", help="'clamped' or 'calendar-day'"),
) -> None:
    """Show the period between two dates (YYYY-MM-DD)."""
    between_command(start, end, convention)


@app.command(name="generate")
def generate(
    start: str = typer.Option(None, "--start", help="First date of the range (default from config)"),
    end: str = typer.Option(None, "--end", help="Exclusive end of the range (default from config)"),
    convention: str = typer.Option(None, "--convention", "-c", help="'clamped' or 'calendar-day'"),
    output: str = typer.Option(None, "--output", "-o", help="Fixture file (default: stdout)"),
) -> None:
    """Generate fixture lines for every pair of dates in a range."""
    generate_command(start, end, convention, output)


@app.command(name="verify")
def verify(
    fixture_file: str,
    convention: str = typer.Option(None, "--convention", "-c", help="'clamped' or 'calendar-day'"),
    limit: int = typer.Option(20, min=0, help="Maximum problem lines to show"),
) -> None:
    """Check every line of a fixture file against the period calculator."""
    verify_command(fixture_file, convention, limit)


if __name__ == "__main__":
    app()
