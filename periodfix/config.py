"""Configuration file management for periodfix."""

import os
import tomllib
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any

import tomli_w

from periodfix.dates import parse_date
from periodfix.domain.fixtures import DEFAULT_RANGE_END, DEFAULT_RANGE_START
from periodfix.domain.models import PeriodConvention


@dataclass(frozen=True)
class FixtureSettings:
    """Immutable defaults for fixture generation."""

    start: date = DEFAULT_RANGE_START
    end: date = DEFAULT_RANGE_END
    convention: PeriodConvention = PeriodConvention.CLAMPED


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "periodfix" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    default_config: dict[str, Any] = {
        "fixtures": {
            "start": DEFAULT_RANGE_START.isoformat(),
            "end": DEFAULT_RANGE_END.isoformat(),
            "convention": PeriodConvention.CLAMPED.value,
        },
    }

    save_config(default_config, config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def parse_convention(value: str) -> PeriodConvention:
    """Parse a convention name.

    Raises:
        ValueError: If the name is not a known convention.
    """
    try:
        return PeriodConvention(value)
    except ValueError as e:
        known = ", ".join(c.value for c in PeriodConvention)
        raise ValueError(f"Unknown convention '{value}' (expected one of: {known})") from e


def _config_date(value: Any) -> date:
    # TOML has a native date type, quoted strings are accepted too
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_date(value)
    raise ValueError(f"Invalid date in config: {value!r}")


def load_fixture_settings(config_path: Path | None = None) -> FixtureSettings:
    """Load fixture generation defaults.

    A missing config file, or missing keys, fall back to the built-in range.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        FixtureSettings with config values applied.

    Raises:
        ValueError: If a configured date or convention is invalid.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        return FixtureSettings()

    fixtures = config.get("fixtures", {})
    if not isinstance(fixtures, dict):
        raise ValueError("Config section [fixtures] must be a table")

    defaults = FixtureSettings()
    start = _config_date(fixtures["start"]) if "start" in fixtures else defaults.start
    end = _config_date(fixtures["end"]) if "end" in fixtures else defaults.end
    convention = parse_convention(fixtures["convention"]) if "convention" in fixtures else defaults.convention

    return FixtureSettings(start=start, end=end, convention=convention)
