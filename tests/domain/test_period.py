"""Tests for periodfix.domain.period pure functions."""

from datetime import date

import pytest
from dateutil.relativedelta import relativedelta

from periodfix.dates import iter_days
from periodfix.domain.models import PeriodConvention
from periodfix.domain.period import Period, apply_period, between, parse_period, round_trips

# Dense windows around a leap February and a common February
WINDOWS = [
    (date(1999, 12, 1), date(2000, 4, 1)),
    (date(2000, 12, 1), date(2001, 4, 1)),
]

# Month-end and leap-day starts where clamping matters most
ANCHORS = [
    date(2000, 1, 31),
    date(2000, 2, 29),
    date(1999, 3, 31),
    date(1999, 8, 31),
    date(1999, 12, 31),
]


def _window_pairs() -> list[tuple[date, date]]:
    pairs = []
    for window_start, window_end in WINDOWS:
        for start in iter_days(window_start, window_end):
            for end in iter_days(window_start, window_end):
                pairs.append((start, end))
    return pairs


def _anchor_pairs() -> list[tuple[date, date]]:
    return [(anchor, end) for anchor in ANCHORS for end in iter_days(anchor, date(2005, 1, 1))]


class TestPeriod:
    """Tests for the Period value."""

    def test_isoformat_all_components(self) -> None:
        """Should render every non-zero component in Y, M, D order."""
        assert Period(1, 2, 3).isoformat() == "P1Y2M3D"

    def test_isoformat_omits_zero_components(self) -> None:
        """Should leave out zero components."""
        assert Period(years=1).isoformat() == "P1Y"
        assert Period(months=1, days=1).isoformat() == "P1M1D"
        assert Period(years=2, days=7).isoformat() == "P2Y7D"

    def test_isoformat_zero_period(self) -> None:
        """Should render the zero period as P0D."""
        assert Period().isoformat() == "P0D"

    def test_isoformat_negative_period(self) -> None:
        """Should prefix the whole token with a single minus sign."""
        assert Period(-1, -2, -3).isoformat() == "-P1Y2M3D"
        assert Period(days=-5).isoformat() == "-P5D"

    def test_str_matches_isoformat(self) -> None:
        """Should use the ISO text as string form."""
        assert str(Period(months=11, days=30)) == "P11M30D"

    def test_mixed_signs_raise_valueerror(self) -> None:
        """Should reject components with different signs."""
        with pytest.raises(ValueError, match="share one sign"):
            Period(years=1, months=-2)

    def test_negated(self) -> None:
        """Should negate every component together."""
        assert Period(1, 2, 3).negated() == Period(-1, -2, -3)
        assert Period().negated() == Period()

    def test_sign_flags(self) -> None:
        """Should report the zero period as non-negative."""
        assert not Period().is_negative
        assert Period().is_zero
        assert Period(days=-1).is_negative
        assert not Period(years=3).is_negative

    def test_total_months(self) -> None:
        """Should fold years into months."""
        assert Period(years=2, months=3).total_months == 27
        assert Period(years=-1, months=-1).total_months == -13


class TestParsePeriod:
    """Tests for parse_period."""

    def test_parses_full_period(self) -> None:
        """Should parse all three components."""
        assert parse_period("P1Y2M3D") == Period(1, 2, 3)

    def test_parses_partial_periods(self) -> None:
        """Should default omitted components to zero."""
        assert parse_period("P1M") == Period(months=1)
        assert parse_period("P11M30D") == Period(months=11, days=30)
        assert parse_period("P0D") == Period()

    def test_parses_negative_period(self) -> None:
        """Should apply a leading minus to every component."""
        assert parse_period("-P1Y1M1D") == Period(-1, -1, -1)

    @pytest.mark.parametrize("text", ["P0Y1M", "P1M0D", "-P0D", "P01M", "P0Y0M0D", "P00D", "-P0Y1D"])
    def test_non_canonical_text_raises_valueerror(self, text: str) -> None:
        """Should reject zero components, signed zeros and leading zeros."""
        with pytest.raises(ValueError, match="expected"):
            parse_period(text)

    @pytest.mark.parametrize("text", ["", "P", "-P", "P1W", "P-1D", "1Y2M", "p1d", "P1D2M", "P1Y ", "PT1H"])
    def test_invalid_text_raises_valueerror(self, text: str) -> None:
        """Should raise ValueError for anything but a Y/M/D period."""
        with pytest.raises(ValueError, match="Invalid period"):
            parse_period(text)


class TestApplyPeriod:
    """Tests for apply_period and round_trips."""

    def test_single_clamp_for_years_and_months(self) -> None:
        """Should move years and months together and clamp the day once."""
        assert apply_period(date(2000, 2, 29), Period(years=1, months=1)) == date(2001, 3, 29)

    def test_days_added_after_month_step(self) -> None:
        """Should add days after the clamped month step."""
        assert apply_period(date(2000, 1, 31), Period(months=1, days=1)) == date(2000, 3, 1)

    def test_round_trip_for_negative_period_uses_swapped_pair(self) -> None:
        """Should check a negative period from end back to start."""
        assert round_trips(date(2001, 3, 1), date(2000, 1, 31), Period(-1, -1, -1))
        assert not round_trips(date(2001, 3, 1), date(2000, 1, 31), Period(-1, -1, -2))


class TestBetween:
    """Tests for between with the default clamped convention."""

    def test_equal_dates(self) -> None:
        """Should return P0D for identical dates."""
        assert between(date(1999, 1, 1), date(1999, 1, 1)).isoformat() == "P0D"

    def test_one_month(self) -> None:
        """Should count a whole month between the same day of consecutive months."""
        assert between(date(1999, 1, 1), date(1999, 2, 1)).isoformat() == "P1M"

    def test_same_month(self) -> None:
        """Should return only days within a month."""
        assert between(date(1999, 3, 5), date(1999, 3, 20)) == Period(days=15)

    def test_end_of_month_clamp_then_days(self) -> None:
        """Should clamp Jan 31 to Feb 29 and add a day to reach Mar 1."""
        assert between(date(2000, 1, 31), date(2000, 3, 1)).isoformat() == "P1M1D"

    def test_negative_is_negation_of_swapped(self) -> None:
        """Should negate the decomposition of the swapped pair."""
        assert between(date(2001, 3, 1), date(2000, 1, 31)).isoformat() == "-P1Y1M1D"

    def test_leap_day_anniversary_in_common_year(self) -> None:
        """Should count Feb 28 as the anniversary of Feb 29 in a common year."""
        assert between(date(2000, 2, 29), date(2001, 2, 28)).isoformat() == "P1Y"

    def test_leap_day_before_next_leap_anniversary(self) -> None:
        """Should not count the fourth year until Feb 29 is reached again."""
        assert between(date(2000, 2, 29), date(2004, 2, 28)).isoformat() == "P3Y11M30D"
        assert between(date(2000, 2, 29), date(2004, 2, 29)).isoformat() == "P4Y"

    def test_leap_day_start_into_march(self) -> None:
        """Should count from the clamped anniversary into March."""
        assert between(date(2000, 2, 29), date(2001, 3, 1)).isoformat() == "P1Y1D"

    def test_clamped_month_end_counts_as_month(self) -> None:
        """Should count Jan 31 to Feb 28 as a whole month in a common year."""
        assert between(date(2001, 1, 31), date(2001, 2, 28)).isoformat() == "P1M"
        assert between(date(1999, 5, 31), date(1999, 6, 30)).isoformat() == "P1M"

    def test_clamp_overshoot_in_leap_year(self) -> None:
        """Should not count a month when the clamped step lands after the end."""
        assert between(date(2000, 1, 31), date(2000, 2, 28)).isoformat() == "P28D"

    def test_negative_month_end(self) -> None:
        """Should negate clamped decompositions without mixing signs."""
        assert between(date(2001, 2, 28), date(2001, 1, 31)).isoformat() == "-P1M"
        assert between(date(2001, 3, 1), date(2001, 1, 30)).isoformat() == "-P1M1D"

    def test_multi_year(self) -> None:
        """Should fold whole twelve-month blocks into years."""
        assert between(date(1999, 1, 1), date(2001, 12, 31)).isoformat() == "P2Y11M30D"


class TestBetweenCalendarDay:
    """Tests for between with the calendar-day convention."""

    def test_leap_day_to_common_year_feb_28(self) -> None:
        """Should not count the year until the day-of-month is reached."""
        result = between(date(2000, 2, 29), date(2001, 2, 28), PeriodConvention.CALENDAR_DAY)
        assert result.isoformat() == "P11M30D"

    def test_month_end_to_shorter_month_end(self) -> None:
        """Should count only days when the end day is below the start day."""
        result = between(date(2001, 1, 31), date(2001, 2, 28), PeriodConvention.CALENDAR_DAY)
        assert result.isoformat() == "P28D"

    def test_agrees_on_clamp_then_days(self) -> None:
        """Should match the clamped convention when days remain after the clamp."""
        result = between(date(2000, 1, 31), date(2000, 3, 1), PeriodConvention.CALENDAR_DAY)
        assert result.isoformat() == "P1M1D"

    def test_negative_is_negation_of_swapped(self) -> None:
        """Should negate the swapped decomposition."""
        result = between(date(2001, 3, 1), date(2000, 1, 31), PeriodConvention.CALENDAR_DAY)
        assert result.isoformat() == "-P1Y1M1D"


class TestBetweenLaws:
    """Exhaustive checks of the period laws over dense date windows."""

    @pytest.mark.parametrize("convention", list(PeriodConvention))
    def test_round_trip(self, convention: PeriodConvention) -> None:
        """Should reproduce the end date by applying the period to the start."""
        for start, end in _window_pairs() + _anchor_pairs():
            assert round_trips(start, end, between(start, end, convention)), (start, end)

    @pytest.mark.parametrize("convention", list(PeriodConvention))
    def test_symmetry(self, convention: PeriodConvention) -> None:
        """Should return the exact negation when start and end are swapped."""
        for start, end in _window_pairs():
            assert between(end, start, convention) == between(start, end, convention).negated()

    @pytest.mark.parametrize("convention", list(PeriodConvention))
    def test_identity(self, convention: PeriodConvention) -> None:
        """Should return P0D for every date compared with itself."""
        for day in iter_days(date(1999, 1, 1), date(2002, 1, 1)):
            assert between(day, day, convention) == Period()

    @pytest.mark.parametrize("convention", list(PeriodConvention))
    def test_bounded_components(self, convention: PeriodConvention) -> None:
        """Should keep months in 0-11 and days below 31."""
        for start, end in _window_pairs() + _anchor_pairs():
            period = between(start, end, convention)
            magnitude = period.negated() if period.is_negative else period
            assert 0 <= magnitude.months <= 11
            assert 0 <= magnitude.days <= 30
            assert magnitude.years >= 0

    def test_ordering_monotonicity(self) -> None:
        """Should never decrease as the end date advances one day."""
        for start in [date(1999, 1, 1), *ANCHORS]:
            previous = (0, 0, 0)
            for end in iter_days(start, date(2005, 1, 1)):
                period = between(start, end)
                current = (period.years, period.months, period.days)
                assert current >= previous, (start, end)
                previous = current

    def test_maximal_decomposition(self) -> None:
        """Should not leave room for one more whole month."""
        for start, end in _window_pairs() + _anchor_pairs():
            if end < start:
                continue
            period = between(start, end)
            assert apply_period(start, Period(years=period.years, months=period.months + 1)) > end

    def test_agrees_with_relativedelta(self) -> None:
        """Should match dateutil's relativedelta for forward pairs."""
        for start, end in _window_pairs() + _anchor_pairs():
            if end < start:
                continue
            expected = relativedelta(end, start)
            period = between(start, end)
            assert (period.years, period.months, period.days) == (expected.years, expected.months, expected.days)
