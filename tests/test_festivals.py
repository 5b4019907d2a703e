"""
Tests for engine/festivals.py — festival windows and discount lookup.

Covers:
- Realized discount range inside a window
- Zero discount outside every window
- Year End rolling into January
- Overlap resolution (highest peak wins)
- Constructor validation
"""

from __future__ import annotations

import random
from datetime import date, timedelta

import pytest

from retailiq_seed.engine.festivals import (
    ANNUAL_FESTIVALS,
    AnnualFestival,
    FestivalCalendar,
    FestivalPeriod,
)


def _calendar(start: date, end: date, seed: int = 3) -> FestivalCalendar:
    return FestivalCalendar.for_range(start, end, random.Random(seed))


class TestAnnualFestival:
    def test_in_year(self) -> None:
        diwali = next(f for f in ANNUAL_FESTIVALS if f.name == "Diwali")
        period = diwali.in_year(2026)
        assert period.start_date == date(2026, 10, 15)
        assert period.end_date == date(2026, 11, 5)

    def test_year_end_rolls_over(self) -> None:
        year_end = next(f for f in ANNUAL_FESTIVALS if f.name == "Year End")
        period = year_end.in_year(2025)
        assert period.start_date == date(2025, 12, 20)
        assert period.end_date == date(2026, 1, 2)

    def test_all_peaks_valid(self) -> None:
        assert all(0.0 < f.peak_discount < 1.0 for f in ANNUAL_FESTIVALS)


class TestDiscountFor:
    def test_diwali_discount_between_half_and_full_peak(self) -> None:
        calendar = _calendar(date(2026, 4, 19), date(2026, 10, 19))
        for _ in range(500):
            discount = calendar.discount_for(date(2026, 10, 18))
            assert 0.15 <= discount <= 0.30

    def test_window_bounds_inclusive(self) -> None:
        calendar = _calendar(date(2026, 4, 19), date(2026, 12, 31))
        assert calendar.discount_for(date(2026, 10, 15)) > 0
        assert calendar.discount_for(date(2026, 11, 5)) > 0
        assert calendar.discount_for(date(2026, 11, 6)) == 0.0

    def test_no_festival_means_zero(self) -> None:
        calendar = _calendar(date(2026, 4, 19), date(2026, 10, 19))
        assert calendar.discount_for(date(2026, 6, 10)) == 0.0
        assert calendar.period_for(date(2026, 6, 10)) is None

    def test_discount_redrawn_each_call(self) -> None:
        calendar = _calendar(date(2026, 4, 19), date(2026, 10, 19))
        draws = {calendar.discount_for(date(2026, 10, 20)) for _ in range(20)}
        assert len(draws) > 1

    def test_january_covered_by_previous_year_end(self) -> None:
        calendar = _calendar(date(2026, 1, 1), date(2026, 3, 1))
        period = calendar.period_for(date(2026, 1, 2))
        assert period is not None
        assert period.name == "Year End"

    def test_same_seed_same_discounts(self) -> None:
        days = [date(2026, 10, 15) + timedelta(days=n) for n in range(10)]
        first = _calendar(date(2026, 10, 1), date(2026, 10, 31), seed=11)
        second = _calendar(date(2026, 10, 1), date(2026, 10, 31), seed=11)
        assert [first.discount_for(d) for d in days] == [second.discount_for(d) for d in days]


class TestForRange:
    def test_only_overlapping_periods_kept(self) -> None:
        calendar = _calendar(date(2026, 4, 19), date(2026, 10, 19))
        names = [p.name for p in calendar.periods]
        assert "Republic Day" not in names
        assert "Black Friday" not in names
        assert {"Summer", "Prime Day", "Independence", "Onam", "Navratri", "Diwali"} <= set(names)

    def test_custom_festivals(self) -> None:
        festivals = [AnnualFestival("Flash", (6, 1), (6, 3), 0.40)]
        calendar = FestivalCalendar.for_range(
            date(2026, 5, 1), date(2026, 7, 1), random.Random(0), festivals=festivals
        )
        assert len(calendar.periods) == 1
        assert 0.20 <= calendar.discount_for(date(2026, 6, 2)) <= 0.40


class TestOverlap:
    def test_highest_peak_wins(self) -> None:
        periods = [
            FestivalPeriod("Small", date(2026, 5, 1), date(2026, 5, 10), 0.10),
            FestivalPeriod("Big", date(2026, 5, 5), date(2026, 5, 15), 0.40),
        ]
        calendar = FestivalCalendar(periods, random.Random(0))
        assert calendar.period_for(date(2026, 5, 7)).name == "Big"
        assert calendar.period_for(date(2026, 5, 2)).name == "Small"

    def test_independent_of_list_order(self) -> None:
        periods = [
            FestivalPeriod("Big", date(2026, 5, 5), date(2026, 5, 15), 0.40),
            FestivalPeriod("Small", date(2026, 5, 1), date(2026, 5, 10), 0.10),
        ]
        calendar = FestivalCalendar(periods, random.Random(0))
        assert calendar.period_for(date(2026, 5, 7)).name == "Big"

    def test_tie_keeps_first(self) -> None:
        periods = [
            FestivalPeriod("First", date(2026, 5, 1), date(2026, 5, 10), 0.20),
            FestivalPeriod("Second", date(2026, 5, 1), date(2026, 5, 10), 0.20),
        ]
        calendar = FestivalCalendar(periods, random.Random(0))
        assert calendar.period_for(date(2026, 5, 3)).name == "First"


class TestValidation:
    def test_end_before_start_raises(self) -> None:
        with pytest.raises(ValueError, match="end_date precedes start_date"):
            FestivalCalendar(
                [FestivalPeriod("Broken", date(2026, 5, 10), date(2026, 5, 1), 0.2)],
                random.Random(0),
            )

    @pytest.mark.parametrize("peak", [0.0, 1.0, -0.1, 1.5])
    def test_peak_out_of_range_raises(self, peak: float) -> None:
        with pytest.raises(ValueError, match="peak_discount"):
            FestivalCalendar(
                [FestivalPeriod("Broken", date(2026, 5, 1), date(2026, 5, 2), peak)],
                random.Random(0),
            )
