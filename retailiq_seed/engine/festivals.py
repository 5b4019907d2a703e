"""
RetailIQ Seed — Festival Calendar

Recurring Indian retail sale windows and the per-date discount lookup used by
the price trajectory generator.

    discount_for(date) = peak_discount × U(0.5, 1.0)   inside a window
                       = 0                              outside every window

The realized discount is redrawn on every call. Windows are defined as annual
month/day ranges and projected onto each year a history window touches; a
window whose end precedes its start (Year End) rolls into the next year.

Overlapping windows: the period with the highest peak discount wins (ties keep
calendar order), so the result does not depend on list order.
"""

from __future__ import annotations

import random
from datetime import date
from typing import Iterable, NamedTuple

import structlog

from retailiq_seed.config import settings

logger = structlog.get_logger(__name__)


class FestivalPeriod(NamedTuple):
    """A dated festival sale window (inclusive bounds)."""
    name: str
    start_date: date
    end_date: date
    peak_discount: float

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


class AnnualFestival(NamedTuple):
    """A festival window expressed as (month, day) bounds that recur yearly."""
    name: str
    start: tuple[int, int]
    end: tuple[int, int]
    peak_discount: float

    def in_year(self, year: int) -> FestivalPeriod:
        """Occurrence starting in ``year``."""
        start = date(year, *self.start)
        end_year = year + 1 if self.end < self.start else year
        return FestivalPeriod(self.name, start, date(end_year, *self.end), self.peak_discount)


ANNUAL_FESTIVALS: tuple[AnnualFestival, ...] = (
    AnnualFestival("Republic Day", (1, 20), (1, 28), 0.15),
    AnnualFestival("Valentine", (2, 10), (2, 14), 0.10),
    AnnualFestival("Holi", (3, 20), (3, 26), 0.12),
    AnnualFestival("Summer", (5, 1), (5, 15), 0.18),
    AnnualFestival("Prime Day", (7, 15), (7, 16), 0.25),
    AnnualFestival("Independence", (8, 8), (8, 16), 0.20),
    AnnualFestival("Onam", (8, 25), (9, 5), 0.15),
    AnnualFestival("Navratri", (10, 1), (10, 10), 0.18),
    AnnualFestival("Diwali", (10, 15), (11, 5), 0.30),
    AnnualFestival("Black Friday", (11, 24), (11, 30), 0.25),
    AnnualFestival("Year End", (12, 20), (1, 2), 0.22),
)


class FestivalCalendar:
    """
    Lookup of active festival discounts by date.

    Args:
        periods: Dated festival windows.
        rng: Seeded random generator used to realize discounts.
        discount_floor: Lower fraction of the peak a realized discount may take.

    Raises:
        ValueError: If a period ends before it starts or its peak is not in (0, 1).
    """

    def __init__(
        self,
        periods: Iterable[FestivalPeriod],
        rng: random.Random,
        discount_floor: float | None = None,
    ):
        self._periods: tuple[FestivalPeriod, ...] = tuple(periods)
        self._rng = rng
        self._floor = settings.FESTIVAL_DISCOUNT_FLOOR if discount_floor is None else discount_floor

        for period in self._periods:
            if period.end_date < period.start_date:
                raise ValueError(f"{period.name}: end_date precedes start_date")
            if not 0.0 < period.peak_discount < 1.0:
                raise ValueError(f"{period.name}: peak_discount must be in (0, 1)")

    @classmethod
    def for_range(
        cls,
        start: date,
        end: date,
        rng: random.Random,
        festivals: Iterable[AnnualFestival] = ANNUAL_FESTIVALS,
    ) -> FestivalCalendar:
        """
        Project annual festivals onto every year overlapping [start, end].

        The year before ``start`` is included so that windows spanning
        New Year are covered at the left edge.
        """
        festivals = tuple(festivals)
        periods = [
            festival.in_year(year)
            for year in range(start.year - 1, end.year + 1)
            for festival in festivals
        ]
        periods = [p for p in periods if p.end_date >= start and p.start_date <= end]

        logger.debug(
            "festival_calendar_built",
            start=start.isoformat(),
            end=end.isoformat(),
            periods=len(periods),
        )
        return cls(periods, rng)

    @property
    def periods(self) -> tuple[FestivalPeriod, ...]:
        return self._periods

    def period_for(self, day: date) -> FestivalPeriod | None:
        """Active period on ``day``; the highest peak discount wins on overlap."""
        best: FestivalPeriod | None = None
        for period in self._periods:
            if period.contains(day) and (best is None or period.peak_discount > best.peak_discount):
                best = period
        return best

    def discount_for(self, day: date) -> float:
        """Realized festival discount fraction for ``day`` (0.0 when none)."""
        period = self.period_for(day)
        if period is None:
            return 0.0
        return period.peak_discount * self._rng.uniform(self._floor, 1.0)
