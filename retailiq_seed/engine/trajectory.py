"""
RetailIQ Seed — Price Trajectory Generator

Synthesizes one price observation per calendar day for each platform listing,
walking forward from ``today − HISTORY_MONTHS`` to ``today`` inclusive.

Algorithm (per series, C = listing current_price):
    starting_price = C × U(1.05, 1.20)
    volatility     = U(0.015, 0.030)
    trend          = −0.002

    for each day:
        price    ← price × (1 + U(−volatility, +volatility) + trend)
        discount ← calendar.discount_for(day)
        observed ← price × (1 − discount)
        observed ← clamp(observed, 0.70 × C, 1.10 × starting_price)
        emit round(observed) @ day 12:00 UTC

The walk state ``price`` is never clamped or rounded: festival discounts and
the clamp shape only the emitted observation. Rounded prices are re-bounded to
whole rupees inside the clamp band so the bounds hold after rounding.
"""

from __future__ import annotations

import calendar
import math
import random
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Iterable, Iterator, NamedTuple

import structlog

from retailiq_seed.config import Platform, settings
from retailiq_seed.engine.festivals import FestivalCalendar
from retailiq_seed.engine.platform_pricing import PlatformListing
from retailiq_seed.utils.text import to_rupees

logger = structlog.get_logger(__name__)


class PriceHistoryRecord(NamedTuple):
    """One price_history row."""
    product_id: str
    platform: Platform
    price: int
    recorded_at: datetime

    def as_row(self) -> dict[str, Any]:
        row = self._asdict()
        row["platform"] = self.platform.value
        return row


class SeriesParams(NamedTuple):
    """Per-series random walk parameters, drawn once per listing."""
    starting_price: float
    volatility: float
    trend: float


def months_before(day: date, months: int) -> date:
    """
    Same day-of-month ``months`` earlier, clamped to the target month's length.

    2026-08-31 minus 6 months → 2026-02-28.
    """
    total = day.year * 12 + (day.month - 1) - months
    year, month_index = divmod(total, 12)
    month = month_index + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def history_dates(today: date, months: int) -> list[date]:
    """Every calendar day in [today − months, today], ascending."""
    start = months_before(today, months)
    return [start + timedelta(days=n) for n in range((today - start).days + 1)]


class PriceTrajectoryGenerator:
    """
    Bounded random walk with festival discounts.

    Args:
        rng: Seeded random generator shared by the run.
        festivals: Festival calendar consulted once per day.
        today: Last day of every series (default: current UTC date).
        months: History depth (default: settings.HISTORY_MONTHS).
    """

    def __init__(
        self,
        rng: random.Random,
        festivals: FestivalCalendar,
        today: date | None = None,
        months: int | None = None,
    ):
        self._rng = rng
        self._festivals = festivals
        self.today = today or datetime.now(timezone.utc).date()
        self.months = months or settings.HISTORY_MONTHS
        self.dates = history_dates(self.today, self.months)
        self._record_time = time(settings.HISTORY_RECORD_HOUR_UTC, tzinfo=timezone.utc)

    @property
    def start_date(self) -> date:
        return self.dates[0]

    def draw_params(self, current_price: int) -> SeriesParams:
        """Draw the starting price and volatility for a new series."""
        starting_price = current_price * self._rng.uniform(*settings.START_PREMIUM_RANGE)
        volatility = self._rng.uniform(*settings.VOLATILITY_RANGE)
        return SeriesParams(starting_price, volatility, settings.DAILY_TREND)

    def walk(
        self,
        product_id: str,
        platform: Platform,
        current_price: int,
        params: SeriesParams | None = None,
    ) -> Iterator[PriceHistoryRecord]:
        """
        Yield one record per day for a single series, earliest first.

        Raises:
            ValueError: If current_price is not positive.
        """
        if current_price <= 0:
            raise ValueError("current_price must be positive")

        if params is None:
            params = self.draw_params(current_price)

        floor = current_price * settings.PRICE_FLOOR_RATIO
        ceiling = params.starting_price * settings.PRICE_CEILING_RATIO
        low, high = math.ceil(floor), math.floor(ceiling)

        price = params.starting_price
        for day in self.dates:
            daily_change = self._rng.uniform(-params.volatility, params.volatility)
            price = price * (1 + daily_change + params.trend)

            festival_discount = self._festivals.discount_for(day)
            observed = price * (1 - festival_discount) if festival_discount > 0 else price
            observed = max(floor, min(ceiling, observed))

            yield PriceHistoryRecord(
                product_id=product_id,
                platform=platform,
                price=min(high, max(low, to_rupees(observed))),
                recorded_at=datetime.combine(day, self._record_time),
            )

    def generate(self, listings: Iterable[PlatformListing]) -> Iterator[PriceHistoryRecord]:
        """Walk every listing in order; records are produced lazily."""
        series = 0
        for listing in listings:
            yield from self.walk(listing.product_id, listing.platform, listing.current_price)
            series += 1

        logger.info(
            "price_history_generated",
            series=series,
            days_per_series=len(self.dates),
            start_date=self.start_date.isoformat(),
            end_date=self.today.isoformat(),
        )
