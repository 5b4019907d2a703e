"""
RetailIQ Seed — Seeding Orchestrator

Runs the full seed in strict dependency order:

    0. clear   price_history → platform_prices → products
               → festivals → promo_codes → subscription_plans
    1. products
    2. platform prices
    3. price history          (streamed through the BatchPersister)
    4. festivals              (static reference data)
    5. plans + promo codes    (static reference data)

There is no cross-stage transaction: a failing stage is logged and re-raised,
and whatever earlier stages (or earlier history batches) wrote stays in place.
"""

from __future__ import annotations

import random
import time
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Callable, NamedTuple, TypeVar

import structlog
from sqlalchemy import delete, insert
from sqlalchemy.orm import Session, sessionmaker

from retailiq_seed.catalog.loader import CatalogProduct, load_catalog, load_pricing_catalog
from retailiq_seed.config import settings
from retailiq_seed.engine.festivals import FestivalCalendar
from retailiq_seed.engine.platform_pricing import PlatformListing, PlatformPriceSynthesizer
from retailiq_seed.engine.platform_rules import PlatformRules
from retailiq_seed.engine.trajectory import PriceTrajectoryGenerator, months_before
from retailiq_seed.models import (
    Festival,
    PlatformPrice,
    PriceHistory,
    Product,
    PromoCode,
    SubscriptionPlan,
)
from retailiq_seed.pipeline.persister import BatchPersister
from retailiq_seed.pipeline.reference_data import (
    build_festival_rows,
    build_plan_rows,
    build_promo_rows,
)

logger = structlog.get_logger(__name__)

T = TypeVar("T")

# Children before parents
CLEAR_ORDER = (PriceHistory, PlatformPrice, Product, Festival, PromoCode, SubscriptionPlan)


class StageResult(NamedTuple):
    name: str
    count: int
    elapsed_seconds: float


class SeedSummary(NamedTuple):
    """Per-stage counts and timings of a completed run."""
    seed: int
    stages: list[StageResult]
    duration_seconds: float

    @property
    def total_records(self) -> int:
        return sum(stage.count for stage in self.stages)

    def counts(self) -> dict[str, int]:
        return {stage.name: stage.count for stage in self.stages}

    def render(self) -> str:
        lines = [
            "=================================",
            "Seeding Summary",
            "=================================",
        ]
        for stage in self.stages:
            lines.append(
                f"{stage.name + ':':<18}{stage.count:>10,}  ({stage.elapsed_seconds:.2f}s)"
            )
        lines += [
            "---------------------------------",
            f"{'Total Records:':<18}{self.total_records:>10,}",
            f"{'Duration:':<18}{self.duration_seconds:>9.2f}s",
            f"{'Random Seed:':<18}{self.seed:>10}",
            "=================================",
        ]
        return "\n".join(lines)


class SeedingOrchestrator:
    """
    Sequences catalog → platform prices → history → reference data.

    Args:
        session_factory: Sync SQLAlchemy session factory bound to the target store.
        seed: Seed for the run's random generator (logged for reproducibility).
        catalog_path / pricing_path: Catalog file overrides.
        batch_size: History batch size (default from settings).
        months: History depth (default from settings).
        today: Last history day (default: current UTC date).
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        seed: int,
        catalog_path: Path | None = None,
        pricing_path: Path | None = None,
        batch_size: int | None = None,
        months: int | None = None,
        today: date | None = None,
    ):
        self._session_factory = session_factory
        self.seed = seed
        self._rng = random.Random(seed)
        self._catalog_path = catalog_path
        self._pricing_path = pricing_path
        self._batch_size = batch_size
        self._months = months
        self._now = datetime.now(timezone.utc)
        self._today = today or self._now.date()
        self._stages: list[StageResult] = []

    # -----------------------------------------------------------------------
    # Stages
    # -----------------------------------------------------------------------

    def clear_data(self) -> int:
        """Delete every row this seeder owns, children first, in one transaction."""
        deleted = 0
        with self._session_factory.begin() as session:
            for model in CLEAR_ORDER:
                result = session.execute(delete(model))
                deleted += result.rowcount or 0
        logger.info("seed_data_cleared", rows=deleted)
        return deleted

    def seed_products(self) -> list[CatalogProduct]:
        products = load_catalog(self._catalog_path)
        rows = [
            {"id": p.id, "product_name": p.name, "brand": p.brand, "category": p.category}
            for p in products
        ]
        with self._session_factory.begin() as session:
            if rows:
                session.execute(insert(Product), rows)
        return products

    def seed_platform_prices(self, products: list[CatalogProduct]) -> list[PlatformListing]:
        rules = PlatformRules(load_pricing_catalog(self._pricing_path))
        synthesizer = PlatformPriceSynthesizer(self._rng, rules, now=self._now)
        listings = synthesizer.generate(products)
        with self._session_factory.begin() as session:
            if listings:
                session.execute(insert(PlatformPrice), [listing.as_row() for listing in listings])
        return listings

    def seed_price_history(self, listings: list[PlatformListing]) -> int:
        months = self._months or settings.HISTORY_MONTHS
        calendar = FestivalCalendar.for_range(
            months_before(self._today, months), self._today, self._rng
        )
        generator = PriceTrajectoryGenerator(self._rng, calendar, today=self._today, months=months)

        with BatchPersister(
            self._session_factory, PriceHistory.__table__, batch_size=self._batch_size
        ) as persister:
            persister.add_all(generator.generate(listings))
        return persister.committed

    def seed_festivals(self) -> int:
        rows = build_festival_rows(self._today)
        with self._session_factory.begin() as session:
            session.execute(insert(Festival), rows)
        return len(rows)

    def seed_plans(self) -> int:
        rows = build_plan_rows()
        with self._session_factory.begin() as session:
            session.execute(insert(SubscriptionPlan), rows)
        return len(rows)

    def seed_promo_codes(self) -> int:
        rows = build_promo_rows()
        with self._session_factory.begin() as session:
            session.execute(insert(PromoCode), rows)
        return len(rows)

    # -----------------------------------------------------------------------
    # Run
    # -----------------------------------------------------------------------

    def _stage(self, name: str, fn: Callable[[], T], count: Callable[[T], int] = len) -> T:
        logger.info("seed_stage_start", stage=name)
        started = time.perf_counter()
        try:
            result = fn()
        except Exception as e:
            logger.error(
                "seed_stage_failed",
                stage=name,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise
        elapsed = time.perf_counter() - started
        n = count(result)
        self._stages.append(StageResult(name, n, elapsed))
        logger.info("seed_stage_complete", stage=name, count=n, elapsed_seconds=round(elapsed, 3))
        return result

    def run(self) -> SeedSummary:
        """
        Clear and reseed everything.

        Returns:
            SeedSummary with per-stage counts and timings.

        Raises:
            Exception: Whatever the failing stage raised, after logging it.
        """
        logger.info("seed_run_start", seed=self.seed, today=self._today.isoformat())
        started = time.perf_counter()
        self._stages = []

        self.clear_data()
        products = self._stage("Products", self.seed_products)
        listings = self._stage("Platform Prices", lambda: self.seed_platform_prices(products))
        self._stage("Price History", lambda: self.seed_price_history(listings), count=int)
        self._stage("Festivals", self.seed_festivals, count=int)
        self._stage("Plans", self.seed_plans, count=int)
        self._stage("Promo Codes", self.seed_promo_codes, count=int)

        summary = SeedSummary(
            seed=self.seed,
            stages=list(self._stages),
            duration_seconds=time.perf_counter() - started,
        )
        logger.info(
            "seed_run_complete",
            seed=self.seed,
            total_records=summary.total_records,
            duration_seconds=round(summary.duration_seconds, 3),
        )
        return summary
