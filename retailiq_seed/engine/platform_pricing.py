"""
RetailIQ Seed — Platform Price Synthesizer

Derives one marketplace listing per (product, eligible platform):

    original_price = round(base_price × U(price band))
    current_price  = round(original_price × U(discount band))   # band < 1.0

    availability   : roll > 0.95 → out_of_stock, > 0.85 → limited, else in_stock
    rating         : U(3.5, 4.9), 1 dp
    review_count   : premium (base_price > 50000) → [500, 50000), else [50, 5000)

All randomness comes from the injected ``random.Random``.
"""

from __future__ import annotations

import random
from datetime import datetime, timezone
from typing import Any, Iterable, NamedTuple

import structlog

from retailiq_seed.catalog.loader import CatalogProduct
from retailiq_seed.config import Availability, Platform, settings
from retailiq_seed.engine.platform_rules import PlatformRules
from retailiq_seed.utils.text import slugify, to_rupees

logger = structlog.get_logger(__name__)


class PlatformListing(NamedTuple):
    """One platform_prices row."""
    product_id: str
    platform: Platform
    current_price: int
    original_price: int
    availability: Availability
    rating: float
    review_count: int
    product_url: str
    affiliate_url: str
    last_checked: datetime

    def as_row(self) -> dict[str, Any]:
        row = self._asdict()
        row["platform"] = self.platform.value
        row["availability"] = self.availability.value
        return row


def listing_urls(product_name: str, platform: Platform) -> tuple[str, str]:
    """Deterministic (product_url, affiliate_url) for a listing."""
    slug = slugify(product_name)
    product_url = settings.PRODUCT_URL_TEMPLATE.format(platform=platform.value, slug=slug)
    affiliate_url = settings.AFFILIATE_URL_TEMPLATE.format(
        platform=platform.value, slug=slug, ref=settings.AFFILIATE_REF
    )
    return product_url, affiliate_url


class PlatformPriceSynthesizer:
    """
    Synthesizes platform listings for catalog products.

    Args:
        rng: Seeded random generator shared by the run.
        rules: Platform assignment rules.
        now: Timestamp stamped into last_checked (default: current UTC time).
    """

    def __init__(
        self,
        rng: random.Random,
        rules: PlatformRules,
        now: datetime | None = None,
    ):
        self._rng = rng
        self._rules = rules
        self._now = now or datetime.now(timezone.utc)

    def _availability(self) -> Availability:
        roll = self._rng.random()
        if roll > settings.AVAILABILITY_OUT_OF_STOCK_ROLL:
            return Availability.OUT_OF_STOCK
        if roll > settings.AVAILABILITY_LIMITED_ROLL:
            return Availability.LIMITED
        return Availability.IN_STOCK

    def _review_count(self, base_price: int) -> int:
        if base_price > settings.PREMIUM_PRICE_THRESHOLD:
            low, high = settings.PREMIUM_REVIEW_RANGE
        else:
            low, high = settings.STANDARD_REVIEW_RANGE
        return low + int(self._rng.random() * (high - low))

    def synthesize(
        self,
        product: CatalogProduct,
        platform: Platform,
        base_price: int,
    ) -> PlatformListing:
        """
        Build a single listing.

        Raises:
            ValueError: If base_price is not positive.
        """
        if base_price <= 0:
            raise ValueError("base_price must be positive")

        price_low, price_high = settings.PLATFORM_PRICE_BANDS[platform.value]
        discount_low, discount_high = settings.PLATFORM_DISCOUNT_BANDS[platform.value]

        original_price = to_rupees(base_price * self._rng.uniform(price_low, price_high))
        current_price = to_rupees(original_price * self._rng.uniform(discount_low, discount_high))
        current_price = min(current_price, original_price)

        availability = self._availability()
        rating = round(self._rng.uniform(settings.RATING_MIN, settings.RATING_MAX), 1)
        review_count = self._review_count(base_price)
        product_url, affiliate_url = listing_urls(product.name, platform)

        return PlatformListing(
            product_id=product.id,
            platform=platform,
            current_price=current_price,
            original_price=original_price,
            availability=availability,
            rating=rating,
            review_count=review_count,
            product_url=product_url,
            affiliate_url=affiliate_url,
            last_checked=self._now,
        )

    def synthesize_product(self, product: CatalogProduct) -> list[PlatformListing]:
        """All listings for one product, in platform-assignment order."""
        assignment = self._rules.assign(product)
        return [
            self.synthesize(product, platform, assignment.base_price)
            for platform in assignment.platforms
        ]

    def generate(self, products: Iterable[CatalogProduct]) -> list[PlatformListing]:
        """Listings for every product in the catalog."""
        listings: list[PlatformListing] = []
        for product in products:
            listings.extend(self.synthesize_product(product))

        logger.info("platform_prices_generated", listings=len(listings))
        return listings
