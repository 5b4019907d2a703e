"""
RetailIQ Seed — Platform Assignment Rules

Maps a product to the marketplaces that carry it and to its base catalog
price. Pure: the same product always yields the same result.

Resolution order:
    1. listing entry for the product key (slug of the product name)
    2. category default (matched=False)
    3. unknown category → ValueError

Platform refs expand group names in order ("major", "budget", "fashion")
and drop duplicates, keeping the first occurrence.
"""

from __future__ import annotations

from typing import NamedTuple

import structlog

from retailiq_seed.catalog.loader import CatalogProduct, PricingCatalog
from retailiq_seed.config import Category, Platform
from retailiq_seed.utils.text import slugify

logger = structlog.get_logger(__name__)


class PlatformAssignment(NamedTuple):
    """Eligible platforms and base price for one product."""
    platforms: tuple[Platform, ...]
    base_price: int
    matched: bool  # False → category default applied


def product_key(name: str) -> str:
    """Normalized lookup key for a product name."""
    return slugify(name)


class PlatformRules:
    """
    Data-driven platform eligibility and base pricing.

    Usage:
        rules = PlatformRules(load_pricing_catalog())
        assignment = rules.assign(product)
    """

    def __init__(self, catalog: PricingCatalog):
        self._catalog = catalog

    def expand(self, refs: list[str]) -> tuple[Platform, ...]:
        """Expand group names and platform ids into an ordered, unique tuple."""
        seen: dict[Platform, None] = {}
        for ref in refs:
            group = self._catalog.platform_groups.get(ref)
            members = group if group is not None else [Platform(ref)]
            for platform in members:
                seen.setdefault(platform, None)
        return tuple(seen)

    def assign(self, product: CatalogProduct) -> PlatformAssignment:
        """
        Resolve platforms and base price for a product.

        Raises:
            ValueError: If the product's category has no pricing rule.
        """
        try:
            category = Category(product.category)
            rule = self._catalog.categories[category]
        except (ValueError, KeyError):
            raise ValueError(
                f"No pricing rule for category {product.category!r} "
                f"(product {product.name!r})"
            ) from None

        listing = self._catalog.listings.get(product_key(product.name))
        if listing is not None:
            return PlatformAssignment(
                platforms=self.expand(listing.platforms),
                base_price=listing.base_price,
                matched=True,
            )

        logger.warning(
            "platform_rules_category_fallback",
            product=product.name,
            category=category.value,
            default_price=rule.default_price,
        )
        return PlatformAssignment(
            platforms=self.expand(rule.platforms),
            base_price=rule.default_price,
            matched=False,
        )
