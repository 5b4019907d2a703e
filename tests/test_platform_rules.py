"""
Tests for engine/platform_rules.py — platform eligibility and base price.

Covers:
- Listing lookup by slugged product name
- Group expansion order and de-duplication
- Category fallback (matched=False) for unlisted products
- Unknown category → ValueError
"""

from __future__ import annotations

import pytest

from retailiq_seed.catalog.loader import CatalogProduct, PricingCatalog
from retailiq_seed.config import Platform
from retailiq_seed.engine.platform_rules import PlatformRules, product_key


class TestProductKey:
    def test_punctuation_collapsed(self) -> None:
        assert product_key("Nothing Phone (2a)") == "nothing-phone-2a"

    def test_case_insensitive(self) -> None:
        assert product_key("Apple iPhone 15 Pro Max") == product_key("APPLE IPHONE 15 PRO MAX")


class TestExpand:
    def test_group_order_preserved(self, pricing_catalog: PricingCatalog) -> None:
        rules = PlatformRules(pricing_catalog)
        assert rules.expand(["major"]) == (
            Platform.AMAZON_INDIA,
            Platform.FLIPKART,
            Platform.TATACLIQ,
            Platform.JIOMART,
        )

    def test_overlapping_groups_deduplicated(self, pricing_catalog: PricingCatalog) -> None:
        """tatacliq sits in both budget and fashion; it appears once, first position kept."""
        rules = PlatformRules(pricing_catalog)
        platforms = rules.expand(["budget", "fashion"])
        assert platforms == (
            Platform.AMAZON_INDIA,
            Platform.FLIPKART,
            Platform.MEESHO,
            Platform.SNAPDEAL,
            Platform.TATACLIQ,
            Platform.MYNTRA,
            Platform.AJIO,
        )
        assert len(platforms) == len(set(platforms))

    def test_bare_platform_ids(self, pricing_catalog: PricingCatalog) -> None:
        rules = PlatformRules(pricing_catalog)
        assert rules.expand(["major", "snapdeal", "flipkart"])[-1] == Platform.SNAPDEAL


class TestAssign:
    def test_premium_listing_on_four_major_platforms(
        self, pricing_catalog: PricingCatalog, iphone: CatalogProduct
    ) -> None:
        assignment = PlatformRules(pricing_catalog).assign(iphone)
        assert assignment.matched is True
        assert assignment.base_price == 159900
        assert len(assignment.platforms) == 4

    def test_budget_audio_adds_apparel_platforms(
        self, pricing_catalog: PricingCatalog, airdopes: CatalogProduct
    ) -> None:
        assignment = PlatformRules(pricing_catalog).assign(airdopes)
        assert assignment.base_price == 999
        assert Platform.MYNTRA in assignment.platforms
        assert Platform.MEESHO in assignment.platforms

    def test_unlisted_product_uses_category_default(self, pricing_catalog: PricingCatalog) -> None:
        product = CatalogProduct(name="Generic Soundbar X", brand="Acme", category="Audio")
        assignment = PlatformRules(pricing_catalog).assign(product)
        assert assignment.matched is False
        assert assignment.base_price == 10000
        assert assignment.platforms == PlatformRules(pricing_catalog).expand(["major"])

    def test_unknown_category_raises(self, pricing_catalog: PricingCatalog) -> None:
        product = CatalogProduct(name="Lego Set", brand="Lego", category="Toys")
        with pytest.raises(ValueError, match="No pricing rule for category 'Toys'"):
            PlatformRules(pricing_catalog).assign(product)

    def test_category_without_rule_raises(self, pricing_data: dict) -> None:
        del pricing_data["categories"]["Home"]
        rules = PlatformRules(PricingCatalog.model_validate(pricing_data))
        product = CatalogProduct(name="Robot Vacuum", brand="Acme", category="Home")
        with pytest.raises(ValueError):
            rules.assign(product)

    def test_pure(self, pricing_catalog: PricingCatalog, iphone: CatalogProduct) -> None:
        rules = PlatformRules(pricing_catalog)
        assert rules.assign(iphone) == rules.assign(iphone)

    def test_packaged_catalog_never_falls_back(self) -> None:
        from retailiq_seed.catalog.loader import load_catalog, load_pricing_catalog

        rules = PlatformRules(load_pricing_catalog())
        assert all(rules.assign(p).matched for p in load_catalog())
