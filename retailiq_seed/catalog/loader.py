"""
RetailIQ Seed — Catalog Loader

Reads the fixed product catalog and the pricing catalog from packaged JSON
files (overridable by path) and validates them with pydantic.

Products receive a fresh UUID at load time; they are immutable afterwards.
The pricing catalog maps a normalized product key (slug of the product name)
to a base price and eligible platforms, with a per-category fallback.
"""

from __future__ import annotations

import json
import uuid
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from retailiq_seed.config import Category, Platform, settings

logger = structlog.get_logger(__name__)

_PLATFORM_IDS = frozenset(p.value for p in Platform)


# ---------------------------------------------------------------------------
# Pydantic Models
# ---------------------------------------------------------------------------


class CatalogProduct(BaseModel):
    """A tracked product as supplied by the catalog file."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = Field(..., min_length=1)
    brand: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)

    @field_validator("name", "brand", "category")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class CatalogFile(BaseModel):
    products: list[CatalogProduct] = Field(default_factory=list)


class CategoryRule(BaseModel):
    """Fallback pricing for products with no listing entry."""

    default_price: int = Field(..., gt=0)
    platforms: list[str] = Field(..., min_length=1)


class ListingRule(BaseModel):
    """Explicit base price and platform refs for one product key."""

    base_price: int = Field(..., gt=0)
    platforms: list[str] = Field(..., min_length=1)


class PricingCatalog(BaseModel):
    """
    Data-driven pricing rules.

    Platform refs inside categories and listings are either a group name from
    ``platform_groups`` or a bare platform id.
    """

    platform_groups: dict[str, list[Platform]] = Field(default_factory=dict)
    categories: dict[Category, CategoryRule]
    listings: dict[str, ListingRule] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_platform_refs(self) -> PricingCatalog:
        known = set(self.platform_groups) | _PLATFORM_IDS
        rules: list[tuple[str, list[str]]] = [
            (category.value, rule.platforms) for category, rule in self.categories.items()
        ]
        rules.extend((key, rule.platforms) for key, rule in self.listings.items())
        for owner, refs in rules:
            unknown = [ref for ref in refs if ref not in known]
            if unknown:
                raise ValueError(f"{owner}: unknown platform refs {unknown}")
        return self


# ---------------------------------------------------------------------------
# Loaders
# ---------------------------------------------------------------------------


def _read_json(path: Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def load_catalog(path: Path | None = None) -> list[CatalogProduct]:
    """
    Load and validate the product catalog.

    Args:
        path: Catalog JSON file (default: settings.CATALOG_PATH).

    Returns:
        Products in file order, each with a freshly assigned UUID.

    Raises:
        pydantic.ValidationError: If any entry is malformed.
        FileNotFoundError: If the file does not exist.
    """
    path = path or settings.CATALOG_PATH
    catalog = CatalogFile.model_validate(_read_json(path))

    logger.info(
        "catalog_loaded",
        path=str(path),
        products=len(catalog.products),
    )
    return catalog.products


def load_pricing_catalog(path: Path | None = None) -> PricingCatalog:
    """Load and validate the pricing catalog (default: settings.PRICING_CATALOG_PATH)."""
    path = path or settings.PRICING_CATALOG_PATH
    pricing = PricingCatalog.model_validate(_read_json(path))

    logger.info(
        "pricing_catalog_loaded",
        path=str(path),
        categories=len(pricing.categories),
        listings=len(pricing.listings),
    )
    return pricing
