"""
RetailIQ Seed — Shared pytest Fixtures & Configuration

Provides common fixtures for all test modules:
- In-memory SQLite engine + session factory with the full schema
- Small catalog / pricing catalog fixtures
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator

import pytest
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from retailiq_seed.catalog.loader import CatalogProduct, PricingCatalog
from retailiq_seed.models import Base


# ---------------------------------------------------------------------------
# Database Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def db_engine() -> Iterator[Engine]:
    """
    In-memory SQLite database with every table created.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_engine(
        "sqlite://",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(db_engine, expire_on_commit=False)


# ---------------------------------------------------------------------------
# Catalog Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def pricing_data() -> dict:
    """Minimal pricing catalog covering every category."""
    return {
        "platform_groups": {
            "major": ["amazon_india", "flipkart", "tatacliq", "jiomart"],
            "budget": ["amazon_india", "flipkart", "meesho", "snapdeal", "tatacliq"],
            "fashion": ["myntra", "ajio", "tatacliq"],
        },
        "categories": {
            "Smartphones": {"default_price": 10000, "platforms": ["budget"]},
            "Laptops": {"default_price": 10000, "platforms": ["major", "snapdeal"]},
            "Audio": {"default_price": 10000, "platforms": ["major"]},
            "Wearables": {"default_price": 10000, "platforms": ["budget", "fashion"]},
            "Cameras": {"default_price": 10000, "platforms": ["major"]},
            "TVs": {"default_price": 10000, "platforms": ["major"]},
            "Home": {"default_price": 10000, "platforms": ["major"]},
        },
        "listings": {
            "apple-iphone-15-pro-max": {"base_price": 159900, "platforms": ["major"]},
            "boat-airdopes-141": {"base_price": 999, "platforms": ["budget", "fashion"]},
            "test-duo-phone": {"base_price": 20000, "platforms": ["amazon_india", "flipkart"]},
        },
    }


@pytest.fixture
def pricing_catalog(pricing_data: dict) -> PricingCatalog:
    return PricingCatalog.model_validate(pricing_data)


@pytest.fixture
def iphone() -> CatalogProduct:
    return CatalogProduct(name="Apple iPhone 15 Pro Max", brand="Apple", category="Smartphones")


@pytest.fixture
def airdopes() -> CatalogProduct:
    return CatalogProduct(name="boAt Airdopes 141", brand="boAt", category="Audio")


@pytest.fixture
def catalog_files(tmp_path: Path, pricing_data: dict) -> tuple[Path, Path]:
    """
    One-product catalog listed on exactly two platforms.

    Returns:
        (catalog_path, pricing_path)
    """
    catalog_path = tmp_path / "products.json"
    pricing_path = tmp_path / "pricing.json"
    catalog_path.write_text(
        json.dumps({
            "products": [
                {"name": "Test Duo Phone", "brand": "Acme", "category": "Smartphones"},
            ]
        }),
        encoding="utf-8",
    )
    pricing_path.write_text(json.dumps(pricing_data), encoding="utf-8")
    return catalog_path, pricing_path
