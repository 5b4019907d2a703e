"""
RetailIQ Seed — Configuration & Constants

Every threshold, price band, and magic number used by the seeding engine
lives here. No hardcoded values in business logic.

Usage:
    from retailiq_seed.config import settings
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings

_DATA_DIR = Path(__file__).resolve().parent / "catalog" / "data"


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Platform(str, Enum):
    """Marketplaces a product listing can belong to."""
    AMAZON_INDIA = "amazon_india"
    FLIPKART = "flipkart"
    MYNTRA = "myntra"
    AJIO = "ajio"
    TATACLIQ = "tatacliq"
    JIOMART = "jiomart"
    MEESHO = "meesho"
    SNAPDEAL = "snapdeal"


class Availability(str, Enum):
    """Stock state of a platform listing."""
    IN_STOCK = "in_stock"
    LIMITED = "limited"
    OUT_OF_STOCK = "out_of_stock"


class Category(str, Enum):
    """Product categories carried by the catalog."""
    SMARTPHONES = "Smartphones"
    LAPTOPS = "Laptops"
    AUDIO = "Audio"
    WEARABLES = "Wearables"
    CAMERAS = "Cameras"
    TVS = "TVs"
    HOME = "Home"


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """
    Central configuration for the RetailIQ seeding engine.

    Loads from environment variables with fallback defaults.
    """

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # -----------------------------------------------------------------------
    # Database
    # -----------------------------------------------------------------------
    DATABASE_URL: str = "sqlite:///retailiq.db"

    # -----------------------------------------------------------------------
    # Run control
    # -----------------------------------------------------------------------
    SEED: Optional[int] = None              # None → drawn per run and logged
    LOG_LEVEL: str = "INFO"

    # -----------------------------------------------------------------------
    # Catalog files
    # -----------------------------------------------------------------------
    CATALOG_PATH: Path = _DATA_DIR / "products.json"
    PRICING_CATALOG_PATH: Path = _DATA_DIR / "pricing_catalog.json"

    # -----------------------------------------------------------------------
    # Platform Price Synthesizer
    # -----------------------------------------------------------------------
    # Per-platform uniform bands: (price multiplier), (discount multiplier)
    PLATFORM_PRICE_BANDS: dict[str, tuple[float, float]] = {
        "amazon_india": (0.95, 1.05),
        "flipkart": (0.93, 1.05),
        "myntra": (0.97, 1.03),
        "ajio": (0.96, 1.04),
        "tatacliq": (0.98, 1.03),
        "jiomart": (0.94, 1.02),
        "meesho": (0.90, 0.98),
        "snapdeal": (0.92, 1.02),
    }
    PLATFORM_DISCOUNT_BANDS: dict[str, tuple[float, float]] = {
        "amazon_india": (0.90, 0.95),   # 5-10% off
        "flipkart": (0.88, 0.95),       # 5-12% off
        "myntra": (0.85, 0.95),         # 5-15% off
        "ajio": (0.87, 0.95),           # 5-13% off
        "tatacliq": (0.92, 0.97),       # 3-8% off
        "jiomart": (0.90, 0.96),        # 4-10% off
        "meesho": (0.85, 0.95),         # 5-15% off
        "snapdeal": (0.88, 0.96),       # 4-12% off
    }

    AVAILABILITY_OUT_OF_STOCK_ROLL: float = 0.95   # roll > 0.95 → out_of_stock
    AVAILABILITY_LIMITED_ROLL: float = 0.85        # roll > 0.85 → limited

    RATING_MIN: float = 3.5
    RATING_MAX: float = 4.9

    PREMIUM_PRICE_THRESHOLD: int = 50000           # base_price > this → premium
    PREMIUM_REVIEW_RANGE: tuple[int, int] = (500, 50000)
    STANDARD_REVIEW_RANGE: tuple[int, int] = (50, 5000)

    PRODUCT_URL_TEMPLATE: str = "https://{platform}.in/product/{slug}"
    AFFILIATE_URL_TEMPLATE: str = "https://{platform}.in/aff/{slug}?ref={ref}"
    AFFILIATE_REF: str = "retailiq"

    # -----------------------------------------------------------------------
    # Festival Calendar
    # Realized discount = peak × uniform(FLOOR, 1.0)
    # -----------------------------------------------------------------------
    FESTIVAL_DISCOUNT_FLOOR: float = 0.5

    # -----------------------------------------------------------------------
    # Price Trajectory Generator
    # -----------------------------------------------------------------------
    HISTORY_MONTHS: int = 6
    HISTORY_RECORD_HOUR_UTC: int = 12               # recorded_at = date @ noon UTC
    START_PREMIUM_RANGE: tuple[float, float] = (1.05, 1.20)
    VOLATILITY_RANGE: tuple[float, float] = (0.015, 0.030)
    DAILY_TREND: float = -0.002                     # gradual depreciation
    PRICE_FLOOR_RATIO: float = 0.70                 # × current_price
    PRICE_CEILING_RATIO: float = 1.10               # × starting_price

    # -----------------------------------------------------------------------
    # Batch Persister
    # -----------------------------------------------------------------------
    HISTORY_BATCH_SIZE: int = 1000

    @field_validator("HISTORY_BATCH_SIZE", "HISTORY_MONTHS")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be at least 1")
        return v


# Singleton instance
settings = Settings()
