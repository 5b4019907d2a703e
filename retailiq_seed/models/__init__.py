"""
Models package — export all SQLAlchemy models.
"""

from retailiq_seed.models.base import Base
from retailiq_seed.models.festival import Festival
from retailiq_seed.models.platform_price import PlatformPrice
from retailiq_seed.models.price_history import PriceHistory
from retailiq_seed.models.product import Product
from retailiq_seed.models.subscription import PromoCode, SubscriptionPlan

__all__ = [
    "Base",
    "Festival",
    "PlatformPrice",
    "PriceHistory",
    "Product",
    "PromoCode",
    "SubscriptionPlan",
]
