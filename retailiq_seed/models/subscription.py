"""
RetailIQ Seed — Subscription Plan & Promo Code Models

Static monetization reference data. Unrelated to pricing but seeded by the
same orchestrator. NULL limits mean unlimited.
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import BOOLEAN, DATE, INTEGER, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from retailiq_seed.models.base import Base, new_id


class SubscriptionPlan(Base):
    """Subscription tier: Free, Basic, Pro, Enterprise."""

    __tablename__ = "subscription_plans"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    price_monthly: Mapped[int] = mapped_column(INTEGER, nullable=False, comment="INR")
    price_yearly: Mapped[int] = mapped_column(INTEGER, nullable=False, comment="INR")
    max_products: Mapped[int | None] = mapped_column(INTEGER, nullable=True)
    max_alerts: Mapped[int | None] = mapped_column(INTEGER, nullable=True)
    price_history_days: Mapped[int | None] = mapped_column(INTEGER, nullable=True)
    api_access: Mapped[bool] = mapped_column(BOOLEAN, nullable=False, default=False)
    team_access: Mapped[bool] = mapped_column(BOOLEAN, nullable=False, default=False)
    features: Mapped[list[str]] = mapped_column(JSON, nullable=False)

    def __repr__(self) -> str:
        return f"<SubscriptionPlan name={self.name!r} monthly={self.price_monthly}>"


class PromoCode(Base):
    """Discount code redeemable against one or more plans."""

    __tablename__ = "promo_codes"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    code: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    discount_type: Mapped[str] = mapped_column(
        String, nullable=False, comment="percentage | fixed"
    )
    discount_value: Mapped[int] = mapped_column(INTEGER, nullable=False)
    valid_from: Mapped[date] = mapped_column(DATE, nullable=False)
    valid_until: Mapped[date] = mapped_column(DATE, nullable=False)
    max_uses: Mapped[int | None] = mapped_column(INTEGER, nullable=True)
    current_uses: Mapped[int] = mapped_column(INTEGER, nullable=False, default=0)
    applicable_plans: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    is_active: Mapped[bool] = mapped_column(BOOLEAN, nullable=False, default=True)

    def __repr__(self) -> str:
        return f"<PromoCode code={self.code!r} {self.discount_type}={self.discount_value}>"
