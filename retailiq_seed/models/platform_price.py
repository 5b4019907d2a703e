"""
RetailIQ Seed — Platform Price Model

One marketplace listing of one product. Written once per
(product, eligible platform) pair by the seeding engine; live price
updates are owned by another service.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import (
    INTEGER,
    REAL,
    TIMESTAMP,
    CheckConstraint,
    ForeignKey,
    Index,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from retailiq_seed.models.base import Base, new_id


class PlatformPrice(Base):
    """
    Listing of a product on a single marketplace.

    Invariant: current_price <= original_price.
    """

    __tablename__ = "platform_prices"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    product_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("products.id"), nullable=False
    )
    platform: Mapped[str] = mapped_column(
        String, nullable=False, comment="amazon_india, flipkart, myntra, ..."
    )
    current_price: Mapped[int] = mapped_column(
        INTEGER, nullable=False, comment="Selling price in INR"
    )
    original_price: Mapped[int] = mapped_column(
        INTEGER, nullable=False, comment="List (MRP) price in INR"
    )
    availability: Mapped[str] = mapped_column(
        Text, nullable=False, comment="in_stock | limited | out_of_stock"
    )
    product_url: Mapped[str] = mapped_column(Text, nullable=False)
    affiliate_url: Mapped[str] = mapped_column(Text, nullable=False)
    rating: Mapped[float] = mapped_column(REAL, nullable=False)
    review_count: Mapped[int] = mapped_column(INTEGER, nullable=False)
    last_checked: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), nullable=False
    )

    __table_args__ = (
        CheckConstraint(
            "current_price <= original_price", name="ck_platform_prices_discounted"
        ),
        Index("ix_platform_prices_product_platform", "product_id", "platform", unique=True),
    )

    def __repr__(self) -> str:
        return (
            f"<PlatformPrice product_id={self.product_id!r} platform={self.platform!r} "
            f"current={self.current_price} original={self.original_price}>"
        )
