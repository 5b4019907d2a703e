"""
RetailIQ Seed — Price History Model

Append-only daily price observation per product per platform.
Never updated; the seeding engine writes one row per calendar day.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import INTEGER, TIMESTAMP, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from retailiq_seed.models.base import Base, new_id


class PriceHistory(Base):
    """
    Daily price observation per product per platform.

    Index: (product_id, platform, recorded_at) supports efficient range scans.
    """

    __tablename__ = "price_history"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=new_id,
        comment="UUID primary key",
    )
    product_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("products.id"),
        nullable=False,
    )
    platform: Mapped[str] = mapped_column(
        String,
        nullable=False,
        comment="Marketplace identifier",
    )
    price: Mapped[int] = mapped_column(
        INTEGER,
        nullable=False,
        comment="Observed price in whole INR",
    )
    recorded_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        comment="Observation date at 12:00 UTC",
    )

    __table_args__ = (
        Index(
            "ix_price_history_product_platform_recorded",
            "product_id",
            "platform",
            "recorded_at",
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<PriceHistory product_id={self.product_id!r} platform={self.platform!r} "
            f"price={self.price} at={self.recorded_at}>"
        )
