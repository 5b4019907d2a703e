"""
RetailIQ Seed — Product Model

Immutable catalog entity. Inserted once per seed run from the packaged
catalog; never updated by the seeding engine.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import TIMESTAMP, String, func
from sqlalchemy.orm import Mapped, mapped_column

from retailiq_seed.models.base import Base, new_id


class Product(Base):
    """A tracked retail product. Parent of platform_prices and price_history."""

    __tablename__ = "products"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_id, comment="UUID primary key"
    )
    product_name: Mapped[str] = mapped_column(
        String, nullable=False, comment="Display name, e.g. 'Apple iPhone 15'"
    )
    brand: Mapped[str] = mapped_column(String, nullable=False)
    category: Mapped[str] = mapped_column(
        String, nullable=False, index=True, comment="Smartphones, Laptops, Audio, ..."
    )
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"<Product id={self.id!r} name={self.product_name!r} "
            f"category={self.category!r}>"
        )
