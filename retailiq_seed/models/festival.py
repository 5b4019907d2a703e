"""
RetailIQ Seed — Festival Model

Reference data: upcoming festival sale windows shown to users.
Seeded from the festival calendar; read-only at runtime.
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import DATE, INTEGER, JSON, REAL, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from retailiq_seed.models.base import Base, new_id


class Festival(Base):
    """Upcoming occurrence of a recurring festival sale."""

    __tablename__ = "festivals"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String, nullable=False)
    platform: Mapped[str] = mapped_column(
        String, nullable=False, default="all", comment="'all' or a platform id"
    )
    start_date: Mapped[date] = mapped_column(DATE, nullable=False)
    end_date: Mapped[date] = mapped_column(DATE, nullable=False)
    expected_discount: Mapped[str] = mapped_column(
        String, nullable=False, comment="Display band, e.g. '15-30%'"
    )
    categories: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    confidence: Mapped[float] = mapped_column(REAL, nullable=False)
    historical_avg_discount: Mapped[int] = mapped_column(
        INTEGER, nullable=False, comment="Percent"
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    banner_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Festival name={self.name!r} {self.start_date}..{self.end_date}>"
