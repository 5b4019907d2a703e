"""
SQLAlchemy 2.0 DeclarativeBase for RetailIQ Seed.

All models inherit from this Base.
"""

import uuid

from sqlalchemy.orm import DeclarativeBase


def new_id() -> str:
    """UUID4 primary key rendered as a string (portable across SQLite/Postgres)."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Base class for all RetailIQ database models."""
    pass
