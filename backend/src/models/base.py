"""SQLAlchemy declarative base with common mixins."""
from datetime import datetime

from sqlalchemy import DateTime, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class CreatedAtMixin:
    """
    Mixin that adds an immutable created_at column.

    The timestamp is timezone-aware (TIMESTAMP WITH TIME ZONE in PostgreSQL) and
    assigned by the database at insert time. Nothing in the application writes it.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True,  # Index for newest-first listing
    )
