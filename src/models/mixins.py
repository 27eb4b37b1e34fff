"""Mixins for SQLAlchemy models."""

from uuid import uuid4

from sqlalchemy import Column, DateTime, func


def generate_id() -> str:
    """Generate a new primary key value."""
    return str(uuid4())


class TimestampMixin:
    """Mixin to add created_at and updated_at timestamp columns."""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
