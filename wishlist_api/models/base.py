"""Base models and mixins for database models"""

from sqlalchemy import Column, DateTime, Uuid
from sqlalchemy.orm import DeclarativeBase, declared_attr
from datetime import datetime, timezone
import uuid

# Create declarative base
class Base(DeclarativeBase):
    pass

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

class TimestampedModel:
    """Mixin for adding created_at and updated_at timestamps"""

    # Python-side defaults keep the values loaded after flush, which async
    # sessions cannot lazily refresh.
    @declared_attr
    def created_at(cls):
        return Column(
            DateTime(timezone=True),
            nullable=False,
            default=utcnow,
            index=True
        )

    @declared_attr
    def updated_at(cls):
        return Column(
            DateTime(timezone=True),
            nullable=False,
            default=utcnow,
            onupdate=utcnow
        )

    def touch(self):
        """Mark the row as modified so its UPDATE is always emitted"""
        self.updated_at = utcnow()

class UUIDModel:
    """Mixin for adding UUID primary key"""

    @declared_attr
    def id(cls):
        return Column(
            Uuid,
            primary_key=True,
            default=uuid.uuid4,
            nullable=False
        )

# Export all
__all__ = [
    'Base',
    'TimestampedModel',
    'UUIDModel',
    'utcnow',
]
