"""SQLAlchemy model for the append-only activity log."""

from uuid import uuid4

from sqlalchemy import Column, DateTime, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.types import JSON

from cornerstone.infrastructure.database import Base
from cornerstone.utils import now_in_app_naive_datetime

_meta_json_type = JSON().with_variant(JSONB(), "postgresql")


class AuditEntryModel(Base):
    """Database representation of audit events."""

    __tablename__ = "activity_log"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    action = Column(String(50), nullable=False, index=True)
    entity_type = Column(String(50), nullable=False)
    entity_id = Column(String(64), nullable=False)
    meta = Column(_meta_json_type, nullable=True)
    actor_id = Column(String(36), nullable=True)
    created_at = Column(
        DateTime(), nullable=False, default=now_in_app_naive_datetime, index=True
    )


__all__ = ["AuditEntryModel"]
