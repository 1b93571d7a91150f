"""SQLAlchemy model for persisted notifications."""

from uuid import uuid4

from sqlalchemy import Column, DateTime, ForeignKey, Index, String, Text

from cornerstone.infrastructure.database import Base
from cornerstone.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notification"
    __table_args__ = (
        Index("ix_notification_owner_created", "owner_id", "created_at"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    owner_id = Column(
        String(36), ForeignKey("user.id", ondelete="CASCADE"), nullable=False
    )
    title = Column(String(200), nullable=False)
    body = Column(Text, nullable=True)
    category = Column(String(50), nullable=True)
    link_href = Column(String(500), nullable=True)
    link_label = Column(String(100), nullable=True)
    read_at = Column(DateTime(), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["NotificationModel"]
