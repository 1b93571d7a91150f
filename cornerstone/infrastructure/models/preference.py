"""SQLAlchemy model for per-user appearance preferences."""

from sqlalchemy import Column, DateTime, ForeignKey, String

from cornerstone.infrastructure.database import Base
from cornerstone.utils import now_in_app_naive_datetime


class UserPreferenceModel(Base):
    """One row per user holding theme and density choices."""

    __tablename__ = "user_preference"

    user_id = Column(
        String(36), ForeignKey("user.id", ondelete="CASCADE"), primary_key=True
    )
    theme = Column(String(20), nullable=True)
    density = Column(String(20), nullable=True)
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )


__all__ = ["UserPreferenceModel"]
