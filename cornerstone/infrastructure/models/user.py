"""SQLAlchemy model for the user table."""

from uuid import uuid4

from sqlalchemy import Boolean, Column, DateTime, String

from cornerstone.infrastructure.database import Base
from cornerstone.utils import now_in_app_naive_datetime


class UserModel(Base):
    """Database representation of a dashboard user."""

    __tablename__ = "user"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    name = Column(String(100), nullable=False)
    email = Column(String(120), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    last_login = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
