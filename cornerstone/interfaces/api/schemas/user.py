"""Schemas describing users."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr


class UserRead(BaseModel):
    """Public representation of a user."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: EmailStr
    is_active: bool
    last_login: datetime | None = None
    created_at: datetime | None = None


__all__ = ["UserRead"]
