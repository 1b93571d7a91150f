"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client.

    Every optional field is always serialized, as ``null`` when absent.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str
    owner_id: str
    title: str
    body: str | None
    category: str | None
    link_href: str | None
    link_label: str | None
    read_at: datetime | None
    created_at: datetime


class NotificationListRead(BaseModel):
    """Notifications of the caller plus a display-only error message."""

    items: list[NotificationRead] = Field(default_factory=list)
    error: str | None = None


class OperationResultRead(BaseModel):
    """Outcome of a notification mutation."""

    error: str | None = None


__all__ = ["NotificationListRead", "NotificationRead", "OperationResultRead"]
