"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Notification:
    """User-visible alert owned by exactly one principal.

    Optional fields are always present and hold ``None`` when absent.
    ``read_at`` is ``None`` while the notification is unread and is never
    cleared once set.
    """

    id: str
    owner_id: str
    title: str
    body: str | None
    category: str | None
    link_href: str | None
    link_label: str | None
    read_at: datetime | None
    created_at: datetime

    @property
    def is_unread(self) -> bool:
        return self.read_at is None


__all__ = ["Notification"]
