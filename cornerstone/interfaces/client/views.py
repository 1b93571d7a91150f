"""View models for the two notification surfaces.

Both views render from their own :class:`NotificationCenter`; neither keeps
state about the items themselves.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from cornerstone.domain.entities import Notification
from cornerstone.utils import format_time_ago

from .state import NotificationCenter

EMPTY_MESSAGE = "No notifications yet."
LOADING_MESSAGE = "Loading…"
NOTIFICATIONS_HREF = "/notifications"
BADGE_LIMIT = 99


def _render_item(item: Notification, now: datetime | None) -> dict[str, Any]:
    return {
        "id": item.id,
        "title": item.title,
        "body": item.body,
        "time_ago": format_time_ago(item.created_at, now),
        "unread": item.is_unread,
        "link_href": item.link_href,
        "link_label": item.link_label,
        "navigable": item.link_href is not None,
    }


class NotificationListView:
    """Full-page list of notifications."""

    def __init__(
        self,
        center: NotificationCenter,
        *,
        navigate: Callable[[str], None] | None = None,
    ) -> None:
        self.center = center
        self._navigate = navigate

    async def load(self) -> None:
        await self.center.activate()

    def select(self, notification_id: str) -> str | None:
        href = self.center.select_item(notification_id)
        if href and self._navigate is not None:
            self._navigate(href)
        return href

    def mark_all_read(self) -> None:
        self.center.mark_all_read()

    def render(self, now: datetime | None = None) -> dict[str, Any]:
        if self.center.error is not None:
            return {
                "error": self.center.error,
                "items": [],
                "empty_message": None,
                "show_mark_all": False,
            }

        items = self.center.items
        return {
            "error": None,
            "items": [_render_item(item, now) for item in items],
            "empty_message": None if items else EMPTY_MESSAGE,
            "show_mark_all": self.center.unread_count > 0,
        }


class NotificationsDropdown:
    """Header bell with an unread badge and a compact list.

    Opening the menu refetches; fetch errors are not shown and the previous
    items stay in place.
    """

    def __init__(
        self,
        center: NotificationCenter,
        *,
        navigate: Callable[[str], None] | None = None,
    ) -> None:
        self.center = center
        self._navigate = navigate
        self.is_open = False

    async def open(self) -> None:
        self.is_open = True
        await self.center.activate()

    def close(self) -> None:
        self.is_open = False

    @property
    def badge(self) -> str | None:
        count = self.center.unread_count
        if count <= 0:
            return None
        return f"{BADGE_LIMIT}+" if count > BADGE_LIMIT else str(count)

    def select(self, notification_id: str) -> str | None:
        href = self.center.select_item(notification_id)
        self.close()
        if href and self._navigate is not None:
            self._navigate(href)
        return href

    def mark_all_read(self) -> None:
        self.center.mark_all_read()

    def render(self, now: datetime | None = None) -> dict[str, Any]:
        items = self.center.items
        if self.center.loading:
            message = LOADING_MESSAGE
        elif not items:
            message = EMPTY_MESSAGE
        else:
            message = None
        return {
            "open": self.is_open,
            "badge": self.badge,
            "message": message,
            "items": [] if self.center.loading else [_render_item(i, now) for i in items],
            "show_mark_all": self.center.unread_count > 0,
            "view_all_href": NOTIFICATIONS_HREF if items else None,
        }


__all__ = [
    "EMPTY_MESSAGE",
    "LOADING_MESSAGE",
    "NOTIFICATIONS_HREF",
    "NotificationListView",
    "NotificationsDropdown",
]
