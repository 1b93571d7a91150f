"""Client-side notification state shared by the list page and the dropdown."""

from .gateway import (
    HttpNotificationGateway,
    InProcessNotificationGateway,
    NotificationGateway,
)
from .state import NotificationCenter
from .views import EMPTY_MESSAGE, NotificationListView, NotificationsDropdown

__all__ = [
    "EMPTY_MESSAGE",
    "HttpNotificationGateway",
    "InProcessNotificationGateway",
    "NotificationCenter",
    "NotificationGateway",
    "NotificationListView",
    "NotificationsDropdown",
]
