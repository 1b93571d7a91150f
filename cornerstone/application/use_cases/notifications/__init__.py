"""Public helpers for reading and raising notifications."""

from .access import (
    UNAUTHORIZED,
    NotificationCreateResult,
    NotificationListResult,
    OperationResult,
    create_notification,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)
from .events import notify_invoice_overdue

__all__ = [
    "UNAUTHORIZED",
    "NotificationCreateResult",
    "NotificationListResult",
    "OperationResult",
    "create_notification",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "notify_invoice_overdue",
]
