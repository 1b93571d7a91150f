"""ORM models used by the application infrastructure."""

from .audit_entry import AuditEntryModel
from .notification import NotificationModel
from .preference import UserPreferenceModel
from .user import UserModel

__all__ = [
    "AuditEntryModel",
    "NotificationModel",
    "UserModel",
    "UserPreferenceModel",
]
