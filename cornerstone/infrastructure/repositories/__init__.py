"""Repository implementations for infrastructure layer."""

from .audit_entry_repository import AuditEntryRepository
from .notification_repository import LIST_LIMIT, NotificationRepository
from .preference_repository import PreferenceRepository
from .user_repository import UserRepository

__all__ = [
    "AuditEntryRepository",
    "LIST_LIMIT",
    "NotificationRepository",
    "PreferenceRepository",
    "UserRepository",
]
