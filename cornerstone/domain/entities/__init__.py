"""Domain entities exposed by the application."""

from .audit_entry import AuditAction, AuditEntry
from .notification import Notification
from .preferences import (
    DEFAULT_DENSITY,
    DEFAULT_THEME,
    DENSITIES,
    THEMES,
    AppearancePreferences,
)
from .user import User

__all__ = [
    "AppearancePreferences",
    "AuditAction",
    "AuditEntry",
    "DEFAULT_DENSITY",
    "DEFAULT_THEME",
    "DENSITIES",
    "Notification",
    "THEMES",
    "User",
]
