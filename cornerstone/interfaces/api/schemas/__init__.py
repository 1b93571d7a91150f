from .audit_entry import AuditEntryCreate, AuditEntryRead
from .auth import Token
from .notification import NotificationListRead, NotificationRead, OperationResultRead
from .preferences import AppearanceRead, AppearanceUpdate
from .user import UserRead

__all__ = [
    "AppearanceRead",
    "AppearanceUpdate",
    "AuditEntryCreate",
    "AuditEntryRead",
    "NotificationListRead",
    "NotificationRead",
    "OperationResultRead",
    "Token",
    "UserRead",
]
