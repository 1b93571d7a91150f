"""Owner-scoped operations over the notification store.

Every operation reports failures as plain text. Callers must treat the text as
display-only and never branch on its content.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cornerstone.domain.entities import Notification
from cornerstone.infrastructure.repositories import NotificationRepository

logger = logging.getLogger(__name__)

UNAUTHORIZED = "Unauthorized"


@dataclass(frozen=True)
class NotificationListResult:
    """Notifications visible to the caller plus an optional error message."""

    items: Sequence[Notification] = field(default_factory=tuple)
    error: str | None = None


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a mutation; ``error`` is ``None`` on success."""

    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class NotificationCreateResult:
    """Identifier of the created notification, or the reason it was not created."""

    id: str | None = None
    error: str | None = None


def _error_message(exc: SQLAlchemyError) -> str:
    original = getattr(exc, "orig", None)
    return str(original) if original is not None else str(exc)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def list_notifications(session: Session, principal: str | None) -> NotificationListResult:
    """Return the newest notifications of ``principal``, at most 50.

    An anonymous caller gets an empty list rather than an error; route-level
    gating is expected to have happened already.
    """

    if not principal:
        return NotificationListResult()

    try:
        items = NotificationRepository(session).list_for_owner(principal)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.warning("Could not list notifications for %s: %s", principal, exc)
        return NotificationListResult(items=(), error=_error_message(exc))
    return NotificationListResult(items=tuple(items))


def mark_notification_read(
    session: Session, principal: str | None, notification_id: str
) -> OperationResult:
    """Mark one notification of ``principal`` as read.

    Rows that do not exist and rows owned by somebody else both update
    nothing and report success.
    """

    if not principal:
        return OperationResult(error=UNAUTHORIZED)

    try:
        updated = NotificationRepository(session).mark_as_read(
            notification_id, owner_id=principal
        )
    except SQLAlchemyError as exc:
        session.rollback()
        logger.warning(
            "Could not mark notification %s as read: %s", notification_id, exc
        )
        return OperationResult(error=_error_message(exc))

    logger.debug("Marked %s notification(s) read for %s", updated, principal)
    return OperationResult()


def mark_all_notifications_read(
    session: Session, principal: str | None
) -> OperationResult:
    """Mark every unread notification of ``principal`` as read."""

    if not principal:
        return OperationResult(error=UNAUTHORIZED)

    try:
        updated = NotificationRepository(session).mark_all_as_read(owner_id=principal)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.warning("Could not mark notifications read for %s: %s", principal, exc)
        return OperationResult(error=_error_message(exc))

    logger.debug("Marked %s notification(s) read for %s", updated, principal)
    return OperationResult()


def create_notification(
    session: Session,
    *,
    owner_id: str,
    title: str,
    body: str | None = None,
    category: str | None = None,
    link_href: str | None = None,
    link_label: str | None = None,
) -> NotificationCreateResult:
    """Create a notification on behalf of ``owner_id``.

    Meant for trusted server-side workflows, so the caller does not need to be
    the owner.
    """

    clean_title = _clean(title)
    if not owner_id or clean_title is None:
        return NotificationCreateResult(error="owner_id and title are required")

    try:
        notification = NotificationRepository(session).create(
            owner_id=owner_id,
            title=clean_title,
            body=_clean(body),
            category=_clean(category),
            link_href=_clean(link_href),
            link_label=_clean(link_label),
        )
    except SQLAlchemyError as exc:
        session.rollback()
        logger.warning("Could not create notification for %s: %s", owner_id, exc)
        return NotificationCreateResult(error=_error_message(exc))

    logger.info("Created notification %s for %s", notification.id, owner_id)
    return NotificationCreateResult(id=notification.id)


__all__ = [
    "NotificationCreateResult",
    "NotificationListResult",
    "OperationResult",
    "UNAUTHORIZED",
    "create_notification",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
]
