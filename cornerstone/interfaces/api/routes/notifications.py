"""Endpoints backing the notification list page and header dropdown.

These endpoints always answer 200: authorization and store failures travel as
the ``error`` text of the body, never as a status code.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from cornerstone.application.use_cases.notifications import (
    list_notifications as list_notifications_uc,
    mark_all_notifications_read as mark_all_notifications_read_uc,
    mark_notification_read as mark_notification_read_uc,
)
from cornerstone.infrastructure.database import get_db
from cornerstone.interfaces.api.dependencies import get_current_principal
from cornerstone.interfaces.api.schemas import (
    NotificationListRead,
    NotificationRead,
    OperationResultRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/", response_model=NotificationListRead)
def list_notifications(
    db: Session = Depends(get_db),
    principal: str | None = Depends(get_current_principal),
) -> NotificationListRead:
    """Return the 50 most recent notifications of the caller."""

    result = list_notifications_uc(db, principal)
    return NotificationListRead(
        items=[NotificationRead.model_validate(item) for item in result.items],
        error=result.error,
    )


@router.post("/read-all", response_model=OperationResultRead)
def mark_all_notifications_read(
    db: Session = Depends(get_db),
    principal: str | None = Depends(get_current_principal),
) -> OperationResultRead:
    """Mark every unread notification of the caller as read."""

    result = mark_all_notifications_read_uc(db, principal)
    return OperationResultRead(error=result.error)


@router.post("/{notification_id}/read", response_model=OperationResultRead)
def mark_notification_read(
    notification_id: str,
    db: Session = Depends(get_db),
    principal: str | None = Depends(get_current_principal),
) -> OperationResultRead:
    """Mark one notification of the caller as read."""

    result = mark_notification_read_uc(db, principal, notification_id)
    return OperationResultRead(error=result.error)


__all__ = ["router"]
