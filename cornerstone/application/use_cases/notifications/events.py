"""Utility helpers to raise notifications for domain events."""

from __future__ import annotations

from sqlalchemy.orm import Session

from .access import NotificationCreateResult, create_notification


def notify_invoice_overdue(
    session: Session, *, owner_id: str, invoice_id: str
) -> NotificationCreateResult:
    """Tell ``owner_id`` that an invoice has passed its due date."""

    return create_notification(
        session,
        owner_id=owner_id,
        title="Invoice overdue",
        body="An invoice has passed its due date.",
        category="invoice_overdue",
        link_href=f"/finance/invoice/{invoice_id}/print",
        link_label="View invoice",
    )


__all__ = ["notify_invoice_overdue"]
