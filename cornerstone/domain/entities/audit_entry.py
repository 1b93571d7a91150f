"""Domain entity representing an append-only activity log entry."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class AuditAction(str, Enum):
    """Domain actions recorded in the activity log."""

    INVOICE_ISSUED = "invoice_issued"
    PAYMENT_RECEIVED = "payment_received"
    VENDOR_PAYOUT_PAID = "vendor_payout_paid"
    REQUIREMENT_FULFILLED = "requirement_fulfilled"


@dataclass
class AuditEntry:
    """A single domain event; never updated after creation."""

    id: str | None
    action: AuditAction
    entity_type: str
    entity_id: str
    meta: dict[str, Any] | None
    actor_id: str | None
    created_at: datetime | None


__all__ = ["AuditAction", "AuditEntry"]
