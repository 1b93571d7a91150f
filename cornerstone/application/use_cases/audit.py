"""Use cases for the append-only activity log."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cornerstone.domain.entities import AuditAction, AuditEntry
from cornerstone.infrastructure.repositories import AuditEntryRepository

logger = logging.getLogger(__name__)

MIN_LIST_LIMIT = 10
MAX_LIST_LIMIT = 200
DEFAULT_LIST_LIMIT = 50


def log_audit(
    session: Session,
    principal: str | None,
    action: AuditAction | str,
    entity_type: str,
    entity_id: str,
    meta: dict[str, Any] | None = None,
) -> None:
    """Append an entry to the activity log on behalf of ``principal``.

    The actor is the resolved principal, or ``None`` for anonymous and
    system writes. Nothing is returned and store failures are only logged:
    callers never depend on the write having happened.
    """

    entry = AuditEntry(
        id=None,
        action=AuditAction(action),
        entity_type=entity_type,
        entity_id=str(entity_id),
        meta=meta,
        actor_id=principal or None,
        created_at=None,
    )
    try:
        AuditEntryRepository(session).create(entry)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.warning(
            "Could not record %s for %s %s: %s",
            entry.action.value,
            entity_type,
            entity_id,
            exc,
        )


def list_audit_entries(
    session: Session,
    *,
    action: AuditAction | str | None = None,
    limit: int | None = None,
) -> list[AuditEntry]:
    """Return the newest activity log entries.

    ``limit`` is clamped to ``[10, 200]`` and defaults to 50.
    """

    effective_limit = DEFAULT_LIST_LIMIT if limit is None else limit
    effective_limit = min(max(effective_limit, MIN_LIST_LIMIT), MAX_LIST_LIMIT)
    action_value = AuditAction(action).value if action is not None else None
    return AuditEntryRepository(session).list(action=action_value, limit=effective_limit)


__all__ = [
    "DEFAULT_LIST_LIMIT",
    "MAX_LIST_LIMIT",
    "MIN_LIST_LIMIT",
    "list_audit_entries",
    "log_audit",
]
