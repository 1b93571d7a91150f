"""Routes for recording and inspecting the activity log."""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from cornerstone.application.use_cases.audit import (
    DEFAULT_LIST_LIMIT,
    list_audit_entries as list_audit_entries_uc,
)
from cornerstone.domain.entities import AuditAction, User
from cornerstone.infrastructure.database import get_db
from cornerstone.interfaces.api.dependencies import (
    AuditWriter,
    get_audit_writer,
    get_current_user,
)
from cornerstone.interfaces.api.schemas import AuditEntryCreate, AuditEntryRead

router = APIRouter(prefix="/audit-logs", tags=["audit_logs"])


@router.get("/", response_model=list[AuditEntryRead])
def list_audit_logs(
    action: AuditAction | None = None,
    limit: int = Query(DEFAULT_LIST_LIMIT, description="Clamped to the 10..200 range"),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> list[AuditEntryRead]:
    """Return the newest activity log entries, optionally for one action."""

    entries = list_audit_entries_uc(db, action=action, limit=limit)
    return [AuditEntryRead.model_validate(entry) for entry in entries]


@router.post("/", status_code=status.HTTP_204_NO_CONTENT)
def record_audit_entry(
    payload: AuditEntryCreate,
    audit: AuditWriter = Depends(get_audit_writer),
    _: User = Depends(get_current_user),
) -> Response:
    """Append a domain event to the activity log, attributed to the caller."""

    audit(payload.action, payload.entity_type, payload.entity_id, payload.meta)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
