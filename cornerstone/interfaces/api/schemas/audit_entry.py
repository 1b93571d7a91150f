"""Schemas for activity log endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from cornerstone.domain.entities import AuditAction


class AuditEntryRead(BaseModel):
    """Representation of an activity log entry returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    action: AuditAction
    entity_type: str
    entity_id: str
    meta: dict[str, Any] | None
    actor_id: str | None
    created_at: datetime | None


class AuditEntryCreate(BaseModel):
    """Domain event reported by another module; the actor is the caller."""

    action: AuditAction
    entity_type: str = Field(min_length=1, max_length=50)
    entity_id: str = Field(min_length=1, max_length=64)
    meta: dict[str, Any] | None = None


__all__ = ["AuditEntryCreate", "AuditEntryRead"]
