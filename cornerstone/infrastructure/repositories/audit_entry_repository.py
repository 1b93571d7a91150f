"""Persistence layer for activity log records."""

from __future__ import annotations

from typing import Iterable

from sqlalchemy.orm import Session

from cornerstone.domain.entities import AuditAction, AuditEntry
from cornerstone.infrastructure.models import AuditEntryModel
from cornerstone.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class AuditEntryRepository:
    """Append and read :class:`AuditEntry` rows; there is no update or delete."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, entry: AuditEntry) -> AuditEntry:
        model = AuditEntryModel()
        self._apply_entity_to_model(model, entry)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list(self, *, action: str | None = None, limit: int = 50) -> list[AuditEntry]:
        """Return the newest entries, optionally filtered by ``action``."""

        query = self.session.query(AuditEntryModel)
        if action is not None:
            query = query.filter(AuditEntryModel.action == action)

        models: Iterable[AuditEntryModel] = (
            query.order_by(AuditEntryModel.created_at.desc(), AuditEntryModel.id.desc())
            .limit(limit)
            .all()
        )
        return [self._to_entity(model) for model in models]

    @staticmethod
    def _to_entity(model: AuditEntryModel) -> AuditEntry:
        return AuditEntry(
            id=model.id,
            action=AuditAction(model.action),
            entity_type=model.entity_type,
            entity_id=model.entity_id,
            meta=dict(model.meta) if model.meta is not None else None,
            actor_id=model.actor_id,
            created_at=ensure_app_timezone(model.created_at),
        )

    @staticmethod
    def _apply_entity_to_model(model: AuditEntryModel, entry: AuditEntry) -> None:
        model.action = AuditAction(entry.action).value
        model.entity_type = entry.entity_type
        model.entity_id = entry.entity_id
        model.meta = dict(entry.meta) if entry.meta is not None else None
        model.actor_id = entry.actor_id
        model.created_at = (
            ensure_app_naive_datetime(entry.created_at)
            or ensure_app_naive_datetime(now_in_app_timezone())
        )


__all__ = ["AuditEntryRepository"]
