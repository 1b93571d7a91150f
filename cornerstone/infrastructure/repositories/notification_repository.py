"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from sqlalchemy.orm import Session

from cornerstone.domain.entities import Notification
from cornerstone.infrastructure.models import NotificationModel
from cornerstone.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

LIST_LIMIT: Final[int] = 50


class NotificationRepository:
    """Owner-scoped access to the ``notification`` table.

    Every read and update filters on ``owner_id``; a row belonging to someone
    else is indistinguishable from a row that does not exist.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_owner(self, owner_id: str) -> Sequence[Notification]:
        """Return the newest notifications of ``owner_id``, capped at 50."""

        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.owner_id == owner_id)
            .order_by(
                NotificationModel.created_at.desc(), NotificationModel.id.desc()
            )
            .limit(LIST_LIMIT)
        )
        return [self._to_entity(model) for model in query.all()]

    def create(
        self,
        *,
        owner_id: str,
        title: str,
        body: str | None = None,
        category: str | None = None,
        link_href: str | None = None,
        link_label: str | None = None,
    ) -> Notification:
        model = NotificationModel(
            owner_id=owner_id,
            title=title,
            body=body,
            category=category,
            link_href=link_href,
            link_label=link_label,
            read_at=None,
            created_at=ensure_app_naive_datetime(now_in_app_timezone()),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_as_read(self, notification_id: str, *, owner_id: str) -> int:
        """Stamp ``read_at`` on one unread row owned by ``owner_id``.

        Returns the number of affected rows (0 or 1).
        """

        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id == notification_id,
                NotificationModel.owner_id == owner_id,
                NotificationModel.read_at.is_(None),
            )
            .update(
                {NotificationModel.read_at: self._read_timestamp()},
                synchronize_session=False,
            )
        )
        self.session.commit()
        return updated

    def mark_all_as_read(self, *, owner_id: str) -> int:
        """Stamp ``read_at`` on every unread row owned by ``owner_id``."""

        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.owner_id == owner_id,
                NotificationModel.read_at.is_(None),
            )
            .update(
                {NotificationModel.read_at: self._read_timestamp()},
                synchronize_session=False,
            )
        )
        self.session.commit()
        return updated

    @staticmethod
    def _read_timestamp():
        return ensure_app_naive_datetime(now_in_app_timezone())

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            owner_id=model.owner_id,
            title=model.title,
            body=model.body or None,
            category=model.category or None,
            link_href=model.link_href or None,
            link_label=model.link_label or None,
            read_at=ensure_app_timezone(model.read_at),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["LIST_LIMIT", "NotificationRepository"]
