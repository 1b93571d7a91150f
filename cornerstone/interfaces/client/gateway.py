"""Transports connecting the notification state to the access layer."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TypeVar

import anyio
import httpx
from pydantic import ValidationError
from sqlalchemy.orm import Session

from cornerstone.application.use_cases.notifications import (
    NotificationListResult,
    OperationResult,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)
from cornerstone.domain.entities import Notification
from cornerstone.interfaces.api.schemas import NotificationListRead, OperationResultRead

logger = logging.getLogger(__name__)

T = TypeVar("T")


class NotificationGateway(ABC):
    """The three calls a notification surface makes."""

    @abstractmethod
    async def list_notifications(self) -> NotificationListResult:
        """Fetch the caller's notifications."""

    @abstractmethod
    async def mark_read(self, notification_id: str) -> OperationResult:
        """Mark one notification as read."""

    @abstractmethod
    async def mark_all_read(self) -> OperationResult:
        """Mark every notification as read."""


class InProcessNotificationGateway(NotificationGateway):
    """Call the use cases directly, one short-lived session per call.

    Database work runs in a worker thread so the event loop stays free.
    """

    def __init__(
        self, session_factory: Callable[[], Session], principal: str | None
    ) -> None:
        self._session_factory = session_factory
        self._principal = principal

    async def list_notifications(self) -> NotificationListResult:
        return await anyio.to_thread.run_sync(self._run, list_notifications)

    async def mark_read(self, notification_id: str) -> OperationResult:
        return await anyio.to_thread.run_sync(
            self._run, mark_notification_read, notification_id
        )

    async def mark_all_read(self) -> OperationResult:
        return await anyio.to_thread.run_sync(self._run, mark_all_notifications_read)

    def _run(self, use_case: Callable[..., T], *args: str) -> T:
        with self._session_factory() as session:
            return use_case(session, self._principal, *args)


class HttpNotificationGateway(NotificationGateway):
    """Talk to the ``/notifications`` endpoints over HTTP.

    Transport and decoding failures are turned into error text, the same way
    the server reports store failures.
    """

    def __init__(self, client: httpx.AsyncClient, token: str | None = None) -> None:
        self._client = client
        self._headers = {"Authorization": f"Bearer {token}"} if token else {}

    async def list_notifications(self) -> NotificationListResult:
        try:
            response = await self._client.get("/notifications/", headers=self._headers)
            response.raise_for_status()
            payload = NotificationListRead.model_validate(response.json())
        except (httpx.HTTPError, ValidationError, ValueError) as exc:
            logger.warning("Fetching notifications failed: %s", exc)
            return NotificationListResult(items=(), error=str(exc))

        items = tuple(Notification(**item.model_dump()) for item in payload.items)
        return NotificationListResult(items=items, error=payload.error)

    async def mark_read(self, notification_id: str) -> OperationResult:
        return await self._post(f"/notifications/{notification_id}/read")

    async def mark_all_read(self) -> OperationResult:
        return await self._post("/notifications/read-all")

    async def _post(self, path: str) -> OperationResult:
        try:
            response = await self._client.post(path, headers=self._headers)
            response.raise_for_status()
            payload = OperationResultRead.model_validate(response.json())
        except (httpx.HTTPError, ValidationError, ValueError) as exc:
            return OperationResult(error=str(exc))
        return OperationResult(error=payload.error)


__all__ = [
    "HttpNotificationGateway",
    "InProcessNotificationGateway",
    "NotificationGateway",
]
