"""Local, optimistic copy of the caller's notifications."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Coroutine
from dataclasses import replace
from datetime import datetime
from functools import partial
from typing import Any

from cornerstone.application.use_cases.notifications import OperationResult
from cornerstone.domain.entities import Notification
from cornerstone.utils import now_in_app_timezone

from .gateway import NotificationGateway

logger = logging.getLogger(__name__)


class NotificationCenter:
    """Materialized notifications for one surface.

    ``activate`` replaces the local copy with a fresh fetch. Read-state changes
    are applied locally first and sent to the server without waiting; a failed
    remote call is logged and leaves the local copy as it is until the next
    activation. Instances are never shared between surfaces.
    """

    def __init__(
        self,
        gateway: NotificationGateway,
        *,
        clock: Callable[[], datetime] = now_in_app_timezone,
    ) -> None:
        self._gateway = gateway
        self._clock = clock
        self._items: list[Notification] = []
        self._pending: set[asyncio.Task] = set()
        self.loading = False
        self.error: str | None = None

    @property
    def items(self) -> tuple[Notification, ...]:
        return tuple(self._items)

    @property
    def unread_count(self) -> int:
        return sum(1 for item in self._items if item.is_unread)

    @property
    def pending(self) -> frozenset[asyncio.Task]:
        """Remote mutations still in flight."""

        return frozenset(self._pending)

    async def activate(self) -> None:
        """Fetch the notifications and replace the local copy.

        On failure the previous items are kept and ``error`` holds the message.
        """

        self.loading = True
        try:
            result = await self._gateway.list_notifications()
        finally:
            self.loading = False

        self.error = result.error
        if result.error is None:
            self._items = list(result.items)

    def select_item(self, notification_id: str) -> str | None:
        """Mark ``notification_id`` read locally and return its link target.

        Selecting an unread item must happen on a running event loop; without
        one ``RuntimeError`` is raised before anything changes.
        """

        for index, item in enumerate(self._items):
            if item.id == notification_id:
                break
        else:
            return None

        if item.read_at is None:
            loop = asyncio.get_running_loop()
            self._items[index] = replace(item, read_at=self._clock())
            self._fire(loop, self._gateway.mark_read(item.id), f"mark {item.id} read")
        return item.link_href

    def mark_all_read(self) -> None:
        """Mark every local item read and ask the server to do the same.

        Must be called on a running event loop.
        """

        loop = asyncio.get_running_loop()
        now = self._clock()
        self._items = [
            item if item.read_at is not None else replace(item, read_at=now)
            for item in self._items
        ]
        self._fire(loop, self._gateway.mark_all_read(), "mark all read")

    async def wait_pending(self) -> None:
        """Wait for in-flight remote mutations; their outcome is not reported."""

        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)

    def _fire(
        self,
        loop: asyncio.AbstractEventLoop,
        call: Coroutine[Any, Any, OperationResult],
        description: str,
    ) -> None:
        task = loop.create_task(call)
        self._pending.add(task)
        task.add_done_callback(partial(self._forget, description))

    def _forget(self, description: str, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.warning("Could not %s: %s", description, exc)
            return
        result = task.result()
        if result.error:
            logger.info("Server refused to %s: %s", description, result.error)


__all__ = ["NotificationCenter"]
