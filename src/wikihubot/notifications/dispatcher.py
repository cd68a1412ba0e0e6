"""
Dispatcher — runs one wiki event through the notification pipeline.

Gate on the per-kind flag, render, encode, then hand the POST to a
background task. The host only waits for the delivery to be scheduled;
failures end up in the log (and the optional result callback), never in
the host's own save/delete/move flow.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional

from wikihubot.notifications.config import HubotConfig
from wikihubot.notifications.errors import DeliveryError
from wikihubot.notifications.events import EventKind, WikiEvent, build_event
from wikihubot.notifications.formatter import MessageFormatter
from wikihubot.notifications.payload import encode
from wikihubot.notifications.transport import DeliveryResult, DeliveryTransport
from wikihubot.notifications.transports import build_transport

logger = logging.getLogger(__name__)

ResultCallback = Callable[[DeliveryResult], None]


class Dispatcher:
    """Bridges wiki hook calls to the configured webhook."""

    def __init__(
        self,
        config: HubotConfig,
        transport: DeliveryTransport | None = None,
        on_result: Optional[ResultCallback] = None,
    ) -> None:
        self.config = config
        self.transport = transport or build_transport(config.transport, config.timeout)
        self.formatter = MessageFormatter(config.urls, config.events)
        self.on_result = on_result
        self._pending: set[asyncio.Task[None]] = set()

    async def dispatch(self, event: WikiEvent) -> bool:
        """
        Schedule delivery of ``event`` and return immediately.

        Always returns True: declining to notify is still a successful
        hook run from the host's point of view.
        """
        kind = event.event_kind
        if not self.config.events.is_enabled(kind):
            logger.debug("Notifications for %s are disabled", kind.value)
            return True

        if not self.config.webhook_url:
            logger.warning("No webhook URL configured; dropping %s notification", kind.value)
            return True

        message = self.formatter.format(event)
        if message is None:
            return True

        payload = encode(message, self.config.room_name, legacy_quotes=self.config.legacy_quotes)
        task = asyncio.create_task(self._safe_deliver(kind, payload))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return True

    # ------------------------------------------------------------------
    # One entry point per host hook
    # ------------------------------------------------------------------

    async def page_edited(self, **fields: Any) -> bool:
        return await self.dispatch(build_event(EventKind.PAGE_EDITED, **fields))

    async def page_created(self, **fields: Any) -> bool:
        return await self.dispatch(build_event(EventKind.PAGE_CREATED, **fields))

    async def page_deleted(self, **fields: Any) -> bool:
        return await self.dispatch(build_event(EventKind.PAGE_DELETED, **fields))

    async def page_moved(self, **fields: Any) -> bool:
        return await self.dispatch(build_event(EventKind.PAGE_MOVED, **fields))

    async def user_created(self, **fields: Any) -> bool:
        return await self.dispatch(build_event(EventKind.USER_CREATED, **fields))

    async def user_blocked(self, **fields: Any) -> bool:
        return await self.dispatch(build_event(EventKind.USER_BLOCKED, **fields))

    async def file_uploaded(self, **fields: Any) -> bool:
        return await self.dispatch(build_event(EventKind.FILE_UPLOADED, **fields))

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        """Wait for every in-flight delivery to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    async def aclose(self) -> None:
        await self.drain()
        await self.transport.disconnect()

    async def __aenter__(self) -> Dispatcher:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def _safe_deliver(self, kind: EventKind, payload: str) -> None:
        """Deliver with error handling so a failed POST stays in the logs."""
        endpoint = self.config.webhook_url
        try:
            status = await self.transport.deliver(endpoint, payload)
        except DeliveryError as exc:
            logger.warning("%s notification not delivered: %s", kind.value, exc)
            self._report(DeliveryResult(kind.value, endpoint, ok=False, error=str(exc)))
        except Exception as exc:
            logger.exception("Unexpected error delivering %s notification", kind.value)
            self._report(DeliveryResult(kind.value, endpoint, ok=False, error=repr(exc)))
        else:
            logger.debug("Delivered %s notification (HTTP %s)", kind.value, status)
            self._report(DeliveryResult(kind.value, endpoint, ok=True, status_code=status))

    def _report(self, result: DeliveryResult) -> None:
        if self.on_result is None:
            return
        try:
            self.on_result(result)
        except Exception:
            logger.exception("Delivery result callback failed")
