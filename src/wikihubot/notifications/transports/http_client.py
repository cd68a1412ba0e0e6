"""
HttpClient strategy — a single httpx POST per delivery.
"""

from __future__ import annotations

import logging

import httpx

from wikihubot.notifications.errors import DeliveryError
from wikihubot.notifications.transport import JSON_HEADERS, DeliveryTransport

logger = logging.getLogger(__name__)


class HttpClientTransport(DeliveryTransport):
    """POSTs the payload with ``httpx.AsyncClient.post``."""

    name: str = "http_client"

    async def deliver(self, endpoint: str, payload_json: str) -> int:
        client = self._client or httpx.AsyncClient(timeout=self.timeout)
        try:
            resp = await client.post(
                endpoint,
                content=payload_json.encode("utf-8"),
                headers=JSON_HEADERS,
            )
        except httpx.TransportError as exc:
            raise DeliveryError(endpoint, str(exc) or type(exc).__name__) from exc
        finally:
            if not self._client:
                await client.aclose()

        if resp.is_error:
            logger.debug("Webhook %s answered HTTP %s", endpoint, resp.status_code)
        return resp.status_code
