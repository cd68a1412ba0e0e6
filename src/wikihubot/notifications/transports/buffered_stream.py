"""
BufferedStream strategy — the body is fed to httpx as a byte stream.

The payload is chunked through an async iterator and the response is
drained without being kept, mirroring a plain stream open/read/close.
"""

from __future__ import annotations

import logging
from typing import AsyncIterator

import httpx

from wikihubot.notifications.errors import DeliveryError
from wikihubot.notifications.transport import JSON_HEADERS, DeliveryTransport

logger = logging.getLogger(__name__)

CHUNK_SIZE = 4096


async def iter_chunks(body: bytes, size: int = CHUNK_SIZE) -> AsyncIterator[bytes]:
    for start in range(0, len(body), size):
        yield body[start:start + size]


class BufferedStreamTransport(DeliveryTransport):
    """Streams the payload with ``httpx.AsyncClient.stream``."""

    name: str = "buffered_stream"

    def __init__(self, timeout: float = 5.0, chunk_size: int = CHUNK_SIZE) -> None:
        super().__init__(timeout=timeout)
        self.chunk_size = chunk_size

    async def deliver(self, endpoint: str, payload_json: str) -> int:
        body = payload_json.encode("utf-8")
        # Explicit length so the server sees a plain body, not chunked encoding
        headers = {**JSON_HEADERS, "Content-Length": str(len(body))}

        client = self._client or httpx.AsyncClient(timeout=self.timeout)
        try:
            async with client.stream(
                "POST",
                endpoint,
                content=iter_chunks(body, self.chunk_size),
                headers=headers,
            ) as resp:
                async for _ in resp.aiter_bytes():
                    pass
                status = resp.status_code
        except httpx.TransportError as exc:
            raise DeliveryError(endpoint, str(exc) or type(exc).__name__) from exc
        finally:
            if not self._client:
                await client.aclose()

        if status >= 400:
            logger.debug("Webhook %s answered HTTP %s", endpoint, status)
        return status
