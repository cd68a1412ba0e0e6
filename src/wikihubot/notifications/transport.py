"""
DeliveryTransport — abstract base class for webhook send strategies.

A transport performs exactly one POST per call. Only transport-level
failures (refused connection, DNS, timeout) raise ``DeliveryError``; the
HTTP status is handed back to the caller and never treated as an error.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import httpx

JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass(frozen=True)
class DeliveryResult:
    """Outcome of one delivery attempt, reported to observers."""

    kind: str
    endpoint: str
    ok: bool
    status_code: Optional[int] = None
    error: Optional[str] = None


class DeliveryTransport(ABC):
    """Base class for transport strategies."""

    name: str = "unnamed"

    def __init__(self, timeout: float = 5.0) -> None:
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @abstractmethod
    async def deliver(self, endpoint: str, payload_json: str) -> int:
        """POST ``payload_json`` to ``endpoint`` and return the HTTP status."""
        ...

    async def connect(self) -> None:
        """Open a shared client. Without it every delivery uses its own."""
        if self._client is not None:
            return
        self._client = httpx.AsyncClient(timeout=self.timeout)

    async def disconnect(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
