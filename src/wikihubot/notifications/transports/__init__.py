"""
Transport strategies and the factory that picks one from configuration.
"""

from __future__ import annotations

from wikihubot.notifications.config import TransportKind
from wikihubot.notifications.transport import DeliveryTransport
from wikihubot.notifications.transports.buffered_stream import BufferedStreamTransport
from wikihubot.notifications.transports.http_client import HttpClientTransport


def build_transport(kind: TransportKind | str, timeout: float = 5.0) -> DeliveryTransport:
    """Instantiate the transport strategy named by ``kind``."""
    if TransportKind(kind) == TransportKind.BUFFERED_STREAM:
        return BufferedStreamTransport(timeout=timeout)
    return HttpClientTransport(timeout=timeout)


__all__ = [
    "BufferedStreamTransport",
    "HttpClientTransport",
    "build_transport",
]
